"""Per-project settings.

JumpSettings is a frozen dataclass — immutable after creation, threaded
explicitly into the lookup workflow instead of read from ambient state.
"""

import json
import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path

from routejump.errors import ConfigurationError

logger = logging.getLogger("routejump.config")

DEFAULT_COMMAND = "php artisan"

# Relative to the project root, alongside the IDE's own project settings
SETTINGS_PATH = Path(".idea") / "laravelRouteJump.json"


@dataclass(frozen=True, slots=True)
class JumpSettings:
    """Route jump settings. Immutable after creation.

    Override the command prefix when ``php`` is not on ``PATH`` or the
    application runs in a container::

        settings = JumpSettings(command="docker compose exec app php artisan")
    """

    # Prefix for ``route:list --json``
    command: str = DEFAULT_COMMAND

    def with_command(self, command: str) -> "JumpSettings":
        return replace(self, command=command.strip())


def settings_file(project_root: str | Path) -> Path:
    return Path(project_root) / SETTINGS_PATH


def load_settings(project_root: str | Path) -> JumpSettings:
    """Load settings for *project_root*, falling back to defaults.

    Raises ``ConfigurationError`` if the settings file exists but is not
    a JSON object with a string ``command``.
    """
    path = settings_file(project_root)
    if not path.is_file():
        return JumpSettings()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        msg = f"Cannot read settings from {path}: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Settings in {path} must be a JSON object"
        raise ConfigurationError(msg)

    command = data.get("command", DEFAULT_COMMAND)
    if not isinstance(command, str):
        msg = f"'command' in {path} must be a string, got {type(command).__name__}"
        raise ConfigurationError(msg)

    return JumpSettings(command=command)


def save_settings(project_root: str | Path, settings: JumpSettings) -> Path:
    """Persist *settings* for *project_root*. Returns the file written."""
    path = settings_file(project_root)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(asdict(settings), indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot write settings to {path}: {exc}"
        raise ConfigurationError(msg) from exc
    logger.info("Saved settings to %s", path)
    return path
