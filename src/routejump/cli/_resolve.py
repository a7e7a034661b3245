"""Project resolution — shared by every subcommand.

Turns the ``--project`` option into an absolute project root and loads
its persisted settings.
"""

from pathlib import Path

from routejump.config import JumpSettings, load_settings
from routejump.errors import WorkingDirectoryMissing


def resolve_project(project: str | None) -> Path:
    """Return the absolute project root for *project* (default: cwd).

    Raises ``WorkingDirectoryMissing`` if it is not a directory.
    """
    root = Path(project).expanduser() if project else Path.cwd()
    root = root.resolve()
    if not root.is_dir():
        raise WorkingDirectoryMissing(str(root))
    return root


def resolve_settings(project: str | None) -> tuple[Path, JumpSettings]:
    """Resolve the project root and load its settings."""
    root = resolve_project(project)
    return root, load_settings(root)
