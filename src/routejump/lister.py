"""Route listing — run ``<command> route:list --json`` in the project root.

The command runs through the shell so the configured prefix may rely on
``PATH`` (``php artisan``, ``sail artisan``, ``docker compose exec ...``).
The blocking call is dispatched to a worker thread via ``anyio.to_thread``
so the caller's event loop stays responsive; there is no cancellation.
"""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path

import anyio.to_thread

from routejump.config import JumpSettings
from routejump.errors import (
    CommandFailed,
    ConfigurationMissing,
    ToolNotFound,
    WorkingDirectoryMissing,
)

logger = logging.getLogger("routejump.lister")

LIST_ARGS = "route:list --json"

# POSIX shell exit codes for "not executable" and "not found"
_SHELL_NOT_FOUND = frozenset({126, 127})


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Captured output of one route-listing run."""

    command: str
    cwd: str
    exit_code: int
    stdout: str
    stderr: str


def build_command(settings: JumpSettings) -> str:
    """Return the full shell command line for *settings*.

    Raises ``ConfigurationMissing`` if the command prefix is blank.
    """
    prefix = settings.command.strip()
    if not prefix:
        raise ConfigurationMissing()
    return f"{prefix} {LIST_ARGS}"


def run_command(command: str, cwd: str | Path) -> CommandResult:
    """Run *command* through the shell in *cwd*, blocking until it exits."""
    workdir = Path(cwd)
    if not workdir.is_dir():
        raise WorkingDirectoryMissing(str(workdir))

    logger.info("Running %r in %s", command, workdir)
    try:
        proc = subprocess.run(
            command,
            shell=True,
            cwd=workdir,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ToolNotFound(command, str(exc)) from exc

    return CommandResult(
        command=command,
        cwd=str(workdir),
        exit_code=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )


def list_routes_sync(settings: JumpSettings, project_root: str | Path) -> str:
    """Run the route listing and return its stdout.

    Raises ``ConfigurationMissing``, ``WorkingDirectoryMissing``,
    ``ToolNotFound``, or ``CommandFailed``.
    """
    command = build_command(settings)
    result = run_command(command, project_root)

    if result.exit_code in _SHELL_NOT_FOUND:
        raise ToolNotFound(command, result.stderr.strip())
    if result.exit_code != 0:
        raise CommandFailed(
            command=result.command,
            cwd=result.cwd,
            exit_code=result.exit_code,
            stderr=result.stderr,
        )

    logger.debug("Route listing returned %d bytes", len(result.stdout))
    return result.stdout


async def list_routes(settings: JumpSettings, project_root: str | Path) -> str:
    """Async wrapper: run ``list_routes_sync`` in an anyio worker thread."""
    return await anyio.to_thread.run_sync(list_routes_sync, settings, project_root)
