"""Navigation — resolve ``Class@method`` to a file, line, and column.

Stands in for the IDE file index: controllers are found by file name
(``UserController.php``) anywhere in the project outside dependency and
hidden directories.
"""

import logging
import os
import re
import shlex
import subprocess
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from routejump.errors import MemberNotFound, RouteJumpError, TypeFileNotFound
from routejump.routing import ActionTarget, parse_action

logger = logging.getLogger("routejump.navigation")

SKIP_DIRS = frozenset({"vendor", "node_modules", "storage"})


@dataclass(frozen=True, slots=True)
class Location:
    """A 1-based position in a source file."""

    path: Path
    line: int
    column: int
    target: ActionTarget

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


def _walk(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS and not d.startswith("."))
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def find_type_files(root: str | Path, type_name: str) -> list[Path]:
    """Return every ``<type_name>.php`` under *root*, in walk order."""
    wanted = f"{type_name}.php"
    return [path for path in _walk(Path(root)) if path.name == wanted]


def find_member(text: str, member_name: str) -> int | None:
    """Return the offset of *member_name* in its ``function`` declaration."""
    pattern = re.compile(rf"function\s+({re.escape(member_name)})\s*\(")
    match = pattern.search(text)
    if match is None:
        return None
    return match.start(1)


def _line_col(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def locate(project_root: str | Path, action: str) -> Location:
    """Find the declaration of the controller method named by *action*.

    Raises ``ActionParseError``, ``TypeFileNotFound``, or ``MemberNotFound``.
    """
    target = parse_action(action)
    files = find_type_files(project_root, target.type_name)
    if not files:
        raise TypeFileNotFound(target.type_name)

    path = files[0]
    if len(files) > 1:
        logger.info("%d files named %s.php, using %s", len(files), target.type_name, path)

    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        msg = f"Cannot read {path}: {exc}"
        raise RouteJumpError(msg) from exc

    offset = find_member(text, target.member_name)
    if offset is None:
        raise MemberNotFound(target.member_name, target.type_name, str(path))

    line, column = _line_col(text, offset)
    return Location(path=path, line=line, column=column, target=target)


def editor_command(location: Location, editor: str | None = None) -> list[str]:
    """Build ``<editor> +LINE FILE`` from *editor* or ``$VISUAL``/``$EDITOR``."""
    editor = editor or os.environ.get("VISUAL") or os.environ.get("EDITOR") or "vi"
    return [*shlex.split(editor), f"+{location.line}", str(location.path)]


def open_in_editor(location: Location, editor: str | None = None) -> int:
    """Open *location* in an editor and wait for it. Returns its exit code."""
    argv = editor_command(location, editor)
    logger.info("Opening %s", " ".join(argv))
    try:
        return subprocess.call(argv)
    except OSError as exc:
        msg = f"Cannot start editor {argv[0]!r}: {exc}"
        raise RouteJumpError(msg) from exc
