"""routejump exception hierarchy.

Shared across the lister, router, navigator, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class RouteJumpError(Exception):
    """Base for all routejump-specific errors."""


class ConfigurationError(RouteJumpError):
    """Raised when the persisted settings cannot be read or written."""


class ConfigurationMissing(RouteJumpError):
    """The route-listing command is empty."""

    def __str__(self) -> str:
        return (
            "Artisan command is not configured. "
            "Set one with: route-jump config --command 'php artisan'"
        )


@dataclass(frozen=True, slots=True)
class WorkingDirectoryMissing(RouteJumpError):
    """The project root to run the command in does not exist."""

    path: str

    def __str__(self) -> str:
        return f"Project directory does not exist: {self.path}"


@dataclass(frozen=True, slots=True)
class ToolNotFound(RouteJumpError):
    """The shell could not locate or start the configured executable."""

    command: str
    detail: str = ""

    def __str__(self) -> str:
        msg = (
            f"Could not run {self.command!r}. "
            "A fully qualified path may be required, e.g. "
            "'/usr/local/bin/php artisan' or 'docker compose exec app php artisan'."
        )
        if self.detail:
            msg = f"{msg}\n{self.detail}"
        return msg


@dataclass(frozen=True, slots=True)
class CommandFailed(RouteJumpError):
    """The route-listing command exited non-zero."""

    command: str
    cwd: str
    exit_code: int
    stderr: str = ""

    def __str__(self) -> str:
        lines = [
            f"Command failed with exit code {self.exit_code}",
            f"  Command: {self.command}",
            f"  Directory: {self.cwd}",
        ]
        if self.stderr.strip():
            lines.append(self.stderr.rstrip())
        return "\n".join(lines)


class RouteListError(RouteJumpError):
    """The route listing is not a JSON array of route records."""


@dataclass(frozen=True, slots=True)
class TemplateError(RouteJumpError):
    """A route template could not be compiled into a pattern."""

    template: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"Invalid route template {self.template!r}: {self.detail}"
        return f"Invalid route template {self.template!r}"


@dataclass(frozen=True, slots=True)
class NoRouteFound(RouteJumpError):
    """No declared route matches the URL."""

    url: str

    def __str__(self) -> str:
        return f"No matching route found for: {self.url}"


@dataclass(frozen=True, slots=True)
class RouteNotNavigable(RouteJumpError):
    """Routes match the URL, but all of them are closures."""

    url: str

    def __str__(self) -> str:
        return f"Route for {self.url} is handled by a closure and cannot be navigated to"


@dataclass(frozen=True, slots=True)
class ActionParseError(RouteJumpError):
    """The action string is not of the form ``Class@method``."""

    action: str

    def __str__(self) -> str:
        return f"Invalid controller action format: {self.action}"


@dataclass(frozen=True, slots=True)
class TypeFileNotFound(RouteJumpError):
    """No ``<Type>.php`` file exists in the project."""

    type_name: str

    def __str__(self) -> str:
        return f"Controller file not found: {self.type_name}.php"


@dataclass(frozen=True, slots=True)
class MemberNotFound(RouteJumpError):
    """The controller file exists, but the method is not declared in it."""

    member_name: str
    type_name: str
    path: str = ""

    def __str__(self) -> str:
        return f"Method '{self.member_name}' not found in {self.type_name}"


@dataclass(frozen=True, slots=True)
class AmbiguousRoute(RouteJumpError):
    """Several actions match and no HTTP method was chosen."""

    url: str
    methods: tuple[str, ...]

    def __str__(self) -> str:
        return (
            f"Multiple routes match {self.url}. "
            f"Choose one with --method ({', '.join(self.methods)})"
        )


@dataclass(frozen=True, slots=True)
class MethodNotAllowed(RouteJumpError):  # noqa: N818 — conventional name in web frameworks
    """Routes match the URL, but none of them answers the requested method."""

    url: str
    method: str
    allowed: tuple[str, ...]

    def __str__(self) -> str:
        return (
            f"No route answers {self.method} {self.url}. "
            f"Allowed methods: {', '.join(self.allowed)}"
        )
