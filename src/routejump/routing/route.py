"""Route, RouteMatch, and resolution frozen dataclasses."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Route:
    """One entry of ``route:list --json``.

    ``uri`` is the template as declared (``users/{id}``,
    ``{account}.localhost/shop/{id}``) and may contain escaped slashes.
    ``action`` is ``Namespace\\Class@method`` or a closure marker.
    """

    uri: str
    action: str
    domain: str | None = None
    methods: tuple[str, ...] = ("GET",)

    @property
    def navigable(self) -> bool:
        return "@" in self.action


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route match."""

    route: Route
    action: str
    methods: tuple[str, ...]

    @property
    def navigable(self) -> bool:
        return "@" in self.action


@dataclass(frozen=True, slots=True)
class ActionTarget:
    """A parsed ``Namespace\\Class@method`` action.

    ``type_name`` is the short class name (``UserController``),
    ``member_name`` the method (``show``).
    """

    type_name: str
    member_name: str
    action: str


# -- Resolution outcomes ------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NoRoute:
    """Nothing matched."""


@dataclass(frozen=True, slots=True)
class NotNavigable:
    """Something matched, but only closures."""

    matches: tuple[RouteMatch, ...]


@dataclass(frozen=True, slots=True)
class Resolved:
    """Exactly one controller action reaches the URL."""

    action: str
    methods: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Ambiguous:
    """Different actions answer different HTTP methods.

    ``choices`` maps method to action in first-seen order.
    """

    choices: dict[str, str]

    @property
    def methods(self) -> tuple[str, ...]:
        return tuple(self.choices)

    def pick(self, method: str) -> str:
        """Return the action for *method* (case-insensitive).

        Raises ``KeyError`` if no matching route answers *method*.
        """
        return self.choices[method.strip().upper()]


Resolution = NoRoute | NotNavigable | Resolved | Ambiguous
