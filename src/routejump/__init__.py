"""routejump — jump from a URL to the Laravel controller method handling it.

Runs ``php artisan route:list --json``, matches the URL against the
declared routes, and points at the controller method.

Basic usage::

    from routejump import find_matches_in_json, resolve

    matches = find_matches_in_json(listing, "https://shop.test/users/42")
    resolution = resolve(matches)

From the shell::

    route-jump jump http://localhost:8000/users/42 --open
"""

__version__ = "0.1.0"
__all__ = [
    "JumpSettings",
    "Route",
    "RouteJumpError",
    "RouteMatch",
    "extract_path",
    "find_matches",
    "find_matches_in_json",
    "list_routes",
    "locate",
    "parse_action",
    "resolve",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routejump`` fast while providing a clean top-level API.
    """
    if name == "JumpSettings":
        from routejump.config import JumpSettings

        return JumpSettings

    if name in (
        "Route",
        "RouteMatch",
        "extract_path",
        "find_matches",
        "find_matches_in_json",
        "parse_action",
        "resolve",
    ):
        from routejump import routing as _routing

        return getattr(_routing, name)

    if name == "list_routes":
        from routejump.lister import list_routes

        return list_routes

    if name == "locate":
        from routejump.navigation import locate

        return locate

    if name == "RouteJumpError":
        from routejump.errors import RouteJumpError

        return RouteJumpError

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
