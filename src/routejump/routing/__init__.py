"""Routing — match a URL against a Laravel route listing.

Every call is independent: routes are parsed, matched, and discarded
per request.
"""

from routejump.routing.paths import extract_path, normalize_path, strip_scheme
from routejump.routing.route import (
    ActionTarget,
    Ambiguous,
    NoRoute,
    NotNavigable,
    Resolution,
    Resolved,
    Route,
    RouteMatch,
)
from routejump.routing.router import (
    find_matches,
    find_matches_in_json,
    normalize_methods,
    parse_action,
    parse_routes,
    resolve,
)

__all__ = [
    "ActionTarget",
    "Ambiguous",
    "NoRoute",
    "NotNavigable",
    "Resolution",
    "Resolved",
    "Route",
    "RouteMatch",
    "extract_path",
    "find_matches",
    "find_matches_in_json",
    "normalize_methods",
    "normalize_path",
    "parse_action",
    "parse_routes",
    "resolve",
    "strip_scheme",
]
