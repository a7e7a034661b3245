"""Route matching against a ``route:list --json`` listing.

Stateless: every route is evaluated independently, in declaration order,
and no result outlives the call.
"""

import json
import logging
from collections.abc import Iterable, Sequence

from routejump.errors import ActionParseError, RouteListError, TemplateError
from routejump.routing.params import compile_template
from routejump.routing.paths import extract_path, normalize_path, strip_host, strip_scheme
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

logger = logging.getLogger("routejump.routing")


def normalize_methods(raw: object) -> tuple[str, ...]:
    """Normalize the ``method`` field of a route record.

    Accepts ``None``, a string (``"GET|HEAD"``), or a list of strings.
    Tokens are upper-cased and de-duplicated; empty and ``"null"`` tokens
    are dropped. Falls back to ``("GET",)``. ``HEAD`` is dropped unless it
    is the only method, since it always rides along with ``GET``.
    """
    if isinstance(raw, str):
        values: list[str] = [raw]
    elif isinstance(raw, (list, tuple)):
        values = [value for value in raw if isinstance(value, str)]
    else:
        values = []

    methods: list[str] = []
    for value in values:
        for token in value.split("|"):
            method = token.strip().upper()
            if method and method != "NULL" and method not in methods:
                methods.append(method)

    if not methods:
        return ("GET",)
    if "HEAD" in methods and len(methods) > 1:
        methods.remove("HEAD")
    return tuple(methods)


def parse_routes(text: str) -> list[Route]:
    """Parse ``route:list --json`` output into routes.

    Records without a string ``uri`` and ``action`` are skipped, unknown
    fields are ignored. Raises ``RouteListError`` if *text* is not a JSON
    array.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        msg = f"Route listing is not valid JSON: {exc}"
        raise RouteListError(msg) from exc

    if not isinstance(data, list):
        msg = f"Route listing must be a JSON array, got {type(data).__name__}"
        raise RouteListError(msg)

    routes: list[Route] = []
    for record in data:
        if not isinstance(record, dict):
            continue
        uri = record.get("uri")
        action = record.get("action")
        if not isinstance(uri, str) or not isinstance(action, str):
            continue
        domain = record.get("domain")
        routes.append(
            Route(
                uri=uri,
                action=action,
                domain=domain if isinstance(domain, str) and domain else None,
                methods=normalize_methods(record.get("method")),
            )
        )
    return routes


def _route_matches(route: Route, path: str, hosted: str) -> bool:
    """Try each strategy in turn. *path* has no host, *hosted* keeps it."""
    uri = normalize_path(route.uri)
    route_path = normalize_path(strip_host(uri))

    # 1. Exact
    if route_path == path:
        return True

    # 2. Parameterized path
    if "{" in route_path and compile_template(route_path).fullmatch(path):
        return True

    # 3. Domain constraint + uri, against the input with its host
    if route.domain:
        template = normalize_path(f"{route.domain}/{uri}")
        if compile_template(template, host=True).fullmatch(hosted):
            return True

    # 4. The uri itself may carry a subdomain placeholder
    return compile_template(uri, host=True).fullmatch(hosted) is not None


def find_matches(routes: Iterable[Route], url: str) -> list[RouteMatch]:
    """Return a match for every route that answers *url*, in route order.

    A route whose template cannot be compiled is treated as not matching.
    """
    path = normalize_path(extract_path(url))
    hosted = strip_scheme(url)

    matches: list[RouteMatch] = []
    for route in routes:
        try:
            matched = _route_matches(route, path, hosted)
        except TemplateError as exc:
            logger.debug("Skipping route: %s", exc)
            continue
        if matched:
            matches.append(
                RouteMatch(
                    route=route,
                    action=route.action,
                    methods=normalize_methods(list(route.methods)),
                )
            )

    logger.debug("%d route(s) match %r", len(matches), url)
    return matches


def find_matches_in_json(text: str, url: str) -> list[RouteMatch]:
    """Like ``find_matches``, from raw listing output. Bad JSON matches nothing."""
    try:
        routes = parse_routes(text)
    except RouteListError as exc:
        logger.warning("%s", exc)
        return []
    return find_matches(routes, url)


def resolve(matches: Sequence[RouteMatch]) -> Resolution:
    """Decide where a set of matches leads.

    Closures are set aside. Each HTTP method maps to the first action that
    answers it; later routes for the same method are ignored. One distinct
    action resolves directly, several are returned for the caller to pick
    by method.
    """
    if not matches:
        return NoRoute()

    navigable = [m for m in matches if m.navigable]
    if not navigable:
        return NotNavigable(matches=tuple(matches))

    choices: dict[str, str] = {}
    for match in navigable:
        for method in match.methods:
            choices.setdefault(method, match.action)

    actions = list(dict.fromkeys(choices.values()))
    if len(actions) == 1:
        return Resolved(action=actions[0], methods=tuple(choices))
    return Ambiguous(choices=choices)


def parse_action(action: str) -> ActionTarget:
    """Split ``App\\Http\\Controllers\\UserController@show``.

    Returns ``ActionTarget("UserController", "show", action)``.
    Raises ``ActionParseError`` unless *action* has exactly one ``@``
    with text on both sides.
    """
    if action.count("@") != 1:
        raise ActionParseError(action)

    qualified, _, member = action.partition("@")
    type_name = qualified.rsplit("\\", 1)[-1].strip()
    member = member.strip()
    if not type_name or not member:
        raise ActionParseError(action)

    return ActionTarget(type_name=type_name, member_name=member, action=action)
