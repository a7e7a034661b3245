"""``route-jump routes`` — list the application's routes.

Runs the route listing and prints a table of METHOD, URI, and ACTION
as the matcher sees them (methods normalized, ``HEAD`` folded into
``GET``).
"""

import argparse
import sys

import anyio

from routejump.cli._resolve import resolve_settings
from routejump.errors import RouteJumpError
from routejump.lister import list_routes
from routejump.routing import parse_routes


def run_routes(args: argparse.Namespace) -> None:
    """List parsed routes for the project at ``args.project``."""
    try:
        root, settings = resolve_settings(args.project)
        output = anyio.run(list_routes, settings, root)
        routes = parse_routes(output)
    except RouteJumpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not routes:
        print("No routes registered.")
        return

    # Build rows: (methods_str, uri, action)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        methods_str = "|".join(route.methods)
        uri = route.uri.replace("\\/", "/")
        if route.domain:
            uri = f"{route.domain}/{uri.lstrip('/')}"
        rows.append((methods_str, uri, route.action))

    # Column widths
    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_uri = max(max(len(r[1]) for r in rows), 3)  # "URI" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_uri}}}  {{}}"
    print(fmt.format("METHOD", "URI", "ACTION"))
    sep_len = max_methods + max_uri + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for methods_str, uri, action in rows:
        print(fmt.format(methods_str, uri, action))
