"""``route-jump jump`` — find the controller method for a URL.

Runs the route listing off the main thread, matches the URL, asks for an
HTTP method when different actions answer it, and prints (or opens) the
method's location.
"""

import argparse
import sys

import anyio

from routejump.cli._resolve import resolve_settings
from routejump.errors import (
    AmbiguousRoute,
    MethodNotAllowed,
    NoRouteFound,
    RouteJumpError,
    RouteNotNavigable,
)
from routejump.lister import list_routes
from routejump.navigation import locate, open_in_editor
from routejump.routing import (
    Ambiguous,
    NoRoute,
    NotNavigable,
    Resolution,
    Resolved,
    find_matches_in_json,
    resolve,
)


def _prompt_method(url: str, resolution: Ambiguous) -> str:
    """Ask on the terminal which method to follow. Returns the action."""
    choices = list(resolution.choices.items())
    width = max(len(method) for method, _ in choices)
    print(f"Multiple routes match {url}:")
    for index, (method, action) in enumerate(choices, start=1):
        print(f"  {index}) {method:<{width}}  {action}")

    try:
        answer = input(f"Select method [1-{len(choices)}]: ").strip()
    except EOFError:
        answer = ""

    if answer.isdigit() and 1 <= int(answer) <= len(choices):
        return choices[int(answer) - 1][1]
    try:
        return resolution.pick(answer)
    except KeyError:
        raise AmbiguousRoute(url, resolution.methods) from None


def choose_action(url: str, resolution: Resolution, method: str | None = None) -> str:
    """Turn a resolution into a single action, or raise a ``RouteJumpError``."""
    if isinstance(resolution, NoRoute):
        raise NoRouteFound(url)
    if isinstance(resolution, NotNavigable):
        raise RouteNotNavigable(url)
    if isinstance(resolution, Resolved):
        if method is not None and method.strip().upper() not in resolution.methods:
            raise MethodNotAllowed(url, method.strip().upper(), resolution.methods)
        return resolution.action

    if method is not None:
        try:
            return resolution.pick(method)
        except KeyError:
            raise MethodNotAllowed(url, method.strip().upper(), resolution.methods) from None
    if sys.stdin.isatty():
        return _prompt_method(url, resolution)
    raise AmbiguousRoute(url, resolution.methods)


def run_jump(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` to a controller method and print its location.

    Prints ``path:line:column  Namespace\\Class@method``. Every failure
    prints ``Error: ...`` to stderr and exits 1.
    """
    try:
        root, settings = resolve_settings(args.project)
        output = anyio.run(list_routes, settings, root)
        matches = find_matches_in_json(output, args.url)
        action = choose_action(args.url, resolve(matches), args.method)
        location = locate(root, action)
    except RouteJumpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"{location}  {action}")

    if args.open:
        try:
            open_in_editor(location, args.editor)
        except RouteJumpError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            raise SystemExit(1) from exc
