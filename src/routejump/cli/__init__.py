"""routejump CLI — jump from a URL to the Laravel controller method handling it.

Entry point registered as ``route-jump`` in ``pyproject.toml``::

    [project.scripts]
    route-jump = "routejump.cli:main"
"""

import argparse
import logging
import sys


def _add_project_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project",
        "-p",
        default=None,
        help="Laravel project root (default: current directory)",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``route-jump`` command."""
    parser = argparse.ArgumentParser(
        prog="route-jump",
        description="Jump from a URL to the Laravel controller method that handles it.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log the command line, working directory, and matching details",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- route-jump jump ----------------------------------------------------
    jump_parser = subparsers.add_parser("jump", help="Find the controller method for a URL")
    jump_parser.add_argument("url", help="URL or path (e.g. http://localhost:8000/users/1)")
    _add_project_arg(jump_parser)
    jump_parser.add_argument(
        "--method",
        "-m",
        default=None,
        help="HTTP method to pick when several routes match",
    )
    jump_parser.add_argument(
        "--open",
        action="store_true",
        help="Open the method in $VISUAL / $EDITOR",
    )
    jump_parser.add_argument(
        "--editor",
        default=None,
        help="Editor command to use with --open (default: $VISUAL or $EDITOR)",
    )

    # -- route-jump routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the application's routes")
    _add_project_arg(routes_parser)

    # -- route-jump config --------------------------------------------------
    config_parser = subparsers.add_parser("config", help="Show or set the artisan command")
    _add_project_arg(config_parser)
    config_parser.add_argument(
        "--command",
        dest="artisan_command",
        default=None,
        help=(
            "Command prefix for route:list. A full path to PHP may be required, e.g. "
            "'/path/to/php artisan' or 'docker compose exec app php artisan'"
        ),
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "jump":
        from routejump.cli._jump import run_jump

        run_jump(args)
    elif args.command == "routes":
        from routejump.cli._routes import run_routes

        run_routes(args)
    elif args.command == "config":
        from routejump.cli._config import run_config

        run_config(args)
