"""``route-jump config`` — show or set the artisan command for a project."""

import argparse
import sys

from routejump.cli._resolve import resolve_settings
from routejump.config import save_settings, settings_file
from routejump.errors import RouteJumpError


def run_config(args: argparse.Namespace) -> None:
    """Print the configured command, or persist ``args.artisan_command``."""
    try:
        root, settings = resolve_settings(args.project)
        if args.artisan_command is None:
            print(f"Artisan command: {settings.command or '(not set)'}")
            print(f"Settings file:   {settings_file(root)}")
            return
        path = save_settings(root, settings.with_command(args.artisan_command))
    except RouteJumpError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"Saved artisan command to {path}")
