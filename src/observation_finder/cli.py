"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from observation_finder import __version__
from observation_finder.config import get_settings
from observation_finder.datasources.inaturalist import ObservationClient
from observation_finder.exceptions import ObservationSearchError
from observation_finder.renderers import render_result
from observation_finder.schemas import Coordinate, SearchFilter, SearchResult
from observation_finder.session import SearchSession


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="observation-finder",
        description="Search iNaturalist observations by username and/or location",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Search observations")
    search_parser.add_argument("-u", "--user", type=str, default=None, help="iNaturalist username")
    search_parser.add_argument("--lat", type=float, default=None, help="Search centre latitude")
    search_parser.add_argument("--lon", type=float, default=None, help="Search centre longitude")
    search_parser.add_argument(
        "--radius",
        type=float,
        default=settings.default_radius_m,
        help=f"Search radius in metres (default: {settings.default_radius_m:g})",
    )
    search_parser.add_argument("--page", type=int, default=1, help="Page to show (default: 1)")

    subparsers.add_parser("info", help="Show application info")

    return parser


def build_filter(args: argparse.Namespace) -> SearchFilter:
    """Build a SearchFilter from parsed ``search`` arguments."""
    if (args.lat is None) != (args.lon is None):
        raise ValueError("--lat and --lon must be given together")

    location = None
    if args.lat is not None:
        location = Coordinate(latitude=args.lat, longitude=args.lon)
    return SearchFilter(username=args.user, location=location, radius_meters=args.radius)


async def run_search(search_filter: SearchFilter, page: int = 1) -> SearchResult:
    """Search, then jump to ``page`` if it isn't the first."""
    async with ObservationClient() as client:
        session = SearchSession(client)
        result = await session.search(search_filter)
        if page != 1:
            result = await session.go_to_page(page)
        return result


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    try:
        search_filter = build_filter(args)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        result = asyncio.run(run_search(search_filter, args.page))
    except ObservationSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_result(result))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"API: {settings.api_base_url}")
    print(f"Default location: ({settings.default_lat}, {settings.default_lon})")
    print(f"Radius: {settings.min_radius_m:g}-{settings.max_radius_m:g}m (default {settings.default_radius_m:g}m)")
    print(f"Debug: {settings.debug}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.debug or get_settings().debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    commands = {
        "search": cmd_search,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
