"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from functools import partial
from typing import TYPE_CHECKING

from city_forecast import __version__
from city_forecast.config import get_settings
from city_forecast.datasources.openweather import fetch_weather
from city_forecast.errors import ValidationError
from city_forecast.lookup import WeatherLookup
from city_forecast.renderers.report import digest_cards, render_report
from city_forecast.schemas import Failure, Success

if TYPE_CHECKING:
    from city_forecast.schemas import WeatherReport

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="city-forecast",
        description="Current conditions and a 7-day forecast for any city",
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

    # 'search' command - look up one city
    search_parser = subparsers.add_parser("search", help="Show weather for a city")
    search_parser.add_argument(
        "city",
        nargs="+",
        help="City name, e.g. 'New York' or 'Paris,FR'",
    )
    search_parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Calendar day the forecast starts from (YYYY-MM-DD, default: local today)",
    )
    search_parser.add_argument(
        "--units",
        choices=["metric", "imperial", "standard"],
        default=None,
        help="Unit system (default: units from settings)",
    )
    search_parser.add_argument(
        "--json",
        action="store_true",
        help="Print current conditions and forecast cards as JSON",
    )

    # 'info' command
    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr; DEBUG with --debug, otherwise WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.INFO if debug else logging.WARNING)


def report_json(report: WeatherReport, units: str) -> str:
    """Serialize a report for other front-ends: the snapshot plus one card per day."""
    data = {
        "city": report.city,
        "today": report.today.isoformat(),
        "units": units,
        "current": report.current.model_dump(mode="json"),
        "forecast": digest_cards(report.digest, units),
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def cmd_search(args: argparse.Namespace) -> int:
    """Handle the 'search' command."""
    settings = get_settings()
    if args.units:
        settings = settings.model_copy(update={"units": args.units})

    lookup = WeatherLookup(
        fetcher=partial(fetch_weather, settings=settings),
        horizon=settings.forecast_horizon_days,
    )
    try:
        state = lookup.search(" ".join(args.city), today=args.today)
    except ValidationError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    if isinstance(state, Success):
        if args.json:
            print(report_json(state.report, units=settings.units))
        else:
            print(
                render_report(
                    state.report,
                    units=settings.units,
                    horizon=settings.forecast_horizon_days,
                )
            )
        return 0

    message = state.message if isinstance(state, Failure) else "query was cancelled"
    print(f"Error: {message}", file=sys.stderr)
    return 1


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Provider: {settings.openweather_base}")
    print(f"API key configured: {'yes' if settings.openweather_api_key else 'no'}")
    print(f"Units: {settings.units}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.debug or get_settings().debug)

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
