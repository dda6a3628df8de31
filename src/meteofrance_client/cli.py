"""
Command-line interface for the client.

Prints decoded API responses as JSON::

    meteofrance places "Briançon"
    meteofrance forecast 48.85 2.35 --lang en
    meteofrance rain 48.85 2.35
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from meteofrance_client import __version__
from meteofrance_client.client import MeteoFranceClient
from meteofrance_client.config import get_settings
from meteofrance_client.errors import MeteoFranceError
from meteofrance_client.url import Language


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="meteofrance",
        description="Query the Météo-France forecast, rain and places API",
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
        help="Log requests to stderr",
    )
    parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="API token (default: METEOFRANCE_API_TOKEN)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("forecast", "Daily, hourly and hazard forecast"),
        ("forecast-v2", "Forecast from the v2 API"),
        ("rain", "Rain forecast for the next hour"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("lat", type=float, help="Latitude")
        sub.add_argument("lon", type=float, help="Longitude")
        sub.add_argument(
            "--lang",
            choices=[lang.value for lang in Language],
            default=None,
            help="Language of descriptions (default: fr)",
        )

    places_parser = subparsers.add_parser("places", help="Search places by name")
    places_parser.add_argument("query", type=str, help="Place name")
    places_parser.add_argument("--lat", type=float, default=None, help="Rank near this latitude")
    places_parser.add_argument("--lon", type=float, default=None, help="Rank near this longitude")

    subparsers.add_parser("info", help="Show client settings")

    return parser


def _client(args: argparse.Namespace) -> MeteoFranceClient:
    return MeteoFranceClient(token=args.token)


def cmd_forecast(args: argparse.Namespace) -> int:
    """Handle the 'forecast' command."""
    forecast = _client(args).get_forecast(args.lat, args.lon, args.lang)
    print(forecast.model_dump_json(indent=2))
    return 0


def cmd_forecast_v2(args: argparse.Namespace) -> int:
    """Handle the 'forecast-v2' command."""
    forecast = _client(args).get_forecast_v2(args.lat, args.lon, args.lang)
    print(forecast.model_dump_json(indent=2))
    return 0


def cmd_rain(args: argparse.Namespace) -> int:
    """Handle the 'rain' command."""
    rain = _client(args).get_rain(args.lat, args.lon, args.lang)
    print(rain.model_dump_json(indent=2))
    return 0


def cmd_places(args: argparse.Namespace) -> int:
    """Handle the 'places' command."""
    places = _client(args).search_places(args.query, args.lat, args.lon)
    if not places:
        print(f"No places found for {args.query!r}", file=sys.stderr)
    print(json.dumps([p.model_dump(mode="json") for p in places], indent=2, ensure_ascii=False))
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"API URL: {settings.api_url}")
    print(f"Token set: {'yes' if settings.api_token else 'no'}")
    print(f"Language: {settings.lang}")
    print(f"Timeout: {settings.timeout}s")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "forecast": cmd_forecast,
        "forecast-v2": cmd_forecast_v2,
        "rain": cmd_rain,
        "places": cmd_places,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if not handler:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except MeteoFranceError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        # raised by Settings() when a METEOFRANCE_* variable is malformed
        print(f"Error: invalid settings: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
