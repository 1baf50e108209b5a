"""
weather - look up current conditions and a short forecast.

Usage:
    weather --location Paris
    weather -l "New York" --days 3 --units imperial
    weather -l Oslo --style art
    weather -l Lima --provider wttr --style compact
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from weathercli import __version__
from weathercli.config import settings
from weathercli.errors import ValidationError, WeatherError
from weathercli.logging_config import setup_logging
from weathercli.models import WeatherResult
from weathercli.render import art, text
from weathercli.services import OpenMeteoClient, WttrClient

logger = logging.getLogger(__name__)

UNITS = ("metric", "imperial")
PROVIDERS = ("open-meteo", "wttr")
STYLES = ("text", "art", "compact")
MIN_DAYS, MAX_DAYS = 1, 3


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors as ValidationError so every failure exits with status 1."""

    def error(self, message):
        raise ValidationError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="weather",
        description="Fetch and display weather information for any city.",
    )
    parser.add_argument("--location", "-l", required=True, help="City name (required)")
    parser.add_argument("--days", "-d", type=int, default=1, help="Forecast days (1-3)")
    parser.add_argument("--units", "-u", default="metric", help="Units: metric or imperial")
    parser.add_argument("--provider", "-p", default="open-meteo", help="Data source: open-meteo or wttr")
    parser.add_argument("--style", "-s", default="text", help="Output style: text, art or compact")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log requests to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def validate(args: argparse.Namespace) -> None:
    if not MIN_DAYS <= args.days <= MAX_DAYS:
        raise ValidationError(f"days must be between {MIN_DAYS} and {MAX_DAYS}")
    if args.units not in UNITS:
        raise ValidationError("units must be 'metric' or 'imperial'")
    if args.provider not in PROVIDERS:
        raise ValidationError("provider must be 'open-meteo' or 'wttr'")
    if args.style not in STYLES:
        raise ValidationError("style must be 'text', 'art' or 'compact'")


async def fetch_weather(args: argparse.Namespace) -> WeatherResult:
    if args.provider == "wttr":
        wttr = WttrClient(settings.wttr_base_url, settings.wttr_timeout_seconds)
        current = await wttr.fetch(args.location)
        return current.to_result(args.units)

    om = OpenMeteoClient(settings.forecast_base_url, settings.geocoding_base_url)
    place = await om.geocode(args.location)
    return await om.get_forecast(place.latitude, place.longitude, args.units, args.days, name=place.name)


def render(weather: WeatherResult, style: str) -> str:
    if style == "text":
        return text.render(weather)
    art_weather = art.ArtWeather.from_result(weather)
    if style == "compact":
        return art.render_compact(art_weather)
    return art.render(art_weather)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        validate(args)
    except ValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if args.verbose else settings.log_level)
    logger.debug("looking up %r via %s (days=%d, units=%s)", args.location, args.provider, args.days, args.units)

    try:
        weather = asyncio.run(fetch_weather(args))
    except WeatherError as exc:
        print(f"Error: failed to get weather: {exc}", file=sys.stderr)
        return 1

    sys.stdout.write(render(weather, args.style))
    return 0


if __name__ == "__main__":
    sys.exit(main())
