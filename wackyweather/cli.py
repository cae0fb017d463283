# ABOUTME: Command-line entry point: `wackyweather Sioux Falls` prints the current forecast and art.
# ABOUTME: Sets up logging and settings, runs the lookup, and turns any failure into a fatal exit.

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from wackyweather.config import Settings, load_settings
from wackyweather.deps import WeatherDeps, create_http_client
from wackyweather.errors import WeatherError
from wackyweather.lookup import lookup_weather
from wackyweather.models import WeatherReport

logger = logging.getLogger("wackyweather")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for `wackyweather CITY... [options]`."""
    parser = argparse.ArgumentParser(
        prog="wackyweather",
        description="Print the current National Weather Service forecast for a city, with ASCII art.",
    )
    parser.add_argument("city", nargs="+", help="city name; several words are joined with spaces")
    country = parser.add_mutually_exclusive_group()
    country.add_argument("--country-code", help="only accept geocoding matches in this country (default: US)")
    country.add_argument(
        "--any-country", action="store_true", help="accept the first geocoding match in any country"
    )
    parser.add_argument("--hourly", action="store_true", help="show the current hour instead of the 12-hour period")
    parser.add_argument("--no-art", action="store_true", help="do not classify the forecast or print ASCII art")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def setup_logging(level: str = "INFO") -> None:
    """Log to stderr at the given level and keep httpx request logs quiet."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def format_report(report: WeatherReport) -> str:
    """Render a report as the text printed on success."""
    period = report.period
    lines = []
    if report.relative_city or report.relative_state:
        lines.append(f"{report.relative_city}, {report.relative_state}")
    lines.append(period.name)
    lines.append(f"{period.temperature}°{period.temperature_unit}")
    lines.append(period.detailed_forecast or period.short_forecast)
    if report.art is not None:
        lines.append(report.art)
    return "\n".join(lines)


async def run(settings: Settings, city: str, *, hourly: bool = False, with_art: bool = True) -> WeatherReport:
    """Open an HTTP client for the duration of one lookup and run it."""
    async with create_http_client(settings) as client:
        deps = WeatherDeps(http_client=client, settings=settings)
        return await lookup_weather(deps, city, hourly=hourly, with_art=with_art)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit status.

    Any WeatherError is logged and turns into status 1; nothing is printed to stdout
    unless the whole lookup succeeds.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ValidationError as e:
        setup_logging()
        logger.error("invalid configuration: %s", e)
        return 1

    if args.any_country:
        settings = settings.model_copy(update={"country_code": None})
    elif args.country_code is not None:
        settings = settings.model_copy(update={"country_code": args.country_code.strip().upper() or None})

    setup_logging("DEBUG" if args.verbose else settings.log_level)

    city = " ".join(args.city)
    try:
        report = asyncio.run(run(settings, city, hourly=args.hourly, with_art=not args.no_art))
    except (WeatherError, ValueError) as e:
        logger.error("%s", e)
        return 1

    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
