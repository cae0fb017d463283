# ABOUTME: End-to-end weather lookup: city name to current forecast period plus ASCII art.
# ABOUTME: Chains geocoding, forecast link lookup, period fetch and classification sequentially.

import logging

from wackyweather.classifier import classify, render
from wackyweather.deps import WeatherDeps
from wackyweather.errors import EmptyForecastError
from wackyweather.models import WeatherReport
from wackyweather.weather_service import geocode, get_forecast_link, get_periods

logger = logging.getLogger(__name__)


async def lookup_weather(
    deps: WeatherDeps,
    city: str,
    *,
    hourly: bool = False,
    with_art: bool = True,
) -> WeatherReport:
    """Resolve a city and return its current forecast period.

    Each stage depends on the previous one, so the requests run one after another.

    Args:
        deps: HTTP client and settings.
        city: Free-text city name (e.g. "Sioux Falls").
        hourly: Use the hourly forecast instead of the 12-hour periods.
        with_art: Classify the short forecast and attach its ASCII art. When false,
            an unclassifiable forecast is not an error.
    """
    settings = deps.settings
    client = deps.http_client

    coords = await geocode(client, city, country_code=settings.country_code, base_url=settings.geocode_url)
    link = await get_forecast_link(client, coords, base_url=settings.weather_url)
    logger.info("forecast office for %s, %s: %s", link.relative_city, link.relative_state, link.url)

    forecast_url = link.url
    if hourly:
        if not link.hourly_url:
            raise EmptyForecastError(link.url)
        forecast_url = link.hourly_url

    periods = await get_periods(client, forecast_url)
    current = periods[0]
    logger.debug("%d period(s); current is %r: %s", len(periods), current.name, current.short_forecast)

    report = WeatherReport(
        coordinates=coords,
        relative_city=link.relative_city,
        relative_state=link.relative_state,
        period=current,
    )
    if with_art:
        report.category = classify(current.short_forecast)
        report.art = render(report.category)
    return report
