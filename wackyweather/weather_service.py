# ABOUTME: Service layer for the geocode.city and National Weather Service API calls.
# ABOUTME: Handles geocoding, forecast link lookup and forecast period retrieval.

import logging
from urllib.parse import quote_plus

import httpx
from pydantic import ValidationError

from wackyweather.config import GEOCODE_URL, WEATHER_URL
from wackyweather.decoding import Shape, decode
from wackyweather.errors import CityNotFoundError, EmptyForecastError, ParseError
from wackyweather.models import Coordinates, ForecastInfo, ForecastLink, ForecastPeriod, GeocodeCandidate, LocationMetadata
from wackyweather.requester import check_status, get_request

logger = logging.getLogger(__name__)

GEOCODE_HEADERS = {"accept": "application/json;charset=utf-8"}
GEOJSON_HEADERS = {"accept": "application/geo+json"}


def build_geocode_url(city: str, base_url: str = GEOCODE_URL, limit: int | None = 1) -> str:
    """Build the autocomplete URL for a city, query-escaping the name."""
    query = f"q={quote_plus(city)}"
    if limit is not None:
        query = f"limit={limit}&{query}"
    return f"{base_url}/autocomplete?{query}"


def build_points_url(coords: Coordinates, base_url: str = WEATHER_URL) -> str:
    """Build the /points URL; the API expects four significant digits per coordinate."""
    return f"{base_url}/points/{coords.latitude:.4g},{coords.longitude:.4g}"


def select_candidate(
    candidates: list[GeocodeCandidate], city: str, country_code: str | None = None
) -> GeocodeCandidate:
    """Pick the first candidate, or the first one in country_code when a filter is given."""
    if not candidates:
        raise CityNotFoundError(city, country_code)
    if country_code is None:
        return candidates[0]
    for candidate in candidates:
        if candidate.country_code and candidate.country_code.upper() == country_code.upper():
            return candidate
    raise CityNotFoundError(city, country_code)


async def geocode(
    client: httpx.AsyncClient,
    city: str,
    *,
    country_code: str | None = "US",
    base_url: str = GEOCODE_URL,
) -> Coordinates:
    """Geocode a city name to coordinates using the geocode.city autocomplete API."""
    city = city.strip()
    if not city:
        raise ValueError("city name must not be empty")

    # A country filter needs every candidate, not just the top one
    url = build_geocode_url(city, base_url, limit=None if country_code else 1)
    resp = await get_request(client, url, GEOCODE_HEADERS)
    check_status(resp.status_code, 200, url)
    candidates = decode(resp.content, GeocodeCandidate, Shape.LIST)
    logger.debug("geocoder returned %d candidate(s) for %r", len(candidates), city)

    match = select_candidate(candidates, city, country_code)
    logger.info("resolved %r to %s, %s (%s)", city, match.name, match.region or match.country, match.country_code)
    try:
        return Coordinates(latitude=match.latitude, longitude=match.longitude)
    except ValidationError as e:
        raise ParseError(f"geocoder returned invalid coordinates for {city!r}: {match.latitude}, {match.longitude}") from e


async def get_forecast_link(
    client: httpx.AsyncClient,
    coords: Coordinates,
    *,
    base_url: str = WEATHER_URL,
) -> ForecastLink:
    """Look up the forecast endpoint and relative location for a coordinate pair."""
    url = build_points_url(coords, base_url)
    resp = await get_request(client, url, GEOJSON_HEADERS)
    check_status(resp.status_code, 200, url)
    metadata = decode(resp.content, LocationMetadata, Shape.OBJECT)

    return ForecastLink(
        url=metadata.forecast_link,
        relative_city=metadata.relative_city,
        relative_state=metadata.relative_state,
        hourly_url=metadata.forecast_hourly_link,
    )


async def get_periods(client: httpx.AsyncClient, forecast_url: str) -> list[ForecastPeriod]:
    """Fetch the forecast periods from a forecast link, in the order the API returns them."""
    resp = await get_request(client, forecast_url, GEOJSON_HEADERS)
    check_status(resp.status_code, 200, forecast_url)
    info = decode(resp.content, ForecastInfo, Shape.OBJECT)

    periods = info.properties.periods
    if not periods:
        raise EmptyForecastError(forecast_url)
    return periods
