# ABOUTME: Single-GET requester and status check shared by the geocoding and forecast services.
# ABOUTME: Translates httpx transport failures and unexpected status codes into WeatherError subclasses.

import logging

import httpx

from wackyweather.errors import NetworkError, UnexpectedStatusError

logger = logging.getLogger(__name__)


async def get_request(client: httpx.AsyncClient, url: str, headers: dict[str, str] | None = None) -> httpx.Response:
    """Issue one GET request and return the fully read response."""
    logger.debug("GET %s", url)
    try:
        resp = await client.get(url, headers=headers)
    except httpx.RequestError as e:
        raise NetworkError(f"request to {url} failed: {e}") from e
    logger.debug("GET %s -> %d (%d bytes)", url, resp.status_code, len(resp.content))
    return resp


def check_status(status_code: int, expected: int = 200, url: str | None = None) -> None:
    """Raise UnexpectedStatusError unless status_code equals expected."""
    if status_code != expected:
        raise UnexpectedStatusError(status_code, url)
