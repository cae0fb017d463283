# ABOUTME: Dependency container for the lookup pipeline using Pydantic BaseModel.
# ABOUTME: Builds the httpx.AsyncClient (timeout, User-Agent, tenacity retry transport) the services share.

import logging

import httpx
from pydantic import BaseModel, ConfigDict
from tenacity import AsyncRetrying, before_sleep_log, retry_if_exception_type, stop_after_attempt, wait_exponential
from tenacity.wait import wait_base

from wackyweather.config import Settings

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (httpx.ConnectError, httpx.ReadTimeout)


class WeatherDeps(BaseModel):
    """Dependencies handed to the lookup pipeline."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings = Settings()


class RetryingTransport(httpx.AsyncBaseTransport):
    """Wrap a transport and retry connection errors and read timeouts with exponential backoff.

    With attempts=1 (the default) every request is sent exactly once.
    """

    def __init__(self, wrapped: httpx.AsyncBaseTransport, attempts: int = 1, wait: wait_base | None = None):
        self._wrapped = wrapped
        self.attempts = attempts
        self._wait = wait if wait is not None else wait_exponential(multiplier=0.5, max=30)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        async for attempt in AsyncRetrying(
            retry=retry_if_exception_type(TRANSIENT_ERRORS),
            wait=self._wait,
            stop=stop_after_attempt(self.attempts),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._wrapped.handle_async_request(request)

    async def aclose(self) -> None:
        await self._wrapped.aclose()


def create_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create an httpx client with a bounded timeout and the configured retry policy."""
    settings = settings or Settings()
    transport = RetryingTransport(httpx.AsyncHTTPTransport(), attempts=settings.retries)
    return httpx.AsyncClient(
        transport=transport,
        timeout=settings.timeout,
        headers={"User-Agent": settings.user_agent},
    )
