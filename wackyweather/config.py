# ABOUTME: Runtime settings for the weather lookup, read from the environment and .env.
# ABOUTME: Holds API base URLs, the geocoding country filter, HTTP timeout/retries and log level.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

GEOCODE_URL = "https://api.geocode.city"
WEATHER_URL = "https://api.weather.gov"
USER_AGENT = "wackyweather (https://github.com/wackyweather)"

_ENV_PREFIX = "WACKYWEATHER_"


class Settings(BaseModel):
    """Configuration shared by the HTTP client and the lookup pipeline."""

    geocode_url: str = GEOCODE_URL
    weather_url: str = WEATHER_URL
    # None disables the country filter
    country_code: str | None = "US"
    timeout: float = Field(default=10.0, gt=0)
    retries: int = Field(default=1, ge=1)
    user_agent: str = USER_AGENT
    log_level: str = "INFO"

    @field_validator("geocode_url", "weather_url")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("country_code")
    @classmethod
    def _normalize_country_code(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip().upper()

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from WACKYWEATHER_* variables, loading .env first when reading os.environ."""
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    values = {}
    for field in Settings.model_fields:
        key = _ENV_PREFIX + field.upper()
        if key in env:
            values[field] = env[key]
    return Settings(**values)
