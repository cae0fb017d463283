# ABOUTME: Tests for environment-driven settings.
# ABOUTME: Verifies defaults, WACKYWEATHER_* overrides, normalization and validation failures.

import pytest
from pydantic import ValidationError

from wackyweather.config import GEOCODE_URL, WEATHER_URL, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})
        assert settings.geocode_url == GEOCODE_URL
        assert settings.weather_url == WEATHER_URL
        assert settings.country_code == "US"
        assert settings.timeout == 10.0
        assert settings.retries == 1

    def test_environment_overrides(self):
        """WACKYWEATHER_* variables override the defaults and are coerced to their types.

        Implementation: Passes an explicit environment mapping.
        Passing implies: Timeouts, retries and URLs are configurable without code changes.
        """
        settings = load_settings(
            {
                "WACKYWEATHER_WEATHER_URL": "https://nws.test/",
                "WACKYWEATHER_TIMEOUT": "2.5",
                "WACKYWEATHER_RETRIES": "3",
                "WACKYWEATHER_COUNTRY_CODE": "ca",
                "WACKYWEATHER_LOG_LEVEL": "debug",
                "UNRELATED": "ignored",
            }
        )
        assert settings.weather_url == "https://nws.test"
        assert settings.timeout == 2.5
        assert settings.retries == 3
        assert settings.country_code == "CA"
        assert settings.log_level == "DEBUG"

    def test_empty_country_code_disables_filter(self):
        assert load_settings({"WACKYWEATHER_COUNTRY_CODE": ""}).country_code is None

    @pytest.mark.parametrize("key,value", [("WACKYWEATHER_TIMEOUT", "0"), ("WACKYWEATHER_RETRIES", "zero")])
    def test_invalid_values_rejected(self, key, value):
        with pytest.raises(ValidationError):
            load_settings({key: value})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("WACKYWEATHER_USER_AGENT", "env-agent")
        assert load_settings().user_agent == "env-agent"
