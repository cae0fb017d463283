# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides sample geocoding, points and forecast payloads shaped like the real APIs.

import pytest

SIOUX_FALLS = {
    "name": "Sioux Falls",
    "longitude": -96.7311,
    "latitude": 43.5446,
    "country": "United States",
    "countryCode": "US",
    "region": "South Dakota",
    "district": "Minnehaha County",
    "timezone": "America/Chicago",
    "population": 192517,
}

FORECAST_URL = "https://api.weather.gov/gridpoints/FSD/89,48/forecast"
HOURLY_URL = "https://api.weather.gov/gridpoints/FSD/89,48/forecast/hourly"


def make_period(number: int = 1, name: str = "Today", short_forecast: str = "Sunny", **overrides) -> dict:
    period = {
        "number": number,
        "name": name,
        "startTime": "2024-06-01T06:00:00-05:00",
        "endTime": "2024-06-01T18:00:00-05:00",
        "isDaytime": True,
        "temperature": 78,
        "temperatureUnit": "F",
        "temperatureTrend": None,
        "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": 10},
        "windSpeed": "5 to 10 mph",
        "windDirection": "S",
        "shortForecast": short_forecast,
        "detailedForecast": f"{short_forecast}, with a high near 78. South wind 5 to 10 mph.",
    }
    period.update(overrides)
    return period


@pytest.fixture
def sioux_falls() -> dict:
    return dict(SIOUX_FALLS)


@pytest.fixture
def forecast_url() -> str:
    return FORECAST_URL


@pytest.fixture
def hourly_url() -> str:
    return HOURLY_URL


@pytest.fixture(name="make_period")
def make_period_fixture():
    """Factory for forecast period payloads, overridable per field."""
    return make_period


@pytest.fixture
def geocode_payload() -> list[dict]:
    return [SIOUX_FALLS]


@pytest.fixture
def points_payload() -> dict:
    return {
        "properties": {
            "forecast": FORECAST_URL,
            "forecastHourly": HOURLY_URL,
            "relativeLocation": {"properties": {"city": "Sioux Falls", "state": "SD"}},
        }
    }


@pytest.fixture
def forecast_payload() -> dict:
    return {
        "properties": {
            "generatedAt": "2024-06-01T10:51:00+00:00",
            "periods": [
                make_period(1, "Today", "Sunny"),
                make_period(2, "Tonight", "Partly Cloudy", isDaytime=False, temperature=58),
                make_period(3, "Sunday", "Chance Showers And Thunderstorms", temperature=81),
            ],
        }
    }
