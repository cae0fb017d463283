# ABOUTME: Pydantic BaseModels for geocoding and National Weather Service responses.
# ABOUTME: Defines the structured types and weather categories used throughout the app.

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    """Base for upstream records: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(populate_by_name=True)


class GeocodeCandidate(_ApiModel):
    """One match returned by the geocoding autocomplete endpoint."""

    name: str
    longitude: float
    latitude: float
    country: str | None = None
    country_code: str | None = Field(default=None, alias="countryCode")
    region: str | None = None
    district: str | None = None
    timezone: str | None = None
    population: int | None = None


class Coordinates(BaseModel):
    """A validated latitude/longitude pair."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class RelativeLocationProperties(_ApiModel):
    city: str = ""
    state: str = ""


class RelativeLocation(_ApiModel):
    properties: RelativeLocationProperties = RelativeLocationProperties()


class PointProperties(_ApiModel):
    forecast: str
    forecast_hourly: str | None = Field(default=None, alias="forecastHourly")
    relative_location: RelativeLocation = Field(default=RelativeLocation(), alias="relativeLocation")


class LocationMetadata(_ApiModel):
    """Response of the /points endpoint: where to find the forecast for a coordinate pair."""

    properties: PointProperties

    @property
    def forecast_link(self) -> str:
        return self.properties.forecast

    @property
    def forecast_hourly_link(self) -> str | None:
        return self.properties.forecast_hourly

    @property
    def relative_city(self) -> str:
        return self.properties.relative_location.properties.city

    @property
    def relative_state(self) -> str:
        return self.properties.relative_location.properties.state


class ForecastLink(BaseModel):
    """Forecast URL together with the human-readable place it belongs to."""

    url: str
    relative_city: str = ""
    relative_state: str = ""
    hourly_url: str | None = None


class QuantitativeValue(_ApiModel):
    unit_code: str | None = Field(default=None, alias="unitCode")
    value: float | None = None


class ForecastPeriod(_ApiModel):
    """One period (e.g. "Tonight", "Monday") of a forecast, in upstream order."""

    number: int
    name: str = ""
    start_time: datetime = Field(alias="startTime")
    end_time: datetime = Field(alias="endTime")
    is_daytime: bool = Field(default=True, alias="isDaytime")
    temperature: int
    temperature_unit: str = Field(default="F", alias="temperatureUnit")
    temperature_trend: str | None = Field(default=None, alias="temperatureTrend")
    probability_of_precipitation: QuantitativeValue = Field(
        default=QuantitativeValue(), alias="probabilityOfPrecipitation"
    )
    wind_speed: str = Field(default="", alias="windSpeed")
    wind_direction: str = Field(default="", alias="windDirection")
    short_forecast: str = Field(default="", alias="shortForecast")
    detailed_forecast: str = Field(default="", alias="detailedForecast")

    @property
    def precipitation_probability_percent(self) -> float | None:
        return self.probability_of_precipitation.value


class ForecastProperties(_ApiModel):
    generated_at: datetime | None = Field(default=None, alias="generatedAt")
    periods: list[ForecastPeriod] = []


class ForecastInfo(_ApiModel):
    """Response of a forecast (or hourly forecast) endpoint."""

    properties: ForecastProperties


class WeatherCategory(Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"
    HAIL = "hail"
    SNOW = "snow"
    UNKNOWN = "unknown"


class WeatherReport(BaseModel):
    """Everything the CLI prints for one lookup."""

    coordinates: Coordinates
    relative_city: str = ""
    relative_state: str = ""
    period: ForecastPeriod
    category: WeatherCategory | None = None
    art: str | None = None
