# ABOUTME: Maps a forecast's short description to a WeatherCategory and its ASCII art.
# ABOUTME: Keyword matching is case-insensitive and checked in a fixed precedence order.

from wackyweather import art
from wackyweather.errors import UnclassifiedForecastError
from wackyweather.models import WeatherCategory

# First match wins; severe weather is checked before milder words in the same text.
KEYWORDS: list[tuple[WeatherCategory, tuple[str, ...]]] = [
    (WeatherCategory.TORNADO, ("tornado",)),
    (WeatherCategory.HAIL, ("hail",)),
    (WeatherCategory.SNOW, ("snow", "snowy")),
    (WeatherCategory.THUNDERSTORM, ("thunder", "thunderstorms", "lightning")),
    (WeatherCategory.RAINY, ("rainy", "rain")),
    (WeatherCategory.CLOUDY, ("clouds", "cloudy")),
    (WeatherCategory.SUNNY, ("sun", "sunny")),
]

ART: dict[WeatherCategory, str | None] = {
    WeatherCategory.TORNADO: art.TORNADO,
    WeatherCategory.HAIL: None,
    WeatherCategory.SNOW: None,
    WeatherCategory.THUNDERSTORM: None,
    WeatherCategory.RAINY: art.RAIN,
    WeatherCategory.CLOUDY: art.CLOUDS,
    WeatherCategory.SUNNY: art.SUN,
}


def classify(short_forecast: str) -> WeatherCategory:
    """Return the category of a short forecast such as "Mostly Sunny".

    Raises UnclassifiedForecastError when none of the known keywords appear.
    """
    text = short_forecast.lower()
    for category, words in KEYWORDS:
        if any(word in text for word in words):
            return category
    raise UnclassifiedForecastError(short_forecast)


def render(category: WeatherCategory) -> str | None:
    """Return the art for a category, or None when it has no picture."""
    if category not in ART:
        raise UnclassifiedForecastError(category.value)
    return ART[category]
