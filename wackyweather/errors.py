# ABOUTME: Exception hierarchy for the weather lookup pipeline.
# ABOUTME: Every stage raises a WeatherError subclass; the CLI is the only place they are caught.


class WeatherError(Exception):
    """Base class for all errors raised while looking up a forecast."""


class NetworkError(WeatherError):
    """The request could not be sent or the transport failed."""


class UnexpectedStatusError(WeatherError):
    """The upstream API answered with a status code other than the expected one."""

    def __init__(self, status_code: int, url: str | None = None):
        self.status_code = status_code
        self.url = url
        msg = f"unexpected status code: {status_code}"
        if url:
            msg += f" ({url})"
        super().__init__(msg)


class EmptyResponseError(WeatherError):
    """The response body was empty where JSON content was expected."""


class ParseError(WeatherError):
    """The response body was not valid JSON or did not match the expected record."""


class ShapeMismatchError(WeatherError):
    """The JSON root was an array where an object was expected, or the reverse."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected a JSON {expected} but the response was a JSON {actual}")


class CityNotFoundError(WeatherError):
    """The geocoder returned no usable candidate for the city."""

    def __init__(self, city: str, country_code: str | None = None):
        self.city = city
        self.country_code = country_code
        msg = f"the requested city could not be found: {city!r}"
        if country_code:
            msg += f" (country code {country_code})"
        super().__init__(msg)


class EmptyForecastError(WeatherError):
    """The forecast endpoint returned no periods."""

    def __init__(self, url: str | None = None):
        self.url = url
        super().__init__(f"no forecast periods returned{f' from {url}' if url else ''}")


class UnclassifiedForecastError(WeatherError):
    """No weather keyword was found in the short forecast text."""

    def __init__(self, short_forecast: str):
        self.short_forecast = short_forecast
        super().__init__(f"could not extract forecast from {short_forecast!r}")
