"""
Error taxonomy for weather lookups.

- ``ValidationError``: the query was rejected before any fetch (empty city).
- ``ProviderError``: OpenWeatherMap answered with an error, the network
  failed, or the payload was not what we expect.
- ``ParseError``: a single forecast sample had an unreadable timestamp.
  The reducer recovers from these by dropping the sample.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for every error raised by city_forecast."""

    kind = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(WeatherError):
    """The query is invalid and was never sent to the provider."""

    kind = "validation"


class ProviderError(WeatherError):
    """The weather provider could not produce a usable answer."""

    kind = "provider"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ParseError(WeatherError):
    """A forecast timestamp could not be parsed."""

    kind = "parse"

    def __init__(self, text: object) -> None:
        super().__init__(f"Unparseable forecast timestamp: {text!r}")
        self.text = text
