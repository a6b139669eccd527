"""Current conditions and forecast for a city in one call."""

from __future__ import annotations

from typing import TYPE_CHECKING

from city_forecast.config import get_settings
from city_forecast.datasources.openweather.current import fetch_current
from city_forecast.datasources.openweather.forecast import fetch_forecast
from city_forecast.schemas import FetchResult

if TYPE_CHECKING:
    from city_forecast.config import Settings


def fetch_weather(city: str, *, settings: Settings | None = None) -> FetchResult:
    """
    Fetch current conditions and the raw forecast for ``city``.

    Two round trips (current, then forecast). Nothing is retried or filtered;
    the first ``ProviderError`` propagates and no partial result is returned.

    Args:
        city: Free-text city name. Callers must not pass an empty string.
        settings: Override settings (defaults to ``get_settings()``).
    """
    settings = settings or get_settings()
    current = fetch_current(city, settings=settings)
    samples = fetch_forecast(city, settings=settings)
    return FetchResult(current=current, forecast_samples=samples)
