"""5-day / 3-hour forecast from the OpenWeatherMap forecast endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from city_forecast.config import get_settings
from city_forecast.datasources.openweather.client import Endpoint, get_json
from city_forecast.errors import ProviderError
from city_forecast.schemas import ForecastSample

if TYPE_CHECKING:
    from city_forecast.config import Settings

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_temperature(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return float(value)


def _parse_sample(item: Any) -> ForecastSample:
    """
    Parse one ``list`` entry. The timestamp is kept as text for the reducer.

    Each field is read on its own: a field with the wrong shape becomes its
    empty value. An entry that is not an object gets an empty timestamp, so
    the reducer drops it.
    """
    if not isinstance(item, dict):
        logger.debug("Forecast entry is not an object: %r", item)
        return ForecastSample(timestamp_text="")

    weather = item.get("weather")
    first = _as_dict(weather[0]) if isinstance(weather, list) and weather else {}
    return ForecastSample(
        timestamp_text=_as_text(item.get("dt_txt")),
        temperature=_as_temperature(_as_dict(item.get("main")).get("temp")),
        condition=_as_text(first.get("main")),
        description=_as_text(first.get("description")),
    )


def parse_forecast(payload: dict[str, Any]) -> list[ForecastSample]:
    """
    Normalize a forecast payload into samples, in provider order.

    Samples are not filtered here, not even ones with unreadable timestamps
    or malformed entries. One bad entry never costs the other samples.

    Raises:
        ProviderError: if ``list`` is missing or is not a list.
    """
    items = payload.get("list")
    if not isinstance(items, list):
        msg = "Malformed forecast payload: missing 'list'"
        raise ProviderError(msg)

    return [_parse_sample(item) for item in items]


def fetch_forecast(city: str, *, settings: Settings | None = None) -> list[ForecastSample]:
    """
    Fetch the 3-hourly forecast for ``city``.

    Args:
        city: Free-text city name. Must be non-empty.
        settings: Override settings (defaults to ``get_settings()``).

    Returns:
        Every sample the provider sent, oldest first.
    """
    settings = settings or get_settings()
    payload = get_json(
        Endpoint.FORECAST,
        city,
        api_key=settings.openweather_api_key,
        base=settings.openweather_base,
        units=settings.units,
        timeout=settings.http_timeout,
    )
    return parse_forecast(payload)
