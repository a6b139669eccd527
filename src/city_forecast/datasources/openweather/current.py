"""Current conditions from the OpenWeatherMap current-weather endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from city_forecast.config import get_settings
from city_forecast.datasources.openweather.client import Endpoint, get_json
from city_forecast.errors import ProviderError
from city_forecast.schemas import CurrentWeather

if TYPE_CHECKING:
    from city_forecast.config import Settings


def parse_current(payload: dict[str, Any]) -> CurrentWeather:
    """
    Normalize a current-weather payload.

    Args:
        payload: Decoded JSON with ``name``, ``sys``, ``main``, ``wind``,
            ``visibility``, ``timezone`` and ``weather`` keys.

    Raises:
        ProviderError: if required fields are missing or of the wrong type.
    """
    try:
        main = payload["main"]
        sys_info = payload["sys"]
        weather = (payload.get("weather") or [{}])[0]
        return CurrentWeather(
            name=payload["name"],
            country=sys_info.get("country") or "",
            temperature=main["temp"],
            humidity=main["humidity"],
            wind_speed=(payload.get("wind") or {}).get("speed"),
            visibility=payload.get("visibility"),
            sunrise=sys_info["sunrise"],
            sunset=sys_info["sunset"],
            timezone_offset=payload.get("timezone") or 0,
            condition=weather.get("main") or "",
            description=weather.get("description") or "",
        )
    except (KeyError, TypeError, AttributeError, PydanticValidationError) as exc:
        msg = f"Malformed current-weather payload: {exc}"
        raise ProviderError(msg) from exc


def fetch_current(city: str, *, settings: Settings | None = None) -> CurrentWeather:
    """
    Fetch current conditions for ``city``.

    Args:
        city: Free-text city name, e.g. ``"Portland,US"``. Must be non-empty.
        settings: Override settings (defaults to ``get_settings()``).
    """
    settings = settings or get_settings()
    payload = get_json(
        Endpoint.CURRENT,
        city,
        api_key=settings.openweather_api_key,
        base=settings.openweather_base,
        units=settings.units,
        timeout=settings.http_timeout,
    )
    return parse_current(payload)
