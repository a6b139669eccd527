"""Shared fixtures: OpenWeatherMap payloads and isolated settings."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

import pytest

from city_forecast.config import Settings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

# 2024-05-06 05:35 UTC / 2024-05-06 19:50 UTC (06:35 / 20:50 in Lisbon, UTC+1)
SUNRISE_EPOCH = 1714973700
SUNSET_EPOCH = 1715025000


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Each test sees a fresh ``get_settings()`` and no CITY_FORECAST_* env."""
    for key in list(os.environ):
        if key.startswith("CITY_FORECAST_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with a test API key, ignoring any .env file."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        openweather_api_key="test-key",
        openweather_base="https://api.example.test",
    )


@pytest.fixture
def current_payload() -> dict[str, Any]:
    """A trimmed current-weather response for Lisbon."""
    return {
        "coord": {"lon": -9.1333, "lat": 38.7167},
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
        "main": {"temp": 18.4, "feels_like": 18.1, "humidity": 72, "pressure": 1016},
        "visibility": 10000,
        "wind": {"speed": 4.12, "deg": 330},
        "dt": 1715000000,
        "sys": {"country": "PT", "sunrise": SUNRISE_EPOCH, "sunset": SUNSET_EPOCH},
        "timezone": 3600,
        "id": 2267057,
        "name": "Lisbon",
        "cod": 200,
    }


def forecast_item(
    dt_txt: str,
    temp: float = 15.0,
    main: str = "Clouds",
    description: str = "scattered clouds",
) -> dict[str, Any]:
    """One entry of the forecast ``list``."""
    return {
        "dt_txt": dt_txt,
        "main": {"temp": temp, "humidity": 70},
        "weather": [{"main": main, "description": description}],
    }


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    """A forecast response with five samples across two days."""
    return {
        "cod": "200",
        "cnt": 5,
        "list": [
            forecast_item("2024-05-06 15:00:00", 19.0),
            forecast_item("2024-05-06 18:00:00", 17.5),
            forecast_item("2024-05-06 21:00:00", 15.2, "Clear", "clear sky"),
            forecast_item("2024-05-07 00:00:00", 13.9, "Rain", "light rain"),
            forecast_item("2024-05-07 03:00:00", 12.8, "Rain", "light rain"),
        ],
        "city": {"name": "Lisbon", "country": "PT"},
    }

