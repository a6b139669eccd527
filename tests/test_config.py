"""Tests for application settings."""

from __future__ import annotations

import pydantic
import pytest

from city_forecast.config import Settings, get_settings


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.app_name == "city-forecast"
        assert s.openweather_api_key is None
        assert s.openweather_base == "https://api.openweathermap.org"
        assert s.units == "metric"
        assert s.forecast_horizon_days == 7
        assert s.http_timeout == 30

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CITY_FORECAST_OPENWEATHER_API_KEY", "abc123")
        monkeypatch.setenv("CITY_FORECAST_UNITS", "imperial")

        s = Settings(_env_file=None)  # type: ignore[call-arg]

        assert s.openweather_api_key == "abc123"
        assert s.units == "imperial"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UNITS", "imperial")
        assert Settings(_env_file=None).units == "metric"  # type: ignore[call-arg]

    def test_invalid_units_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None, units="kelvin")  # type: ignore[call-arg]

    def test_horizon_must_be_positive(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None, forecast_horizon_days=0)  # type: ignore[call-arg]


class TestGetSettings:
    """Cached settings accessor."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("CITY_FORECAST_APP_ENV", "production")
        get_settings.cache_clear()

        second = get_settings()

        assert second is not first
        assert second.app_env == "production"
