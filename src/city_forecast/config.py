"""
Application settings.

Values come from environment variables prefixed ``CITY_FORECAST_`` (or a
``.env`` file in the working directory), e.g.::

    CITY_FORECAST_OPENWEATHER_API_KEY=abc123
    CITY_FORECAST_UNITS=imperial
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Units = Literal["metric", "imperial", "standard"]


class Settings(BaseSettings):
    """Runtime configuration for the weather lookup."""

    model_config = SettingsConfigDict(
        env_prefix="CITY_FORECAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    app_name: str = "city-forecast"
    app_env: str = "development"
    debug: bool = False

    # Provider
    openweather_api_key: str | None = None
    openweather_base: str = "https://api.openweathermap.org"
    units: Units = "metric"

    forecast_horizon_days: int = Field(default=7, ge=1)
    http_timeout: float = Field(default=30, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
