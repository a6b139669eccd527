"""
Domain models for city forecast.

Pydantic models for data from OpenWeatherMap and for the lookup state.
These define the canonical schema - datasources normalize API responses to these.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, Field

# =============================================================================
# Current conditions
# =============================================================================


class CurrentWeather(BaseModel):
    """Snapshot of current conditions for one city. Replaced, never merged."""

    model_config = {"frozen": True}

    name: str
    country: str = ""
    temperature: float
    humidity: int
    wind_speed: float | None = None
    visibility: int | None = Field(default=None, description="Metres")
    sunrise: datetime
    sunset: datetime
    timezone_offset: int = Field(default=0, description="Seconds east of UTC")
    condition: str = ""
    description: str = ""

    @property
    def visibility_km(self) -> float | None:
        """Visibility in kilometres."""
        if self.visibility is None:
            return None
        return self.visibility / 1000


# =============================================================================
# Forecast
# =============================================================================


class ForecastSample(BaseModel):
    """One 3-hourly forecast entry, timestamp left as the provider sent it."""

    model_config = {"frozen": True}

    timestamp_text: str
    temperature: float | None = None
    condition: str = ""
    description: str = ""


class DigestEntry(BaseModel):
    """The sample chosen to represent one calendar day."""

    model_config = {"frozen": True}

    date: date
    timestamp: datetime
    temperature: float | None = None
    condition: str = ""
    description: str = ""

    @property
    def weekday(self) -> str:
        """Full weekday name, e.g. ``Monday``."""
        return self.date.strftime("%A")


class FetchResult(BaseModel):
    """Everything one provider round trip returns."""

    model_config = {"frozen": True}

    current: CurrentWeather
    forecast_samples: list[ForecastSample] = Field(default_factory=list)


class WeatherReport(BaseModel):
    """Current conditions plus the daily digest, ready to render."""

    model_config = {"frozen": True}

    city: str
    today: date
    current: CurrentWeather
    digest: list[DigestEntry] = Field(default_factory=list)


# =============================================================================
# Query state
# =============================================================================


class Loading(BaseModel):
    """A query has been issued and has not settled yet."""

    model_config = {"frozen": True}

    status: Literal["loading"] = "loading"
    city: str
    generation: int


class Success(BaseModel):
    """The most recent query produced a report."""

    model_config = {"frozen": True}

    status: Literal["success"] = "success"
    generation: int
    report: WeatherReport


class Failure(BaseModel):
    """The most recent query failed; ``message`` is meant for display."""

    model_config = {"frozen": True}

    status: Literal["failure"] = "failure"
    generation: int
    kind: str
    message: str


QueryState = Annotated[Loading | Success | Failure, Field(discriminator="status")]
