"""Text renderers for a weather lookup.

Current conditions block, the daily digest as one line per day, and the
two combined into a full report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from city_forecast.analysis import FORECAST_HORIZON_DAYS
from city_forecast.renderers import render_template
from city_forecast.renderers.conditions import condition_asset, condition_symbol
from city_forecast.renderers.date_utils import clock_time, long_date, weekday_name
from city_forecast.renderers.weather_utils import format_speed, format_temperature

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any

    from city_forecast.schemas import CurrentWeather, DigestEntry, WeatherReport


def render_current(current: CurrentWeather, units: str = "metric") -> str:
    """Render the current-conditions block."""
    location = f"{current.name}, {current.country}" if current.country else current.name
    visibility = "n/a" if current.visibility_km is None else f"{current.visibility_km:g} km"
    offset = current.timezone_offset
    details = [
        ("Humidity", f"{current.humidity}%"),
        ("Wind", format_speed(current.wind_speed, units)),
        ("Visibility", visibility),
        ("Sunrise", clock_time(current.sunrise, offset)),
        ("Sunset", clock_time(current.sunset, offset)),
    ]
    return render_template(
        "current.txt.j2",
        location=location,
        temperature=format_temperature(current.temperature, units),
        description=current.description,
        details=details,
    )


def digest_cards(digest: Sequence[DigestEntry], units: str = "metric") -> list[dict[str, Any]]:
    """
    One display card per digest entry, earliest day first.

    Each card holds the weekday name, the formatted temperature, the
    condition description, a terminal glyph and the animated icon asset
    (``None`` when the condition has no asset).
    """
    return [
        {
            "date": entry.date.isoformat(),
            "weekday": weekday_name(entry.date),
            "temperature": format_temperature(entry.temperature, units),
            "description": entry.description,
            "symbol": condition_symbol(entry.condition),
            "icon": condition_asset(entry.condition),
        }
        for entry in digest
    ]


def render_digest(digest: Sequence[DigestEntry], units: str = "metric") -> str:
    """Render the digest, one line per day."""
    return render_template("digest.txt.j2", rows=digest_cards(digest, units))


def render_report(
    report: WeatherReport,
    units: str = "metric",
    horizon: int = FORECAST_HORIZON_DAYS,
) -> str:
    """Render current conditions followed by the ``horizon``-day forecast."""
    return render_template(
        "report.txt.j2",
        horizon=horizon,
        as_of=long_date(report.today),
        current_text=render_current(report.current, units),
        digest_text=render_digest(report.digest, units),
    )
