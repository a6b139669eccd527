"""Weather unit formatting for renderers.

Pure conversion functions with no external dependencies. Values are shown in
whatever unit system the provider was queried with; nothing is converted.
"""

from __future__ import annotations

TEMPERATURE_UNITS: dict[str, str] = {
    "metric": "°C",
    "imperial": "°F",
    "standard": " K",
}

SPEED_UNITS: dict[str, str] = {
    "metric": "m/s",
    "imperial": "mph",
    "standard": "m/s",
}


def format_temperature(value: float | None, units: str = "metric") -> str:
    """Format a temperature, e.g. ``12.3°C``. Missing values render as ``n/a``."""
    if value is None:
        return "n/a"
    return f"{value:.1f}{TEMPERATURE_UNITS.get(units, '')}"


def format_speed(value: float | None, units: str = "metric") -> str:
    """Format a wind speed, e.g. ``4.1 m/s``."""
    if value is None:
        return "n/a"
    return f"{value:.1f} {SPEED_UNITS.get(units, 'm/s')}"
