"""Condition keyword -> presentation lookups.

Keywords are OpenWeatherMap's ``weather[].main`` groups, lowercased
(``clouds``, ``clear``, ``rain``...). Both lookups are total: an unknown
keyword resolves to the default, never an exception.
"""

from __future__ import annotations

#: Animated asset shown on a forecast card.
CONDITION_ASSETS: dict[str, str] = {
    "clouds": "cloudy.gif",
    "clear": "sun.gif",
    "sunny": "sun.gif",
    "rain": "rain.gif",
}

#: Terminal glyph shown next to a forecast line.
CONDITION_SYMBOLS: dict[str, str] = {
    "clear": "\u2600\ufe0f",
    "sunny": "\u2600\ufe0f",
    "clouds": "\u2601\ufe0f",
    "rain": "\U0001f327\ufe0f",
    "drizzle": "\U0001f326\ufe0f",
    "thunderstorm": "\u26c8\ufe0f",
    "snow": "\U0001f328\ufe0f",
    "mist": "\U0001f32b\ufe0f",
    "fog": "\U0001f32b\ufe0f",
    "haze": "\U0001f32b\ufe0f",
}


def normalize_condition(keyword: str | None) -> str:
    """Lowercase and strip a condition keyword; ``None`` becomes ``""``."""
    return (keyword or "").strip().lower()


def condition_asset(keyword: str | None) -> str | None:
    """Asset file for a condition keyword, or None when there is no asset."""
    return CONDITION_ASSETS.get(normalize_condition(keyword))


def condition_symbol(keyword: str | None) -> str:
    """Glyph for a condition keyword, or ``""`` when there is none."""
    return CONDITION_SYMBOLS.get(normalize_condition(keyword), "")
