"""Shared date-formatting helpers for renderers."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone


def weekday_name(day: date) -> str:
    """Full weekday name, e.g. ``Monday``."""
    return day.strftime("%A")


def long_date(day: date) -> str:
    """Human-readable date, e.g. ``October 19, 2026``."""
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def clock_time(moment: datetime, offset_seconds: int = 0) -> str:
    """Wall-clock time at a fixed UTC offset, e.g. ``6:42 am``.

    ``offset_seconds`` is the provider's ``timezone`` field for the city.
    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    local = moment.astimezone(timezone(timedelta(seconds=offset_seconds)))
    hour = local.hour % 12 or 12
    suffix = "am" if local.hour < 12 else "pm"
    return f"{hour}:{local.minute:02d} {suffix}"
