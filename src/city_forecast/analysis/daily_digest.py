"""Reduce 3-hourly forecast samples to one representative entry per day.

The provider returns ~40 samples spanning five or six days. The digest keeps
the first sample seen for each calendar day on or after ``today``, in
chronological order, capped at ``FORECAST_HORIZON_DAYS`` days. The first
sample of a day is used as-is rather than averaged.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from city_forecast.errors import ParseError
from city_forecast.schemas import DigestEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

    from city_forecast.schemas import ForecastSample

logger = logging.getLogger(__name__)

FORECAST_HORIZON_DAYS = 7

# Format of the provider's ``dt_txt`` field
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_sample_timestamp(text: str) -> datetime:
    """Parse a ``dt_txt`` value such as ``2024-05-01 09:00:00``.

    Raises:
        ParseError: if ``text`` is not in ``TIMESTAMP_FORMAT``.
    """
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except (TypeError, ValueError):
        raise ParseError(text) from None


def reduce_to_daily_digest(
    samples: Iterable[ForecastSample],
    today: date,
    *,
    horizon: int = FORECAST_HORIZON_DAYS,
) -> list[DigestEntry]:
    """
    Pick one sample per calendar day, earliest day first.

    Args:
        samples: Forecast samples in provider (chronological) order.
        today: The caller's local date at query time. Days before it are dropped.
        horizon: Maximum number of days in the digest.

    Returns:
        Entries with strictly increasing dates, none before ``today``, at most
        ``horizon`` long. Empty input gives an empty list.
    """
    if horizon < 1:
        msg = f"horizon must be at least 1, got {horizon}"
        raise ValueError(msg)

    digest: list[DigestEntry] = []
    last_day: date | None = None

    for sample in samples:
        try:
            timestamp = parse_sample_timestamp(sample.timestamp_text)
        except ParseError as exc:
            logger.debug("Skipping forecast sample: %s", exc.message)
            continue

        day = timestamp.date()
        if day < today:
            continue
        # Later samples of an already-kept day (or out-of-order stragglers) are skipped
        if last_day is not None and day <= last_day:
            continue

        digest.append(
            DigestEntry(
                date=day,
                timestamp=timestamp,
                temperature=sample.temperature,
                condition=sample.condition,
                description=sample.description,
            )
        )
        last_day = day
        if len(digest) >= horizon:
            break

    return digest
