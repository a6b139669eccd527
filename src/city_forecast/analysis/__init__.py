"""Pure reductions over fetched weather data.

Dependency rule: analysis/ imports schemas only. It never fetches data,
never reads the clock, and never produces text. Anything time-dependent
(``today``) is passed in by the caller.

Modules:
  - daily_digest: 3-hourly forecast samples -> one entry per calendar day
"""

from city_forecast.analysis.daily_digest import (
    FORECAST_HORIZON_DAYS,
    parse_sample_timestamp,
    reduce_to_daily_digest,
)

__all__ = ["FORECAST_HORIZON_DAYS", "parse_sample_timestamp", "reduce_to_daily_digest"]
