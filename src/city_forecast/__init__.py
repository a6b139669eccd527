"""City Forecast - current conditions and a 7-day digest for any city.

Architecture::

    datasources/   External APIs (OpenWeatherMap current weather + 3-hour forecast)
    analysis/      Pure reductions (3-hour samples -> one entry per day)
    renderers/     Pure data -> text (report blocks, condition assets, dates)
    lookup.py      Query session: validation, tagged state, stale-result guard
    services/      Shared utilities (HTTP session)

Data flow: city -> datasources (fetch) -> analysis (digest) -> renderers -> terminal
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from city_forecast.config import Settings
from city_forecast.schemas import WeatherReport

__all__ = ["Settings", "WeatherReport", "__version__"]
