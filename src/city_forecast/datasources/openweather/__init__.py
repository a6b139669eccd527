"""OpenWeatherMap data source.

Fetches current conditions and the 5-day / 3-hour forecast by city name.

Public API:
  - weather: fetch_weather (both endpoints, one FetchResult)
  - current: fetch_current, parse_current
  - forecast: fetch_forecast, parse_forecast
  - client: API URLs, shared request helper
"""

from city_forecast.datasources.openweather.client import Endpoint, openweather_url
from city_forecast.datasources.openweather.current import fetch_current, parse_current
from city_forecast.datasources.openweather.forecast import fetch_forecast, parse_forecast
from city_forecast.datasources.openweather.weather import fetch_weather

__all__ = [
    "Endpoint",
    "fetch_current",
    "fetch_forecast",
    "fetch_weather",
    "openweather_url",
    "parse_current",
    "parse_forecast",
]
