"""OpenWeatherMap API client constants and the shared request helper.

API docs:
  - Current weather: https://openweathermap.org/current
  - 5 day / 3 hour forecast: https://openweathermap.org/forecast5
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any

import requests

from city_forecast.errors import ProviderError
from city_forecast.services.http import session

logger = logging.getLogger(__name__)


class Endpoint(StrEnum):
    """Paths under the OpenWeatherMap base URL."""

    CURRENT = "/data/2.5/weather"
    FORECAST = "/data/2.5/forecast"


def openweather_url(endpoint: Endpoint, base: str) -> str:
    """Join the base URL and an endpoint path."""
    return base.rstrip("/") + endpoint.value


def _error_message(resp: requests.Response) -> str:
    """Pull the provider's own error message out of a failed response.

    OpenWeatherMap answers errors with ``{"cod": "404", "message": "city not found"}``.
    """
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return resp.reason or f"HTTP {resp.status_code}"


def get_json(
    endpoint: Endpoint,
    city: str,
    *,
    api_key: str | None,
    base: str,
    units: str,
    timeout: float,
) -> dict[str, Any]:
    """
    Issue one GET for ``city`` and return the decoded JSON object.

    Raises:
        ProviderError: missing API key, network failure, non-2xx status,
            or a body that is not a JSON object.
    """
    if not api_key:
        msg = "OpenWeatherMap API key is not configured"
        raise ProviderError(msg)

    url = openweather_url(endpoint, base)
    params = {"q": city, "appid": api_key, "units": units}
    logger.debug("GET %s q=%r units=%s", url, city, units)

    try:
        resp = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        msg = f"Network error: {exc}"
        raise ProviderError(msg) from exc

    if not resp.ok:
        message = _error_message(resp)
        logger.info("Provider rejected %r (%s): %s", city, resp.status_code, message)
        raise ProviderError(message, status_code=resp.status_code)

    try:
        payload = resp.json()
    except ValueError as exc:
        msg = "Malformed response from weather provider"
        raise ProviderError(msg, status_code=resp.status_code) from exc

    if not isinstance(payload, dict):
        msg = "Malformed response from weather provider"
        raise ProviderError(msg, status_code=resp.status_code)

    result: dict[str, Any] = payload
    return result
