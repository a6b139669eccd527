"""
Shared HTTP client for provider calls.

Provides a pre-configured ``requests.Session`` with the project User-Agent.
Provider requests are not retried at this layer: the default strategy has
zero retries and leaves status handling to the caller. Timeouts are not set
here either; every call passes ``timeout=`` from settings. All datasource
modules should use this instead of bare ``requests.get``.

Usage::

    from city_forecast.services.http import session

    resp = session.get("https://api.example.com/v1/data", timeout=30)
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from city_forecast import __version__

#: Default retry strategy: none. Retry policy belongs to whoever calls the fetcher.
DEFAULT_RETRY = Retry(
    total=0,
    raise_on_status=False,  # non-2xx responses are translated by the datasource
)

USER_AGENT = f"city-forecast/{__version__}"


def create_session(retry: Retry | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT
    return s


#: Module-level session: import and use directly.
session: requests.Session = create_session()
