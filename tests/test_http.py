"""Tests for the shared HTTP client."""

from __future__ import annotations

import requests
from urllib3.util.retry import Retry

from city_forecast.services.http import (
    DEFAULT_RETRY,
    USER_AGENT,
    create_session,
    session,
)


class TestDefaultRetry:
    """Provider calls are never retried by the session."""

    def test_no_retries(self) -> None:
        assert DEFAULT_RETRY.total == 0

    def test_status_left_to_caller(self) -> None:
        assert DEFAULT_RETRY.raise_on_status is False


class TestCreateSession:
    """Verify session factory."""

    def test_returns_session(self) -> None:
        s = create_session()
        assert isinstance(s, requests.Session)

    def test_mounts_https_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_mounts_http_adapter(self) -> None:
        s = create_session()
        adapter = s.get_adapter("http://example.com")
        assert isinstance(adapter, requests.adapters.HTTPAdapter)

    def test_adapter_has_no_retry(self) -> None:
        s = create_session()
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 0

    def test_custom_retry(self) -> None:
        custom = Retry(total=3, backoff_factor=1)
        s = create_session(retry=custom)
        adapter = s.get_adapter("https://example.com")
        assert adapter.max_retries.total == 3

    def test_user_agent_header(self) -> None:
        s = create_session()
        assert s.headers["User-Agent"] == USER_AGENT
        assert USER_AGENT.startswith("city-forecast/")


class TestModuleSession:
    """Verify the module-level singleton."""

    def test_session_is_configured(self) -> None:
        adapter = session.get_adapter("https://api.openweathermap.org")
        assert adapter.max_retries.total == 0
