"""
Query session for city weather lookups.

``WeatherLookup`` is the caller side of the fetcher: it rejects empty
queries, holds exactly one query state at a time (loading, success or
failure), decides what "today" is for the reducer, and drops results that
arrive for a query that has since been replaced or cancelled.

Synchronous use::

    lookup = WeatherLookup()
    state = lookup.search("Lisbon")
    if isinstance(state, Success):
        print(render_report(state.report))

Callers that fetch on another thread or event loop use ``begin`` /
``resolve`` / ``reject`` directly and pass back the generation they were given.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from city_forecast.analysis.daily_digest import FORECAST_HORIZON_DAYS, reduce_to_daily_digest
from city_forecast.datasources.openweather import fetch_weather
from city_forecast.errors import ValidationError, WeatherError
from city_forecast.schemas import Failure, Loading, Success, WeatherReport

if TYPE_CHECKING:
    from collections.abc import Callable

    from city_forecast.schemas import FetchResult, QueryState

logger = logging.getLogger(__name__)


class WeatherLookup:
    """Tracks the state of the latest weather query."""

    def __init__(
        self,
        fetcher: Callable[[str], FetchResult] = fetch_weather,
        clock: Callable[[], date] = date.today,
        horizon: int = FORECAST_HORIZON_DAYS,
    ) -> None:
        self._fetcher = fetcher
        self._clock = clock
        self._horizon = horizon
        self._generation = 0
        self.state: QueryState | None = None

    @property
    def generation(self) -> int:
        """Identifier of the most recent query (0 before the first one)."""
        return self._generation

    @property
    def busy(self) -> bool:
        """True while a query is outstanding."""
        return isinstance(self.state, Loading)

    def begin(self, city: str) -> int:
        """
        Start a new query and return its generation.

        Raises:
            ValidationError: if ``city`` is empty or only whitespace. The
                current state is left untouched.
        """
        query = city.strip()
        if not query:
            msg = "Please enter a city name"
            raise ValidationError(msg)

        self._generation += 1
        self.state = Loading(city=query, generation=self._generation)
        logger.debug("Query %d started for %r", self._generation, query)
        return self._generation

    def resolve(self, generation: int, fetched: FetchResult, today: date) -> bool:
        """Settle query ``generation`` with fetched data. Returns False if stale."""
        loading = self._pending(generation)
        if loading is None:
            logger.debug("Discarding stale result for query %d", generation)
            return False

        digest = reduce_to_daily_digest(fetched.forecast_samples, today, horizon=self._horizon)
        report = WeatherReport(
            city=loading.city,
            today=today,
            current=fetched.current,
            digest=digest,
        )
        self.state = Success(generation=generation, report=report)
        logger.info("Query %d: %s, %d forecast days", generation, report.city, len(digest))
        return True

    def reject(self, generation: int, error: WeatherError) -> bool:
        """Settle query ``generation`` with an error. Returns False if stale."""
        if self._pending(generation) is None:
            logger.debug("Discarding stale error for query %d: %s", generation, error.message)
            return False

        self.state = Failure(generation=generation, kind=error.kind, message=error.message)
        logger.info("Query %d failed: %s", generation, error.message)
        return True

    def cancel(self) -> None:
        """Abandon the outstanding query, if any. Its result will be discarded."""
        if self.busy:
            logger.debug("Query %d cancelled", self._generation)
            self._generation += 1
            self.state = None

    def search(self, city: str, today: date | None = None) -> QueryState | None:
        """
        Run a complete query: validate, fetch, reduce, settle.

        Args:
            city: City name as typed by the user.
            today: Calendar day for the digest. Defaults to the clock, read once
                when the query starts.

        Returns:
            The settled state, or None if the query was cancelled meanwhile.

        Raises:
            ValidationError: if ``city`` is empty.

        Weather errors from the fetcher settle the query as a ``Failure``.
        Anything else propagates, but the session is first reset so it never
        stays busy.
        """
        generation = self.begin(city)
        try:
            day = today or self._clock()
            fetched = self._fetcher(city.strip())
        except WeatherError as exc:
            self.reject(generation, exc)
        else:
            self.resolve(generation, fetched, day)
        finally:
            # Never leave the session stuck in Loading
            if self._pending(generation) is not None:
                logger.error("Query %d ended without a result", generation)
                self.state = None
        return self.state

    def _pending(self, generation: int) -> Loading | None:
        """The loading state for ``generation``, or None if it is no longer current."""
        if generation != self._generation or not isinstance(self.state, Loading):
            return None
        return self.state
