"""Periodic refresh of next-to-arrive predictions for favorite station pairs."""

from __future__ import annotations

import asyncio
import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from septa_tracker.domain.errors import FeedError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from septa_tracker.domain.models.next_arrival import NextArrival
    from septa_tracker.domain.models.station_pair import StationPair
    from septa_tracker.domain.ports import FavoritesRepository, NextArrivalRepository

logger = logging.getLogger(__name__)


class FavoritesRefreshManager:
    """Keeps next-to-arrive results fresh for every favorite station pair.

    All state is mutated on the event loop that runs the manager. Each pair
    has at most one outstanding fetch; different pairs are fetched in
    parallel. Changing the favorites set clears all results and starts a
    new generation, so results of fetches started before the change are
    dropped when they complete.
    """

    def __init__(
        self,
        next_arrivals: NextArrivalRepository,
        favorites_repository: FavoritesRepository,
        interval_seconds: float = 5.0,
        arrivals_limit: int = 3,
    ) -> None:
        """Initialize the manager.

        Args:
            next_arrivals: Source of next-to-arrive predictions.
            favorites_repository: Persistence for the favorites list.
            interval_seconds: Seconds between refreshes of every favorite.
            arrivals_limit: Number of arrivals requested per pair.
        """
        self._next_arrivals = next_arrivals
        self._favorites_repository = favorites_repository
        self.interval_seconds = interval_seconds
        self.arrivals_limit = arrivals_limit
        self._favorites: list[StationPair] = []
        self._results: dict[str, list[NextArrival]] = {}
        self._in_flight: dict[str, bool] = {}
        self._generation = 0
        self._task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()

    @property
    def favorites(self) -> list[StationPair]:
        """Current favorites in the order they were added."""
        return list(self._favorites)

    @property
    def results(self) -> Mapping[str, list[NextArrival]]:
        """Latest arrivals keyed by ``StationPair.key``."""
        return MappingProxyType(self._results)

    def results_for(self, pair: StationPair) -> list[NextArrival]:
        """Latest arrivals for a pair, empty until a fetch has completed."""
        return self._results.get(pair.key, [])

    def is_in_flight(self, pair: StationPair) -> bool:
        """True while a fetch for the pair is outstanding."""
        return self._in_flight.get(pair.key, False)

    def is_favorite(self, pair: StationPair) -> bool:
        """True when the pair is saved as a favorite."""
        return pair in self._favorites

    async def start(self) -> None:
        """Load saved favorites and start the refresh timer."""
        if self._task is not None and not self._task.done():
            logger.warning("Favorites refresh manager already running")
            return

        self._favorites = await self._favorites_repository.load()
        self._reset()
        logger.info(f"Favorites refresh manager started with {len(self._favorites)} favorite(s)")
        self._task = asyncio.create_task(self._refresh_loop())

    async def stop(self) -> None:
        """Stop the refresh timer. Outstanding fetches finish but are discarded."""
        self._reset()
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Favorites refresh manager cancelled")
            logger.info("Stopped favorites refresh manager")

    async def wait_idle(self) -> None:
        """Wait until every outstanding fetch has completed."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _refresh_loop(self) -> None:
        """Refresh immediately, then on every timer tick."""
        try:
            while True:
                self.trigger_refresh_all()
                await asyncio.sleep(self.interval_seconds)
        except asyncio.CancelledError:
            logger.debug("Favorites refresh loop cancelled")
            raise

    async def add_favorite(self, pair: StationPair) -> bool:
        """Add a favorite. Returns False if it was already saved."""
        if pair in self._favorites:
            return False
        await self.set_favorites([*self._favorites, pair])
        return True

    async def remove_favorite(self, pair: StationPair) -> bool:
        """Remove a favorite. Returns False if it was not saved."""
        if pair not in self._favorites:
            return False
        await self.set_favorites([p for p in self._favorites if p != pair])
        return True

    async def set_favorites(self, pairs: list[StationPair]) -> None:
        """Replace the favorites set, reset all results and refresh every favorite.

        The in-memory set changes even if persisting it fails; the failure is logged.
        """
        unique: list[StationPair] = []
        for pair in pairs:
            if pair not in unique:
                unique.append(pair)
        self._favorites = unique
        self._reset()
        self.trigger_refresh_all()
        try:
            await self._favorites_repository.save(unique)
        except OSError as e:
            logger.error(f"Failed to save favorites: {e}")

    def _reset(self) -> None:
        """Start a new generation; fetches from older generations leave no trace."""
        self._generation += 1
        self._results.clear()
        self._in_flight.clear()
        logger.debug(f"Starting refresh generation {self._generation}")

    def trigger_refresh_all(self) -> None:
        """Schedule a refresh of every favorite without waiting for it."""
        for pair in self._favorites:
            task = asyncio.create_task(self.refresh(pair))
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    async def refresh_all(self) -> None:
        """Refresh every favorite concurrently and wait for all of them."""
        await asyncio.gather(*(self.refresh(pair) for pair in self._favorites))

    async def refresh(self, pair: StationPair) -> None:
        """Fetch arrivals for one pair unless a fetch for it is already running."""
        key = pair.key
        if self._in_flight.get(key):
            logger.debug(f"Refresh for {key} already in flight, skipping")
            return

        generation = self._generation
        self._in_flight[key] = True
        try:
            arrivals = await self._next_arrivals.get_next_arrivals(
                pair.start, pair.end, self.arrivals_limit
            )
        except FeedError as e:
            logger.error(f"Failed to refresh favorite {key}: {type(e).__name__}: {e}")
            arrivals = []
        finally:
            if generation == self._generation:
                self._in_flight[key] = False

        if generation != self._generation or pair not in self._favorites:
            logger.debug(f"Discarding stale result for {key}")
            return

        self._results[key] = arrivals
        logger.debug(f"Refreshed favorite {key}: {len(arrivals)} arrival(s)")
