"""Live feed poller for train positions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from septa_tracker.adapters.broadcaster import Broadcaster
from septa_tracker.adapters.error_details import extract_error_details
from septa_tracker.domain.contracts.train_feed import TrainFeedProtocol, TrainSubscriber
from septa_tracker.domain.errors import FeedError

if TYPE_CHECKING:
    from septa_tracker.domain.models.train import Train
    from septa_tracker.domain.ports import TrainRepository

logger = logging.getLogger(__name__)


class LiveFeedPoller(TrainFeedProtocol):
    """Polls the live train feed on a fixed interval and republishes each snapshot.

    Ticks fire on schedule even if the previous fetch is still running.
    Each tick is numbered; a result older than the last applied one is
    dropped, so a slow response never replaces a newer snapshot. Failed
    ticks are logged and skipped, leaving the previous snapshot in place.
    """

    def __init__(self, train_repository: TrainRepository, interval_seconds: float = 10.0) -> None:
        """Initialize the poller.

        Args:
            train_repository: Source of live train positions.
            interval_seconds: Seconds between ticks.
        """
        self.train_repository = train_repository
        self.interval_seconds = interval_seconds
        self.last_update: datetime | None = None
        self._trains: list[Train] = []
        self._broadcaster: Broadcaster[list[Train]] = Broadcaster("live trains")
        self._task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()
        self._generation = 0
        self._issued = 0
        self._applied = 0

    @property
    def current_trains(self) -> list[Train]:
        """The most recently published snapshot."""
        return self._trains

    @property
    def is_running(self) -> bool:
        """True while the timer is active."""
        return self._task is not None and not self._task.done()

    def subscribe(self, callback: TrainSubscriber) -> Callable[[], None]:
        """Register a callback for new snapshots. Returns an unsubscribe function."""
        return self._broadcaster.subscribe(callback)

    async def start(self) -> None:
        """Start the live feed poller."""
        if self.is_running:
            logger.warning("Live feed poller already running")
            return

        self._generation += 1
        self._task = asyncio.create_task(self._poll_loop(self._generation))
        logger.info(f"Started live feed poller (every {self.interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the timer. Fetches already in flight complete but are discarded."""
        self._generation += 1
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Live feed poller cancelled")
            logger.info("Stopped live feed poller")

    async def wait_idle(self) -> None:
        """Wait until every fetch in flight has completed."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _poll_loop(self, generation: int) -> None:
        """Fire a tick immediately, then once per interval."""
        try:
            while True:
                task = asyncio.create_task(self.poll_once(generation))
                self._pending.add(task)
                task.add_done_callback(self._pending.discard)
                await asyncio.sleep(self.interval_seconds)
        except asyncio.CancelledError:
            logger.debug("Live feed poll loop cancelled")
            raise

    async def poll_once(self, generation: int | None = None) -> bool:
        """Run a single tick.

        Args:
            generation: Generation the tick belongs to; defaults to the current one.

        Returns:
            True if the tick published a new snapshot.
        """
        if generation is None:
            generation = self._generation
        self._issued += 1
        sequence = self._issued

        try:
            trains = await self.train_repository.get_trains()
        except FeedError as e:
            details = extract_error_details(e)
            logger.error(f"Live feed poller failed to fetch trains: {details.describe()}: {e}")
            if details.status_code == 429:
                logger.warning("Rate limit (429) detected - consider a longer poll interval")
            return False

        if generation != self._generation:
            logger.debug(f"Discarding train snapshot #{sequence} from a stopped poller")
            return False
        if sequence < self._applied:
            logger.debug(f"Discarding out-of-order train snapshot #{sequence}")
            return False

        self._applied = sequence
        self._trains = trains
        self.last_update = datetime.now(UTC)
        logger.debug(f"Published {len(trains)} train(s) from snapshot #{sequence}")
        await self._broadcaster.publish(trains)
        return True
