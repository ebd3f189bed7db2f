"""Cache-first loading of slowly changing reference data."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from septa_tracker.adapters.broadcaster import Broadcaster, Subscriber
from septa_tracker.adapters.error_details import extract_error_details
from septa_tracker.adapters.septa_api.constants import (
    ADVISORIES_PATH,
    SCHEDULES_PATH,
    STOPS_PATH,
)
from septa_tracker.adapters.septa_api.parsers import (
    parse_advisories,
    parse_schedules,
    parse_stops,
)
from septa_tracker.domain.errors import DecodingError, FeedError

if TYPE_CHECKING:
    from septa_tracker.adapters.septa_api.http_client import SeptaHttpClient
    from septa_tracker.domain.contracts.blob_store import BlobStoreProtocol
    from septa_tracker.domain.models.advisory import AdvisoryFeed
    from septa_tracker.domain.models.schedule import ScheduleData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferenceSource:
    """Where a reference dataset comes from and how it is decoded."""

    path: str
    blob_key: str | None  # None: never persisted locally
    decode: Callable[[bytes], Any]


class ReferenceKind(Enum):
    """Reference datasets served by the reference API."""

    STOPS = ReferenceSource(STOPS_PATH, "cachedStops.json", parse_stops)
    SCHEDULES = ReferenceSource(SCHEDULES_PATH, "cachedSchedules.json", parse_schedules)
    ADVISORIES = ReferenceSource(ADVISORIES_PATH, None, parse_advisories)


class ReferenceDataCache:
    """Stale-while-revalidate cache for stops, schedules and advisories.

    ``load`` returns whatever is stored locally right away and revalidates
    against the network in the background. A successful fetch overwrites
    the stored payload and republishes the decoded value; a failed fetch
    leaves both untouched. There is no expiry: only ``load`` and
    ``revalidate`` trigger network requests.
    """

    def __init__(
        self,
        http_client: SeptaHttpClient,
        store: BlobStoreProtocol,
        base_url: str,
    ) -> None:
        """Initialize the cache.

        Args:
            http_client: Client used for network fetches.
            store: Local storage for raw payloads.
            base_url: Base URL of the reference API.
        """
        self._http_client = http_client
        self._store = store
        self._base_url = base_url.rstrip("/")
        self._values: dict[ReferenceKind, Any] = {}
        self._broadcasters: dict[ReferenceKind, Broadcaster[Any]] = {
            kind: Broadcaster(f"reference:{kind.name.lower()}") for kind in ReferenceKind
        }
        self._issued: dict[ReferenceKind, int] = dict.fromkeys(ReferenceKind, 0)
        self._applied: dict[ReferenceKind, int] = dict.fromkeys(ReferenceKind, 0)
        self._generation = 0
        self._pending: set[asyncio.Task] = set()

    def current(self, kind: ReferenceKind) -> Any | None:
        """The most recently published value, or None before the first one."""
        return self._values.get(kind)

    @property
    def stops(self) -> list[str]:
        """Current stop list, empty before it has been loaded."""
        return self._values.get(ReferenceKind.STOPS, [])

    @property
    def schedules(self) -> ScheduleData | None:
        """Current schedules, if loaded."""
        return self._values.get(ReferenceKind.SCHEDULES)

    @property
    def advisories(self) -> AdvisoryFeed | None:
        """Current advisories, if loaded."""
        return self._values.get(ReferenceKind.ADVISORIES)

    def subscribe(self, kind: ReferenceKind, callback: Subscriber[Any]) -> Callable[[], None]:
        """Be notified whenever a new value for ``kind`` is published."""
        return self._broadcasters[kind].subscribe(callback)

    async def load(self, kind: ReferenceKind) -> Any | None:
        """Return the locally cached value and revalidate in the background.

        Args:
            kind: Dataset to load.

        Returns:
            The decoded cached value, or None when nothing usable is cached.
        """
        cached = await self._read_cached(kind)
        if cached is not None and self._applied[kind] == 0:
            logger.info(f"Loaded {kind.name.lower()} from cache")
            await self._publish(kind, cached)

        task = asyncio.create_task(self.revalidate(kind))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return cached

    async def _read_cached(self, kind: ReferenceKind) -> Any | None:
        source = kind.value
        if source.blob_key is None:
            return None
        try:
            payload = await self._store.get(source.blob_key)
        except OSError as e:
            logger.warning(f"Could not read cached {kind.name.lower()}: {e}")
            return None
        if payload is None:
            return None
        try:
            return source.decode(payload)
        except DecodingError as e:
            logger.warning(f"Ignoring unreadable cached {kind.name.lower()}: {e}")
            return None

    async def revalidate(self, kind: ReferenceKind) -> Any | None:
        """Fetch ``kind`` from the network and publish it if it is still the newest result.

        Returns:
            The decoded value, or None when the fetch failed or was superseded.
        """
        source = kind.value
        generation = self._generation
        self._issued[kind] += 1
        sequence = self._issued[kind]
        url = f"{self._base_url}{source.path}"

        logger.info(f"Fetching {kind.name.lower()} from network")
        try:
            payload = await self._http_client.get(url)
            value = source.decode(payload)
        except FeedError as e:
            details = extract_error_details(e)
            logger.error(f"Failed to refresh {kind.name.lower()}: {details.describe()}: {e}")
            return None

        if generation != self._generation:
            logger.debug(f"Discarding {kind.name.lower()} fetched before cache was closed")
            return None
        if sequence < self._applied[kind]:
            logger.debug(f"Discarding out-of-order {kind.name.lower()} result #{sequence}")
            return None
        self._applied[kind] = sequence

        if source.blob_key is not None:
            try:
                await self._store.set(source.blob_key, payload)
                logger.info(f"Cached {kind.name.lower()} ({len(payload)} bytes)")
            except OSError as e:
                logger.error(f"Failed to cache {kind.name.lower()}: {e}")

        await self._publish(kind, value)
        return value

    async def _publish(self, kind: ReferenceKind, value: Any) -> None:
        self._values[kind] = value
        await self._broadcasters[kind].publish(value)

    async def wait_idle(self) -> None:
        """Wait for background revalidations to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    def close(self) -> None:
        """Stop applying results of revalidations that are still running."""
        self._generation += 1
