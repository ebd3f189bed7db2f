"""Favorites persistence on top of a blob store."""

import json
import logging
from typing import TYPE_CHECKING

from septa_tracker.domain.models.station_pair import StationPair
from septa_tracker.domain.ports.favorites_repository import FavoritesRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from septa_tracker.domain.contracts.blob_store import BlobStoreProtocol

DEFAULT_FAVORITES_KEY = "favoriteStationPairs"


class BlobFavoritesRepository(FavoritesRepository):
    """Stores favorites as a JSON list of ``[start, end]`` pairs under one key."""

    def __init__(self, store: "BlobStoreProtocol", key: str = DEFAULT_FAVORITES_KEY) -> None:
        """Initialize with a blob store and the key holding the favorites list."""
        self._store = store
        self._key = key

    async def load(self) -> list[StationPair]:
        """Load saved favorites. Unreadable data yields no favorites."""
        payload = await self._store.get(self._key)
        if payload is None:
            return []

        try:
            raw = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Saved favorites are not valid JSON, ignoring them: {e}")
            return []

        if not isinstance(raw, list):
            logger.error("Saved favorites are not a list, ignoring them")
            return []

        favorites: list[StationPair] = []
        for entry in raw:
            if (
                isinstance(entry, list)
                and len(entry) == 2
                and all(isinstance(name, str) for name in entry)
            ):
                pair = StationPair(start=entry[0], end=entry[1])
                if pair not in favorites:
                    favorites.append(pair)
            else:
                logger.warning(f"Skipping malformed favorite entry: {entry!r}")
        return favorites

    async def save(self, favorites: list[StationPair]) -> None:
        """Replace saved favorites."""
        payload = json.dumps([[pair.start, pair.end] for pair in favorites]).encode("utf-8")
        await self._store.set(self._key, payload)
        logger.info(f"Saved {len(favorites)} favorite(s)")
