"""Favorites repository port."""

from typing import Protocol

from septa_tracker.domain.models.station_pair import StationPair


class FavoritesRepository(Protocol):
    """Port for persisting the user's favorite station pairs."""

    async def load(self) -> list[StationPair]:
        """Load saved favorites in saved order."""
        ...

    async def save(self, favorites: list[StationPair]) -> None:
        """Replace saved favorites."""
        ...
