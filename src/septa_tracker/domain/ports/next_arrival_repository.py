"""Next arrival repository port."""

from typing import Protocol

from septa_tracker.domain.models.next_arrival import NextArrival


class NextArrivalRepository(Protocol):
    """Port for retrieving next-to-arrive predictions between two stations."""

    async def get_next_arrivals(self, start: str, end: str, limit: int) -> list[NextArrival]:
        """Get up to ``limit`` predicted journeys from ``start`` to ``end``."""
        ...
