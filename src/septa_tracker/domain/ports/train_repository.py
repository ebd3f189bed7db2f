"""Train repository port."""

from typing import Protocol

from septa_tracker.domain.models.train import Train


class TrainRepository(Protocol):
    """Port for retrieving live train positions."""

    async def get_trains(self) -> list[Train]:
        """Get every train currently reported by the live feed."""
        ...
