"""Domain layer - core models, errors and ports."""

from septa_tracker.domain.models import (
    NextArrival,
    StationPair,
    Train,
)
from septa_tracker.domain.ports import (
    FavoritesRepository,
    NextArrivalRepository,
    TrainRepository,
)

__all__ = [
    "FavoritesRepository",
    "NextArrival",
    "NextArrivalRepository",
    "StationPair",
    "Train",
    "TrainRepository",
]
