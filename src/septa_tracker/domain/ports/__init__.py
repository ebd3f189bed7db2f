"""Ports (interfaces) for the ports-and-adapters architecture."""

from septa_tracker.domain.ports.favorites_repository import FavoritesRepository
from septa_tracker.domain.ports.next_arrival_repository import NextArrivalRepository
from septa_tracker.domain.ports.train_repository import TrainRepository

__all__ = [
    "FavoritesRepository",
    "NextArrivalRepository",
    "TrainRepository",
]
