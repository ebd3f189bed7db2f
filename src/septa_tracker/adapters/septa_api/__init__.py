"""SEPTA API adapters."""

from septa_tracker.adapters.septa_api.http_client import SeptaHttpClient, build_url
from septa_tracker.adapters.septa_api.next_to_arrive_repository import NextToArriveRepository
from septa_tracker.adapters.septa_api.train_view_repository import TrainViewRepository

__all__ = [
    "NextToArriveRepository",
    "SeptaHttpClient",
    "TrainViewRepository",
    "build_url",
]
