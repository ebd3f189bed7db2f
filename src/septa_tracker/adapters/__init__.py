"""Adapters layer - external system integrations."""

from septa_tracker.adapters.config import AppConfig
from septa_tracker.adapters.pollers import LiveFeedPoller
from septa_tracker.adapters.reference import ReferenceDataCache, ReferenceKind
from septa_tracker.adapters.septa_api import (
    NextToArriveRepository,
    SeptaHttpClient,
    TrainViewRepository,
)
from septa_tracker.adapters.storage import BlobFavoritesRepository, FileBlobStore

__all__ = [
    "AppConfig",
    "BlobFavoritesRepository",
    "FileBlobStore",
    "LiveFeedPoller",
    "NextToArriveRepository",
    "ReferenceDataCache",
    "ReferenceKind",
    "SeptaHttpClient",
    "TrainViewRepository",
]
