"""Protocols shared between layers."""

from septa_tracker.domain.contracts.blob_store import BlobStoreProtocol
from septa_tracker.domain.contracts.location_provider import LocationProviderProtocol
from septa_tracker.domain.contracts.train_feed import TrainFeedProtocol, TrainSubscriber

__all__ = [
    "BlobStoreProtocol",
    "LocationProviderProtocol",
    "TrainFeedProtocol",
    "TrainSubscriber",
]
