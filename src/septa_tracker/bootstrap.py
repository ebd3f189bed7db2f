"""Wiring of adapters and services from configuration."""

from dataclasses import dataclass

import aiohttp

from septa_tracker.adapters.config import AppConfig
from septa_tracker.adapters.location import StaticLocationProvider
from septa_tracker.adapters.pollers import LiveFeedPoller
from septa_tracker.adapters.reference import ReferenceDataCache
from septa_tracker.adapters.septa_api import (
    NextToArriveRepository,
    SeptaHttpClient,
    TrainViewRepository,
)
from septa_tracker.adapters.storage import BlobFavoritesRepository, FileBlobStore
from septa_tracker.application.services import FavoritesRefreshManager, TripBoardService


@dataclass(frozen=True)
class TrackerServices:
    """Everything the entry points need, built around one HTTP session."""

    config: AppConfig
    trains: TrainViewRepository
    next_arrivals: NextToArriveRepository
    train_feed: LiveFeedPoller
    reference: ReferenceDataCache
    favorites_repository: BlobFavoritesRepository
    favorites: FavoritesRefreshManager
    trip_boards: TripBoardService
    location: StaticLocationProvider


def create_services(config: AppConfig, session: aiohttp.ClientSession) -> TrackerServices:
    """Build all components for the given configuration and session."""
    http_client = SeptaHttpClient(session, timeout_seconds=config.api_timeout_seconds)
    store = FileBlobStore(config.cache_path)

    trains = TrainViewRepository(http_client, config.septa_api_base_url)
    next_arrivals = NextToArriveRepository(http_client, config.septa_api_base_url)
    train_feed = LiveFeedPoller(trains, interval_seconds=config.live_feed_interval_seconds)
    favorites_repository = BlobFavoritesRepository(store, key=config.favorites_key)

    return TrackerServices(
        config=config,
        trains=trains,
        next_arrivals=next_arrivals,
        train_feed=train_feed,
        reference=ReferenceDataCache(http_client, store, config.reference_api_base_url),
        favorites_repository=favorites_repository,
        favorites=FavoritesRefreshManager(
            next_arrivals,
            favorites_repository,
            interval_seconds=config.favorites_refresh_interval_seconds,
            arrivals_limit=config.favorite_arrivals_limit,
        ),
        trip_boards=TripBoardService(
            next_arrivals, train_feed, arrivals_limit=config.next_arrivals_limit
        ),
        location=StaticLocationProvider(config.home_latitude, config.home_longitude),
    )
