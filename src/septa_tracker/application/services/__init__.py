"""Application services (use cases)."""

from septa_tracker.application.services.correlator import correlate, unmatched_arrivals
from septa_tracker.application.services.favorites_refresh_manager import (
    FavoritesRefreshManager,
)
from septa_tracker.application.services.proximity import distance_km, nearest_trains
from septa_tracker.application.services.time_adjuster import (
    adjust_leg,
    adjust_time,
)
from septa_tracker.application.services.trip_board_service import TripBoardService

__all__ = [
    "FavoritesRefreshManager",
    "TripBoardService",
    "adjust_leg",
    "adjust_time",
    "correlate",
    "distance_km",
    "nearest_trains",
    "unmatched_arrivals",
]
