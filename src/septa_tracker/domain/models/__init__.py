"""Domain models for SEPTA tracking."""

from septa_tracker.domain.models.advisory import Advisory, AdvisoryFeed
from septa_tracker.domain.models.error_details import ErrorDetails
from septa_tracker.domain.models.next_arrival import (
    STATION_PLACEHOLDER,
    ArrivalLeg,
    ConnectingArrival,
    DirectArrival,
    NextArrival,
)
from septa_tracker.domain.models.position import Position
from septa_tracker.domain.models.schedule import (
    DayBucket,
    Direction,
    ScheduleData,
    ScheduledStop,
    TrainSchedule,
)
from septa_tracker.domain.models.station_pair import StationPair
from septa_tracker.domain.models.train import RollingStock, Train, classify_consist
from septa_tracker.domain.models.trip_board import TrackedArrival, TripBoard

__all__ = [
    "STATION_PLACEHOLDER",
    "Advisory",
    "AdvisoryFeed",
    "ArrivalLeg",
    "ConnectingArrival",
    "DayBucket",
    "DirectArrival",
    "Direction",
    "ErrorDetails",
    "NextArrival",
    "Position",
    "RollingStock",
    "ScheduleData",
    "ScheduledStop",
    "StationPair",
    "TrackedArrival",
    "Train",
    "TrainSchedule",
    "TripBoard",
    "classify_consist",
]
