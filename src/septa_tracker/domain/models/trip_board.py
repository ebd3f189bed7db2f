"""Trip board domain models."""

from dataclasses import dataclass, field

from septa_tracker.domain.models.next_arrival import NextArrival
from septa_tracker.domain.models.station_pair import StationPair
from septa_tracker.domain.models.train import Train


@dataclass(frozen=True)
class TrackedArrival:
    """A predicted arrival matched to the live train serving it."""

    train: Train
    arrival: NextArrival
    adjusted_time: str  # Blank when the delay could not be applied


@dataclass(frozen=True)
class TripBoard:
    """Everything shown for one station pair."""

    pair: StationPair
    tracked: list[TrackedArrival] = field(default_factory=list)
    prediction_only: list[NextArrival] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to show."""
        return not self.tracked and not self.prediction_only
