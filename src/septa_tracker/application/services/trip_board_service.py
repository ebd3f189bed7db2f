"""Trip board use case: predicted arrivals joined with live trains."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from septa_tracker.application.services.correlator import correlate, unmatched_arrivals
from septa_tracker.application.services.time_adjuster import adjust_leg
from septa_tracker.domain.errors import FeedError
from septa_tracker.domain.models.next_arrival import STATION_PLACEHOLDER
from septa_tracker.domain.models.station_pair import StationPair
from septa_tracker.domain.models.trip_board import TrackedArrival, TripBoard

if TYPE_CHECKING:
    from septa_tracker.domain.contracts.train_feed import TrainFeedProtocol
    from septa_tracker.domain.models.next_arrival import NextArrival
    from septa_tracker.domain.ports import NextArrivalRepository

logger = logging.getLogger(__name__)


class TripBoardService:
    """Builds trip boards for the currently selected station pair."""

    def __init__(
        self,
        next_arrivals: NextArrivalRepository,
        train_feed: TrainFeedProtocol,
        arrivals_limit: int = 10,
    ) -> None:
        """Initialize with a prediction source and the live train feed."""
        self._next_arrivals = next_arrivals
        self._train_feed = train_feed
        self.arrivals_limit = arrivals_limit
        self.start = STATION_PLACEHOLDER
        self.end = STATION_PLACEHOLDER
        self.arrivals: list[NextArrival] = []

    @property
    def selection(self) -> StationPair:
        """The selected origin/destination."""
        return StationPair(self.start, self.end)

    def select(self, start: str, end: str) -> None:
        """Change the selected station pair."""
        self.start = start
        self.end = end

    def swap(self) -> None:
        """Reverse the selected direction of travel."""
        self.start, self.end = self.end, self.start

    async def refresh(self) -> TripBoard:
        """Fetch arrivals for the selection and build its board.

        On fetch failure the previous arrivals are kept.
        """
        try:
            self.arrivals = await self._next_arrivals.get_next_arrivals(
                self.start, self.end, self.arrivals_limit
            )
        except FeedError as e:
            logger.error(f"Failed to fetch next trains for {self.selection.key}: {e}")
        return self.board_for(self.selection, self.arrivals)

    def board_for(self, pair: StationPair, arrivals: list[NextArrival]) -> TripBoard:
        """Build a board from already fetched arrivals and the latest live trains."""
        trains = self._train_feed.current_trains
        tracked = [
            TrackedArrival(train=train, arrival=arrival, adjusted_time=adjust_leg(arrival.origin))
            for train, arrival in correlate(trains, arrivals)
        ]
        return TripBoard(
            pair=pair,
            tracked=tracked,
            prediction_only=unmatched_arrivals(trains, arrivals),
        )
