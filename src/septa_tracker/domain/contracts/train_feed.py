"""Protocol for the live train feed."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from septa_tracker.domain.models.train import Train

TrainSubscriber = Callable[[list["Train"]], Awaitable[None] | None]


class TrainFeedProtocol(Protocol):
    """Protocol for a periodically refreshed list of live trains."""

    @property
    def current_trains(self) -> list["Train"]:
        """The most recently published snapshot."""
        ...

    def subscribe(self, callback: TrainSubscriber) -> Callable[[], None]:
        """Register a callback for new snapshots. Returns an unsubscribe function."""
        ...

    async def start(self) -> None:
        """Start polling."""
        ...

    async def stop(self) -> None:
        """Stop polling."""
        ...
