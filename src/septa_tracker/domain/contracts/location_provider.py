"""Protocol for the user's current position."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from septa_tracker.domain.models.position import Position


class LocationProviderProtocol(Protocol):
    """Protocol for an optional current-position source."""

    def current_position(self) -> "Position | None":
        """Return the current position, or None when it is not available."""
        ...
