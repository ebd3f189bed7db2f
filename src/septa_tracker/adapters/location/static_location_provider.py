"""Location provider backed by configured coordinates."""

from septa_tracker.domain.contracts.location_provider import LocationProviderProtocol
from septa_tracker.domain.models.position import Position


class StaticLocationProvider(LocationProviderProtocol):
    """Reports a fixed position, or none when coordinates are not configured."""

    def __init__(self, latitude: float | None, longitude: float | None) -> None:
        """Initialize with optional coordinates."""
        self._position = (
            Position(latitude, longitude)
            if latitude is not None and longitude is not None
            else None
        )

    def current_position(self) -> Position | None:
        """Return the configured position, if any."""
        return self._position
