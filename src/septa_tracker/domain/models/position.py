"""Position domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A WGS84 coordinate."""

    latitude: float
    longitude: float
