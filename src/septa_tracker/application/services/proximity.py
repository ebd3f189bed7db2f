"""Distance helpers for locating trains near the user."""

import math

from septa_tracker.domain.models.position import Position
from septa_tracker.domain.models.train import Train

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Position, b: Position) -> float:
    """Great-circle distance between two positions."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)
    d_lat = lat2 - lat1
    d_lon = lon2 - lon1
    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(h))


def nearest_trains(trains: list[Train], position: Position, limit: int = 5) -> list[Train]:
    """Trains closest to ``position``, skipping trains without coordinates."""
    located = [train for train in trains if train.has_position]
    located.sort(key=lambda t: distance_km(position, Position(t.latitude, t.longitude)))
    return located[:limit]
