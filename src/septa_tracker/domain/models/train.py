"""Train (live vehicle) domain model."""

from dataclasses import dataclass, field
from enum import StrEnum

# Cars kept in heritage livery
HERITAGE_UNITS = frozenset({"280", "276", "293", "304", "401"})


class RollingStock(StrEnum):
    """Rolling-stock class inferred from a train's consist."""

    HERITAGE = "heritage"
    SERIES_900 = "series_900"
    SERIES_700 = "series_700"
    STANDARD = "standard"
    UNKNOWN = "unknown"


def classify_consist(consist: tuple[str, ...]) -> RollingStock:
    """Classify a consist by heritage cars first, then by lead car number."""
    if not consist:
        return RollingStock.UNKNOWN
    if any(car in HERITAGE_UNITS for car in consist):
        return RollingStock.HERITAGE
    try:
        lead_car = int(consist[0])
    except ValueError:
        return RollingStock.UNKNOWN
    if lead_car > 900:
        return RollingStock.SERIES_900
    if lead_car >= 700:
        return RollingStock.SERIES_700
    return RollingStock.STANDARD


@dataclass(frozen=True)
class Train:
    """A live train as reported by the TrainView feed."""

    train_no: str
    latitude: float
    longitude: float
    line: str | None = None
    destination: str | None = None
    current_stop: str | None = None
    next_stop: str | None = None
    service: str | None = None
    consist: tuple[str, ...] = field(default_factory=tuple)
    late_minutes: int | None = None
    track: str | None = None
    track_change: str | None = None

    @property
    def rolling_stock(self) -> RollingStock:
        """Rolling-stock class of this train."""
        return classify_consist(self.consist)

    @property
    def has_position(self) -> bool:
        """False when the feed gave no usable coordinates."""
        return not (self.latitude == 0.0 and self.longitude == 0.0)
