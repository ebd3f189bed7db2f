"""Next-to-arrive domain models."""

from dataclasses import dataclass

# Station value used before the user has chosen a station
STATION_PLACEHOLDER = "---"

# Vendor delay text for trains running on schedule
ON_TIME = "On time"


@dataclass(frozen=True)
class ArrivalLeg:
    """One leg of a predicted journey."""

    train_no: str
    line: str
    departure_time: str
    arrival_time: str
    delay_minutes: int | None  # None when the vendor delay text could not be parsed

    @property
    def is_on_time(self) -> bool:
        """True when the vendor reported no delay."""
        return self.delay_minutes == 0


@dataclass(frozen=True)
class DirectArrival:
    """A journey served by a single train."""

    origin: ArrivalLeg

    @property
    def train_no(self) -> str:
        """Identifier used to correlate with live trains."""
        return self.origin.train_no

    @property
    def is_direct(self) -> bool:
        """Always True for direct arrivals."""
        return True


@dataclass(frozen=True)
class ConnectingArrival:
    """A journey with one connection between two trains."""

    origin: ArrivalLeg
    connection_station: str
    terminus: ArrivalLeg

    @property
    def train_no(self) -> str:
        """Identifier used to correlate with live trains."""
        return self.origin.train_no

    @property
    def is_direct(self) -> bool:
        """Always False for connecting arrivals."""
        return False


NextArrival = DirectArrival | ConnectingArrival


def parse_delay_minutes(delay_text: str) -> int | None:
    """Parse vendor delay text ("On time", "7 min", "-2 min") into minutes.

    Returns None when the leading token is not an integer.
    """
    if delay_text.strip() == ON_TIME:
        return 0
    tokens = delay_text.split()
    if not tokens:
        return None
    try:
        return int(tokens[0])
    except ValueError:
        return None
