"""Station pair domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationPair:
    """An ordered origin/destination query, e.g. a saved favorite."""

    start: str
    end: str

    @property
    def key(self) -> str:
        """Stable identifier used to key per-pair state."""
        return f"{self.start}-{self.end}"
