"""Static schedule domain models."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class DayBucket(StrEnum):
    """Service-day grouping used by the schedule feed."""

    WEEKDAY = "mon-fri"
    SATURDAY = "sat"
    SUNDAY = "sun"

    @classmethod
    def for_date(cls, day: date) -> "DayBucket":
        """Return the bucket whose timetable applies on the given date."""
        weekday = day.weekday()
        if weekday == 5:
            return cls.SATURDAY
        if weekday == 6:
            return cls.SUNDAY
        return cls.WEEKDAY


class Direction(StrEnum):
    """Travel direction relative to Center City."""

    INBOUND = "inbound"
    OUTBOUND = "outbound"


@dataclass(frozen=True)
class ScheduledStop:
    """A stop and its scheduled time within one train's run."""

    stop: str
    time: str


@dataclass(frozen=True)
class TrainSchedule:
    """Scheduled run of one train. Stops are in route order."""

    train_no: str
    stops: tuple[ScheduledStop, ...]

    def time_at(self, stop: str) -> str | None:
        """Scheduled time at a stop, or None if the train does not call there."""
        for scheduled in self.stops:
            if scheduled.stop == stop:
                return scheduled.time
        return None


@dataclass(frozen=True)
class ScheduleData:
    """Schedules keyed by line, day bucket and direction."""

    lines: dict[str, dict[DayBucket, dict[Direction, list[TrainSchedule]]]] = field(
        default_factory=dict
    )

    def line_names(self) -> list[str]:
        """Line codes in feed order."""
        return list(self.lines)

    def trains_for(self, line: str, day: DayBucket, direction: Direction) -> list[TrainSchedule]:
        """Scheduled trains for a line/day/direction, empty if unknown."""
        return self.lines.get(line, {}).get(day, {}).get(direction, [])
