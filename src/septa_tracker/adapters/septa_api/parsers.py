"""Decoders for SEPTA feed payloads.

Payloads are validated with pydantic wire models and then converted to
domain objects. Vendor quirks (string booleans, coordinates as strings,
delay text) are resolved here.
"""

import logging
import math
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from septa_tracker.domain.errors import DecodingError
from septa_tracker.domain.models.advisory import Advisory, AdvisoryFeed
from septa_tracker.domain.models.next_arrival import (
    ArrivalLeg,
    ConnectingArrival,
    DirectArrival,
    NextArrival,
    parse_delay_minutes,
)
from septa_tracker.domain.models.schedule import (
    DayBucket,
    Direction,
    ScheduleData,
    ScheduledStop,
    TrainSchedule,
)
from septa_tracker.domain.models.train import Train

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)


class TrainRecord(_WireModel):
    """One entry of the TrainView feed."""

    trainno: str
    lat: str | float | None = None
    lon: str | float | None = None
    service: str | None = None
    dest: str | None = None
    currentstop: str | None = None
    nextstop: str | None = None
    line: str | None = None
    consist: str | None = None
    late: int | None = None
    track: str | None = Field(default=None, alias="TRACK")
    track_change: str | None = Field(default=None, alias="TRACK_CHANGE")


class NextToArriveRecord(_WireModel):
    """One entry of the NextToArrive feed."""

    orig_train: str | None = None
    orig_line: str | None = None
    orig_departure_time: str | None = None
    orig_arrival_time: str | None = None
    orig_delay: str | None = None
    term_train: str | None = None
    term_line: str | None = None
    term_depart_time: str | None = None
    term_arrival_time: str | None = None
    term_delay: str | None = None
    connection: str | None = Field(default=None, alias="Connection")
    isdirect: str = "true"


class StopListRecord(_WireModel):
    stops: list[str]


class TrainScheduleRecord(_WireModel):
    train: str
    stops: list[tuple[str, str]]


class AdvisoryRecord(_WireModel):
    title: str
    dates_affected: str = ""
    description: str = ""


class AdvisoryFeedRecord(_WireModel):
    current: list[str] | None = None
    advisory: list[AdvisoryRecord] = Field(default_factory=list)


_TRAINS = TypeAdapter(list[TrainRecord])
_NEXT_TO_ARRIVE = TypeAdapter(list[NextToArriveRecord])
_STOP_LIST = TypeAdapter(StopListRecord)
_SCHEDULES = TypeAdapter(dict[str, dict[DayBucket, dict[Direction, list[TrainScheduleRecord]]]])
_ADVISORIES = TypeAdapter(AdvisoryFeedRecord)


def _validate(adapter: TypeAdapter[T], payload: bytes, what: str) -> T:
    try:
        return adapter.validate_json(payload)
    except ValidationError as e:
        raise DecodingError(f"Could not decode {what}: {e.error_count()} error(s): {e}") from e


def _to_float(value: str | float | None) -> float:
    """Coordinates arrive as strings; anything unparsable or non-finite becomes 0.0."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _split_consist(consist: str | None) -> tuple[str, ...]:
    if not consist:
        return ()
    return tuple(car.strip() for car in consist.split(",") if car.strip())


def _delay(text: str | None) -> int | None:
    return parse_delay_minutes(text) if text is not None else None


def _to_train(record: TrainRecord) -> Train:
    return Train(
        train_no=record.trainno,
        latitude=_to_float(record.lat),
        longitude=_to_float(record.lon),
        line=record.line,
        destination=record.dest,
        current_stop=record.currentstop,
        next_stop=record.nextstop,
        service=record.service,
        consist=_split_consist(record.consist),
        late_minutes=record.late,
        track=record.track,
        track_change=record.track_change,
    )


def _terminus_leg(record: NextToArriveRecord) -> ArrivalLeg | None:
    if not (
        record.term_train
        and record.term_line
        and record.term_depart_time
        and record.term_arrival_time
        and record.connection
    ):
        return None
    return ArrivalLeg(
        train_no=record.term_train,
        line=record.term_line,
        departure_time=record.term_depart_time,
        arrival_time=record.term_arrival_time,
        delay_minutes=_delay(record.term_delay),
    )


def _to_next_arrival(record: NextToArriveRecord) -> NextArrival | None:
    if not record.orig_train:
        logger.warning("Dropping next-to-arrive record without a train number")
        return None

    origin = ArrivalLeg(
        train_no=record.orig_train,
        line=record.orig_line or "",
        departure_time=record.orig_departure_time or "",
        arrival_time=record.orig_arrival_time or "",
        delay_minutes=_delay(record.orig_delay),
    )

    if record.isdirect.strip().lower() != "false":
        return DirectArrival(origin=origin)

    terminus = _terminus_leg(record)
    if terminus is None or record.connection is None:
        logger.warning(
            f"Connecting trip for train {record.orig_train} is missing connection details, "
            "treating it as direct"
        )
        return DirectArrival(origin=origin)
    return ConnectingArrival(origin=origin, connection_station=record.connection, terminus=terminus)


def parse_trains(payload: bytes) -> list[Train]:
    """Decode a TrainView payload."""
    return [_to_train(record) for record in _validate(_TRAINS, payload, "train view")]


def parse_next_arrivals(payload: bytes) -> list[NextArrival]:
    """Decode a NextToArrive payload, dropping records without a train number."""
    records = _validate(_NEXT_TO_ARRIVE, payload, "next to arrive")
    arrivals = [_to_next_arrival(record) for record in records]
    return [arrival for arrival in arrivals if arrival is not None]


def parse_stops(payload: bytes) -> list[str]:
    """Decode the stop list payload."""
    return _validate(_STOP_LIST, payload, "stop list").stops


def parse_schedules(payload: bytes) -> ScheduleData:
    """Decode the schedules payload, preserving stop order."""
    raw = _validate(_SCHEDULES, payload, "schedules")
    lines: dict[str, dict[DayBucket, dict[Direction, list[TrainSchedule]]]] = {}
    for line, days in raw.items():
        lines[line] = {
            day: {
                direction: [
                    TrainSchedule(
                        train_no=record.train,
                        stops=tuple(
                            ScheduledStop(stop=stop, time=time) for stop, time in record.stops
                        ),
                    )
                    for record in records
                ]
                for direction, records in directions.items()
            }
            for day, directions in days.items()
        }
    return ScheduleData(lines=lines)


def parse_advisories(payload: bytes) -> AdvisoryFeed:
    """Decode the advisories payload."""
    record = _validate(_ADVISORIES, payload, "advisories")
    return AdvisoryFeed(
        current=record.current,
        advisories=[
            Advisory(title=a.title, dates_affected=a.dates_affected, description=a.description)
            for a in record.advisory
        ],
    )

