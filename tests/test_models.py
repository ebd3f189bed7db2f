"""Tests for domain models."""

from datetime import date

import pytest

from septa_tracker.domain.models import (
    Advisory,
    DayBucket,
    Direction,
    RollingStock,
    ScheduleData,
    ScheduledStop,
    StationPair,
    TrainSchedule,
    classify_consist,
)
from septa_tracker.domain.models.next_arrival import parse_delay_minutes
from tests.fakes import make_arrival, make_train


def test_station_pair_key_is_start_dash_end() -> None:
    """Given a station pair, when reading its key, then it is "start-end"."""
    pair = StationPair(start="Suburban Station", end="Paoli")

    assert pair.key == "Suburban Station-Paoli"


def test_station_pair_is_ordered() -> None:
    """Given two pairs with swapped stations, when comparing, then they differ."""
    assert StationPair("A", "B") != StationPair("B", "A")
    assert StationPair("A", "B").key != StationPair("B", "A").key


def test_train_equality_is_structural() -> None:
    """Given two trains with identical fields, when comparing, then they are equal."""
    assert make_train("1234") == make_train("1234")
    assert make_train("1234") != make_train("1234", late_minutes=3)


def test_train_without_coordinates_has_no_position() -> None:
    """Given a train at 0,0, when checking its position, then it is unknown."""
    assert make_train("1", latitude=0.0, longitude=0.0).has_position is False
    assert make_train("2").has_position is True


@pytest.mark.parametrize(
    ("consist", "expected"),
    [
        (("735", "736"), RollingStock.SERIES_700),
        (("700",), RollingStock.SERIES_700),
        (("901", "902"), RollingStock.SERIES_900),
        (("900",), RollingStock.SERIES_700),
        (("101", "102"), RollingStock.STANDARD),
        (("101", "276"), RollingStock.HERITAGE),
        (("2402",), RollingStock.SERIES_900),
        (("abc",), RollingStock.UNKNOWN),
        ((), RollingStock.UNKNOWN),
    ],
)
def test_classify_consist(consist: tuple[str, ...], expected: RollingStock) -> None:
    """Given a consist, when classifying, then heritage cars win, then the lead car decides."""
    assert classify_consist(consist) == expected


def test_arrival_identity_is_origin_train() -> None:
    """Given direct and connecting arrivals, when reading train_no, then the origin train is used."""
    direct = make_arrival("1234")
    connecting = make_arrival("5678", connection="Temple University")

    assert direct.train_no == "1234"
    assert direct.is_direct is True
    assert connecting.train_no == "5678"
    assert connecting.is_direct is False


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("On time", 0),
        ("5 min", 5),
        ("-2 min", -2),
        ("12 mins", 12),
        ("", None),
        ("late", None),
    ],
)
def test_parse_delay_minutes(text: str, expected: int | None) -> None:
    """Given vendor delay text, when parsing, then a signed minute count or None is returned."""
    assert parse_delay_minutes(text) == expected


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        (date(2024, 10, 28), DayBucket.WEEKDAY),
        (date(2024, 11, 1), DayBucket.WEEKDAY),
        (date(2024, 11, 2), DayBucket.SATURDAY),
        (date(2024, 11, 3), DayBucket.SUNDAY),
    ],
)
def test_day_bucket_for_date(day: date, expected: DayBucket) -> None:
    """Given a date, when picking the timetable, then weekday/saturday/sunday is chosen."""
    assert DayBucket.for_date(day) == expected


def test_schedule_lookup_keeps_stop_order() -> None:
    """Given schedule data, when looking up trains, then stops keep route order."""
    schedule = TrainSchedule(
        train_no="9211",
        stops=(
            ScheduledStop("Paoli", "6:05AM"),
            ScheduledStop("Bryn Mawr", "6:20AM"),
            ScheduledStop("Suburban Station", "6:45AM"),
        ),
    )
    data = ScheduleData(lines={"PAO": {DayBucket.WEEKDAY: {Direction.INBOUND: [schedule]}}})

    trains = data.trains_for("PAO", DayBucket.WEEKDAY, Direction.INBOUND)

    assert [s.stop for s in trains[0].stops] == ["Paoli", "Bryn Mawr", "Suburban Station"]
    assert trains[0].time_at("Bryn Mawr") == "6:20AM"
    assert trains[0].time_at("Malvern") is None
    assert data.trains_for("PAO", DayBucket.SUNDAY, Direction.INBOUND) == []
    assert data.trains_for("XYZ", DayBucket.WEEKDAY, Direction.INBOUND) == []


def test_advisory_link_detection() -> None:
    """Given advisories, when the description is a URL, then it is flagged as a link."""
    link = Advisory("Track work", "Nov 1-3", "https://www.septa.org/service/")
    prose = Advisory("Track work", "Nov 1-3", "Buses replace trains")

    assert link.is_link is True
    assert prose.is_link is False
