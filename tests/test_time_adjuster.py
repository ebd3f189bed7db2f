"""Tests for delay-adjusted time display."""

import pytest

from septa_tracker.application.services import adjust_leg, adjust_time
from tests.fakes import make_leg


def test_on_time_returns_scheduled_time_unchanged() -> None:
    """Given "On time", when adjusting, then the scheduled time is returned as is."""
    assert adjust_time("3:00PM", "On time") == "3:00PM"


def test_delay_is_added_to_scheduled_time() -> None:
    """Given a ten minute delay, when adjusting, then the adjusted time is shown."""
    result = adjust_time("3:00PM", "10 min")

    assert "3:10PM" in result
    assert result == "3:00PM (Now: 3:10PM)"


@pytest.mark.parametrize(
    ("scheduled", "delay", "expected"),
    [
        ("3:15PM", "7 min", "3:15PM (Now: 3:22PM)"),
        ("11:55AM", "10 min", "11:55AM (Now: 12:05PM)"),
        ("11:50PM", "15 min", "11:50PM (Now: 12:05AM)"),
        ("12:05AM", "-10 min", "12:05AM (Now: 11:55PM)"),
        ("9:30AM", "0 min", "9:30AM (Now: 9:30AM)"),
        ("10:00 AM", "5 min", "10:00 AM (Now: 10:05AM)"),
    ],
)
def test_adjusted_time_wraps_meridiem_and_midnight(
    scheduled: str, delay: str, expected: str
) -> None:
    """Given delays crossing noon or midnight, when adjusting, then the clock wraps."""
    assert adjust_time(scheduled, delay) == expected


@pytest.mark.parametrize(
    ("scheduled", "delay"),
    [
        ("garbage", "10 min"),
        ("25:00PM", "10 min"),
        ("3:00PM", "late"),
        ("3:00PM", ""),
        ("3:00PM", "   "),
    ],
)
def test_unparsable_input_yields_empty_string(scheduled: str, delay: str) -> None:
    """Given an unparsable time or delay, when adjusting, then an empty string is returned."""
    assert adjust_time(scheduled, delay) == ""


def test_adjust_leg_uses_typed_delay() -> None:
    """Given decoded legs, when adjusting, then the typed delay is applied."""
    assert adjust_leg(make_leg("1", "3:00PM", 0)) == "3:00PM"
    assert adjust_leg(make_leg("1", "3:00PM", 4)) == "3:00PM (Now: 3:04PM)"
    assert adjust_leg(make_leg("1", "3:00PM", None)) == ""
    assert adjust_leg(make_leg("1", "soon", 4)) == ""
