"""Delay-adjusted time display."""

import logging
from datetime import datetime, timedelta

from septa_tracker.domain.models.next_arrival import ON_TIME, ArrivalLeg

logger = logging.getLogger(__name__)

CLOCK_FORMAT = "%I:%M%p"


def _parse_clock(value: str) -> datetime | None:
    """Parse a 12-hour clock string such as "3:15PM"."""
    try:
        return datetime.strptime(value.replace(" ", "").upper(), CLOCK_FORMAT)
    except ValueError:
        return None


def _format_clock(value: datetime) -> str:
    """Format like the feed does: no leading zero, no space before the meridiem."""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d}{meridiem}"


def _shift(scheduled_time: str, minutes: int) -> str:
    parsed = _parse_clock(scheduled_time)
    if parsed is None:
        logger.warning(f"Could not parse scheduled time {scheduled_time!r}")
        return ""
    adjusted = parsed + timedelta(minutes=minutes)
    return f"{scheduled_time} (Now: {_format_clock(adjusted)})"


def adjust_time(scheduled_time: str, delay_text: str) -> str:
    """Combine a scheduled time with vendor delay text for display.

    Args:
        scheduled_time: Wall-clock time such as "3:15PM".
        delay_text: "On time" or a string starting with a signed minute count.

    Returns:
        ``scheduled_time`` unchanged when on time, "3:15PM (Now: 3:22PM)"
        when delayed, or an empty string when either input cannot be parsed.
    """
    if delay_text == ON_TIME:
        return scheduled_time
    tokens = delay_text.split()
    try:
        minutes = int(tokens[0])
    except (IndexError, ValueError):
        logger.warning(f"Could not parse delay {delay_text!r}")
        return ""
    return _shift(scheduled_time, minutes)


def adjust_leg(leg: ArrivalLeg) -> str:
    """Adjusted departure time for a decoded arrival leg."""
    if leg.delay_minutes is None:
        return ""
    if leg.is_on_time:
        return leg.departure_time
    return _shift(leg.departure_time, leg.delay_minutes)
