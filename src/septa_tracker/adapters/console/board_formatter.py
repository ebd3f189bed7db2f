"""Plain-text formatting of trains and trip boards."""

from septa_tracker.domain.models.advisory import Advisory
from septa_tracker.domain.models.next_arrival import ArrivalLeg, ConnectingArrival, NextArrival
from septa_tracker.domain.models.schedule import TrainSchedule
from septa_tracker.domain.models.train import Train
from septa_tracker.domain.models.trip_board import TrackedArrival, TripBoard


def format_delay(minutes: int | None) -> str:
    """Human readable delay."""
    if minutes is None:
        return "delay unknown"
    if minutes == 0:
        return "on time"
    if minutes < 0:
        return f"{-minutes} min early"
    return f"{minutes} min late"


def format_train(train: Train) -> str:
    """One-line summary of a live train."""
    line = train.line or "Unknown Line"
    next_stop = train.next_stop or "Unknown Next Stop"
    destination = train.destination or "Unknown Destination"
    return (
        f"{line} Line #{train.train_no} -> {destination} "
        f"(next: {next_stop}, {format_delay(train.late_minutes)}, {train.rolling_stock.value})"
    )


def _format_leg(leg: ArrivalLeg) -> str:
    return (
        f"#{leg.train_no} {leg.line}: departs {leg.departure_time}, "
        f"arrives {leg.arrival_time} ({format_delay(leg.delay_minutes)})"
    )


def format_arrival(arrival: NextArrival) -> list[str]:
    """Lines describing a predicted journey; connecting journeys get two."""
    lines = [_format_leg(arrival.origin)]
    if isinstance(arrival, ConnectingArrival):
        lines.append(f"  change at {arrival.connection_station}: {_format_leg(arrival.terminus)}")
    return lines


def _format_tracked(tracked: TrackedArrival) -> list[str]:
    lines = format_arrival(tracked.arrival)
    train = tracked.train
    where = train.current_stop or train.next_stop or "unknown position"
    lines.append(f"  live: near {where}")
    if tracked.adjusted_time:
        lines.append(f"  departure: {tracked.adjusted_time}")
    return lines


def format_board(board: TripBoard) -> list[str]:
    """Lines for a full trip board."""
    lines = [f"{board.pair.start} -> {board.pair.end}"]
    if board.is_empty:
        lines.append("  No trains found")
        return lines
    for tracked in board.tracked:
        lines.extend(f"  {line}" for line in _format_tracked(tracked))
    for arrival in board.prediction_only:
        lines.extend(f"  {line}" for line in format_arrival(arrival))
        lines.append("    (prediction only)")
    return lines


def format_schedule(schedule: TrainSchedule) -> list[str]:
    """Lines for one scheduled train, stops in route order."""
    lines = [f"Train {schedule.train_no}"]
    lines.extend(f"  {stop.time:>8}  {stop.stop}" for stop in schedule.stops)
    return lines


def format_advisory(advisory: Advisory) -> list[str]:
    """Lines for one service advisory."""
    label = "Link" if advisory.is_link else "Details"
    return [
        advisory.title,
        f"  Dates: {advisory.dates_affected}",
        f"  {label}: {advisory.description}",
    ]
