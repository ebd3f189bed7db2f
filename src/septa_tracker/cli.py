"""Command line interface for one-off SEPTA queries and managing favorites."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from datetime import date
from typing import Any

import aiohttp

from septa_tracker.adapters.config import AppConfig
from septa_tracker.adapters.console.board_formatter import (
    format_advisory,
    format_arrival,
    format_board,
    format_schedule,
    format_train,
)
from septa_tracker.adapters.reference import ReferenceKind
from septa_tracker.application.services import nearest_trains
from septa_tracker.bootstrap import TrackerServices, create_services
from septa_tracker.domain.errors import FeedError
from septa_tracker.domain.models import (
    DayBucket,
    Direction,
    NextArrival,
    StationPair,
    Train,
)
from septa_tracker.main import configure_logging

logger = logging.getLogger(__name__)


def _train_to_dict(train: Train) -> dict[str, Any]:
    data = asdict(train)
    data["consist"] = list(train.consist)
    data["rolling_stock"] = train.rolling_stock.value
    return data


def _arrival_to_dict(arrival: NextArrival) -> dict[str, Any]:
    data = asdict(arrival)
    data["is_direct"] = arrival.is_direct
    return data


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _load_reference(services: TrackerServices, kind: ReferenceKind) -> Any | None:
    """Cached value if there is one, otherwise wait for the network."""
    value = await services.reference.load(kind)
    await services.reference.wait_idle()
    return services.reference.current(kind) or value


async def _unknown_stations(services: TrackerServices, *names: str) -> list[str]:
    stops = await _load_reference(services, ReferenceKind.STOPS)
    if not stops:
        return []
    return [name for name in names if name not in stops]


async def cmd_stops(services: TrackerServices, args: argparse.Namespace) -> int:
    """List every station name."""
    stops = await _load_reference(services, ReferenceKind.STOPS)
    if stops is None:
        print("Stop list unavailable", file=sys.stderr)
        return 1
    if args.json:
        _print_json(stops)
    else:
        for stop in stops:
            print(stop)
    return 0


async def cmd_trains(services: TrackerServices, args: argparse.Namespace) -> int:
    """List live trains, optionally filtered by line or sorted by distance."""
    try:
        trains = await services.trains.get_trains()
    except FeedError as e:
        print(f"Could not fetch trains: {e}", file=sys.stderr)
        return 1

    if args.line:
        trains = [t for t in trains if (t.line or "").lower() == args.line.lower()]

    if args.near:
        position = services.location.current_position()
        if position is None:
            print("Set HOME_LATITUDE and HOME_LONGITUDE to use --near", file=sys.stderr)
            return 1
        trains = nearest_trains(trains, position, limit=args.limit)

    if args.json:
        _print_json([_train_to_dict(t) for t in trains])
    else:
        for train in trains:
            print(format_train(train))
        print(f"\n{len(trains)} train(s)")
    return 0


async def cmd_next(services: TrackerServices, args: argparse.Namespace) -> int:
    """Show the next predicted journeys between two stations."""
    unknown = await _unknown_stations(services, args.start, args.end)
    if unknown:
        print(f"Unknown station(s): {', '.join(unknown)}", file=sys.stderr)
        return 1

    try:
        arrivals = await services.next_arrivals.get_next_arrivals(
            args.start, args.end, args.count
        )
    except FeedError as e:
        print(f"Could not fetch next trains: {e}", file=sys.stderr)
        return 1

    if args.json:
        _print_json([_arrival_to_dict(a) for a in arrivals])
    elif not arrivals:
        print("No trains found")
    else:
        for arrival in arrivals:
            for line in format_arrival(arrival):
                print(line)
    return 0


async def cmd_board(services: TrackerServices, args: argparse.Namespace) -> int:
    """Show next journeys joined with the live position of each train."""
    await services.train_feed.poll_once()
    services.trip_boards.arrivals_limit = args.count
    services.trip_boards.select(args.start, args.end)
    board = await services.trip_boards.refresh()
    for line in format_board(board):
        print(line)
    return 0


async def cmd_schedule(services: TrackerServices, args: argparse.Namespace) -> int:
    """Show the static timetable of one line."""
    schedules = await _load_reference(services, ReferenceKind.SCHEDULES)
    if schedules is None:
        print("Schedules unavailable", file=sys.stderr)
        return 1
    if args.line not in schedules.lines:
        print(f"Unknown line {args.line!r}. Known lines: {', '.join(schedules.line_names())}")
        return 1

    day = DayBucket(args.day) if args.day else DayBucket.for_date(date.today())
    directions = [Direction(args.direction)] if args.direction else list(Direction)
    for direction in directions:
        print(f"== {args.line} / {day.value} / {direction.value}")
        for schedule in schedules.trains_for(args.line, day, direction):
            for line in format_schedule(schedule):
                print(line)
    return 0


async def cmd_advisories(services: TrackerServices, args: argparse.Namespace) -> int:  # noqa: ARG001
    """Show current alerts and planned advisories."""
    feed = await _load_reference(services, ReferenceKind.ADVISORIES)
    if feed is None:
        print("Advisories unavailable", file=sys.stderr)
        return 1
    for alert in feed.current or []:
        print(f"! {alert}")
    for advisory in feed.advisories:
        for line in format_advisory(advisory):
            print(line)
    return 0


async def cmd_favorites(services: TrackerServices, args: argparse.Namespace) -> int:
    """List, add or remove favorite station pairs."""
    repository = services.favorites_repository
    favorites = await repository.load()

    if args.action == "list":
        for pair in favorites:
            print(f"{pair.start} -> {pair.end}")
        return 0

    pair = StationPair(args.start, args.end)
    if args.action == "add":
        unknown = await _unknown_stations(services, pair.start, pair.end)
        if unknown:
            print(f"Unknown station(s): {', '.join(unknown)}", file=sys.stderr)
            return 1
        if pair in favorites:
            print(f"{pair.key} is already a favorite")
            return 0
        await repository.save([*favorites, pair])
        print(f"Added {pair.key}")
        return 0

    if pair not in favorites:
        print(f"{pair.key} is not a favorite", file=sys.stderr)
        return 1
    await repository.save([p for p in favorites if p != pair])
    print(f"Removed {pair.key}")
    return 0


COMMANDS = {
    "stops": cmd_stops,
    "trains": cmd_trains,
    "next": cmd_next,
    "board": cmd_board,
    "schedule": cmd_schedule,
    "advisories": cmd_advisories,
    "favorites": cmd_favorites,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Query SEPTA Regional Rail trains, predictions and schedules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s trains --line Paoli/Thorndale
  %(prog)s next "Suburban Station" "Paoli" -n 5
  %(prog)s board "Suburban Station" "Paoli"
  %(prog)s favorites add "Suburban Station" "Paoli"
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    stops_parser = subparsers.add_parser("stops", help="List station names")
    stops_parser.add_argument("--json", action="store_true", help="Output as JSON")

    trains_parser = subparsers.add_parser("trains", help="List live trains")
    trains_parser.add_argument("--line", help="Only show trains on this line")
    trains_parser.add_argument(
        "--near", action="store_true", help="Sort by distance from the configured home position"
    )
    trains_parser.add_argument(
        "--limit", type=int, default=5, help="Number of trains shown with --near"
    )
    trains_parser.add_argument("--json", action="store_true", help="Output as JSON")

    next_parser = subparsers.add_parser("next", help="Next trains between two stations")
    next_parser.add_argument("start", help="Origin station name")
    next_parser.add_argument("end", help="Destination station name")
    next_parser.add_argument("-n", "--count", type=int, default=10, help="Number of trains")
    next_parser.add_argument("--json", action="store_true", help="Output as JSON")

    board_parser = subparsers.add_parser("board", help="Next trains with live positions")
    board_parser.add_argument("start", help="Origin station name")
    board_parser.add_argument("end", help="Destination station name")
    board_parser.add_argument("-n", "--count", type=int, default=10, help="Number of trains")

    schedule_parser = subparsers.add_parser("schedule", help="Static timetable of a line")
    schedule_parser.add_argument("line", help="Line code")
    schedule_parser.add_argument(
        "--day", choices=[d.value for d in DayBucket], help="Service day (default: today)"
    )
    schedule_parser.add_argument(
        "--direction", choices=[d.value for d in Direction], help="Direction (default: both)"
    )

    subparsers.add_parser("advisories", help="Service alerts and advisories")

    favorites_parser = subparsers.add_parser("favorites", help="Manage favorite station pairs")
    favorites_sub = favorites_parser.add_subparsers(dest="action", required=True)
    favorites_sub.add_parser("list", help="List favorites")
    for action in ("add", "remove"):
        action_parser = favorites_sub.add_parser(action, help=f"{action.capitalize()} a favorite")
        action_parser.add_argument("start", help="Origin station name")
        action_parser.add_argument("end", help="Destination station name")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    config = AppConfig()
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    config.load_toml_overrides()

    async with aiohttp.ClientSession() as session:
        services = create_services(config, session)
        try:
            return await COMMANDS[args.command](services, args)
        finally:
            services.reference.close()
            await services.reference.wait_idle()


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
