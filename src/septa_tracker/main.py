"""Main entry point for the SEPTA tracker watcher."""

import asyncio
import contextlib
import logging
import signal
import sys

import aiohttp

from septa_tracker.adapters.config import AppConfig
from septa_tracker.adapters.console.board_formatter import format_board
from septa_tracker.adapters.reference import ReferenceKind
from septa_tracker.bootstrap import TrackerServices, create_services
from septa_tracker.domain.models.train import Train

logger = logging.getLogger(__name__)

# Upper bound for letting in-flight fetches finish on shutdown
SHUTDOWN_GRACE_SECONDS = 15


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging the same way for every entry point."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _warn_unknown_stations(services: TrackerServices) -> None:
    """Favorites must use the exact spelling of the reference stop list."""
    stops = set(services.reference.stops)
    if not stops:
        return
    for pair in services.favorites.favorites:
        for name in (pair.start, pair.end):
            if name not in stops:
                logger.warning(f"Favorite {pair.key} uses unknown station {name!r}")


async def _shutdown(services: TrackerServices) -> None:
    await services.favorites.stop()
    await services.train_feed.stop()
    services.reference.close()
    try:
        await asyncio.wait_for(
            asyncio.gather(
                services.favorites.wait_idle(),
                services.train_feed.wait_idle(),
                services.reference.wait_idle(),
            ),
            timeout=SHUTDOWN_GRACE_SECONDS,
        )
    except TimeoutError:
        logger.warning("Gave up waiting for in-flight requests")


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level_number)

    try:
        config.load_toml_overrides()
    except FileNotFoundError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, stop_event.set)

    # One session for every request the tracker makes
    async with aiohttp.ClientSession() as session:
        services = create_services(config, session)

        def log_favorite_boards(trains: list[Train]) -> None:
            logger.info(f"{len(trains)} train(s) running")
            for pair in services.favorites.favorites:
                board = services.trip_boards.board_for(
                    pair, services.favorites.results_for(pair)
                )
                for line in format_board(board):
                    logger.info(line)

        services.train_feed.subscribe(log_favorite_boards)
        services.reference.subscribe(
            ReferenceKind.STOPS, lambda stops: logger.info(f"{len(stops)} stops available")
        )

        await services.reference.load(ReferenceKind.STOPS)
        await services.reference.load(ReferenceKind.ADVISORIES)
        await services.favorites.start()
        await services.train_feed.start()
        _warn_unknown_stations(services)

        logger.info("SEPTA tracker running, press Ctrl+C to stop")
        try:
            await stop_event.wait()
        finally:
            logger.info("Shutting down...")
            await _shutdown(services)


def run() -> None:
    """Console script entry point."""
    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(main())


if __name__ == "__main__":
    run()
