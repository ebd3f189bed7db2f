"""Integration tests against the live SEPTA API.

Deselected by default; run with ``pytest -m integration``.
"""

import aiohttp
import pytest

from septa_tracker.adapters.config import AppConfig
from septa_tracker.adapters.septa_api import (
    NextToArriveRepository,
    SeptaHttpClient,
    TrainViewRepository,
)

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_train_view_returns_trains() -> None:
    """Given the live TrainView feed, when fetching, then every train has a number."""
    config = AppConfig.for_testing()
    async with aiohttp.ClientSession() as session:
        repository = TrainViewRepository(SeptaHttpClient(session), config.septa_api_base_url)
        trains = await repository.get_trains()

    assert all(train.train_no for train in trains)


async def test_next_to_arrive_between_busy_stations() -> None:
    """Given two busy stations, when fetching predictions, then at most the limit is returned."""
    config = AppConfig.for_testing()
    async with aiohttp.ClientSession() as session:
        repository = NextToArriveRepository(SeptaHttpClient(session), config.septa_api_base_url)
        arrivals = await repository.get_next_arrivals("Suburban Station", "Jefferson Station", 3)

    assert len(arrivals) <= 3
