"""Next arrival repository adapter using the SEPTA NextToArrive API."""

import logging
from typing import TYPE_CHECKING

from septa_tracker.adapters.septa_api.constants import (
    NEXT_TO_ARRIVE_PATH,
    PARAM_END,
    PARAM_LIMIT,
    PARAM_START,
)
from septa_tracker.adapters.septa_api.parsers import parse_next_arrivals
from septa_tracker.domain.models.next_arrival import STATION_PLACEHOLDER, NextArrival
from septa_tracker.domain.ports.next_arrival_repository import NextArrivalRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from septa_tracker.adapters.septa_api.http_client import SeptaHttpClient


def is_meaningful_query(start: str, end: str) -> bool:
    """False for queries that cannot have results, e.g. before stations are chosen."""
    return start != end and STATION_PLACEHOLDER not in (start, end)


class NextToArriveRepository(NextArrivalRepository):
    """Adapter for predicted journeys between two Regional Rail stations."""

    def __init__(self, http_client: "SeptaHttpClient", base_url: str) -> None:
        """Initialize with an HTTP client and the SEPTA API base URL."""
        self._http_client = http_client
        self._url = f"{base_url.rstrip('/')}{NEXT_TO_ARRIVE_PATH}"

    async def get_next_arrivals(self, start: str, end: str, limit: int) -> list[NextArrival]:
        """Get up to ``limit`` predicted journeys from ``start`` to ``end``.

        Station names must match the reference stop list exactly.

        Args:
            start: Origin station name.
            end: Destination station name.
            limit: Maximum number of journeys requested.

        Returns:
            Predicted journeys in feed order; empty without any request when
            the stations are equal or one is still the placeholder.

        Raises:
            InvalidURLError: If the request URL cannot be built.
            NoDataError: If the feed answered with an empty body.
            DecodingError: If the payload does not match the schema.
            TransportError: On network failure or a non-200 response.
        """
        if not is_meaningful_query(start, end):
            logger.debug(f"Skipping next-to-arrive query {start!r} -> {end!r}")
            return []

        params: dict[str, str | int] = {PARAM_START: start, PARAM_END: end, PARAM_LIMIT: limit}
        payload = await self._http_client.get(self._url, params=params)
        arrivals = parse_next_arrivals(payload)
        logger.debug(f"NextToArrive {start} -> {end}: {len(arrivals)} journey(s)")
        return arrivals
