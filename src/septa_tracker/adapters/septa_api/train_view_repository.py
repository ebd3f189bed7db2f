"""Train repository adapter using the SEPTA TrainView API."""

import logging
from typing import TYPE_CHECKING

from septa_tracker.adapters.septa_api.constants import TRAIN_VIEW_PATH
from septa_tracker.adapters.septa_api.parsers import parse_trains
from septa_tracker.domain.models.train import Train
from septa_tracker.domain.ports.train_repository import TrainRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from septa_tracker.adapters.septa_api.http_client import SeptaHttpClient


class TrainViewRepository(TrainRepository):
    """Adapter for live Regional Rail train positions."""

    def __init__(self, http_client: "SeptaHttpClient", base_url: str) -> None:
        """Initialize with an HTTP client and the SEPTA API base URL."""
        self._http_client = http_client
        self._url = f"{base_url.rstrip('/')}{TRAIN_VIEW_PATH}"

    async def get_trains(self) -> list[Train]:
        """Get every train currently reported by TrainView.

        Raises:
            FeedError: If the request fails or the payload cannot be decoded.
        """
        payload = await self._http_client.get(self._url)
        trains = parse_trains(payload)
        logger.debug(f"TrainView reported {len(trains)} train(s)")
        return trains
