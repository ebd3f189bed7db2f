"""In-process fan-out of published values to subscriber callbacks."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Subscriber = Callable[[T], Awaitable[None] | None]


class Broadcaster(Generic[T]):
    """Delivers each published value to every subscriber, in subscription order.

    Subscribers may be plain functions or coroutine functions. A failing
    subscriber is logged and does not prevent delivery to the others.
    """

    def __init__(self, name: str) -> None:
        """Initialize the broadcaster.

        Args:
            name: Label used in log messages.
        """
        self.name = name
        self._subscribers: list[Subscriber[T]] = []

    def __len__(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """Register a subscriber. Returns a function that removes it again."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    async def publish(self, value: T) -> None:
        """Deliver a value to all current subscribers."""
        for callback in list(self._subscribers):
            try:
                result = callback(value)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber of {self.name} failed: {e}", exc_info=True)
