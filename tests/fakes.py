"""Test doubles shared across test modules."""

import asyncio

from septa_tracker.domain.errors import TransportError
from septa_tracker.domain.models import (
    ArrivalLeg,
    ConnectingArrival,
    DirectArrival,
    NextArrival,
    Train,
)


def make_train(train_no: str, **overrides: object) -> Train:
    """Build a live train with sensible defaults."""
    fields: dict[str, object] = {
        "latitude": 39.9566,
        "longitude": -75.1820,
        "line": "Paoli/Thorndale",
        "destination": "Thorndale",
        "current_stop": "30th Street Station",
        "next_stop": "Overbrook",
        "consist": ("735", "736"),
        "late_minutes": 0,
    }
    fields.update(overrides)
    return Train(train_no=train_no, **fields)  # type: ignore[arg-type]


def make_leg(
    train_no: str, departure_time: str = "3:00PM", delay_minutes: int | None = 0
) -> ArrivalLeg:
    """Build an arrival leg."""
    return ArrivalLeg(
        train_no=train_no,
        line="Paoli/Thorndale",
        departure_time=departure_time,
        arrival_time="3:40PM",
        delay_minutes=delay_minutes,
    )


def make_arrival(
    train_no: str,
    departure_time: str = "3:00PM",
    delay_minutes: int | None = 0,
    connection: str | None = None,
) -> NextArrival:
    """Build a direct arrival, or a connecting one when ``connection`` is given."""
    origin = make_leg(train_no, departure_time, delay_minutes)
    if connection is None:
        return DirectArrival(origin=origin)
    return ConnectingArrival(
        origin=origin, connection_station=connection, terminus=make_leg(f"{train_no}9")
    )


class InMemoryBlobStore:
    """Blob store keeping payloads in a dict."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self.data: dict[str, bytes] = dict(initial or {})
        self.writes: list[str] = []

    async def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    async def set(self, key: str, data: bytes) -> None:
        self.data[key] = data
        self.writes.append(key)


class FakeHttpClient:
    """HTTP client answering from a URL -> payload/exception table.

    A URL with a gate blocks until the gate's event is set.
    """

    def __init__(self, responses: dict[str, bytes | Exception] | None = None) -> None:
        self.responses: dict[str, bytes | Exception] = dict(responses or {})
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[tuple[str, dict | None]] = []

    async def get(self, url: str, params: dict | None = None) -> bytes:
        self.calls.append((url, params))
        gate = self.gates.get(url)
        if gate is not None:
            await gate.wait()
        response = self.responses.get(url)
        if response is None:
            raise TransportError(f"No route to {url}", url=url)
        if isinstance(response, Exception):
            raise response
        return response


class FakeTrainRepository:
    """Train repository returning queued results; the last result repeats."""

    def __init__(self, *results: list[Train] | Exception) -> None:
        self.results = list(results)
        self.calls = 0

    async def get_trains(self) -> list[Train]:
        self.calls += 1
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


class FakeNextArrivalRepository:
    """Next arrival repository keyed by (start, end); gated pairs block until released."""

    def __init__(self) -> None:
        self.results: dict[tuple[str, str], list[NextArrival] | Exception] = {}
        self.gates: dict[tuple[str, str], asyncio.Event] = {}
        self.calls: list[tuple[str, str, int]] = []

    async def get_next_arrivals(self, start: str, end: str, limit: int) -> list[NextArrival]:
        self.calls.append((start, end, limit))
        gate = self.gates.get((start, end))
        if gate is not None:
            await gate.wait()
        result = self.results.get((start, end), [])
        if isinstance(result, Exception):
            raise result
        return result


class ScriptedHttpClient:
    """HTTP client answering the n-th call with the n-th scripted payload.

    Each call blocks until the gate of the same index is set, so tests can
    release responses in any order.
    """

    def __init__(self, *payloads: bytes | Exception) -> None:
        self.payloads = list(payloads)
        self.gates = [asyncio.Event() for _ in payloads]
        self.calls: list[str] = []

    async def get(self, url: str, params: dict | None = None) -> bytes:  # noqa: ARG002
        index = len(self.calls)
        self.calls.append(url)
        await self.gates[index].wait()
        payload = self.payloads[index]
        if isinstance(payload, Exception):
            raise payload
        return payload
