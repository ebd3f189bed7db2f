"""Tests for the stale-while-revalidate reference data cache."""

import asyncio

import pytest

from septa_tracker.adapters.reference import ReferenceDataCache, ReferenceKind
from septa_tracker.domain.errors import TransportError
from tests.fakes import FakeHttpClient, InMemoryBlobStore, ScriptedHttpClient

BASE_URL = "https://reference.example.com"
STOPS_URL = f"{BASE_URL}/stops"
ADVISORIES_URL = f"{BASE_URL}/advisories"

STOPS_V1 = b'{"stops": ["Ardmore", "Paoli"]}'
STOPS_V2 = b'{"stops": ["Ardmore", "Paoli", "Wayne"]}'


@pytest.mark.asyncio
async def test_cold_start_without_cache_fetches_and_persists() -> None:
    """Given an empty store, when loading stops, then they are fetched, stored and published."""
    store = InMemoryBlobStore()
    cache = ReferenceDataCache(FakeHttpClient({STOPS_URL: STOPS_V1}), store, BASE_URL)  # type: ignore[arg-type]
    published: list[list[str]] = []
    cache.subscribe(ReferenceKind.STOPS, published.append)

    assert await cache.load(ReferenceKind.STOPS) is None
    await cache.wait_idle()

    assert cache.stops == ["Ardmore", "Paoli"]
    assert store.data["cachedStops.json"] == STOPS_V1
    assert published == [["Ardmore", "Paoli"]]


@pytest.mark.asyncio
async def test_second_cold_start_serves_cache_while_network_is_slow() -> None:
    """Given a cached payload, when loading, then it is served before the network answers."""
    store = InMemoryBlobStore({"cachedStops.json": STOPS_V1})
    http_client = FakeHttpClient({STOPS_URL: STOPS_V2})
    http_client.gates[STOPS_URL] = asyncio.Event()
    cache = ReferenceDataCache(http_client, store, BASE_URL)  # type: ignore[arg-type]

    cached = await cache.load(ReferenceKind.STOPS)

    assert cached == ["Ardmore", "Paoli"]
    assert cache.stops == ["Ardmore", "Paoli"]

    http_client.gates[STOPS_URL].set()
    await cache.wait_idle()

    assert cache.stops == ["Ardmore", "Paoli", "Wayne"]
    assert store.data["cachedStops.json"] == STOPS_V2


@pytest.mark.asyncio
async def test_failed_revalidation_leaves_cache_untouched() -> None:
    """Given a failing network, when loading, then cached data stays published and stored."""
    store = InMemoryBlobStore({"cachedStops.json": STOPS_V1})
    http_client = FakeHttpClient({STOPS_URL: TransportError("down", url=STOPS_URL)})
    cache = ReferenceDataCache(http_client, store, BASE_URL)  # type: ignore[arg-type]

    await cache.load(ReferenceKind.STOPS)
    await cache.wait_idle()

    assert cache.stops == ["Ardmore", "Paoli"]
    assert store.data["cachedStops.json"] == STOPS_V1
    assert store.writes == []


@pytest.mark.asyncio
async def test_undecodable_fetch_is_not_persisted() -> None:
    """Given a malformed response, when revalidating, then nothing is stored or published."""
    store = InMemoryBlobStore()
    cache = ReferenceDataCache(
        FakeHttpClient({STOPS_URL: b"<html>oops</html>"}), store, BASE_URL  # type: ignore[arg-type]
    )

    assert await cache.revalidate(ReferenceKind.STOPS) is None
    assert cache.current(ReferenceKind.STOPS) is None
    assert store.writes == []


@pytest.mark.asyncio
async def test_unreadable_cache_counts_as_miss() -> None:
    """Given a corrupt cached payload, when loading, then it is ignored and refetched."""
    store = InMemoryBlobStore({"cachedStops.json": b"not json"})
    cache = ReferenceDataCache(FakeHttpClient({STOPS_URL: STOPS_V1}), store, BASE_URL)  # type: ignore[arg-type]

    assert await cache.load(ReferenceKind.STOPS) is None
    await cache.wait_idle()

    assert cache.stops == ["Ardmore", "Paoli"]


@pytest.mark.asyncio
async def test_advisories_are_never_persisted() -> None:
    """Given fetched advisories, when revalidating, then they are published but not stored."""
    payload = b'{"current": ["Delays on Paoli/Thorndale"], "advisory": []}'
    store = InMemoryBlobStore()
    cache = ReferenceDataCache(FakeHttpClient({ADVISORIES_URL: payload}), store, BASE_URL)  # type: ignore[arg-type]

    await cache.load(ReferenceKind.ADVISORIES)
    await cache.wait_idle()

    assert cache.advisories is not None
    assert cache.advisories.current == ["Delays on Paoli/Thorndale"]
    assert store.writes == []


@pytest.mark.asyncio
async def test_out_of_order_result_is_discarded() -> None:
    """Given two overlapping fetches, when the older one finishes last, then it is dropped."""
    store = InMemoryBlobStore()
    http_client = ScriptedHttpClient(STOPS_V1, STOPS_V2)
    cache = ReferenceDataCache(http_client, store, BASE_URL)  # type: ignore[arg-type]

    older = asyncio.create_task(cache.revalidate(ReferenceKind.STOPS))
    newer = asyncio.create_task(cache.revalidate(ReferenceKind.STOPS))
    await asyncio.sleep(0)

    http_client.gates[1].set()
    assert await newer == ["Ardmore", "Paoli", "Wayne"]
    http_client.gates[0].set()
    assert await older is None

    assert cache.stops == ["Ardmore", "Paoli", "Wayne"]
    assert store.data["cachedStops.json"] == STOPS_V2


@pytest.mark.asyncio
async def test_results_after_close_are_discarded() -> None:
    """Given a fetch in flight, when the cache is closed, then its result is not applied."""
    store = InMemoryBlobStore()
    http_client = ScriptedHttpClient(STOPS_V1)
    cache = ReferenceDataCache(http_client, store, BASE_URL)  # type: ignore[arg-type]

    await cache.load(ReferenceKind.STOPS)
    await asyncio.sleep(0)
    cache.close()
    http_client.gates[0].set()
    await cache.wait_idle()

    assert cache.current(ReferenceKind.STOPS) is None
    assert store.writes == []
