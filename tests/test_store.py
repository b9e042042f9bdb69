"""
Tests for the session lifecycle: memoized, single-flight loading and search.
"""
import asyncio

import httpx
import pytest

from travel_recs.data import store
from travel_recs.data.schemas import Category, LoadState
from travel_recs.data.store import TravelSession
from travel_recs.errors import LoadError

URL = "https://example.test/travel_recommendation_api.json"


class CountingHandler:
    """MockTransport handler that counts requests and can fail the first N."""

    def __init__(self, payload, fail_first: int = 0, delay: float = 0.0):
        self.payload = payload
        self.fail_first = fail_first
        self.delay = delay
        self.calls = 0

    async def __call__(self, request):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.calls <= self.fail_first:
            return httpx.Response(503)
        return httpx.Response(200, json=self.payload)


def _run(handler, body):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            session = TravelSession(source=URL, client=client)
            return await body(session)
    return asyncio.run(run())


class TestLoad:

    def test_initial_state(self):
        session = TravelSession(source=URL)
        assert session.state is LoadState.UNINITIALIZED
        assert session.dataset is None
        assert not session.is_ready
        assert session.fetch_count == 0

    def test_second_load_does_not_refetch(self, payload):
        handler = CountingHandler(payload)

        async def body(session):
            first = await session.load()
            second = await session.load()
            return session, first, second

        session, first, second = _run(handler, body)
        assert first is second
        assert handler.calls == 1
        assert session.fetch_count == 1
        assert session.state is LoadState.READY

    def test_concurrent_loads_share_one_fetch(self, payload):
        handler = CountingHandler(payload, delay=0.05)

        async def body(session):
            results = await asyncio.gather(session.load(), session.load(), session.search("japan"))
            return session, results

        session, (a, b, result) = _run(handler, body)
        assert handler.calls == 1
        assert a is b
        assert [i.name for i in result.items] == ["Tokyo, Japan", "Kyoto, Japan"]

    def test_loading_state_while_in_flight(self, payload):
        handler = CountingHandler(payload, delay=0.05)

        async def body(session):
            task = asyncio.ensure_future(session.load())
            await asyncio.sleep(0.01)
            during = session.state
            await task
            return during, session.state

        during, after = _run(handler, body)
        assert during is LoadState.LOADING
        assert after is LoadState.READY

    def test_failure_sets_failed_state(self, payload):
        handler = CountingHandler(payload, fail_first=1)

        async def body(session):
            with pytest.raises(LoadError) as info:
                await session.load()
            return session, info.value

        session, error = _run(handler, body)
        assert session.state is LoadState.FAILED
        assert session.last_error is error
        assert error.status == 503
        assert session.dataset is None

    def test_concurrent_callers_share_a_failure(self, payload):
        handler = CountingHandler(payload, fail_first=1, delay=0.05)

        async def body(session):
            return await asyncio.gather(session.load(), session.load(), return_exceptions=True)

        outcomes = _run(handler, body)
        assert handler.calls == 1
        assert all(isinstance(o, LoadError) for o in outcomes)

    def test_retry_after_failure_starts_a_fresh_fetch(self, payload):
        handler = CountingHandler(payload, fail_first=1)

        async def body(session):
            with pytest.raises(LoadError):
                await session.load()
            dataset = await session.load()
            return session, dataset

        session, dataset = _run(handler, body)
        assert handler.calls == 2
        assert session.fetch_count == 2
        assert session.state is LoadState.READY
        assert session.last_error is None
        assert len(dataset.countries) == 2

    def test_preload_swallows_failure(self, payload):
        handler = CountingHandler(payload, fail_first=1)

        async def body(session):
            await session.preload()
            return session

        session = _run(handler, body)
        assert session.state is LoadState.FAILED
        assert isinstance(session.last_error, LoadError)


class TestSearch:

    def test_search_before_load_triggers_load(self, payload):
        handler = CountingHandler(payload)

        async def body(session):
            return await session.search("beach")

        result = _run(handler, body)
        assert handler.calls == 1
        assert result.category is Category.BEACHES

    def test_search_after_failed_preload_retries(self, payload):
        handler = CountingHandler(payload, fail_first=1)

        async def body(session):
            await session.preload()
            return await session.search("countries")

        result = _run(handler, body)
        assert handler.calls == 2
        assert len(result.items) == 3

    def test_search_aborts_when_load_fails(self, payload):
        handler = CountingHandler(payload, fail_first=5)

        async def body(session):
            with pytest.raises(LoadError):
                await session.search("japan")
            return session

        session = _run(handler, body)
        assert session.state is LoadState.FAILED

    def test_local_file_session(self, data_file):
        session = TravelSession(source=str(data_file))
        result = asyncio.run(session.search("temple"))
        assert [i.name for i in result.items] == ["Angkor Wat, Cambodia", "Taj Mahal, India"]


class TestFailureModes:

    def test_undecodable_file_fails_cleanly(self, tmp_path):
        bad = tmp_path / "travel.json"
        bad.write_bytes(b"\xff\xfe")
        session = TravelSession(source=str(bad))

        with pytest.raises(LoadError) as info:
            asyncio.run(session.load())
        assert "Could not read" in str(info.value)
        assert session.state is LoadState.FAILED
        assert session.last_error is info.value

    def test_unexpected_exception_becomes_load_error(self, monkeypatch, data_file):
        async def explode(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(store, "fetch_dataset", explode)
        session = TravelSession(source=str(data_file))

        with pytest.raises(LoadError) as info:
            asyncio.run(session.load())
        assert "boom" in str(info.value)
        assert session.state is LoadState.FAILED
        assert session.last_error is info.value

    def test_cancelled_caller_does_not_abort_shared_fetch(self, payload):
        handler = CountingHandler(payload, delay=0.05)

        async def body(session):
            cancelled = asyncio.ensure_future(session.load())
            survivor = asyncio.ensure_future(session.search("japan"))
            await asyncio.sleep(0.01)
            cancelled.cancel()
            result = await survivor
            return session, cancelled, result

        session, cancelled, result = _run(handler, body)
        assert cancelled.cancelled()
        assert [i.name for i in result.items] == ["Tokyo, Japan", "Kyoto, Japan"]
        assert session.state is LoadState.READY
        assert handler.calls == 1

    def test_fetch_finishes_after_its_only_caller_is_cancelled(self, payload):
        handler = CountingHandler(payload, delay=0.05)

        async def body(session):
            task = asyncio.ensure_future(session.load())
            await asyncio.sleep(0.01)
            task.cancel()
            await asyncio.sleep(0.1)
            state = session.state
            await session.load()
            return state

        assert _run(handler, body) is LoadState.READY
        assert handler.calls == 1
