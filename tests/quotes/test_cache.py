import asyncio
import json

import pytest

from arraybutt.quotes import (
    CacheInitError,
    EmptyCache,
    FetchFailure,
    MalformedDocument,
    QuoteCache,
)

TTL = 1800.0


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeFetcher:
    """Serves queued responses; an exception instance is raised instead of returned."""

    def __init__(self, *responses) -> None:
        self.responses = list(responses)
        self.calls = []

    async def __call__(self, url, timeout):
        self.calls.append((url, timeout))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _body(doc) -> bytes:
    return json.dumps(doc).encode()


def _cache(fetcher, clock, ttl=TTL):
    return QuoteCache(
        "https://quotes.invalid/q.json", ttl, fetch_timeout=5.0, fetcher=fetcher, clock=clock
    )


def test_first_access_refreshes_immediately():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(_body({"2020": {"3": ["hello", "world"]}}))
    cache = _cache(fetcher, clock)

    collection = asyncio.run(cache.get_quotes())

    assert fetcher.calls == [("https://quotes.invalid/q.json", 5.0)]
    assert collection.size == 2
    assert cache.last_refresh == clock.now


def test_fresh_snapshot_is_served_without_fetching():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(_body({"2020": {"3": ["hello"]}}))
    cache = _cache(fetcher, clock)
    first = asyncio.run(cache.get_quotes())

    clock.now += TTL - 1
    second = asyncio.run(cache.get_quotes())

    assert len(fetcher.calls) == 1
    assert second is first


def test_stale_snapshot_triggers_fetch():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(
        _body({"2020": {"3": ["hello"]}}),
        _body({"2021": {"1": ["new", "quotes", "here"]}}),
    )
    cache = _cache(fetcher, clock)
    asyncio.run(cache.get_quotes())

    clock.now += TTL + 1
    refreshed = asyncio.run(cache.get_quotes())

    assert len(fetcher.calls) == 2
    assert refreshed.size == 3
    assert set(refreshed.years) == {"2021"}
    assert cache.last_refresh == clock.now


def test_failed_refresh_serves_previous_snapshot_and_advances_timestamp():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(
        _body({"2020": {"3": ["hello"]}}),
        FetchFailure("connection refused"),
    )
    cache = _cache(fetcher, clock)
    original = asyncio.run(cache.get_quotes())

    clock.now += TTL + 1
    served = asyncio.run(cache.get_quotes())

    assert served is original
    assert cache.last_refresh == clock.now

    # No retry until another full TTL has passed.
    clock.now += 1
    assert asyncio.run(cache.get_quotes()) is original
    assert len(fetcher.calls) == 2


def test_malformed_refresh_keeps_previous_snapshot():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(_body({"2020": {"3": ["hello"]}}), _body(["not", "years"]))
    cache = _cache(fetcher, clock)
    original = asyncio.run(cache.get_quotes())

    clock.now += TTL
    assert asyncio.run(cache.get_quotes()) is original
    assert cache.size == 1


def test_never_loaded_cache_raises_empty_cache():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(FetchFailure("timeout"))
    cache = _cache(fetcher, clock)

    with pytest.raises(EmptyCache):
        asyncio.run(cache.get_quotes())
    assert cache.snapshot is None
    assert cache.last_refresh == clock.now


def test_zero_ttl_refreshes_on_every_call():
    clock = FakeClock(1_000_000.0)
    doc = _body({"2020": {"3": ["hello", "world"]}})
    fetcher = FakeFetcher(doc, doc, doc)
    cache = _cache(fetcher, clock, ttl=0)

    for _ in range(3):
        assert asyncio.run(cache.get_quotes()).size == 2
    assert len(fetcher.calls) == 3


def test_concurrent_callers_share_one_refresh():
    clock = FakeClock(1_000_000.0)

    class SlowFetcher(FakeFetcher):
        async def __call__(self, url, timeout):
            await asyncio.sleep(0.01)
            return await super().__call__(url, timeout)

    fetcher = SlowFetcher(_body({"2020": {"3": ["hello"]}}))
    cache = _cache(fetcher, clock)

    async def _run():
        return await asyncio.gather(*(cache.get_quotes() for _ in range(5)))

    results = asyncio.run(_run())

    assert len(fetcher.calls) == 1
    assert all(r is results[0] for r in results)


def test_populate_raises_typed_error_with_cause():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(_body([1, 2, 3]))
    cache = _cache(fetcher, clock)

    with pytest.raises(CacheInitError) as excinfo:
        asyncio.run(cache.populate())
    assert isinstance(excinfo.value.__cause__, MalformedDocument)


def test_populate_returns_first_snapshot():
    clock = FakeClock(1_000_000.0)
    fetcher = FakeFetcher(_body({"2020": {"3": ["hello", "world"]}}))
    cache = _cache(fetcher, clock)

    collection = asyncio.run(cache.populate())

    assert collection.size == 2
    assert cache.snapshot is collection


class _FakeResponse:
    def __init__(self, body: bytes, error: Exception | None = None) -> None:
        self._body = body
        self._error = error

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def raise_for_status(self):
        if self._error is not None:
            raise self._error

    async def read(self):
        return self._body


def _fake_session(get):
    class _Session:
        def __init__(self, *args, **kwargs):
            self.kwargs = kwargs

        async def __aenter__(self):
            return self

        async def __aexit__(self, *exc):
            return False

        def get(self, url):
            return get(url)

    return _Session


def test_fetch_document_returns_body(monkeypatch):
    from arraybutt.quotes import cache as cache_module

    monkeypatch.setattr(
        cache_module.aiohttp,
        "ClientSession",
        _fake_session(lambda url: _FakeResponse(b'{"2020": {}}')),
    )

    assert asyncio.run(cache_module.fetch_document("https://q.invalid", 1.0)) == b'{"2020": {}}'


def test_fetch_document_wraps_transport_errors(monkeypatch):
    import aiohttp

    from arraybutt.quotes import cache as cache_module

    def _refuse(url):
        raise aiohttp.ClientConnectionError("refused")

    monkeypatch.setattr(cache_module.aiohttp, "ClientSession", _fake_session(_refuse))

    with pytest.raises(FetchFailure):
        asyncio.run(cache_module.fetch_document("https://q.invalid", 1.0))


def test_fetch_document_wraps_timeouts(monkeypatch):
    from arraybutt.quotes import cache as cache_module

    def _slow(url):
        raise asyncio.TimeoutError()

    monkeypatch.setattr(cache_module.aiohttp, "ClientSession", _fake_session(_slow))

    with pytest.raises(FetchFailure, match="TimeoutError"):
        asyncio.run(cache_module.fetch_document("https://q.invalid", 1.0))


def test_deeply_nested_refresh_keeps_previous_snapshot():
    clock = FakeClock(1_000_000.0)
    nested = ("[" * 200_000 + "]" * 200_000).encode()
    fetcher = FakeFetcher(_body({"2020": {"3": ["hello"]}}), nested)
    cache = _cache(fetcher, clock)
    original = asyncio.run(cache.get_quotes())

    clock.now += TTL + 1
    served = asyncio.run(cache.get_quotes())

    assert served is original
    assert len(fetcher.calls) == 2
    assert cache.last_refresh == clock.now
