"""
QuoteCache
==========
Lazily refreshed snapshot of the remote quote document.

1. ``get_quotes()`` takes the cache lock, then checks whether ``ttl`` seconds
   have passed since the last refresh *attempt*.
2. When stale, the attempt time is recorded before fetching so a slow or
   failing source is retried one full ``ttl`` later, not on the next call.
3. The fetched bytes are parsed and the snapshot swapped in a single
   assignment. Fetch and parse failures are logged and the previous snapshot
   keeps being served.
4. With no snapshot at all, :class:`EmptyCache` is raised to the caller.

There is no background refresh task; refreshes happen inline when asked for.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

import aiohttp

from .errors import CacheInitError, EmptyCache, FetchFailure, QuoteError
from .model import QuoteCollection
from .parser import loads_quotes

logger = logging.getLogger(__name__)

Fetcher = Callable[[str, float], Awaitable[bytes]]


async def fetch_document(url: str, timeout: float) -> bytes:
    """GET ``url`` and return the raw body, wrapping transport errors."""

    client_timeout = aiohttp.ClientTimeout(total=timeout)
    try:
        async with aiohttp.ClientSession(timeout=client_timeout) as s, s.get(url) as r:
            r.raise_for_status()
            return await r.read()
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
        raise FetchFailure(f"{url}: {str(exc) or type(exc).__name__}") from exc


class QuoteCache:
    """Owns the current quote snapshot and the state deciding when to refresh it."""

    def __init__(
        self,
        source_url: str,
        ttl: float,
        *,
        fetch_timeout: float = 20.0,
        fetcher: Fetcher | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.source_url = source_url
        self.ttl = ttl
        self.fetch_timeout = fetch_timeout
        self.last_refresh: float = 0.0
        self._snapshot: QuoteCollection | None = None
        self._last_error: QuoteError | None = None
        self._fetcher = fetcher or fetch_document
        self._clock = clock
        self._lock = asyncio.Lock()

    @property
    def snapshot(self) -> QuoteCollection | None:
        return self._snapshot

    @property
    def size(self) -> int:
        return self._snapshot.size if self._snapshot is not None else 0

    def is_stale(self, now: float | None = None) -> bool:
        now = self._clock() if now is None else now
        return now - self.last_refresh >= self.ttl

    async def get_quotes(self) -> QuoteCollection:
        """Return the current snapshot, refreshing it first when stale."""

        async with self._lock:
            now = self._clock()
            if self.is_stale(now):
                logger.info("Cache expired! Retrieving...")
                self.last_refresh = now
                await self._refresh()

            if self._snapshot is None:
                raise EmptyCache()
            return self._snapshot

    async def populate(self) -> QuoteCollection:
        """Load the first snapshot, raising :class:`CacheInitError` on failure."""

        try:
            return await self.get_quotes()
        except EmptyCache as exc:
            cause = self._last_error or exc
            raise CacheInitError(f"Initial cache population failed: {cause}") from cause

    async def _refresh(self) -> None:
        try:
            raw = await self._fetcher(self.source_url, self.fetch_timeout)
            collection, count = loads_quotes(raw)
        except QuoteError as exc:
            self._last_error = exc
            logger.error("Cache retrieval failed: %s", exc)
            return

        self._snapshot = collection
        self._last_error = None
        logger.info(
            "Cached %d quote(s) across %d year(s) from %s",
            count,
            len(collection.years),
            self.source_url,
        )


__all__ = ["QuoteCache", "fetch_document"]
