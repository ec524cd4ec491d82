"""ISR cache — stale-while-revalidate for generated guide responses.

Entries older than `revalidate_seconds` are still served, flagged as stale,
and one background recompute per key is scheduled to replace them.
Concurrent misses on the same key share a single load.

Bounded by cachetools.LRUCache so the working set cannot grow without limit.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Literal

from cachetools import LRUCache
from pydantic import BaseModel

logger = logging.getLogger(__name__)

Loader = Callable[[], Awaitable[dict[str, Any]]]
CacheStatus = Literal["miss", "hit", "stale"]


class CacheEntry(BaseModel):
    data: dict[str, Any]
    cached_at: float
    revalidate: bool = False


class CacheLookup(BaseModel):
    data: dict[str, Any]
    is_stale: bool = False
    status: CacheStatus = "hit"


class RevalidatingCache:
    """In-process stale-while-revalidate cache keyed by guide path."""

    def __init__(
        self,
        revalidate_seconds: float = 300,
        maxsize: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.revalidate_seconds = revalidate_seconds
        self._entries: LRUCache = LRUCache(maxsize=maxsize)
        self._clock = clock
        self._loading: dict[str, asyncio.Task] = {}
        self._inflight: dict[str, asyncio.Task] = {}

    @staticmethod
    def make_key(stain_name: str, material_name: str) -> str:
        return f"guide:{stain_name}:{material_name}"

    def get(self, key: str) -> CacheLookup | None:
        """Read an entry. Returns None on miss; stale entries are flagged, not dropped."""
        entry: CacheEntry | None = self._entries.get(key)
        if entry is None:
            return None

        is_stale = self._clock() - entry.cached_at > self.revalidate_seconds
        if is_stale:
            entry.revalidate = True
        return CacheLookup(data=entry.data, is_stale=is_stale, status="stale" if is_stale else "hit")

    def set(self, key: str, data: dict[str, Any]):
        self._entries[key] = CacheEntry(data=data, cached_at=self._clock())
        logger.debug("Cache SET | key=%s | size=%d", key, len(self._entries))

    async def get_or_load(self, key: str, loader: Loader) -> CacheLookup:
        """Serve from cache, loading on miss and revalidating in the background when stale.

        Loader errors on a miss propagate to the caller and nothing is stored.
        """
        lookup = self.get(key)
        if lookup is not None:
            if lookup.is_stale:
                self.schedule_revalidation(key, loader)
                logger.info("Cache STALE | key=%s", key)
            return lookup

        logger.info("Cache MISS | key=%s", key)
        task = self._loading.get(key)
        if task is None:
            task = asyncio.create_task(self._load(key, loader))
            self._loading[key] = task
            task.add_done_callback(lambda t: self._forget(self._loading, key, t))
        data = await asyncio.shield(task)
        return CacheLookup(data=data, is_stale=False, status="miss")

    def schedule_revalidation(self, key: str, loader: Loader) -> bool:
        """Start a background recompute unless one is already running for this key."""
        if key in self._inflight:
            return False
        task = asyncio.create_task(self._revalidate(key, loader))
        self._inflight[key] = task
        task.add_done_callback(lambda t: self._forget(self._inflight, key, t))
        return True

    async def drain(self):
        """Wait for all in-flight revalidations to finish."""
        while self._inflight:
            await asyncio.gather(*list(self._inflight.values()), return_exceptions=True)

    def keys(self) -> list[str]:
        return list(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)

    async def _load(self, key: str, loader: Loader) -> dict[str, Any]:
        data = await loader()
        self.set(key, data)
        return data

    async def _revalidate(self, key: str, loader: Loader):
        try:
            data = await loader()
        except Exception as e:
            logger.warning("Revalidation failed, keeping stale entry | key=%s | %s", key, str(e)[:200])
            return
        self.set(key, data)
        logger.info("Cache REVALIDATED | key=%s", key)

    @staticmethod
    def _forget(tasks: dict[str, asyncio.Task], key: str, task: asyncio.Task):
        if tasks.get(key) is task:
            del tasks[key]
