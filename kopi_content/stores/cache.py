"""Read cache interface and the process-local implementation.

Cached values are JSON-compatible (lists/dicts of validated entity dumps) so
every backend can hold them. A lookup returns None on miss or expiry.

The memory cache is not shared across processes: a scaled-out deployment sees
staleness bounded by the TTL. Use CACHE_BACKEND=redis for a shared cache.
"""

from abc import ABC, abstractmethod
from typing import Any
from uuid import uuid4

from aiocache.backends.memory import SimpleMemoryCache
from aiocache.serializers import PickleSerializer


class ReadCache(ABC):
    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the cached value, or None on miss/expiry."""

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: float) -> None:
        """Store `value` under `key` for `ttl` seconds."""

    @abstractmethod
    async def invalidate(self, key: str) -> None:
        """Drop `key` so the next read goes to the store."""

    async def close(self) -> None:
        return None


class MemoryReadCache(ReadCache):
    """Process-local TTL cache backed by aiocache's SimpleMemoryCache.

    Values are pickled on the way in, so a caller mutating a returned value
    never changes what the next reader sees. Expiry is per key.
    """

    def __init__(self, namespace: str | None = None) -> None:
        # Unique per instance so two caches in one process never see each other's keys.
        self._namespace = namespace or f"content-{uuid4().hex[:8]}:"
        self._cache = SimpleMemoryCache(serializer=PickleSerializer(), namespace=self._namespace)
        # Local dict operations; no need for aiocache's per-call wait_for.
        self._cache.timeout = 0.0

    async def get(self, key: str) -> Any | None:
        return await self._cache.get(key)

    async def set(self, key: str, value: Any, ttl: float) -> None:
        if ttl <= 0:
            return
        await self._cache.set(key, value, ttl=ttl)

    async def invalidate(self, key: str) -> None:
        await self._cache.delete(key)

    async def clear(self) -> None:
        """Drop every entry held by this cache."""
        await self._cache.clear(namespace=self._namespace)

    async def close(self) -> None:
        await self._cache.clear(namespace=self._namespace)
        await self._cache.close()
