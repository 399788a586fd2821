"""Redis store for shared read caching.

Handles:
- Caching content reads with millisecond TTLs (SET ... PX)
- Explicit invalidation on writes

TTL policies:
- Collection reads (products, blog, events, testimonials, menu): ~1 second
- Singleton documents (settings, hero): ~5 minutes

Redis failures never fail a content read: they are logged and treated as a
cache miss. A failed invalidation leaves staleness bounded by the TTL.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis
from redis.exceptions import RedisError

from kopi_content.settings import Settings
from kopi_content.stores.cache import ReadCache

# Key prefixes
PREFIX_CONTENT = "content:"

logger = logging.getLogger("uvicorn.error")


async def connect_redis(settings: Settings) -> redis.Redis:
    """Create a Redis client and validate connectivity."""
    client = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await client.ping()
    logger.info("Redis connected")
    return client


class RedisReadCache(ReadCache):
    """Read cache shared by every API instance pointing at the same Redis."""

    def __init__(self, client: redis.Redis, prefix: str = PREFIX_CONTENT) -> None:
        self._client = client
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> Any | None:
        try:
            raw = await self._client.get(self._key(key))
        except RedisError:
            logger.warning(f"Redis cache read failed for {key}, treating as miss", exc_info=True)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Discarding undecodable cache entry {key}")
            return None

    async def set(self, key: str, value: Any, ttl: float) -> None:
        ttl_ms = int(ttl * 1000)
        if ttl_ms <= 0:
            return
        try:
            await self._client.set(self._key(key), json.dumps(value), px=ttl_ms)
        except RedisError:
            logger.warning(f"Redis cache write failed for {key}", exc_info=True)

    async def invalidate(self, key: str) -> None:
        try:
            await self._client.delete(self._key(key))
        except RedisError:
            logger.exception(f"Redis cache invalidation failed for {key}; stale for at most one TTL")

    async def close(self) -> None:
        await self._client.aclose()
