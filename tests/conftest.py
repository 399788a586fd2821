"""Shared fixtures: in-memory store with call counting, wired services."""

import asyncio
from collections import Counter
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

import pytest

from kopi_content.services.registry import ContentServices, build_content_services
from kopi_content.services.seeding import Seeder
from kopi_content.settings import Settings
from kopi_content.stores.base import StoredDocument
from kopi_content.stores.cache import MemoryReadCache
from kopi_content.stores.memory import InMemoryDocumentStore


class CountingStore(InMemoryDocumentStore):
    """In-memory store that records how often each operation runs."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: Counter[str] = Counter()
        # Awaited once, after the next get_all() has read its documents.
        self.after_get_all: Callable[[], Awaitable[Any]] | None = None
        self.get_all_delay = 0.0

    async def get_all(self, collection: str) -> list[StoredDocument]:
        self.calls["get_all"] += 1
        if self.get_all_delay:
            await asyncio.sleep(self.get_all_delay)
        docs = await super().get_all(collection)
        hook, self.after_get_all = self.after_get_all, None
        if hook is not None:
            await hook()
        return docs

    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        self.calls["get"] += 1
        return await super().get(collection, doc_id)

    async def find(self, collection: str, field: str, value: Any, *, limit: int | None = None) -> list[StoredDocument]:
        self.calls["find"] += 1
        return await super().find(collection, field, value, limit=limit)

    async def has_documents(self, collection: str) -> bool:
        self.calls["has_documents"] += 1
        return await super().has_documents(collection)

    async def batch_set(self, collection: str, documents: Sequence[dict[str, Any]]) -> list[str]:
        self.calls["batch_set"] += 1
        return await super().batch_set(collection, documents)


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "content_store": "memory",
        "collection_cache_ttl_seconds": 1.0,
        "singleton_cache_ttl_seconds": 300.0,
        "store_timeout_seconds": 5.0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture
def cache() -> MemoryReadCache:
    return MemoryReadCache()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def services(settings: Settings, store: CountingStore, cache: MemoryReadCache) -> ContentServices:
    """Services over the seeded baseline."""
    return build_content_services(settings, store=store, cache=cache)


@pytest.fixture
def blank_services(settings: Settings, store: CountingStore, cache: MemoryReadCache) -> ContentServices:
    """Services whose collections start (and stay) empty; singletons still get defaults."""
    seeder = Seeder(store, baselines={})
    return build_content_services(settings, store=store, cache=cache, seeder=seeder)


@pytest.fixture
def storeless_services(settings: Settings) -> ContentServices:
    """Services with no document store configured."""
    return build_content_services(settings, store=None, cache=MemoryReadCache())


@pytest.fixture
def make_services(store: CountingStore, cache: MemoryReadCache) -> Callable[..., ContentServices]:
    """Build seeded services with settings overrides (e.g. unique_slugs=True)."""

    def factory(**overrides: Any) -> ContentServices:
        return build_content_services(make_settings(**overrides), store=store, cache=cache)

    return factory
