"""Lazy, once-per-process seeding of content collections.

Flow for ensure_seeded(collection):
1. Skip if this process already seeded (or verified) the collection
2. Probe the store for a single document
3. If empty, write the baseline set as one atomic batch
4. Mark the collection completed

A per-collection asyncio.Lock makes concurrent first calls wait for one
attempt instead of racing. Nothing coordinates separate processes: two
instances starting against an empty store may both seed.

Failures are logged and swallowed so a missing store degrades to "no content"
rather than a crash. A failed attempt is not marked completed and is retried
by the next call.
"""

import asyncio
from collections.abc import Callable, Mapping
import copy
import logging
from typing import Any

from kopi_content.errors import ContentError
from kopi_content.services.seed_data import BASELINES, SINGLETON_DEFAULTS
from kopi_content.stores.base import DocumentStore, with_timeout

logger = logging.getLogger("uvicorn.error")

BaselineFactory = Callable[[], list[dict[str, Any]]]


class Seeder:
    def __init__(
        self,
        store: DocumentStore | None,
        *,
        baselines: Mapping[str, BaselineFactory] | None = None,
        singletons: Mapping[tuple[str, str], dict[str, Any]] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._store = store
        self._baselines = dict(BASELINES if baselines is None else baselines)
        self._singletons = dict(SINGLETON_DEFAULTS if singletons is None else singletons)
        self._timeout = timeout
        self._completed: set[str] = set()
        self._locks: dict[str, asyncio.Lock] = {}

    def is_seeded(self, key: str) -> bool:
        return key in self._completed

    def baseline_collections(self) -> list[str]:
        return list(self._baselines)

    def singleton_keys(self) -> list[str]:
        return [f"{collection}/{doc_id}" for collection, doc_id in self._singletons]

    def singleton_defaults(self, collection: str, doc_id: str) -> dict[str, Any]:
        return copy.deepcopy(self._singletons.get((collection, doc_id), {}))

    def _lock(self, key: str) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    async def ensure_seeded(self, collection: str) -> None:
        """Write the baseline into `collection` if it is empty. Never raises."""
        if collection in self._completed:
            return

        async with self._lock(collection):
            if collection in self._completed:
                return
            if self._store is None:
                logger.warning(f"Content store not configured; skipping seed of {collection}")
                return

            factory = self._baselines.get(collection)
            if factory is None:
                # Nothing to seed (e.g. orders); no need to probe the store.
                self._completed.add(collection)
                return

            try:
                if not await with_timeout(self._store.has_documents(collection), self._timeout):
                    logger.info(f"{collection} collection is empty. Seeding database...")
                    ids = await with_timeout(
                        self._store.batch_set(collection, factory()),
                        self._timeout,
                    )
                    logger.info(f"{collection} seeded with {len(ids)} documents")
                self._completed.add(collection)
            except ContentError:
                logger.exception(f"Error seeding {collection} collection")

    async def ensure_document(self, collection: str, doc_id: str) -> None:
        """Create a singleton document from its defaults if missing. Never raises."""
        key = f"{collection}/{doc_id}"
        if key in self._completed:
            return

        async with self._lock(key):
            if key in self._completed:
                return
            if self._store is None:
                logger.warning(f"Content store not configured; skipping init of {key}")
                return

            try:
                existing = await with_timeout(self._store.get(collection, doc_id), self._timeout)
                if existing is None:
                    logger.info(f"{key} not found. Creating with default values...")
                    await with_timeout(
                        self._store.set(collection, doc_id, self.singleton_defaults(collection, doc_id)),
                        self._timeout,
                    )
                self._completed.add(key)
            except ContentError:
                logger.exception(f"Error initializing {key}")

    async def seed_all(self) -> list[str]:
        """Seed every known collection and singleton; return the keys now seeded."""
        for collection in self._baselines:
            await self.ensure_seeded(collection)
        for collection, doc_id in self._singletons:
            await self.ensure_document(collection, doc_id)
        return sorted(self._completed)
