"""Content repositories: seeding + store + read cache + slug derivation.

A repository owns one collection (or one singleton document) and composes:
- Seeder: the collection is seeded before the first store query in this process
- DocumentStore: every call bounded by the store timeout
- ReadCache: full-collection reads cached for a short TTL, invalidated by writes
- Slug/excerpt derivation on add/update

Reads validate stored documents into typed records at the store boundary.
Writes invalidate the cache only after the store accepted them, and always
before returning, so a following list() in this process sees the write.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime, timezone
import logging
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import ValidationError

from kopi_content.errors import InvalidChanges, MalformedDocument, StoreUnavailable
from kopi_content.schemas.common import DocumentModel, PatchModel
from kopi_content.services.seeding import Seeder
from kopi_content.services.slugs import derive_slug, unique_slug
from kopi_content.stores.base import DocumentStore, StoredDocument, with_timeout
from kopi_content.stores.cache import ReadCache

logger = logging.getLogger("uvicorn.error")

EntityT = TypeVar("EntityT", bound=DocumentModel)
T = TypeVar("T")


def parse_iso_timestamp(value: str | None) -> float | None:
    """Parse an ISO-8601 string to a POSIX timestamp; None if missing or invalid."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def sort_by_timestamp(
    items: list[T],
    timestamp_of: Callable[[T], float | None],
    *,
    descending: bool,
) -> list[T]:
    """Stable sort by timestamp. Items without a usable timestamp rank equal, after the rest."""

    def key(item: T) -> tuple[int, float]:
        ts = timestamp_of(item)
        if ts is None:
            return (1, 0.0)
        return (0, -ts if descending else ts)

    return sorted(items, key=key)


class _Repository(Generic[EntityT]):
    collection: ClassVar[str]
    entity: ClassVar[type[DocumentModel]]
    # Partial-update payload; raw mappings passed to update() are validated with it.
    patch: ClassVar[type[PatchModel]]

    def __init__(
        self,
        store: DocumentStore | None,
        cache: ReadCache,
        seeder: Seeder,
        *,
        ttl: float = 1.0,
        timeout: float | None = None,
    ) -> None:
        self._store = store
        self._cache = cache
        self._seeder = seeder
        self._ttl = ttl
        self._timeout = timeout
        # Bumped on every write; a read that raced a write must not repopulate the cache.
        self._generation = 0

    @property
    def cache_key(self) -> str:
        return self.collection

    def _require_store(self) -> DocumentStore:
        if self._store is None:
            raise StoreUnavailable(f"Content store is not configured; cannot access {self.collection}")
        return self._store

    async def _call(self, call: Awaitable[T]) -> T:
        return await with_timeout(call, self._timeout)

    def _validate(self, doc: StoredDocument) -> EntityT:
        try:
            return self.entity.model_validate({**doc.data, "id": doc.id})  # type: ignore[return-value]
        except ValidationError as exc:
            raise MalformedDocument(self.collection, doc.id, str(exc)) from exc

    def _from_cache(self, payload: dict[str, Any]) -> EntityT:
        return self.entity.model_validate(payload)  # type: ignore[return-value]

    @staticmethod
    def _to_cache(entity: DocumentModel) -> dict[str, Any]:
        return entity.model_dump(mode="json", by_alias=True)

    def _stored_field(self, field: str) -> str:
        """Map a Python attribute name to its stored (alias) name."""
        info = self.entity.model_fields.get(field)
        if info is not None and info.alias:
            return info.alias
        return field

    def _parse_changes(self, changes: Mapping[str, Any]) -> PatchModel:
        """Validate a raw mapping of changes with this kind's patch model."""
        known = set(self.patch.model_fields)
        known.update(info.alias for info in self.patch.model_fields.values() if info.alias)
        unknown = sorted(key for key in changes if key not in known)
        if unknown:
            raise InvalidChanges(self.collection, f"unknown fields: {', '.join(unknown)}")
        try:
            return self.patch.model_validate(dict(changes))
        except ValidationError as exc:
            raise InvalidChanges(self.collection, str(exc)) from exc

    def _normalize_changes(self, changes: PatchModel | Mapping[str, Any]) -> dict[str, Any]:
        """Stored-name changes that keep the document valid for `entity`.

        Explicit None is only accepted for fields whose stored default is None.
        """
        patch = changes if isinstance(changes, PatchModel) else self._parse_changes(changes)
        cleared = []
        for name in sorted(patch.model_fields_set):
            info = self.entity.model_fields.get(name)
            if getattr(patch, name) is None and info is not None and info.default is not None:
                # Required fields have PydanticUndefined as their default.
                cleared.append(name)
        if cleared:
            raise InvalidChanges(self.collection, f"fields cannot be null: {', '.join(cleared)}")
        return patch.to_changes()

    async def _invalidate(self) -> None:
        self._generation += 1
        await self._cache.invalidate(self.cache_key)


class ContentRepository(_Repository[EntityT]):
    """Repository for a collection of documents of one entity kind."""

    # Stored field the slug is derived from ("name", "title"); None for unslugged kinds.
    slug_source: ClassVar[str | None] = None
    cached: ClassVar[bool] = True
    # True when _sort reorders a full read; field lookups then honour that order.
    ordered: ClassVar[bool] = False

    def __init__(
        self,
        store: DocumentStore | None,
        cache: ReadCache,
        seeder: Seeder,
        *,
        ttl: float = 1.0,
        timeout: float | None = None,
        unique_slugs: bool = False,
    ) -> None:
        super().__init__(store, cache, seeder, ttl=ttl, timeout=timeout)
        self._unique_slugs = unique_slugs

    async def _ready(self) -> DocumentStore:
        store = self._require_store()
        await self._seeder.ensure_seeded(self.collection)
        return store

    def _sort(self, items: list[EntityT]) -> list[EntityT]:
        """Order a full read. Store order by default."""
        return items

    async def _cached_payloads(self) -> list[dict[str, Any]] | None:
        if not self.cached:
            return None
        return await self._cache.get(self.cache_key)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list(self) -> list[EntityT]:
        """All entities, ordered; served from cache while fresh."""
        store = await self._ready()

        cached = await self._cached_payloads()
        if cached is not None:
            return [self._from_cache(payload) for payload in cached]

        generation = self._generation
        docs = await self._call(store.get_all(self.collection))

        items: list[EntityT] = []
        for doc in docs:
            try:
                items.append(self._validate(doc))
            except MalformedDocument as exc:
                logger.warning(f"Skipping malformed document {self.collection}/{doc.id}: {exc.detail['reason']}")
        items = self._sort(items)

        if self.cached and generation == self._generation:
            await self._cache.set(self.cache_key, [self._to_cache(item) for item in items], self._ttl)
        return items

    async def get(self, doc_id: str) -> EntityT | None:
        store = await self._ready()
        doc = await self._call(store.get(self.collection, doc_id))
        if doc is None:
            return None
        return self._validate(doc)

    async def get_by_field(self, field: str, value: Any) -> EntityT | None:
        """First entity whose `field` equals `value`, or None.

        Searches the cached list when it is fresh; otherwise runs an indexed
        store query (limit 1 for store-ordered kinds, every match sorted like
        list() for ordered kinds), so warm and cold lookups agree.
        """
        store = await self._ready()
        stored_field = self._stored_field(field)

        cached = await self._cached_payloads()
        if cached is not None:
            for payload in cached:
                if payload.get(stored_field) == value:
                    return self._from_cache(payload)
            return None

        limit = None if self.ordered else 1
        docs = await self._call(store.find(self.collection, stored_field, value, limit=limit))
        if not docs:
            return None
        return self._sort([self._validate(doc) for doc in docs])[0]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def _slug_for(self, text: str, *, exclude_id: str | None = None) -> str:
        slug = derive_slug(text)
        if not self._unique_slugs:
            return slug
        taken = {getattr(item, "slug", None) for item in await self.list() if item.id != exclude_id}
        return unique_slug(slug, taken)

    async def _derive_changes(self, doc_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        """Recompute derived fields for a partial update."""
        source = changes.get(self.slug_source) if self.slug_source else None
        if isinstance(source, str) and source.strip():
            changes["slug"] = await self._slug_for(source, exclude_id=doc_id)
        return changes

    def _build(self, data: dict[str, Any], doc_id: str = "") -> EntityT:
        return self.entity.model_validate({**data, "id": doc_id})  # type: ignore[return-value]

    async def _add_document(self, data: dict[str, Any]) -> EntityT:
        """Validate and insert a full document; return it with its new ID."""
        store = await self._ready()
        entity = self._build(data)
        doc_id = await self._call(store.add(self.collection, entity.to_document()))
        await self._invalidate()
        return entity.model_copy(update={"id": doc_id})

    async def _set_document(self, doc_id: str, data: dict[str, Any]) -> EntityT:
        """Validate and write a full document under a caller-chosen ID."""
        store = await self._ready()
        entity = self._build(data, doc_id)
        await self._call(store.set(self.collection, doc_id, entity.to_document()))
        await self._invalidate()
        return entity

    async def update(self, doc_id: str, changes: PatchModel | Mapping[str, Any]) -> None:
        """Merge `changes` into the document; raises DocumentNotFound for unknown IDs."""
        store = await self._ready()
        data = await self._derive_changes(doc_id, self._normalize_changes(changes))
        await self._call(store.update(self.collection, doc_id, data))
        await self._invalidate()

    async def delete(self, doc_id: str) -> None:
        """Remove the document. Deleting an unknown ID is a silent no-op."""
        store = await self._ready()
        await self._call(store.delete(self.collection, doc_id))
        await self._invalidate()


class SingletonRepository(_Repository[EntityT]):
    """Repository for one well-known document (site settings, homepage hero)."""

    doc_id: ClassVar[str]

    @property
    def cache_key(self) -> str:
        return f"{self.collection}/{self.doc_id}"

    def defaults(self) -> EntityT:
        data = self._seeder.singleton_defaults(self.collection, self.doc_id)
        return self.entity.model_validate({**data, "id": self.doc_id})  # type: ignore[return-value]

    async def get(self) -> EntityT:
        """The stored document; defaults when no store is configured or it is still missing."""
        if self._store is None:
            logger.error(f"Content store not configured. Returning default {self.cache_key}.")
            return self.defaults()

        await self._seeder.ensure_document(self.collection, self.doc_id)

        cached = await self._cache.get(self.cache_key)
        if cached is not None:
            return self._from_cache(cached)

        generation = self._generation
        doc = await self._call(self._store.get(self.collection, self.doc_id))
        if doc is None:
            # Initialization failed (logged by the seeder); do not cache the fallback.
            return self.defaults()

        entity = self._validate(doc)
        if generation == self._generation:
            await self._cache.set(self.cache_key, self._to_cache(entity), self._ttl)
        return entity

    async def update(self, changes: PatchModel | Mapping[str, Any]) -> None:
        store = self._require_store()
        await self._seeder.ensure_document(self.collection, self.doc_id)
        await self._call(store.update(self.collection, self.doc_id, self._normalize_changes(changes)))
        await self._invalidate()
