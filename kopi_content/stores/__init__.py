"""Data stores for persistence and caching.

Stores handle:
- Document stores: PostgreSQL (JSONB documents) and in-memory, behind DocumentStore
- Read caches: process-local TTL cache and Redis-backed shared cache

No business logic in stores (slugs, seeding, ordering) - that belongs in services.
"""

from kopi_content.stores.base import DocumentStore, StoredDocument
from kopi_content.stores.cache import MemoryReadCache, ReadCache
from kopi_content.stores.memory import InMemoryDocumentStore

__all__ = [
    "DocumentStore",
    "StoredDocument",
    "ReadCache",
    "MemoryReadCache",
    "InMemoryDocumentStore",
]
