"""Document store adapter interface.

A document store is addressed by collection name and holds schema-less JSON
documents under opaque string IDs. Implementations must:
- raise DocumentNotFound from update() when the ID is missing
- treat delete() of a missing ID as a no-op
- apply batch_set() atomically (all documents or none)
- wrap backend failures in TransportError
"""

from abc import ABC, abstractmethod
import asyncio
from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from kopi_content.errors import TransportError

T = TypeVar("T")


async def with_timeout(call: Awaitable[T], timeout: float | None) -> T:
    """Await a store call, failing with TransportError once `timeout` seconds pass."""
    if timeout is None:
        return await call
    try:
        return await asyncio.wait_for(call, timeout=timeout)
    except asyncio.TimeoutError as exc:
        raise TransportError(f"Store call timed out after {timeout:g}s") from exc


@dataclass(frozen=True)
class StoredDocument:
    """A raw document as returned by a store."""

    id: str
    data: dict[str, Any]


class DocumentStore(ABC):
    """Minimal async document store used by the content repositories."""

    @abstractmethod
    async def get_all(self, collection: str) -> list[StoredDocument]:
        """Return every document in the collection, in insertion order."""

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        """Return a document by ID, or None."""

    @abstractmethod
    async def find(
        self,
        collection: str,
        field: str,
        value: Any,
        *,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """Return documents whose `field` equals `value`."""

    @abstractmethod
    async def has_documents(self, collection: str) -> bool:
        """Return True if the collection holds at least one document."""

    @abstractmethod
    async def add(self, collection: str, data: dict[str, Any]) -> str:
        """Insert a document under a new store-assigned ID and return the ID."""

    @abstractmethod
    async def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Create or replace a document under a caller-chosen ID."""

    @abstractmethod
    async def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> None:
        """Merge `changes` into an existing document."""

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Remove a document."""

    @abstractmethod
    async def batch_set(self, collection: str, documents: Sequence[dict[str, Any]]) -> list[str]:
        """Insert several documents atomically and return their new IDs."""

    async def close(self) -> None:
        """Release backend resources."""
        return None
