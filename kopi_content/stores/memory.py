"""In-memory document store.

Used for local development (CONTENT_STORE=memory) and tests. Documents are
deep-copied on the way in and out so callers never share state with the store.
"""

import copy
from collections.abc import Sequence
from typing import Any
from uuid import uuid4

from kopi_content.errors import DocumentNotFound
from kopi_content.stores.base import DocumentStore, StoredDocument


def new_document_id() -> str:
    """Generate an opaque 20-character document ID."""
    return uuid4().hex[:20]


class InMemoryDocumentStore(DocumentStore):
    def __init__(self) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(name, {})

    async def get_all(self, collection: str) -> list[StoredDocument]:
        return [
            StoredDocument(id=doc_id, data=copy.deepcopy(data))
            for doc_id, data in self._collection(collection).items()
        ]

    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        data = self._collection(collection).get(doc_id)
        if data is None:
            return None
        return StoredDocument(id=doc_id, data=copy.deepcopy(data))

    async def find(
        self,
        collection: str,
        field: str,
        value: Any,
        *,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        matches: list[StoredDocument] = []
        for doc_id, data in self._collection(collection).items():
            if field in data and data[field] == value:
                matches.append(StoredDocument(id=doc_id, data=copy.deepcopy(data)))
                if limit is not None and len(matches) >= limit:
                    break
        return matches

    async def has_documents(self, collection: str) -> bool:
        return bool(self._collection(collection))

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        doc_id = new_document_id()
        self._collection(collection)[doc_id] = copy.deepcopy(data)
        return doc_id

    async def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self._collection(collection)[doc_id] = copy.deepcopy(data)

    async def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> None:
        docs = self._collection(collection)
        if doc_id not in docs:
            raise DocumentNotFound(collection, doc_id)
        docs[doc_id].update(copy.deepcopy(changes))

    async def delete(self, collection: str, doc_id: str) -> None:
        self._collection(collection).pop(doc_id, None)

    async def batch_set(self, collection: str, documents: Sequence[dict[str, Any]]) -> list[str]:
        staged = {new_document_id(): copy.deepcopy(data) for data in documents}
        self._collection(collection).update(staged)
        return list(staged)
