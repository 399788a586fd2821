"""Error taxonomy for the content data-access layer.

- StoreUnavailable: no document store configured (fatal for the call, degrade on public reads)
- DocumentNotFound: update targeted an ID the store does not hold
- TransportError: the store was reachable but rejected or timed out the call
- MalformedDocument: stored data failed validation at the store boundary
- InvalidChanges: an update payload would leave the document invalid

Routine "no such slug/id" lookups are not errors; repositories return None.
"""

from typing import Any


class ContentError(Exception):
    """Base class for content layer failures.

    Attributes:
        code: Stable machine-readable error code.
        status_code: HTTP status used when the error reaches the API surface.
        detail: Extra context for logs and error payloads.
    """

    code = "CONTENT_ERROR"
    status_code = 500

    def __init__(self, message: str, detail: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class StoreUnavailable(ContentError):
    code = "STORE_UNAVAILABLE"
    status_code = 503

    def __init__(self, message: str = "Content store is not configured"):
        super().__init__(message)


class DocumentNotFound(ContentError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, collection: str, doc_id: str):
        super().__init__(
            f"Document {doc_id!r} not found in {collection!r}",
            detail={"collection": collection, "id": doc_id},
        )
        self.collection = collection
        self.doc_id = doc_id


class TransportError(ContentError):
    code = "STORE_ERROR"
    status_code = 502


class MalformedDocument(ContentError):
    code = "MALFORMED_DOCUMENT"
    status_code = 500

    def __init__(self, collection: str, doc_id: str, reason: str):
        super().__init__(
            f"Stored document {doc_id!r} in {collection!r} is malformed",
            detail={"collection": collection, "id": doc_id, "reason": reason},
        )
        self.collection = collection
        self.doc_id = doc_id


class InvalidChanges(ContentError):
    code = "INVALID_CHANGES"
    status_code = 422

    def __init__(self, collection: str, reason: str):
        super().__init__(
            f"Invalid changes for {collection!r}",
            detail={"collection": collection, "reason": reason},
        )
        self.collection = collection
