"""Common schemas used across the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Structured error detail."""

    code: str
    message: str
    detail: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format.

    Format: { "error": { "code": str, "message": str, "detail": object } }
    """

    error: ErrorDetail


class DocumentModel(BaseModel):
    """A typed record stored as a document.

    Stored field names are the camelCase aliases; `id` is the store-assigned
    document ID and is never written into the document body.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude={"id"})


class InputModel(BaseModel):
    """Request payload for creating a document."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class PatchModel(BaseModel):
    """Partial update payload: only fields the caller set are written."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True, exclude_none=True)
