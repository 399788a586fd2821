"""Content document model.

One row per document of any collection (products, blog, events, ...).
The document body is schema-less JSONB; typed validation happens in the
repositories at the store boundary.

Example: collection="products", doc_id="3f2a...", data={"name": "Aceh Gayo", ...}
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Index, String, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from kopi_content.stores.postgres import Base


class ContentDocument(Base):
    """A stored document addressed by (collection, doc_id)."""

    __tablename__ = "content_documents"
    __table_args__ = (
        UniqueConstraint("collection", "doc_id", name="uq_content_documents_collection_doc_id"),
        # Supports containment queries (data @> {"slug": "..."}) used for field lookups.
        Index("ix_content_documents_data", "data", postgresql_using="gin"),
    )

    # Surrogate key; also gives a stable insertion order for full reads.
    id: Mapped[int] = mapped_column(primary_key=True)

    collection: Mapped[str] = mapped_column(String(100), index=True)
    doc_id: Mapped[str] = mapped_column(String(64))

    data: Mapped[dict[str, Any]] = mapped_column(JSONB, default=dict)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    def __repr__(self) -> str:
        return f"<ContentDocument {self.collection}/{self.doc_id}>"
