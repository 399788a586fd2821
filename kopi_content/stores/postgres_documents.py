"""PostgreSQL-backed document store.

Documents live in the content_documents table (see models.document) as JSONB.
Each store call runs in its own session/transaction; SQLAlchemy and socket
errors surface as TransportError and are never retried here.
"""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import Delete, Select, delete, func, select, text, type_coerce
from sqlalchemy.dialects.postgresql import JSONB, insert as pg_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from kopi_content.errors import DocumentNotFound, TransportError
from kopi_content.models import ContentDocument
from kopi_content.settings import Settings
from kopi_content.stores.base import DocumentStore, StoredDocument
from kopi_content.stores.memory import new_document_id
from kopi_content.stores.postgres import create_engine


def _to_stored(row: ContentDocument) -> StoredDocument:
    return StoredDocument(id=row.doc_id, data=dict(row.data or {}))


def find_statement(collection: str, field: str, value: Any, limit: int | None = None) -> Select:
    """Documents whose top-level `field` equals `value`, in insertion order.

    Scalars use JSONB containment (data @> {"field": value}) so the GIN index
    applies. Containment would also match supersets of a list or object, so
    those compare the extracted value for exact JSONB equality instead.
    """
    if isinstance(value, (list, dict)):
        condition = ContentDocument.data[field] == type_coerce(value, JSONB)
    else:
        condition = ContentDocument.data.contains({field: value})
    query = (
        select(ContentDocument)
        .where(ContentDocument.collection == collection, condition)
        .order_by(ContentDocument.id)
    )
    if limit is not None:
        query = query.limit(limit)
    return query


def update_statement(collection: str, doc_id: str) -> Select:
    """Row lock on the document about to be merged."""
    return (
        select(ContentDocument)
        .where(
            ContentDocument.collection == collection,
            ContentDocument.doc_id == doc_id,
        )
        .with_for_update()
    )


def delete_statement(collection: str, doc_id: str) -> Delete:
    return delete(ContentDocument).where(
        ContentDocument.collection == collection,
        ContentDocument.doc_id == doc_id,
    )


class PostgresDocumentStore(DocumentStore):
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PostgresDocumentStore":
        return cls(create_engine(settings))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that commits on success and maps driver failures to TransportError."""
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except (SQLAlchemyError, OSError) as exc:
                await session.rollback()
                raise TransportError(f"Postgres call failed: {exc}") from exc
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> None:
        async with self._session() as session:
            await session.execute(text("SELECT 1"))

    async def get_all(self, collection: str) -> list[StoredDocument]:
        async with self._session() as session:
            result = await session.execute(
                select(ContentDocument)
                .where(ContentDocument.collection == collection)
                .order_by(ContentDocument.id)
            )
            return [_to_stored(row) for row in result.scalars()]

    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        async with self._session() as session:
            result = await session.execute(
                select(ContentDocument).where(
                    ContentDocument.collection == collection,
                    ContentDocument.doc_id == doc_id,
                )
            )
            row = result.scalar_one_or_none()
            return _to_stored(row) if row is not None else None

    async def find(
        self,
        collection: str,
        field: str,
        value: Any,
        *,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        async with self._session() as session:
            result = await session.execute(find_statement(collection, field, value, limit))
            return [_to_stored(row) for row in result.scalars()]

    async def has_documents(self, collection: str) -> bool:
        async with self._session() as session:
            result = await session.execute(
                select(ContentDocument.id)
                .where(ContentDocument.collection == collection)
                .limit(1)
            )
            return result.scalar_one_or_none() is not None

    async def add(self, collection: str, data: dict[str, Any]) -> str:
        doc_id = new_document_id()
        async with self._session() as session:
            session.add(ContentDocument(collection=collection, doc_id=doc_id, data=data))
        return doc_id

    async def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        stmt = pg_insert(ContentDocument).values(collection=collection, doc_id=doc_id, data=data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[ContentDocument.collection, ContentDocument.doc_id],
            set_={"data": stmt.excluded.data, "updated_at": func.now()},
        )
        async with self._session() as session:
            await session.execute(stmt)

    async def update(self, collection: str, doc_id: str, changes: dict[str, Any]) -> None:
        async with self._session() as session:
            result = await session.execute(update_statement(collection, doc_id))
            row = result.scalar_one_or_none()
            if row is None:
                raise DocumentNotFound(collection, doc_id)
            # Reassign (not mutate) so SQLAlchemy detects the JSONB change.
            row.data = {**(row.data or {}), **changes}

    async def delete(self, collection: str, doc_id: str) -> None:
        async with self._session() as session:
            await session.execute(delete_statement(collection, doc_id))

    async def batch_set(self, collection: str, documents: Sequence[dict[str, Any]]) -> list[str]:
        rows = [
            ContentDocument(collection=collection, doc_id=new_document_id(), data=data)
            for data in documents
        ]
        # Single transaction: all rows commit together or none do.
        async with self._session() as session:
            session.add_all(rows)
        return [row.doc_id for row in rows]

    async def close(self) -> None:
        await self._engine.dispose()
