"""Testimonials repository.

Customer submissions arrive as pending. The only transition is an explicit
admin action setting the status (pending <-> published); nothing expires.
"""

from __future__ import annotations

from typing import Any

from kopi_content.schemas import Testimonial, TestimonialCreate, TestimonialStatus, TestimonialUpdate
from kopi_content.services import collections
from kopi_content.services.content import (
    ContentRepository,
    parse_iso_timestamp,
    sort_by_timestamp,
    utc_now_iso,
)


class TestimonialRepository(ContentRepository[Testimonial]):
    __test__ = False  # not a pytest test class

    collection = collections.TESTIMONIALS
    entity = Testimonial
    patch = TestimonialUpdate
    ordered = True

    def _sort(self, items: list[Testimonial]) -> list[Testimonial]:
        return sort_by_timestamp(items, lambda t: parse_iso_timestamp(t.date), descending=True)

    async def add(
        self,
        data: TestimonialCreate,
        status: TestimonialStatus = TestimonialStatus.PENDING,
    ) -> Testimonial:
        doc: dict[str, Any] = data.to_document()
        doc["status"] = status.value
        doc["date"] = utc_now_iso()
        return await self._add_document(doc)

    async def list_visible(self, limit: int = 3, include_pending: bool = False) -> list[Testimonial]:
        """Newest testimonials first; `limit=0` returns all."""
        items = await self.list()
        if not include_pending:
            items = [t for t in items if t.status == TestimonialStatus.PUBLISHED]
        if limit > 0:
            items = items[:limit]
        return items

    async def set_status(self, doc_id: str, status: TestimonialStatus) -> None:
        await self.update(doc_id, {"status": status.value})
