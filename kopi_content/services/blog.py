"""Blog post repository.

Slug follows the title and the excerpt follows the content; both are
recomputed on update only when their source field changes. Posts are listed
newest first.
"""

from __future__ import annotations

from typing import Any

from kopi_content.schemas import BlogPost, BlogPostCreate, BlogPostUpdate
from kopi_content.services import collections
from kopi_content.services.content import (
    ContentRepository,
    parse_iso_timestamp,
    sort_by_timestamp,
    utc_now_iso,
)
from kopi_content.services.slugs import DEFAULT_EXCERPT_LENGTH, make_excerpt


class BlogPostRepository(ContentRepository[BlogPost]):
    collection = collections.BLOG
    entity = BlogPost
    patch = BlogPostUpdate
    ordered = True
    slug_source = "title"

    def __init__(self, *args: Any, excerpt_length: int = DEFAULT_EXCERPT_LENGTH, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._excerpt_length = excerpt_length

    def _sort(self, items: list[BlogPost]) -> list[BlogPost]:
        return sort_by_timestamp(items, lambda post: parse_iso_timestamp(post.date), descending=True)

    async def _derive_changes(self, doc_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        changes = await super()._derive_changes(doc_id, changes)
        if "content" in changes:
            changes["excerpt"] = make_excerpt(str(changes["content"]), self._excerpt_length)
        return changes

    async def add(self, data: BlogPostCreate, author: str) -> BlogPost:
        doc: dict[str, Any] = data.to_document()
        doc["slug"] = await self._slug_for(data.title)
        doc["excerpt"] = make_excerpt(data.content, self._excerpt_length)
        doc["author"] = author
        doc["date"] = utc_now_iso()
        return await self._add_document(doc)

    async def get_by_slug(self, slug: str) -> BlogPost | None:
        return await self.get_by_field("slug", slug)
