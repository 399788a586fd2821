"""Product catalog repository."""

from __future__ import annotations

from typing import Any

from kopi_content.schemas import Product, ProductCreate, ProductUpdate
from kopi_content.services import collections
from kopi_content.services.content import ContentRepository


class ProductRepository(ContentRepository[Product]):
    collection = collections.PRODUCTS
    entity = Product
    patch = ProductUpdate
    slug_source = "name"

    async def add(self, data: ProductCreate) -> Product:
        """Create a product with a derived slug; new products start unrated."""
        doc: dict[str, Any] = data.to_document()
        doc["slug"] = await self._slug_for(data.name)
        doc["rating"] = 0.0
        doc["reviews"] = 0
        return await self._add_document(doc)

    async def get_by_slug(self, slug: str) -> Product | None:
        return await self.get_by_field("slug", slug)
