"""Checkout orders repository.

Orders are keyed by their order ID, read per user, and never cached: every
read goes to the store. There is no baseline to seed.
"""

from __future__ import annotations

from typing import Any

from kopi_content.schemas import Order, OrderCreate, OrderStatus, OrderStatusUpdate
from kopi_content.services import collections
from kopi_content.services.content import (
    ContentRepository,
    parse_iso_timestamp,
    sort_by_timestamp,
    utc_now_iso,
)


class OrderRepository(ContentRepository[Order]):
    collection = collections.ORDERS
    entity = Order
    patch = OrderStatusUpdate
    cached = False

    async def add(self, data: OrderCreate) -> Order:
        doc: dict[str, Any] = data.to_document()
        if not doc.get("orderDate"):
            doc["orderDate"] = utc_now_iso()
        return await self._set_document(data.order_id, doc)

    async def list_for_user(self, user_id: str) -> list[Order]:
        """A user's orders, newest first."""
        store = await self._ready()
        docs = await self._call(store.find(self.collection, "userId", user_id))
        orders = [self._validate(doc) for doc in docs]
        return sort_by_timestamp(orders, lambda o: parse_iso_timestamp(o.order_date), descending=True)

    async def update_status(self, order_id: str, status: OrderStatus) -> None:
        await self.update(order_id, {"status": status.value})
