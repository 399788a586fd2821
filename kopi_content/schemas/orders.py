"""Schemas for checkout orders.

The order ID doubles as the document ID, so `id` and `order_id` are equal.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from kopi_content.schemas.common import DocumentModel, InputModel, PatchModel


class OrderStatus(str, Enum):
    PENDING = "Pending"
    SHIPPED = "Shipped"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"


class OrderItem(BaseModel):
    """A cart line captured at checkout."""

    model_config = ConfigDict(populate_by_name=True)

    slug: str
    name: str
    price: int = Field(ge=0)
    quantity: int = Field(ge=1)
    image: str = ""


class Order(DocumentModel):
    order_id: str = Field(alias="orderId")
    user_id: str = Field(alias="userId")
    order_date: str = Field(alias="orderDate")  # ISO 8601
    items: list[OrderItem]
    subtotal: int = Field(ge=0)
    shipping: int = Field(ge=0)
    total: int = Field(ge=0)
    status: OrderStatus = OrderStatus.PENDING


class OrderCreate(InputModel):
    order_id: str = Field(alias="orderId", min_length=1)
    user_id: str = Field(alias="userId", min_length=1)
    order_date: str | None = Field(alias="orderDate", default=None)
    items: list[OrderItem] = Field(min_length=1)
    subtotal: int = Field(ge=0)
    shipping: int = Field(default=0, ge=0)
    total: int = Field(ge=0)
    status: OrderStatus = OrderStatus.PENDING


class OrderStatusUpdate(PatchModel):
    status: OrderStatus
