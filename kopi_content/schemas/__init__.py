"""Pydantic schemas for stored documents and API request/response validation."""

from kopi_content.schemas.catalog import (
    MenuCategory,
    MenuItem,
    MenuItemCreate,
    MenuItems,
    MenuItemUpdate,
    Product,
    ProductCreate,
    ProductUpdate,
)
from kopi_content.schemas.common import ErrorDetail, ErrorResponse
from kopi_content.schemas.editorial import (
    BlogCategory,
    BlogPost,
    BlogPostCreate,
    BlogPostUpdate,
    Event,
    EventCreate,
    EventUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialStatus,
    TestimonialUpdate,
)
from kopi_content.schemas.orders import Order, OrderCreate, OrderItem, OrderStatus, OrderStatusUpdate
from kopi_content.schemas.site import HeroData, HeroDataUpdate, WebsiteSettings, WebsiteSettingsUpdate

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "MenuCategory",
    "MenuItem",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItems",
    "BlogCategory",
    "BlogPost",
    "BlogPostCreate",
    "BlogPostUpdate",
    "Event",
    "EventCreate",
    "EventUpdate",
    "Testimonial",
    "TestimonialCreate",
    "TestimonialStatus",
    "TestimonialUpdate",
    "Order",
    "OrderCreate",
    "OrderItem",
    "OrderStatus",
    "OrderStatusUpdate",
    "HeroData",
    "HeroDataUpdate",
    "WebsiteSettings",
    "WebsiteSettingsUpdate",
]
