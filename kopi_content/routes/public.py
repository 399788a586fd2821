"""Public storefront endpoints.

Read endpoints degrade to empty results when the content store is not
configured, so pages render "no content" instead of an error. Transport and
validation failures still propagate. Writes made by customers (reviews,
orders) surface every error.

Routers are thin: call repositories for all content rules.
"""

from collections.abc import Awaitable
import logging
from typing import TypeVar

from fastapi import APIRouter, HTTPException, Query, status

from kopi_content.errors import StoreUnavailable
from kopi_content.routes.deps import Content
from kopi_content.schemas import (
    BlogPost,
    Event,
    HeroData,
    MenuItems,
    Order,
    OrderCreate,
    Product,
    Testimonial,
    TestimonialCreate,
    WebsiteSettings,
)

router = APIRouter()
logger = logging.getLogger("uvicorn.error")

T = TypeVar("T")


async def _or_default(call: Awaitable[T], default: T, what: str) -> T:
    try:
        return await call
    except StoreUnavailable:
        logger.warning(f"Content store unavailable; serving empty {what}")
        return default


def _not_found(what: str, key: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found: {key}")


# ============================================================
# Catalog
# ============================================================


@router.get("/products", response_model=list[Product])
async def list_products(content: Content) -> list[Product]:
    return await _or_default(content.products.list(), [], "products")


@router.get("/products/{slug}", response_model=Product)
async def get_product(slug: str, content: Content) -> Product:
    product = await _or_default(content.products.get_by_slug(slug), None, "product")
    if product is None:
        raise _not_found("Product", slug)
    return product


@router.get("/menu", response_model=MenuItems)
async def get_menu(content: Content) -> MenuItems:
    return await _or_default(content.menu.list_grouped(), MenuItems(), "menu")


# ============================================================
# Editorial
# ============================================================


@router.get("/blog", response_model=list[BlogPost])
async def list_blog_posts(content: Content) -> list[BlogPost]:
    return await _or_default(content.blog.list(), [], "blog posts")


@router.get("/blog/{slug}", response_model=BlogPost)
async def get_blog_post(slug: str, content: Content) -> BlogPost:
    post = await _or_default(content.blog.get_by_slug(slug), None, "blog post")
    if post is None:
        raise _not_found("Blog post", slug)
    return post


@router.get("/events", response_model=list[Event])
async def list_events(content: Content) -> list[Event]:
    return await _or_default(content.events.list(), [], "events")


@router.get("/testimonials", response_model=list[Testimonial])
async def list_testimonials(
    content: Content,
    limit: int = Query(default=3, ge=0, le=100, description="Max testimonials (0 = all)"),
) -> list[Testimonial]:
    return await _or_default(content.testimonials.list_visible(limit=limit), [], "testimonials")


@router.post("/testimonials", response_model=Testimonial, status_code=status.HTTP_201_CREATED)
async def submit_testimonial(data: TestimonialCreate, content: Content) -> Testimonial:
    """Customer review; stays pending until an admin publishes it."""
    return await content.testimonials.add(data)


# ============================================================
# Site
# ============================================================


@router.get("/site/settings", response_model=WebsiteSettings)
async def get_site_settings(content: Content) -> WebsiteSettings:
    return await content.settings.get()


@router.get("/site/hero", response_model=HeroData)
async def get_hero(content: Content) -> HeroData:
    return await content.hero.get()


# ============================================================
# Orders (checkout)
# ============================================================


@router.post("/orders", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(data: OrderCreate, content: Content) -> Order:
    return await content.orders.add(data)


@router.get("/orders", response_model=list[Order])
async def list_orders(
    content: Content,
    user_id: str = Query(alias="userId", min_length=1),
) -> list[Order]:
    return await _or_default(content.orders.list_for_user(user_id), [], "orders")
