"""Admin endpoints for content management.

Every failure surfaces to the dashboard as a structured error (see the
ContentError handler in main.py): 503 when no store is configured, 404 for
unknown IDs on update, 502 when the store rejects the call.
In production, put these behind authentication (handled outside this service).
"""

import logging
from typing import TypeVar

from fastapi import APIRouter, HTTPException, Query, status

from kopi_content.errors import StoreUnavailable
from kopi_content.routes.deps import Content
from kopi_content.schemas import (
    BlogPost,
    BlogPostCreate,
    BlogPostUpdate,
    Event,
    EventCreate,
    EventUpdate,
    HeroData,
    HeroDataUpdate,
    MenuItem,
    MenuItemCreate,
    MenuItemUpdate,
    Order,
    OrderStatusUpdate,
    Product,
    ProductCreate,
    ProductUpdate,
    Testimonial,
    TestimonialCreate,
    TestimonialStatus,
    TestimonialUpdate,
    WebsiteSettings,
    WebsiteSettingsUpdate,
)
from kopi_content.schemas.common import DocumentModel

EntityT = TypeVar("EntityT", bound=DocumentModel)

router = APIRouter()
logger = logging.getLogger("uvicorn.error")


def _found(entity: EntityT | None, what: str, doc_id: str) -> EntityT:
    # The document vanished between the update and the re-read (concurrent delete).
    if entity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{what} not found: {doc_id}")
    return entity


# ============================================================
# Products
# ============================================================


@router.post("/products", response_model=Product, status_code=status.HTTP_201_CREATED)
async def create_product(data: ProductCreate, content: Content) -> Product:
    product = await content.products.add(data)
    logger.info(f"[admin] product created id={product.id} slug={product.slug}")
    return product


@router.patch("/products/{product_id}", response_model=Product)
async def update_product(product_id: str, data: ProductUpdate, content: Content) -> Product:
    await content.products.update(product_id, data)
    return _found(await content.products.get(product_id), "Product", product_id)


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: str, content: Content) -> None:
    await content.products.delete(product_id)


# ============================================================
# Blog
# ============================================================


@router.post("/blog", response_model=BlogPost, status_code=status.HTTP_201_CREATED)
async def create_blog_post(
    data: BlogPostCreate,
    content: Content,
    author: str = Query(default="Sehati Kopi", min_length=1, description="Display name of the author"),
) -> BlogPost:
    post = await content.blog.add(data, author=author)
    logger.info(f"[admin] blog post created id={post.id} slug={post.slug}")
    return post


@router.patch("/blog/{post_id}", response_model=BlogPost)
async def update_blog_post(post_id: str, data: BlogPostUpdate, content: Content) -> BlogPost:
    await content.blog.update(post_id, data)
    return _found(await content.blog.get(post_id), "Blog post", post_id)


@router.delete("/blog/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(post_id: str, content: Content) -> None:
    await content.blog.delete(post_id)


# ============================================================
# Events
# ============================================================


@router.post("/events", response_model=Event, status_code=status.HTTP_201_CREATED)
async def create_event(data: EventCreate, content: Content) -> Event:
    return await content.events.add(data)


@router.patch("/events/{event_id}", response_model=Event)
async def update_event(event_id: str, data: EventUpdate, content: Content) -> Event:
    await content.events.update(event_id, data)
    return _found(await content.events.get(event_id), "Event", event_id)


@router.delete("/events/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(event_id: str, content: Content) -> None:
    await content.events.delete(event_id)


# ============================================================
# Testimonials
# ============================================================


@router.get("/testimonials", response_model=list[Testimonial])
async def list_all_testimonials(content: Content) -> list[Testimonial]:
    """Every testimonial, pending included, newest first."""
    return await content.testimonials.list_visible(limit=0, include_pending=True)


@router.post("/testimonials", response_model=Testimonial, status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    data: TestimonialCreate,
    content: Content,
    testimonial_status: TestimonialStatus = Query(default=TestimonialStatus.PUBLISHED, alias="status"),
) -> Testimonial:
    return await content.testimonials.add(data, status=testimonial_status)


@router.patch("/testimonials/{testimonial_id}", response_model=Testimonial)
async def update_testimonial(testimonial_id: str, data: TestimonialUpdate, content: Content) -> Testimonial:
    await content.testimonials.update(testimonial_id, data)
    return _found(await content.testimonials.get(testimonial_id), "Testimonial", testimonial_id)


@router.patch("/testimonials/{testimonial_id}/status", response_model=Testimonial)
async def set_testimonial_status(
    testimonial_id: str,
    content: Content,
    testimonial_status: TestimonialStatus = Query(alias="status"),
) -> Testimonial:
    await content.testimonials.set_status(testimonial_id, testimonial_status)
    logger.info(f"[admin] testimonial {testimonial_id} -> {testimonial_status.value}")
    return _found(await content.testimonials.get(testimonial_id), "Testimonial", testimonial_id)


@router.delete("/testimonials/{testimonial_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_testimonial(testimonial_id: str, content: Content) -> None:
    await content.testimonials.delete(testimonial_id)


# ============================================================
# Menu
# ============================================================


@router.post("/menu", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
async def create_menu_item(data: MenuItemCreate, content: Content) -> MenuItem:
    return await content.menu.add(data)


@router.patch("/menu/{item_id}", response_model=MenuItem)
async def update_menu_item(item_id: str, data: MenuItemUpdate, content: Content) -> MenuItem:
    await content.menu.update(item_id, data)
    return _found(await content.menu.get(item_id), "Menu item", item_id)


@router.delete("/menu/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_menu_item(item_id: str, content: Content) -> None:
    await content.menu.delete(item_id)


# ============================================================
# Orders
# ============================================================


@router.patch("/orders/{order_id}/status", response_model=Order)
async def update_order_status(order_id: str, data: OrderStatusUpdate, content: Content) -> Order:
    await content.orders.update_status(order_id, data.status)
    return _found(await content.orders.get(order_id), "Order", order_id)


# ============================================================
# Site settings
# ============================================================


@router.put("/site/settings", response_model=WebsiteSettings)
async def update_site_settings(data: WebsiteSettingsUpdate, content: Content) -> WebsiteSettings:
    await content.settings.update(data)
    return await content.settings.get()


@router.put("/site/hero", response_model=HeroData)
async def update_hero(data: HeroDataUpdate, content: Content) -> HeroData:
    await content.hero.update(data)
    return await content.hero.get()


@router.post("/seed")
async def seed_content(content: Content) -> dict[str, list[str]]:
    """Seed every empty collection and missing singleton now."""
    if content.store is None:
        raise StoreUnavailable()
    seeded = await content.seeder.seed_all()
    return {"seeded": seeded}
