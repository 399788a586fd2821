"""Tests for content repositories (seeding + store + read cache + derivation)."""

import asyncio

import pytest

from kopi_content import schemas
from kopi_content.errors import (
    DocumentNotFound,
    InvalidChanges,
    MalformedDocument,
    StoreUnavailable,
    TransportError,
)
from kopi_content.services import collections
from kopi_content.services.seed_data import DEFAULT_HERO, DEFAULT_SETTINGS, PRODUCTS
from kopi_content.services.slugs import make_excerpt


def _product(name: str = "Papua Wamena", **overrides) -> schemas.ProductCreate:
    data = {
        "name": name,
        "origin": "Wamena, Papua",
        "description": "Grown in the Baliem Valley.",
        "price": 160000,
        "image": "https://placehold.co/800x800.png",
        "roast": "Medium",
        "tags": "Fruity, Chocolate",
    }
    data.update(overrides)
    return schemas.ProductCreate(**data)


def _order(order_id: str, user_id: str = "user-1", **overrides) -> schemas.OrderCreate:
    data = {
        "orderId": order_id,
        "userId": user_id,
        "items": [{"slug": "aceh-gayo", "name": "Aceh Gayo", "price": 150000, "quantity": 2}],
        "subtotal": 300000,
        "shipping": 20000,
        "total": 320000,
    }
    data.update(overrides)
    return schemas.OrderCreate(**data)


# ============================================================
# Read cache behaviour
# ============================================================


@pytest.mark.asyncio
async def test_list_within_ttl_hits_store_once(services, store):
    first = await services.products.list()
    second = await services.products.list()

    assert store.calls["get_all"] == 1
    assert [p.model_dump() for p in first] == [p.model_dump() for p in second]
    assert len(first) == len(PRODUCTS)


@pytest.mark.asyncio
async def test_list_after_ttl_reads_store_again(make_services, store):
    services = make_services(collection_cache_ttl_seconds=0.05)
    await services.products.list()
    await asyncio.sleep(0.1)
    await services.products.list()

    assert store.calls["get_all"] == 2


@pytest.mark.asyncio
async def test_update_then_list_is_fresh_within_ttl(services, store):
    products = await services.products.list()
    target = products[0]

    await services.products.update(target.id, schemas.ProductUpdate(price=1))
    refreshed = {p.id: p for p in await services.products.list()}

    assert refreshed[target.id].price == 1
    assert store.calls["get_all"] == 2


@pytest.mark.asyncio
async def test_read_racing_a_write_does_not_repopulate_cache(services, store, cache):
    products = await services.products.list()
    target = products[0]
    await cache.clear()

    store.after_get_all = lambda: services.products.update(target.id, {"price": 1})
    await services.products.list()

    refreshed = {p.id: p for p in await services.products.list()}
    assert refreshed[target.id].price == 1
    assert store.calls["get_all"] == 3


@pytest.mark.asyncio
async def test_get_by_field_uses_warm_cache(services, store):
    await services.products.list()

    product = await services.products.get_by_slug("bali-kintamani")

    assert product is not None
    assert product.name == "Bali Kintamani"
    assert store.calls["find"] == 0


@pytest.mark.asyncio
async def test_get_by_field_queries_store_when_cold(services, store):
    product = await services.products.get_by_slug("toraja-kalosi")

    assert product is not None
    assert product.name == "Toraja Kalosi"
    assert store.calls["find"] == 1
    assert store.calls["get_all"] == 0


@pytest.mark.asyncio
async def test_get_by_field_missing_returns_none(services):
    assert await services.products.get_by_slug("no-such-coffee") is None
    assert await services.products.get("no-such-id") is None


# ============================================================
# Products
# ============================================================


@pytest.mark.asyncio
async def test_add_product_derives_slug_and_is_fetchable(blank_services):
    product = await blank_services.products.add(_product("Papua Wamena"))

    assert product.slug == "papua-wamena"
    assert product.id
    assert product.rating == 0.0
    assert product.review_count == 0
    assert product.tags == ["Fruity", "Chocolate"]

    fetched = await blank_services.products.get_by_slug("papua-wamena")
    assert fetched is not None
    assert fetched.model_dump() == product.model_dump()


@pytest.mark.asyncio
async def test_deleted_product_no_longer_found_by_slug(services):
    await services.products.list()
    product = await services.products.get_by_slug("flores-bajawa")
    assert product is not None

    await services.products.delete(product.id)

    assert await services.products.get_by_field("slug", "flores-bajawa") is None
    assert product.id not in {p.id for p in await services.products.list()}


@pytest.mark.asyncio
async def test_delete_unknown_id_is_noop(services):
    await services.products.delete("does-not-exist")
    assert len(await services.products.list()) == len(PRODUCTS)


@pytest.mark.asyncio
async def test_update_unknown_id_raises_not_found(services):
    with pytest.raises(DocumentNotFound) as exc_info:
        await services.products.update("does-not-exist", {"price": 10})
    assert exc_info.value.detail == {"collection": collections.PRODUCTS, "id": "does-not-exist"}


@pytest.mark.asyncio
async def test_rename_product_rederives_slug(services):
    product = await services.products.get_by_slug("java-preanger")

    await services.products.update(product.id, schemas.ProductUpdate(name="West Java Preanger"))

    updated = await services.products.get(product.id)
    assert updated.slug == "west-java-preanger"
    assert updated.name == "West Java Preanger"


@pytest.mark.asyncio
async def test_update_with_attribute_names_maps_to_stored_fields(services, store):
    product = await services.products.get_by_slug("aceh-gayo")

    await services.products.update(product.id, {"review_count": 42, "ai_hint": "coffee beans"})

    doc = await store.get(collections.PRODUCTS, product.id)
    assert doc.data["reviews"] == 42
    assert doc.data["aiHint"] == "coffee beans"


@pytest.mark.asyncio
async def test_update_rejects_wrongly_typed_value(services):
    product = await services.products.get_by_slug("aceh-gayo")

    with pytest.raises(InvalidChanges) as exc_info:
        await services.products.update(product.id, {"price": "free"})

    assert exc_info.value.detail["collection"] == collections.PRODUCTS
    products = await services.products.list()
    assert product.id in {p.id for p in products}
    assert (await services.products.get(product.id)).price == product.price


@pytest.mark.asyncio
async def test_update_rejects_null_for_required_field(services):
    product = await services.products.get_by_slug("aceh-gayo")

    with pytest.raises(InvalidChanges):
        await services.products.update(product.id, {"name": None})
    with pytest.raises(InvalidChanges):
        await services.products.update(product.id, schemas.ProductUpdate(name=None))

    unchanged = await services.products.get(product.id)
    assert unchanged.name == product.name
    assert unchanged.slug == "aceh-gayo"


@pytest.mark.asyncio
async def test_update_rejects_unknown_fields(services, store):
    product = await services.products.get_by_slug("aceh-gayo")

    with pytest.raises(InvalidChanges) as exc_info:
        await services.products.update(product.id, {"flavour": "nutty"})

    assert "flavour" in exc_info.value.detail["reason"]
    doc = await store.get(collections.PRODUCTS, product.id)
    assert "flavour" not in doc.data


@pytest.mark.asyncio
async def test_duplicate_names_share_slug_by_default(services):
    product = await services.products.add(_product("Aceh Gayo"))
    assert product.slug == "aceh-gayo"


@pytest.mark.asyncio
async def test_unique_slugs_option_appends_suffix(make_services):
    services = make_services(unique_slugs=True)

    second = await services.products.add(_product("Aceh Gayo"))
    third = await services.products.add(_product("Aceh Gayo"))

    assert second.slug == "aceh-gayo-2"
    assert third.slug == "aceh-gayo-3"


# ============================================================
# Blog
# ============================================================


@pytest.mark.asyncio
async def test_blog_content_update_keeps_slug_and_recomputes_excerpt(services):
    post = (await services.blog.list())[0]
    new_content = "## Fresh take\n\n" + "Grind right before you brew. " * 20

    await services.blog.update(post.id, schemas.BlogPostUpdate(content=new_content))

    updated = await services.blog.get(post.id)
    assert updated.slug == post.slug
    assert updated.excerpt == make_excerpt(new_content)
    assert updated.excerpt != post.excerpt


@pytest.mark.asyncio
async def test_blog_add_sets_derived_fields_and_lists_newest_first(services):
    data = schemas.BlogPostCreate(
        title="Why Altitude Matters",
        category=schemas.BlogCategory.COFFEE_EDUCATION,
        content="Higher farms mean slower cherry development and denser beans.",
    )

    post = await services.blog.add(data, author="Sehati Kopi")

    assert post.slug == "why-altitude-matters"
    assert post.excerpt == "Higher farms mean slower cherry development and denser beans."
    assert post.author == "Sehati Kopi"
    assert post.date

    posts = await services.blog.list()
    assert posts[0].id == post.id
    assert [p.slug for p in posts[1:]] == ["brewing-the-perfect-v60", "from-gayo-to-your-cup"]


@pytest.mark.asyncio
async def test_blog_posts_without_dates_sort_last(services, store, cache):
    await services.blog.list()
    await store.add(
        collections.BLOG,
        {
            "title": "Undated",
            "category": "News",
            "slug": "undated",
            "content": "No date yet.",
            "date": "sometime soon",
        },
    )
    await cache.clear()

    posts = await services.blog.list()

    assert posts[-1].slug == "undated"


@pytest.mark.asyncio
async def test_blog_slug_lookup_agrees_warm_and_cold(blank_services, store):
    post = {"title": "Same Title", "category": "News", "slug": "same-title", "content": "Body."}
    await store.add(collections.BLOG, {**post, "date": "2024-01-01T00:00:00+00:00"})
    newer_id = await store.add(collections.BLOG, {**post, "date": "2024-06-01T00:00:00+00:00"})

    cold = await blank_services.blog.get_by_slug("same-title")
    listed = await blank_services.blog.list()
    warm = await blank_services.blog.get_by_slug("same-title")

    assert cold.id == newer_id
    assert listed[0].id == newer_id
    assert warm.id == cold.id


# ============================================================
# Events
# ============================================================


@pytest.mark.asyncio
async def test_events_listed_soonest_first(services):
    added = await services.events.add(
        schemas.EventCreate(
            title="Harvest Talk",
            date="August 1, 2024",
            location="Sehati Kopi Roastery",
            description="Stories from the harvest.",
        )
    )

    events = await services.events.list()

    assert events[0].id == added.id
    assert [e.title for e in events[1:]] == [
        "Coffee Cupping 101",
        "Latte Art Workshop",
        "Meet the Farmer: Gayo Highlands",
    ]


# ============================================================
# Testimonials
# ============================================================


@pytest.mark.asyncio
async def test_submitted_testimonial_hidden_until_published(services):
    submitted = await services.testimonials.add(
        schemas.TestimonialCreate(name="Budi", review="Great beans!", rating=5)
    )
    assert submitted.status == schemas.TestimonialStatus.PENDING

    visible = await services.testimonials.list_visible(limit=0)
    assert submitted.id not in {t.id for t in visible}

    everything = await services.testimonials.list_visible(limit=0, include_pending=True)
    assert everything[0].id == submitted.id

    await services.testimonials.set_status(submitted.id, schemas.TestimonialStatus.PUBLISHED)

    visible = await services.testimonials.list_visible(limit=1)
    assert [t.id for t in visible] == [submitted.id]


@pytest.mark.asyncio
async def test_list_visible_respects_limit(services):
    assert len(await services.testimonials.list_visible(limit=1)) == 1
    assert len(await services.testimonials.list_visible(limit=0)) == 2


# ============================================================
# Menu
# ============================================================


@pytest.mark.asyncio
async def test_menu_grouped_by_category(services):
    menu = await services.menu.list_grouped()

    assert [item.name for item in menu.hot] == ["Espresso", "Americano", "Latte", "Cappuccino"]
    assert len(menu.cold) == 3
    assert len(menu.manual) == 3
    assert [item.name for item in menu.signature] == ["Kopi Susu Sehati", "Pandan Latte"]


# ============================================================
# Orders
# ============================================================


@pytest.mark.asyncio
async def test_orders_keyed_by_order_id_and_listed_per_user(services):
    first = await services.orders.add(_order("ORD-1", orderDate="2024-08-01T10:00:00+00:00"))
    second = await services.orders.add(_order("ORD-2", orderDate="2024-08-02T10:00:00+00:00"))
    await services.orders.add(_order("ORD-3", user_id="user-2"))

    assert first.id == "ORD-1"
    assert first.status == schemas.OrderStatus.PENDING

    mine = await services.orders.list_for_user("user-1")
    assert [o.order_id for o in mine] == [second.order_id, first.order_id]
    assert await services.orders.list_for_user("nobody") == []


@pytest.mark.asyncio
async def test_order_defaults_date_and_status_update_is_visible(services, store):
    order = await services.orders.add(_order("ORD-9"))
    assert order.order_date

    await services.orders.update_status("ORD-9", schemas.OrderStatus.SHIPPED)
    await services.orders.update_status("ORD-9", schemas.OrderStatus.DELIVERED)

    fetched = await services.orders.get("ORD-9")
    assert fetched.status == schemas.OrderStatus.DELIVERED
    # Orders bypass the read cache and have nothing to seed.
    assert store.calls["has_documents"] == 0


# ============================================================
# Singletons
# ============================================================


@pytest.mark.asyncio
async def test_settings_initialized_from_defaults(services, store):
    current = await services.settings.get()

    assert current.contact_email == DEFAULT_SETTINGS["contactEmail"]
    doc = await store.get(collections.SETTINGS, collections.SETTINGS_DOC_ID)
    assert doc is not None


@pytest.mark.asyncio
async def test_settings_update_visible_despite_long_ttl(services):
    await services.settings.get()

    await services.settings.update(schemas.WebsiteSettingsUpdate(contactPhone="+62 811 0000"))

    current = await services.settings.get()
    assert current.contact_phone == "+62 811 0000"
    assert current.contact_email == DEFAULT_SETTINGS["contactEmail"]


@pytest.mark.asyncio
async def test_hero_cached_between_reads(services, store):
    await services.hero.get()
    calls = store.calls["get"]

    hero = await services.hero.get()

    assert hero.image_url == DEFAULT_HERO["imageUrl"]
    assert store.calls["get"] == calls


# ============================================================
# Failure modes
# ============================================================


@pytest.mark.asyncio
async def test_missing_store_raises_store_unavailable(storeless_services):
    with pytest.raises(StoreUnavailable):
        await storeless_services.products.list()
    with pytest.raises(StoreUnavailable):
        await storeless_services.blog.get_by_slug("anything")
    with pytest.raises(StoreUnavailable):
        await storeless_services.events.add(
            schemas.EventCreate(title="x", date="2024-01-01", location="x", description="x")
        )


@pytest.mark.asyncio
async def test_missing_store_singletons_fall_back_to_defaults(storeless_services):
    hero = await storeless_services.hero.get()
    assert hero.title == DEFAULT_HERO["title"]

    with pytest.raises(StoreUnavailable):
        await storeless_services.hero.update({"title": "New"})


@pytest.mark.asyncio
async def test_malformed_document_skipped_in_list_but_raised_on_get(services, store, cache):
    await services.products.list()
    await store.set(collections.PRODUCTS, "broken", {"name": "No price"})
    await cache.clear()

    products = await services.products.list()

    assert len(products) == len(PRODUCTS)
    with pytest.raises(MalformedDocument) as exc_info:
        await services.products.get("broken")
    assert exc_info.value.detail["id"] == "broken"


@pytest.mark.asyncio
async def test_slow_store_call_times_out(make_services, store):
    services = make_services(store_timeout_seconds=0.01)
    store.get_all_delay = 1.0

    with pytest.raises(TransportError):
        await services.products.list()
