"""Process-scoped content services.

Builds the store, read cache, seeder and every repository once at application
startup. Cache entries and seeding flags live on these objects (not module
globals) and go away when the application shuts down.
"""

from dataclasses import dataclass
import logging

from redis.exceptions import RedisError

from kopi_content.services.blog import BlogPostRepository
from kopi_content.services.events import EventRepository
from kopi_content.services.menu import MenuRepository
from kopi_content.services.orders import OrderRepository
from kopi_content.services.products import ProductRepository
from kopi_content.services.seeding import Seeder
from kopi_content.services.site import HeroRepository, SettingsRepository
from kopi_content.services.testimonials import TestimonialRepository
from kopi_content.settings import Settings
from kopi_content.stores.base import DocumentStore
from kopi_content.stores.cache import MemoryReadCache, ReadCache
from kopi_content.stores.memory import InMemoryDocumentStore
from kopi_content.stores.postgres_documents import PostgresDocumentStore
from kopi_content.stores.redis import RedisReadCache, connect_redis

logger = logging.getLogger("uvicorn.error")


@dataclass
class ContentServices:
    store: DocumentStore | None
    cache: ReadCache
    seeder: Seeder
    products: ProductRepository
    blog: BlogPostRepository
    events: EventRepository
    testimonials: TestimonialRepository
    menu: MenuRepository
    orders: OrderRepository
    settings: SettingsRepository
    hero: HeroRepository

    async def aclose(self) -> None:
        await self.cache.close()
        if self.store is not None:
            await self.store.close()


def build_content_services(
    settings: Settings,
    *,
    store: DocumentStore | None,
    cache: ReadCache,
    seeder: Seeder | None = None,
) -> ContentServices:
    """Wire repositories around an existing store and cache."""
    timeout = settings.store_timeout_seconds
    if seeder is None:
        seeder = Seeder(store, timeout=timeout)

    def collection_kwargs() -> dict[str, object]:
        return {
            "ttl": settings.collection_cache_ttl_seconds,
            "timeout": timeout,
            "unique_slugs": settings.unique_slugs,
        }

    singleton_kwargs: dict[str, object] = {
        "ttl": settings.singleton_cache_ttl_seconds,
        "timeout": timeout,
    }

    return ContentServices(
        store=store,
        cache=cache,
        seeder=seeder,
        products=ProductRepository(store, cache, seeder, **collection_kwargs()),
        blog=BlogPostRepository(
            store,
            cache,
            seeder,
            excerpt_length=settings.excerpt_length,
            **collection_kwargs(),
        ),
        events=EventRepository(store, cache, seeder, **collection_kwargs()),
        testimonials=TestimonialRepository(store, cache, seeder, **collection_kwargs()),
        menu=MenuRepository(store, cache, seeder, **collection_kwargs()),
        orders=OrderRepository(store, cache, seeder, **collection_kwargs()),
        settings=SettingsRepository(store, cache, seeder, **singleton_kwargs),
        hero=HeroRepository(store, cache, seeder, **singleton_kwargs),
    )


def create_store(settings: Settings) -> DocumentStore | None:
    """Create the configured document store, or None when it is not configured."""
    if not settings.store_configured:
        logger.warning(
            "Content store is not configured (CONTENT_STORE / DATABASE_URL). "
            "Public content will be empty and admin writes will fail."
        )
        return None
    if settings.content_store == "memory":
        logger.info("Using in-memory content store (data is lost on restart)")
        return InMemoryDocumentStore()
    return PostgresDocumentStore.from_settings(settings)


async def create_cache(settings: Settings) -> ReadCache:
    """Create the configured read cache; fall back to in-process if Redis is unreachable."""
    if settings.cache_backend == "redis":
        try:
            return RedisReadCache(await connect_redis(settings))
        except (RedisError, OSError):
            logger.exception("Redis init failed; falling back to in-process read cache")
    return MemoryReadCache()


async def create_content_services(settings: Settings) -> ContentServices:
    store = create_store(settings)
    cache = await create_cache(settings)
    return build_content_services(settings, store=store, cache=cache)
