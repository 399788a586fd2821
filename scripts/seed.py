#!/usr/bin/env python3
"""Seed the content store with the storefront baseline.

Writes the baseline set into every empty collection (products, blog, events,
testimonials, menu) and creates the settings and hero documents if missing.
Collections that already hold documents are left untouched, so the script is
safe to re-run.

Usage:
    python -m scripts.seed

Optional env vars:
  SEED_CREATE_TABLES=1   create the content_documents table first (dev only; use alembic in prod)
"""

import asyncio
import os
import sys

# Ensure imports work when executed as a script/module
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

from kopi_content.models import ContentDocument  # noqa: E402,F401
from kopi_content.services.registry import create_content_services  # noqa: E402
from kopi_content.settings import get_settings  # noqa: E402
from kopi_content.stores.postgres import create_tables  # noqa: E402
from kopi_content.stores.postgres_documents import PostgresDocumentStore  # noqa: E402

load_dotenv()


async def seed_content() -> int:
    settings = get_settings()
    content = await create_content_services(settings)
    try:
        if content.store is None:
            print("Content store is not configured (set CONTENT_STORE and DATABASE_URL)")
            return 1

        if os.getenv("SEED_CREATE_TABLES", "").strip() in {"1", "true", "yes"}:
            if isinstance(content.store, PostgresDocumentStore):
                print("Creating tables...")
                await create_tables(content.store.engine)

        print("Seeding content store...")
        seeded = await content.seeder.seed_all()
        for key in seeded:
            print(f"  {key}")

        expected = len(content.seeder.baseline_collections()) + len(content.seeder.singleton_keys())
        if len(seeded) < expected:
            print(f"Seeded {len(seeded)}/{expected}; see the log for failures")
            return 1
        print("Content store seeded successfully")
        return 0
    finally:
        await content.aclose()


if __name__ == "__main__":
    raise SystemExit(asyncio.run(seed_content()))
