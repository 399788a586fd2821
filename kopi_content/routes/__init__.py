"""API routes."""

from fastapi import APIRouter

from kopi_content.routes import admin, public

api_router = APIRouter()

# Storefront endpoints (catalog, blog, events, site content, checkout)
api_router.include_router(public.router, prefix="/v1", tags=["public"])

# Admin endpoints (content management)
api_router.include_router(admin.router, prefix="/v1/admin", tags=["admin"])
