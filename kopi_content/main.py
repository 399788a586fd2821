"""FastAPI application entry point.

Sehati Kopi Content API - catalog, blog, events and site content for the storefront.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kopi_content.errors import ContentError
from kopi_content.routes import api_router
from kopi_content.schemas import ErrorDetail, ErrorResponse
from kopi_content.services.registry import create_content_services
from kopi_content.settings import get_settings
from kopi_content.stores.postgres_documents import PostgresDocumentStore

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the content services (store, cache, repositories) on startup and
    closes them on shutdown.
    """
    # Startup
    settings = get_settings()
    content = await create_content_services(settings)

    if isinstance(content.store, PostgresDocumentStore):
        try:
            await content.store.ping()
            logger.info("Postgres connected")
        except ContentError:
            logger.exception("Postgres init failed")

    app.state.content = content

    if settings.seed_on_startup:
        seeded = await content.seeder.seed_all()
        logger.info(f"Startup seeding done: {', '.join(seeded) or 'nothing seeded'}")

    yield

    # Shutdown
    await content.aclose()
    app.state.content = None


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Content data-access API for the Sehati Kopi storefront",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ContentError)
    async def content_error_handler(request: Request, exc: ContentError) -> JSONResponse:
        """Content layer failures in the structured error format."""
        if exc.status_code >= 500:
            logger.error(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
        body = ErrorResponse(
            error=ErrorDetail(code=exc.code, message=exc.message, detail=exc.detail or None)
        )
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": str(exc) if settings.debug else "Internal server error",
                    "detail": None,
                }
            },
        )

    # Health check endpoint
    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, bool]:
        """Health check endpoint."""
        return {"ok": True}

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "kopi_content.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
