"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stockroom.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from stockroom.api.middleware.error_handler import setup_exception_handlers
from stockroom.api.routes import categories_router, health_router, products_router
from stockroom.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Initializes storage on startup, optionally seeds the sample
    catalogue, and releases storage on shutdown.
    """
    settings = get_settings()
    configure_logging()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        backend=settings.storage.backend,
    )

    from stockroom.application.services import (
        get_category_service,
        get_product_service,
        reset_services,
    )
    from stockroom.infrastructure.storage import close_storage, init_storage

    try:
        await init_storage()
    except Exception as e:
        logger.error("storage_init_failed", error=str(e))
        raise

    if settings.inventory.seed_on_startup:
        from stockroom.application.seed import seed_inventory

        await seed_inventory(await get_category_service(), await get_product_service())

    logger.info("application_started")

    yield

    # Shutdown
    logger.info("application_stopping")

    try:
        await close_storage()
        logger.info("storage_closed")
    except Exception as e:
        logger.warning("storage_close_failed", error=str(e))

    reset_services()
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Product and category management with inventory metrics",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    # Add middleware
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    # CORS
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(categories_router)
    app.include_router(products_router)

    @app.get("/")
    async def root() -> dict:
        """Service information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.api.debug else None,
        }

    @app.get("/health")
    async def health() -> dict:
        """Liveness check."""
        return {"status": "healthy"}

    return app


# Create default app instance
app = create_app()


def main() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "stockroom.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
