"""API route modules."""

from stockroom.api.routes.categories import router as categories_router
from stockroom.api.routes.health import router as health_router
from stockroom.api.routes.products import router as products_router

__all__ = [
    "health_router",
    "categories_router",
    "products_router",
]
