"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from functools import lru_cache

from stockroom.application.services import get_category_service, get_product_service
from stockroom.config import Settings, get_settings
from stockroom.core.services import CategoryService, ProductService


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Service dependencies
async def get_categories() -> CategoryService:
    """Get category service."""
    return await get_category_service()


async def get_products() -> ProductService:
    """Get product service."""
    return await get_product_service()
