"""
Service factory functions for dependency injection.

This module wires infrastructure store implementations to the core
services. The API layer, the seed loader and the CLI import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from stockroom.config import get_settings
from stockroom.core.services import CategoryService, ProductService

if TYPE_CHECKING:
    from stockroom.core.interfaces import ICategoryResolver, ICategoryStore, IProductStore


# Singleton service instances
_category_service: CategoryService | None = None
_product_service: ProductService | None = None


async def get_category_service(
    category_store: "ICategoryStore | None" = None,
) -> CategoryService:
    """
    Get or create CategoryService instance.

    Args:
        category_store: Optional category store override

    Returns:
        Configured CategoryService
    """
    global _category_service

    if _category_service is not None and category_store is None:
        return _category_service

    # Lazy import infrastructure to avoid circular imports
    from stockroom.infrastructure.storage import get_category_store

    service = CategoryService(category_store=category_store or await get_category_store())

    if category_store is None:
        _category_service = service

    return service


async def get_product_service(
    product_store: "IProductStore | None" = None,
    category_resolver: "ICategoryResolver | None" = None,
    restock_quantity: int | None = None,
) -> ProductService:
    """
    Get or create ProductService instance.

    The category service doubles as the category resolver unless one
    is supplied.

    Args:
        product_store: Optional product store override
        category_resolver: Optional category resolver override
        restock_quantity: Optional override of INVENTORY_RESTOCK_QUANTITY

    Returns:
        Configured ProductService
    """
    global _product_service

    overridden = product_store is not None or category_resolver is not None
    if _product_service is not None and not overridden and restock_quantity is None:
        return _product_service

    from stockroom.infrastructure.storage import get_product_store

    service = ProductService(
        product_store=product_store or await get_product_store(),
        category_resolver=category_resolver or await get_category_service(),
        restock_quantity=restock_quantity or get_settings().inventory.restock_quantity,
    )

    if not overridden and restock_quantity is None:
        _product_service = service

    return service


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _category_service
    global _product_service

    _category_service = None
    _product_service = None
