"""Core domain entities."""

from stockroom.core.entities.category import Category
from stockroom.core.entities.metrics import (
    ZERO_AMOUNT,
    CategoryMetrics,
    InventoryReport,
    OverallMetrics,
)
from stockroom.core.entities.product import (
    Product,
    ProductFilter,
    ProductInput,
)

__all__ = [
    # Catalogue entities
    "Category",
    "Product",
    "ProductInput",
    "ProductFilter",
    # Metrics entities
    "OverallMetrics",
    "CategoryMetrics",
    "InventoryReport",
    "ZERO_AMOUNT",
]
