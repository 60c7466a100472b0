"""Core interfaces (ports) for dependency injection."""

from stockroom.core.interfaces.category_store import ICategoryResolver, ICategoryStore
from stockroom.core.interfaces.product_store import IProductStore

__all__ = [
    # Storage interfaces
    "ICategoryStore",
    "IProductStore",
    # Capability interfaces
    "ICategoryResolver",
]
