"""In-memory storage implementations."""

from stockroom.infrastructure.storage.memory.category_store import InMemoryCategoryStore
from stockroom.infrastructure.storage.memory.product_store import InMemoryProductStore

__all__ = [
    "InMemoryCategoryStore",
    "InMemoryProductStore",
]
