"""SQLite storage implementations."""

from stockroom.infrastructure.storage.sqlite.category_store import SQLiteCategoryStore
from stockroom.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from stockroom.infrastructure.storage.sqlite.product_store import SQLiteProductStore

__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteCategoryStore",
    "SQLiteProductStore",
]
