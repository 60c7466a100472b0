"""
Storage backends.

Store singletons are selected by STORAGE_BACKEND: "memory" keeps
everything in process, "sqlite" persists through aiosqlite.
"""

from stockroom.config import get_logger, get_settings
from stockroom.core.exceptions import ConfigurationError
from stockroom.core.interfaces import ICategoryStore, IProductStore

logger = get_logger(__name__)

# Singleton instances
_category_store: ICategoryStore | None = None
_product_store: IProductStore | None = None


def _backend() -> str:
    backend = get_settings().storage.backend
    if backend not in ("memory", "sqlite"):
        raise ConfigurationError(f"Unknown storage backend: {backend}")
    return backend


async def get_category_store() -> ICategoryStore:
    """Get singleton category store for the configured backend."""
    global _category_store
    if _category_store is None:
        if _backend() == "sqlite":
            from stockroom.infrastructure.storage.sqlite import SQLiteCategoryStore

            _category_store = SQLiteCategoryStore()
        else:
            from stockroom.infrastructure.storage.memory import InMemoryCategoryStore

            _category_store = InMemoryCategoryStore()
        logger.info("category_store_created", backend=_backend())
    return _category_store


async def get_product_store() -> IProductStore:
    """Get singleton product store for the configured backend."""
    global _product_store
    if _product_store is None:
        if _backend() == "sqlite":
            from stockroom.infrastructure.storage.sqlite import SQLiteProductStore

            _product_store = SQLiteProductStore()
        else:
            from stockroom.infrastructure.storage.memory import InMemoryProductStore

            _product_store = InMemoryProductStore()
        logger.info("product_store_created", backend=_backend())
    return _product_store


async def init_storage() -> None:
    """Prepare the configured backend (migrations and pool for SQLite)."""
    if _backend() != "sqlite":
        return

    from stockroom.infrastructure.storage.sqlite import get_pool
    from stockroom.infrastructure.storage.sqlite.migrations import run_migrations

    await run_migrations()
    logger.info("database_initialized")

    await get_pool()
    logger.info("connection_pool_ready")


async def close_storage() -> None:
    """Release backend resources and drop store singletons."""
    global _category_store, _product_store
    if _backend() == "sqlite":
        from stockroom.infrastructure.storage.sqlite import close_pool

        await close_pool()
    _category_store = None
    _product_store = None


__all__ = [
    "get_category_store",
    "get_product_store",
    "init_storage",
    "close_storage",
]
