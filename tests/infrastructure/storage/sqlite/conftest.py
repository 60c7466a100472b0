"""Pytest fixtures for SQLite storage tests."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

import stockroom.infrastructure.storage.sqlite.connection as conn_module
from stockroom.core.entities import Category
from stockroom.infrastructure.storage.sqlite import (
    SQLiteCategoryStore,
    SQLiteProductStore,
    close_pool,
)
from stockroom.infrastructure.storage.sqlite.migrations import run_migrations


@pytest.fixture
def temp_db_path(tmp_path: Path) -> Path:
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def mock_settings(temp_db_path: Path):
    """Mock settings with temp database path."""
    mock = MagicMock()
    mock.storage.db_path = temp_db_path
    mock.storage.pool_size = 2
    mock.storage.busy_timeout = 5000
    return mock


@pytest.fixture
async def initialized_db(temp_db_path: Path) -> Path:
    """Temporary database with all migrations applied."""
    results = await run_migrations(temp_db_path)
    assert all(r.success for r in results)
    return temp_db_path


@pytest.fixture
async def sqlite_pool(initialized_db: Path, mock_settings) -> AsyncGenerator[Path, None]:
    """Point the global pool at the migrated temp database."""
    conn_module._pool = None
    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield initialized_db
        finally:
            await close_pool()


@pytest.fixture
async def category_store(sqlite_pool) -> SQLiteCategoryStore:
    store = SQLiteCategoryStore()
    await store.create_category(Category(name="Electronics"))
    await store.create_category(Category(name="Food"))
    return store


@pytest.fixture
def sqlite_product_store(category_store) -> SQLiteProductStore:
    return SQLiteProductStore()
