"""Tests for backend selection of store singletons."""

from unittest.mock import MagicMock, patch

import pytest

import stockroom.infrastructure.storage as storage
from stockroom.core.exceptions import ConfigurationError
from stockroom.infrastructure.storage.memory import InMemoryCategoryStore, InMemoryProductStore
from stockroom.infrastructure.storage.sqlite import SQLiteCategoryStore, SQLiteProductStore


def _settings(backend: str) -> MagicMock:
    mock = MagicMock()
    mock.storage.backend = backend
    return mock


@pytest.fixture(autouse=True)
def fresh_singletons(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(storage, "_category_store", None)
    monkeypatch.setattr(storage, "_product_store", None)


class TestStorageFactory:
    async def test_memory_backend(self):
        with patch.object(storage, "get_settings", return_value=_settings("memory")):
            assert isinstance(await storage.get_category_store(), InMemoryCategoryStore)
            assert isinstance(await storage.get_product_store(), InMemoryProductStore)

    async def test_sqlite_backend(self):
        with patch.object(storage, "get_settings", return_value=_settings("sqlite")):
            assert isinstance(await storage.get_category_store(), SQLiteCategoryStore)
            assert isinstance(await storage.get_product_store(), SQLiteProductStore)

    async def test_singletons(self):
        with patch.object(storage, "get_settings", return_value=_settings("memory")):
            assert await storage.get_product_store() is await storage.get_product_store()

    async def test_unknown_backend(self):
        with patch.object(storage, "get_settings", return_value=_settings("redis")):
            with pytest.raises(ConfigurationError, match="redis"):
                await storage.get_product_store()

    async def test_close_storage_drops_singletons(self):
        with patch.object(storage, "get_settings", return_value=_settings("memory")):
            first = await storage.get_product_store()
            await storage.init_storage()
            await storage.close_storage()
            assert await storage.get_product_store() is not first
