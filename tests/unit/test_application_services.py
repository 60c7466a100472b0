"""Tests for service factory functions."""

from unittest.mock import AsyncMock, patch

import pytest

from stockroom.application import services
from stockroom.core.services import CategoryService, ProductService
from stockroom.infrastructure.storage.memory import InMemoryCategoryStore, InMemoryProductStore


@pytest.fixture(autouse=True)
def fresh_services():
    services.reset_services()
    yield
    services.reset_services()


@pytest.fixture
def memory_stores():
    category_store = InMemoryCategoryStore()
    product_store = InMemoryProductStore()
    with (
        patch(
            "stockroom.infrastructure.storage.get_category_store",
            AsyncMock(return_value=category_store),
        ),
        patch(
            "stockroom.infrastructure.storage.get_product_store",
            AsyncMock(return_value=product_store),
        ),
    ):
        yield category_store, product_store


class TestServiceFactories:
    async def test_category_service_singleton(self, memory_stores):
        first = await services.get_category_service()
        assert isinstance(first, CategoryService)
        assert await services.get_category_service() is first

    async def test_product_service_singleton(self, memory_stores):
        first = await services.get_product_service()
        assert isinstance(first, ProductService)
        assert await services.get_product_service() is first

    async def test_product_service_resolves_through_category_service(self, memory_stores):
        category_service = await services.get_category_service()
        product_service = await services.get_product_service()
        assert product_service._categories is category_service

    async def test_override_is_not_cached(self, memory_stores):
        custom = InMemoryProductStore()
        overridden = await services.get_product_service(product_store=custom)
        default = await services.get_product_service()
        assert overridden is not default
        assert overridden._store is custom

    async def test_restock_quantity_override(self, memory_stores):
        service = await services.get_product_service(restock_quantity=4)
        assert service._restock_quantity == 4

    async def test_reset_services(self, memory_stores):
        first = await services.get_category_service()
        services.reset_services()
        assert await services.get_category_service() is not first
