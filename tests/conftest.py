"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from datetime import date
from decimal import Decimal

import pytest
from httpx import ASGITransport, AsyncClient

from stockroom.api.dependencies import get_categories, get_products
from stockroom.api.main import app
from stockroom.core.entities import Category, Product, ProductInput
from stockroom.core.services import CategoryService, ProductService
from stockroom.infrastructure.storage.memory import InMemoryCategoryStore, InMemoryProductStore


@pytest.fixture
def make_product() -> Callable[..., Product]:
    """Factory for products with sensible defaults."""

    def _make(
        name: str = "Laptop",
        category: str = "Electronics",
        unit_price: str = "1200.00",
        stock_quantity: int = 5,
        product_id: str | None = None,
        expiration_date: date | None = None,
    ) -> Product:
        return Product(
            id=product_id or f"id-{name.lower().replace(' ', '-')}",
            name=name,
            category=Category(name=category),
            unit_price=Decimal(unit_price),
            stock_quantity=stock_quantity,
            expiration_date=expiration_date,
        )

    return _make


@pytest.fixture
def laptop_input() -> ProductInput:
    """Valid input for a new product."""
    return ProductInput(
        name="Laptop",
        category_name="Electronics",
        unit_price=Decimal("1200.00"),
        stock_quantity=5,
    )


@pytest.fixture
def category_store() -> InMemoryCategoryStore:
    return InMemoryCategoryStore()


@pytest.fixture
def product_store() -> InMemoryProductStore:
    return InMemoryProductStore()


@pytest.fixture
def category_service(category_store: InMemoryCategoryStore) -> CategoryService:
    return CategoryService(category_store=category_store)


@pytest.fixture
def product_service(
    product_store: InMemoryProductStore,
    category_service: CategoryService,
) -> ProductService:
    return ProductService(product_store=product_store, category_resolver=category_service)


@pytest.fixture
async def async_client(
    category_service: CategoryService,
    product_service: ProductService,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client wired to fresh in-memory services."""
    app.dependency_overrides[get_categories] = lambda: category_service
    app.dependency_overrides[get_products] = lambda: product_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_categories, None)
    app.dependency_overrides.pop(get_products, None)
