"""Unit tests for CategoryService."""

from unittest.mock import AsyncMock

import pytest

from stockroom.core.entities import Category
from stockroom.core.exceptions import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    InvalidArgumentError,
)
from stockroom.core.interfaces import ICategoryStore
from stockroom.core.services import CategoryService


class TestCategoryService:
    async def test_create_category(self, category_service):
        category = await category_service.create_category("Electronics")
        assert category == Category(name="Electronics")

    async def test_create_strips_name(self, category_service):
        category = await category_service.create_category("  Food  ")
        assert category.name == "Food"

    async def test_duplicate_rejected(self, category_service):
        await category_service.create_category("Food")
        with pytest.raises(CategoryAlreadyExistsError, match="Category already exists: Food"):
            await category_service.create_category("Food")

    @pytest.mark.parametrize("name", [None, "", "   "])
    async def test_blank_name_rejected_before_store_access(self, name):
        store = AsyncMock(spec=ICategoryStore)
        service = CategoryService(category_store=store)
        with pytest.raises(InvalidArgumentError):
            await service.create_category(name)
        store.exists.assert_not_called()
        store.create_category.assert_not_called()

    async def test_list_categories(self, category_service):
        await category_service.create_category("Toys")
        await category_service.create_category("Books")
        names = [c.name for c in await category_service.list_categories()]
        assert names == ["Books", "Toys"]

    async def test_get_category(self, category_service):
        await category_service.create_category("Books")
        assert (await category_service.get_category("Books")).name == "Books"

    async def test_get_unknown_category(self, category_service):
        with pytest.raises(CategoryNotFoundError, match="Category does not exist: Garden"):
            await category_service.get_category("Garden")

    async def test_resolve_category_by_name(self, category_service):
        await category_service.create_category("Food")
        assert (await category_service.resolve_category_by_name("Food")).name == "Food"

    async def test_resolve_is_case_sensitive(self, category_service):
        await category_service.create_category("Food")
        with pytest.raises(CategoryNotFoundError):
            await category_service.resolve_category_by_name("food")
