"""Category Service - create, look up and resolve product categories."""

from __future__ import annotations

from stockroom.config import get_logger
from stockroom.core.entities.category import Category
from stockroom.core.exceptions import CategoryAlreadyExistsError, CategoryNotFoundError
from stockroom.core.interfaces.category_store import ICategoryResolver, ICategoryStore
from stockroom.core.validation import validate_category_name

logger = get_logger(__name__)


class CategoryService(ICategoryResolver):
    """
    Layer-pure service for category operations.

    Also serves as the category resolver that ProductService depends on.
    """

    def __init__(self, category_store: ICategoryStore) -> None:
        self._store = category_store

    async def create_category(self, name: str | None) -> Category:
        """Validate, check uniqueness and persist a new category."""
        category_name = validate_category_name(name)

        if await self._store.exists(category_name):
            raise CategoryAlreadyExistsError(category_name)

        category = await self._store.create_category(Category(name=category_name))
        logger.info("category_created", category_name=category.name)
        return category

    async def list_categories(self) -> list[Category]:
        return await self._store.list_categories()

    async def get_category(self, name: str) -> Category:
        category = await self._store.get_category(name)
        if category is None:
            raise CategoryNotFoundError(name)
        return category

    async def resolve_category_by_name(self, name: str) -> Category:
        return await self.get_category(name)
