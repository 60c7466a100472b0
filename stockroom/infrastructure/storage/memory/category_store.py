"""In-memory implementation of category storage."""

import asyncio

from stockroom.config import get_logger
from stockroom.core.entities.category import Category
from stockroom.core.exceptions import CategoryAlreadyExistsError
from stockroom.core.interfaces.category_store import ICategoryStore

logger = get_logger(__name__)


class InMemoryCategoryStore(ICategoryStore):
    """Dict-backed category store keyed by name."""

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}
        self._lock = asyncio.Lock()

    async def create_category(self, category: Category) -> Category:
        async with self._lock:
            if category.name in self._categories:
                raise CategoryAlreadyExistsError(category.name)
            self._categories[category.name] = category.model_copy()
            logger.debug("category_stored", category_name=category.name)
            return category.model_copy()

    async def get_category(self, name: str) -> Category | None:
        async with self._lock:
            category = self._categories.get(name)
            return category.model_copy() if category else None

    async def exists(self, name: str) -> bool:
        async with self._lock:
            return name in self._categories

    async def list_categories(self) -> list[Category]:
        async with self._lock:
            return [self._categories[name].model_copy() for name in sorted(self._categories)]
