"""SQLite implementation of category storage."""

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.entities.category import Category
from stockroom.core.exceptions import CategoryAlreadyExistsError, DatabaseError
from stockroom.core.interfaces.category_store import ICategoryStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)


class SQLiteCategoryStore(ICategoryStore):
    """SQLite implementation of category storage."""

    async def create_category(self, category: Category) -> Category:
        try:
            async with get_transaction() as conn:
                await conn.execute(
                    "INSERT INTO categories (name) VALUES (?)",
                    (category.name,),
                )
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise CategoryAlreadyExistsError(category.name) from e
            raise DatabaseError("create_category", str(e)) from e

        logger.debug("category_stored", category_name=category.name)
        return category

    async def get_category(self, name: str) -> Category | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT name FROM categories WHERE name = ?", (name,)
            )
            row = await cursor.fetchone()
            return Category(name=row["name"]) if row else None

    async def exists(self, name: str) -> bool:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT 1 FROM categories WHERE name = ?", (name,)
            )
            return await cursor.fetchone() is not None

    async def list_categories(self) -> list[Category]:
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT name FROM categories ORDER BY name")
            rows = await cursor.fetchall()
            return [Category(name=row["name"]) for row in rows]
