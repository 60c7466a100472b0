"""SQLite implementation of product storage."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

import aiosqlite

from stockroom.config import get_logger
from stockroom.core.entities.category import Category
from stockroom.core.entities.product import Product, ProductFilter, utcnow
from stockroom.core.exceptions import DatabaseError, ProductAlreadyExistsError
from stockroom.core.interfaces.product_store import IProductStore
from stockroom.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

# casefold() is registered on every pooled connection
ORDER_BY = " ORDER BY casefold(name), id"


def _build_where(criteria: ProductFilter | None) -> tuple[str, list[Any]]:
    """Translate a filter into a WHERE clause and its parameters."""
    if criteria is None:
        return "", []

    clauses: list[str] = []
    params: list[Any] = []

    if criteria.name and criteria.name.strip():
        clauses.append("instr(casefold(name), ?) > 0")
        params.append(criteria.name.strip().casefold())

    if criteria.category_names:
        placeholders = ", ".join("?" for _ in criteria.category_names)
        clauses.append(f"category_name IN ({placeholders})")
        params.extend(criteria.category_names)

    if criteria.in_stock is True:
        clauses.append("stock_quantity > 0")
    elif criteria.in_stock is False:
        clauses.append("stock_quantity = 0")

    if not clauses:
        return "", []
    return " WHERE " + " AND ".join(clauses), params


def _build_limit(limit: int | None, offset: int) -> tuple[str, list[Any]]:
    # SQLite needs a LIMIT before OFFSET; -1 means unbounded
    return " LIMIT ? OFFSET ?", [-1 if limit is None else limit, offset]


class SQLiteProductStore(IProductStore):
    """SQLite implementation of product storage."""

    async def save_product(self, product: Product) -> Product:
        if product.id is None:
            raise ValueError("Product must have an ID before it is saved")

        try:
            async with get_transaction() as conn:
                await conn.execute(
                    """
                    INSERT INTO products (
                        id, name, category_name, unit_price, expiration_date,
                        stock_quantity, created_at, updated_at
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                    ON CONFLICT(id) DO UPDATE SET
                        name = excluded.name,
                        category_name = excluded.category_name,
                        unit_price = excluded.unit_price,
                        expiration_date = excluded.expiration_date,
                        stock_quantity = excluded.stock_quantity,
                        updated_at = excluded.updated_at
                    """,
                    (
                        product.id,
                        product.name,
                        product.category_name,
                        str(product.unit_price),
                        product.expiration_date.isoformat() if product.expiration_date else None,
                        product.stock_quantity,
                        product.created_at.isoformat(),
                        product.updated_at.isoformat(),
                    ),
                )
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise ProductAlreadyExistsError(product.name) from e
            raise DatabaseError("save_product", str(e)) from e

        logger.debug("product_stored", product_id=product.id)
        return product

    async def update_product(self, product: Product) -> Product | None:
        if product.id is None:
            raise ValueError("Product must have an ID to be updated")

        try:
            async with get_transaction() as conn:
                cursor = await conn.execute(
                    """
                    UPDATE products SET
                        name = ?, category_name = ?, unit_price = ?,
                        expiration_date = ?, stock_quantity = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        product.name,
                        product.category_name,
                        str(product.unit_price),
                        product.expiration_date.isoformat() if product.expiration_date else None,
                        product.stock_quantity,
                        product.updated_at.isoformat(),
                        product.id,
                    ),
                )
                if cursor.rowcount == 0:
                    return None
        except aiosqlite.IntegrityError as e:
            if "UNIQUE" in str(e):
                raise ProductAlreadyExistsError(product.name) from e
            raise DatabaseError("update_product", str(e)) from e

        logger.debug("product_updated", product_id=product.id)
        return product

    async def get_product(self, product_id: str) -> Product | None:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM products WHERE id = ?", (product_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def exists_by_name(self, name: str) -> bool:
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT 1 FROM products WHERE name = ? COLLATE NOCASE", (name,)
            )
            return await cursor.fetchone() is not None

    async def list_products(
        self, limit: int | None = None, offset: int = 0
    ) -> list[Product]:
        return await self._select(None, limit, offset)

    async def filter_products(
        self,
        criteria: ProductFilter,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        return await self._select(criteria, limit, offset)

    async def count_products(self, criteria: ProductFilter | None = None) -> int:
        where, params = _build_where(criteria)
        async with get_connection() as conn:
            cursor = await conn.execute(f"SELECT COUNT(*) FROM products{where}", params)
            row = await cursor.fetchone()
            return row[0] if row else 0

    async def set_stock(self, product_id: str, quantity: int) -> Product | None:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE products SET stock_quantity = ?, updated_at = ? WHERE id = ?",
                (quantity, utcnow().isoformat(), product_id),
            )
            if cursor.rowcount == 0:
                return None
            cursor = await conn.execute(
                "SELECT * FROM products WHERE id = ?", (product_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_product(row) if row else None

    async def delete_product(self, product_id: str) -> bool:
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM products WHERE id = ?", (product_id,)
            )
            return cursor.rowcount > 0

    async def _select(
        self,
        criteria: ProductFilter | None,
        limit: int | None,
        offset: int,
    ) -> list[Product]:
        where, params = _build_where(criteria)
        page, page_params = _build_limit(limit, offset)
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"SELECT * FROM products{where}{ORDER_BY}{page}",
                params + page_params,
            )
            rows = await cursor.fetchall()
            return [self._row_to_product(row) for row in rows]

    def _row_to_product(self, row: aiosqlite.Row) -> Product:
        return Product(
            id=row["id"],
            name=row["name"],
            category=Category(name=row["category_name"]),
            unit_price=Decimal(row["unit_price"]),
            expiration_date=(
                date.fromisoformat(row["expiration_date"]) if row["expiration_date"] else None
            ),
            stock_quantity=row["stock_quantity"],
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
