"""
Product Service - product CRUD, stock toggling and inventory reporting.

Orchestrates validation, category resolution and uniqueness checks on top
of an injected product store. This is the contract surface consumed by the
HTTP routes, the seed loader and the CLI.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from stockroom.config import get_logger
from stockroom.core.entities.metrics import InventoryReport
from stockroom.core.entities.product import Product, ProductFilter, ProductInput, utcnow
from stockroom.core.exceptions import (
    InvalidArgumentError,
    ProductAlreadyExistsError,
    ProductNotFoundError,
)
from stockroom.core.interfaces.category_store import ICategoryResolver
from stockroom.core.interfaces.product_store import IProductStore
from stockroom.core.services.metrics_aggregator import compute_report
from stockroom.core.validation import has_text, validate_product_input

logger = get_logger(__name__)

# Quantity assigned by "mark in stock". This resets stock to a constant
# rather than restoring a previous quantity.
DEFAULT_RESTOCK_QUANTITY = 10


@dataclass
class ProductPage:
    """A page of products plus the total number of matches."""

    items: list[Product]
    total: int


class ProductService:
    """Layer-pure service for product operations."""

    def __init__(
        self,
        product_store: IProductStore,
        category_resolver: ICategoryResolver,
        restock_quantity: int = DEFAULT_RESTOCK_QUANTITY,
    ) -> None:
        self._store = product_store
        self._categories = category_resolver
        self._restock_quantity = restock_quantity

    async def create_product(self, info: ProductInput | None) -> Product:
        """
        Create a product.

        Raises:
            InvalidArgumentError: input fails validation
            CategoryNotFoundError: category does not exist
            ProductAlreadyExistsError: name already used (case-insensitive)
        """
        validate_product_input(info)
        assert info is not None

        category = await self._categories.resolve_category_by_name(
            info.category_name.strip()  # type: ignore[union-attr]
        )

        name = info.name.strip()  # type: ignore[union-attr]
        if await self._store.exists_by_name(name):
            raise ProductAlreadyExistsError(name)

        now = utcnow()
        product = Product(
            id=str(uuid.uuid4()),
            name=name,
            category=category,
            unit_price=info.unit_price,  # type: ignore[arg-type]
            expiration_date=info.expiration_date,
            stock_quantity=info.stock_quantity,
            created_at=now,
            updated_at=now,
        )
        product = await self._store.save_product(product)

        logger.info(
            "product_created",
            product_id=product.id,
            name=product.name,
            category=product.category_name,
        )
        return product

    async def update_product(self, info: ProductInput | None) -> Product:
        """
        Overwrite the mutable fields of an existing product.

        Raises:
            InvalidArgumentError: input fails validation or has no ID
            ProductNotFoundError: no product with this ID
            CategoryNotFoundError: category does not exist
            ProductAlreadyExistsError: new name used by another product
        """
        validate_product_input(info)
        assert info is not None
        if not has_text(info.id):
            raise InvalidArgumentError("Product ID is required for updating", field="id")

        existing = await self._store.get_product(info.id)  # type: ignore[arg-type]
        if existing is None:
            raise ProductNotFoundError(info.id)  # type: ignore[arg-type]

        category = await self._categories.resolve_category_by_name(
            info.category_name.strip()  # type: ignore[union-attr]
        )

        existing.name = info.name.strip()  # type: ignore[union-attr]
        existing.category = category
        existing.unit_price = info.unit_price  # type: ignore[assignment]
        existing.expiration_date = info.expiration_date
        existing.stock_quantity = info.stock_quantity
        existing.updated_at = utcnow()

        product = await self._store.update_product(existing)
        if product is None:
            # deleted after it was read
            raise ProductNotFoundError(info.id)  # type: ignore[arg-type]
        logger.info("product_updated", product_id=product.id, name=product.name)
        return product

    async def delete_product(self, product_id: str | None) -> None:
        if not has_text(product_id):
            raise InvalidArgumentError(
                "Product ID cannot be null or empty for deletion", field="id"
            )
        if not await self._store.delete_product(product_id):  # type: ignore[arg-type]
            raise ProductNotFoundError(
                product_id,  # type: ignore[arg-type]
                message=f"Product not found with ID: {product_id} for deletion",
            )
        logger.info("product_deleted", product_id=product_id)

    async def get_product(self, product_id: str | None) -> Product:
        if not has_text(product_id):
            raise InvalidArgumentError("Product ID cannot be null or empty", field="id")
        product = await self._store.get_product(product_id)  # type: ignore[arg-type]
        if product is None:
            raise ProductNotFoundError(product_id)  # type: ignore[arg-type]
        return product

    async def list_products(
        self,
        criteria: ProductFilter | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> ProductPage:
        """List all products, or only those matching the active criteria."""
        if criteria is None or criteria.is_empty:
            items = await self._store.list_products(limit=limit, offset=offset)
            total = await self._store.count_products()
        else:
            items = await self._store.filter_products(criteria, limit=limit, offset=offset)
            total = await self._store.count_products(criteria)
        return ProductPage(items=items, total=total)

    async def set_stock(self, product_id: str, in_stock: bool) -> Product:
        """
        Mark a product in or out of stock.

        In stock assigns the configured restock quantity; out of stock
        assigns zero.
        """
        quantity = self._restock_quantity if in_stock else 0
        product = await self._store.set_stock(product_id, quantity)
        if product is None:
            raise ProductNotFoundError(product_id)

        logger.info(
            "product_stock_set",
            product_id=product_id,
            in_stock=in_stock,
            stock_quantity=product.stock_quantity,
        )
        return product

    async def get_inventory_report(self) -> InventoryReport:
        """Compute metrics over the full live product set."""
        products = await self._store.list_products()
        report = compute_report(products)
        logger.info(
            "inventory_report_computed",
            products=len(products),
            categories=len(report.per_category),
            total_units=report.overall.total_units_in_stock,
        )
        return report
