"""In-memory implementation of product storage."""

import asyncio

from stockroom.config import get_logger
from stockroom.core.entities.product import Product, ProductFilter, utcnow
from stockroom.core.exceptions import ProductAlreadyExistsError
from stockroom.core.interfaces.product_store import IProductStore

logger = get_logger(__name__)


def _name_key(name: str) -> str:
    return name.casefold()


def _sort_key(product: Product) -> tuple[str, str]:
    return (_name_key(product.name), product.id or "")


def _page(products: list[Product], limit: int | None, offset: int) -> list[Product]:
    end = None if limit is None else offset + limit
    return [p.model_copy(deep=True) for p in products[offset:end]]


class InMemoryProductStore(IProductStore):
    """
    Dict-backed product store.

    Every operation runs under one asyncio lock, and callers only ever
    receive copies, so a record can only change through the store.
    """

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._ids_by_name: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def save_product(self, product: Product) -> Product:
        if product.id is None:
            raise ValueError("Product must have an ID before it is saved")

        async with self._lock:
            key = _name_key(product.name)
            owner = self._ids_by_name.get(key)
            if owner is not None and owner != product.id:
                raise ProductAlreadyExistsError(product.name)

            previous = self._products.get(product.id)
            if previous is not None:
                self._ids_by_name.pop(_name_key(previous.name), None)

            self._products[product.id] = product.model_copy(deep=True)
            self._ids_by_name[key] = product.id
            logger.debug(
                "product_stored",
                product_id=product.id,
                created=previous is None,
            )
            return product.model_copy(deep=True)

    async def update_product(self, product: Product) -> Product | None:
        if product.id is None:
            raise ValueError("Product must have an ID to be updated")

        async with self._lock:
            previous = self._products.get(product.id)
            if previous is None:
                return None

            key = _name_key(product.name)
            owner = self._ids_by_name.get(key)
            if owner is not None and owner != product.id:
                raise ProductAlreadyExistsError(product.name)

            self._ids_by_name.pop(_name_key(previous.name), None)
            self._products[product.id] = product.model_copy(deep=True)
            self._ids_by_name[key] = product.id
            return product.model_copy(deep=True)

    async def get_product(self, product_id: str) -> Product | None:
        async with self._lock:
            product = self._products.get(product_id)
            return product.model_copy(deep=True) if product else None

    async def exists_by_name(self, name: str) -> bool:
        async with self._lock:
            return _name_key(name) in self._ids_by_name

    async def list_products(
        self, limit: int | None = None, offset: int = 0
    ) -> list[Product]:
        async with self._lock:
            ordered = sorted(self._products.values(), key=_sort_key)
            return _page(ordered, limit, offset)

    async def filter_products(
        self,
        criteria: ProductFilter,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        async with self._lock:
            matches = sorted(
                (p for p in self._products.values() if criteria.matches(p)),
                key=_sort_key,
            )
            return _page(matches, limit, offset)

    async def count_products(self, criteria: ProductFilter | None = None) -> int:
        async with self._lock:
            if criteria is None:
                return len(self._products)
            return sum(1 for p in self._products.values() if criteria.matches(p))

    async def set_stock(self, product_id: str, quantity: int) -> Product | None:
        async with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return None
            product.stock_quantity = quantity
            product.updated_at = utcnow()
            return product.model_copy(deep=True)

    async def delete_product(self, product_id: str) -> bool:
        async with self._lock:
            product = self._products.pop(product_id, None)
            if product is None:
                return False
            self._ids_by_name.pop(_name_key(product.name), None)
            return True
