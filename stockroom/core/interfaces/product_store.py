"""Abstract interface for product storage."""

from abc import ABC, abstractmethod

from stockroom.core.entities.product import Product, ProductFilter


class IProductStore(ABC):
    """
    Interface for product persistence.

    Implementations must make each operation mutually exclusive so that
    single-record read-modify-write (e.g. set_stock) cannot lose updates.
    """

    @abstractmethod
    async def save_product(self, product: Product) -> Product:
        """
        Insert or replace a product by ID.

        Raises ProductAlreadyExistsError if another product already uses
        the same name (case-insensitive).
        """
        pass

    @abstractmethod
    async def update_product(self, product: Product) -> Product | None:
        """
        Overwrite an existing product by ID. Never inserts.

        Returns None if no product with this ID exists, e.g. it was
        deleted after the caller read it. Raises ProductAlreadyExistsError
        if another product already uses the new name.
        """
        pass

    @abstractmethod
    async def get_product(self, product_id: str) -> Product | None:
        """Get product by ID."""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Check name existence (case-insensitive)."""
        pass

    @abstractmethod
    async def list_products(
        self, limit: int | None = None, offset: int = 0
    ) -> list[Product]:
        """List products ordered by name."""
        pass

    @abstractmethod
    async def filter_products(
        self,
        criteria: ProductFilter,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        """List products matching all active criteria, ordered by name."""
        pass

    @abstractmethod
    async def count_products(self, criteria: ProductFilter | None = None) -> int:
        """Count products, optionally restricted to a filter."""
        pass

    @abstractmethod
    async def set_stock(self, product_id: str, quantity: int) -> Product | None:
        """Atomically set stock quantity. Returns None if product is absent."""
        pass

    @abstractmethod
    async def delete_product(self, product_id: str) -> bool:
        """Delete product. Returns False if it did not exist."""
        pass
