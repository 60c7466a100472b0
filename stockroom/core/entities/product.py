"""Product domain entities."""

from datetime import UTC, date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from stockroom.core.entities.category import Category


def utcnow() -> datetime:
    return datetime.now(UTC)


class Product(BaseModel):
    """A stocked product belonging to exactly one category."""

    id: str | None = None
    name: str
    category: Category
    unit_price: Decimal
    expiration_date: date | None = None
    stock_quantity: int = 0
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def category_name(self) -> str:
        return self.category.name

    @property
    def in_stock(self) -> bool:
        """True when at least one unit is on hand."""
        return self.stock_quantity > 0

    @property
    def stock_value(self) -> Decimal:
        """Value of units on hand = unit_price * stock_quantity."""
        return self.unit_price * self.stock_quantity


class ProductInput(BaseModel):
    """
    Caller-supplied product data for create and update.

    Every field is optional so that validation, not parsing,
    decides what is missing.
    """

    id: str | None = None
    name: str | None = None
    category_name: str | None = None
    unit_price: Decimal | None = None
    expiration_date: date | None = None
    stock_quantity: int = 0


class ProductFilter(BaseModel):
    """Criteria for product search. Unset fields match everything."""

    name: str | None = None
    category_names: list[str] | None = None
    in_stock: bool | None = None  # None: any, True: stock > 0, False: stock == 0

    @property
    def is_empty(self) -> bool:
        return (
            not (self.name and self.name.strip())
            and not self.category_names
            and self.in_stock is None
        )

    def matches(self, product: Product) -> bool:
        """Check a product against all active criteria."""
        if self.name and self.name.strip():
            if self.name.strip().casefold() not in product.name.casefold():
                return False
        if self.category_names and product.category_name not in self.category_names:
            return False
        if self.in_stock is not None and product.in_stock != self.in_stock:
            return False
        return True
