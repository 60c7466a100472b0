"""
Input validation for products and categories.

Pure functions: they inspect caller input and raise InvalidArgumentError
on the first problem found. Check order is fixed so error messages are
deterministic.
"""

from decimal import Decimal

from stockroom.core.entities.product import ProductInput
from stockroom.core.exceptions import InvalidArgumentError


def has_text(value: str | None) -> bool:
    """True when value contains at least one non-whitespace character."""
    return value is not None and bool(value.strip())


def validate_product_input(info: ProductInput | None) -> None:
    """
    Validate product input before it reaches the store.

    Checks, in order: presence, name, category, unit price, stock.
    """
    if info is None:
        raise InvalidArgumentError("Product information cannot be null")
    if not has_text(info.name):
        raise InvalidArgumentError("Product name cannot be null or empty", field="name")
    if not has_text(info.category_name):
        raise InvalidArgumentError("Product category cannot be null", field="category_name")
    if info.unit_price is None or info.unit_price <= Decimal(0):
        raise InvalidArgumentError(
            "Product unit price must be greater than zero", field="unit_price"
        )
    if info.stock_quantity < 0:
        raise InvalidArgumentError("Product stock cannot be negative", field="stock_quantity")


def validate_category_name(name: str | None) -> str:
    """Validate a category name and return it trimmed."""
    if not has_text(name):
        raise InvalidArgumentError("Category name can't be null or empty", field="name")
    return name.strip()  # type: ignore[union-attr]
