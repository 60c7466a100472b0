"""Inventory metrics entities.

Derived, ephemeral values computed per request from the live product set.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

ZERO_AMOUNT = Decimal("0.00")


class OverallMetrics(BaseModel):
    """Stock metrics across every category."""

    total_units_in_stock: int = 0
    total_value: Decimal = ZERO_AMOUNT
    average_unit_price: Decimal = ZERO_AMOUNT


class CategoryMetrics(OverallMetrics):
    """Stock metrics scoped to one category's in-stock products."""

    category_name: str


class InventoryReport(BaseModel):
    """Overall metrics plus per-category metrics sorted by category name."""

    overall: OverallMetrics = Field(default_factory=OverallMetrics)
    per_category: list[CategoryMetrics] = Field(default_factory=list)
