"""
Inventory metrics aggregation.

Folds a product collection into overall and per-category stock statistics
in a single pass. Only in-stock products (stock_quantity > 0) contribute,
so a category with nothing on hand does not appear in the report.

The average unit price is the plain mean of the unit prices of in-stock
products. It is NOT weighted by quantity: one product at 10 (qty 1) and one
at 20 (qty 1000) average to 15.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_DOWN,
    ROUND_HALF_UP,
    Context,
    Decimal,
)

from stockroom.core.entities.metrics import (
    ZERO_AMOUNT,
    CategoryMetrics,
    InventoryReport,
    OverallMetrics,
)
from stockroom.core.entities.product import Product

CENT = Decimal("0.01")

# Sums, products and quantize are exact under this context at any magnitude.
EXACT = Context(prec=MAX_PREC, rounding=ROUND_HALF_UP, Emax=MAX_EMAX, Emin=MIN_EMIN)

# Digits kept past the cent place when dividing for an average.
GUARD_DIGITS = 3


def round_money(amount: Decimal) -> Decimal:
    """Quantize to 2 decimal places, rounding half up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP, context=EXACT)


def mean_money(total: Decimal, count: int) -> Decimal:
    """
    Round total / count to cents, half up.

    The quotient is truncated a few digits past the cent place before the
    final rounding. Truncation never crosses a half-cent boundary, so the
    result equals half-up rounding of the exact quotient.
    """
    integer_digits = max(total.adjusted() + 1, 1)
    division = Context(
        prec=integer_digits + 2 + GUARD_DIGITS,
        rounding=ROUND_DOWN,
        Emax=MAX_EMAX,
        Emin=MIN_EMIN,
    )
    return round_money(division.divide(total, count))


@dataclass
class StockAccumulator:
    """Running totals for one aggregation scope."""

    units_in_stock: int = 0
    value_in_stock: Decimal = field(default_factory=lambda: Decimal(0))
    unit_price_sum: Decimal = field(default_factory=lambda: Decimal(0))
    product_count: int = 0

    def add(self, product: Product) -> None:
        self.units_in_stock += product.stock_quantity
        stock_value = EXACT.multiply(product.unit_price, product.stock_quantity)
        self.value_in_stock = EXACT.add(self.value_in_stock, stock_value)
        self.unit_price_sum = EXACT.add(self.unit_price_sum, product.unit_price)
        self.product_count += 1

    @property
    def total_value(self) -> Decimal:
        if self.product_count == 0:
            return ZERO_AMOUNT
        return round_money(self.value_in_stock)

    @property
    def average_unit_price(self) -> Decimal:
        if self.product_count == 0:
            return ZERO_AMOUNT
        return mean_money(self.unit_price_sum, self.product_count)

    def to_overall(self) -> OverallMetrics:
        return OverallMetrics(
            total_units_in_stock=self.units_in_stock,
            total_value=self.total_value,
            average_unit_price=self.average_unit_price,
        )

    def to_category(self, category_name: str) -> CategoryMetrics:
        return CategoryMetrics(
            category_name=category_name,
            total_units_in_stock=self.units_in_stock,
            total_value=self.total_value,
            average_unit_price=self.average_unit_price,
        )


def compute_report(products: Iterable[Product]) -> InventoryReport:
    """
    Compute the inventory report for a snapshot of products.

    Pure and deterministic. Every product passed in must carry a
    resolved category.

    Args:
        products: Any iterable of products; consumed once.

    Returns:
        Overall metrics (zeros when nothing is in stock) and per-category
        metrics sorted ascending by category name.
    """
    overall = StockAccumulator()
    by_category: dict[str, StockAccumulator] = {}

    for product in products:
        if not product.in_stock:
            continue
        overall.add(product)
        scope = by_category.get(product.category_name)
        if scope is None:
            scope = by_category[product.category_name] = StockAccumulator()
        scope.add(product)

    return InventoryReport(
        overall=overall.to_overall(),
        per_category=[
            by_category[name].to_category(name) for name in sorted(by_category)
        ],
    )
