"""
Core business logic services.

Layer-pure services that depend only on:
- stockroom/core/entities/*
- stockroom/core/interfaces/*
- stockroom/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from stockroom.core.services.category_service import CategoryService
from stockroom.core.services.metrics_aggregator import (
    StockAccumulator,
    compute_report,
    round_money,
)
from stockroom.core.services.product_service import (
    DEFAULT_RESTOCK_QUANTITY,
    ProductPage,
    ProductService,
)

__all__ = [
    # Categories
    "CategoryService",
    # Products
    "ProductService",
    "ProductPage",
    "DEFAULT_RESTOCK_QUANTITY",
    # Metrics
    "compute_report",
    "round_money",
    "StockAccumulator",
]
