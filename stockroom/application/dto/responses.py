"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Money leaves the core
as Decimal and is rendered as a JSON number here.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from stockroom.core.entities.category import Category
from stockroom.core.entities.metrics import CategoryMetrics, InventoryReport, OverallMetrics
from stockroom.core.entities.product import Product


class CategoryResponse(BaseModel):
    """Category response DTO."""

    name: str = Field(..., description="Category name")

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryResponse":
        return cls(name=category.name)


class ProductResponse(BaseModel):
    """Product response DTO."""

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    category_name: str = Field(..., description="Category name")
    unit_price: float = Field(..., description="Price per unit")
    expiration_date: date | None = Field(default=None, description="Expiry date")
    stock_quantity: int = Field(..., description="Units on hand")
    in_stock: bool = Field(..., description="True when stock_quantity > 0")
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            category_name=product.category_name,
            unit_price=float(product.unit_price),
            expiration_date=product.expiration_date,
            stock_quantity=product.stock_quantity,
            in_stock=product.in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductListResponse(BaseModel):
    """Paginated product list."""

    items: list[ProductResponse] = Field(default_factory=list)
    total: int = Field(..., description="Total matching products")
    limit: int
    offset: int


class OverallMetricsResponse(BaseModel):
    """Stock metrics across all categories."""

    total_units_in_stock: int
    total_value: float
    average_unit_price: float

    @classmethod
    def from_entity(cls, metrics: OverallMetrics) -> "OverallMetricsResponse":
        return cls(
            total_units_in_stock=metrics.total_units_in_stock,
            total_value=float(metrics.total_value),
            average_unit_price=float(metrics.average_unit_price),
        )


class CategoryMetricsResponse(OverallMetricsResponse):
    """Stock metrics for one category."""

    category_name: str

    @classmethod
    def from_entity(cls, metrics: CategoryMetrics) -> "CategoryMetricsResponse":  # type: ignore[override]
        return cls(
            category_name=metrics.category_name,
            total_units_in_stock=metrics.total_units_in_stock,
            total_value=float(metrics.total_value),
            average_unit_price=float(metrics.average_unit_price),
        )


class InventoryReportResponse(BaseModel):
    """Inventory metrics report."""

    overall: OverallMetricsResponse
    per_category: list[CategoryMetricsResponse] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, report: InventoryReport) -> "InventoryReportResponse":
        return cls(
            overall=OverallMetricsResponse.from_entity(report.overall),
            per_category=[CategoryMetricsResponse.from_entity(m) for m in report.per_category],
        )


class StoreHealthResponse(BaseModel):
    """Storage backend health status."""

    backend: str
    available: bool
    latency_ms: float | None = None
    categories: int | None = None
    products: int | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    storage: StoreHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. PRODUCT_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
