"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.
"""

from stockroom.application.dto.requests import CreateCategoryRequest, ProductRequest
from stockroom.application.dto.responses import (
    CategoryMetricsResponse,
    CategoryResponse,
    ErrorResponse,
    HealthResponse,
    InventoryReportResponse,
    OverallMetricsResponse,
    ProductListResponse,
    ProductResponse,
    StoreHealthResponse,
)

__all__ = [
    # Requests
    "CreateCategoryRequest",
    "ProductRequest",
    # Responses
    "CategoryResponse",
    "ProductResponse",
    "ProductListResponse",
    "OverallMetricsResponse",
    "CategoryMetricsResponse",
    "InventoryReportResponse",
    "StoreHealthResponse",
    "HealthResponse",
    "ErrorResponse",
]
