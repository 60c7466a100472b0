"""Request DTOs for API endpoints.

Pydantic v2 models for request validation. Fields the domain requires are
still optional here: missing values reach the service and fail its
validation with a 400, instead of a schema 422.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from stockroom.core.entities.product import ProductInput

# --- Categories ---


class CreateCategoryRequest(BaseModel):
    """Request to create a category."""

    name: str | None = Field(default=None, description="Unique category name")


# --- Products ---


class ProductRequest(BaseModel):
    """Request body for creating or updating a product."""

    name: str | None = Field(default=None, description="Product name (unique, case-insensitive)")
    category_name: str | None = Field(default=None, description="Existing category name")
    unit_price: Decimal | None = Field(default=None, description="Price per unit, > 0")
    expiration_date: date | None = Field(default=None, description="Optional expiry date")
    stock_quantity: int = Field(default=0, description="Units on hand, >= 0")

    def to_input(self, product_id: str | None = None) -> ProductInput:
        """Convert to the domain input, optionally binding a product ID."""
        return ProductInput(id=product_id, **self.model_dump())
