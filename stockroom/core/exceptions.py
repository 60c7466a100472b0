"""
Domain exceptions for the Stockroom application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class StockroomError(Exception):
    """Base exception for all Stockroom errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Input Exceptions
class InvalidArgumentError(StockroomError):
    """Caller input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message,
            code="INVALID_ARGUMENT",
            details={"field": field} if field else None,
        )


# Lookup Exceptions
class NotFoundError(StockroomError):
    """Referenced entity does not exist."""

    pass


class ProductNotFoundError(NotFoundError):
    """Product not found in storage."""

    def __init__(self, product_id: str, message: str | None = None):
        super().__init__(
            message or f"Product not found with ID: {product_id}",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class CategoryNotFoundError(NotFoundError):
    """Category not found in storage."""

    def __init__(self, category_name: str | None):
        super().__init__(
            f"Category does not exist: {category_name}",
            code="CATEGORY_NOT_FOUND",
            details={"category_name": category_name},
        )


# Uniqueness Exceptions
class AlreadyExistsError(StockroomError):
    """Uniqueness constraint violated."""

    pass


class ProductAlreadyExistsError(AlreadyExistsError):
    """Product with the same name (case-insensitive) already exists."""

    def __init__(self, name: str):
        super().__init__(
            f"Product with name {name} already exists",
            code="PRODUCT_ALREADY_EXISTS",
            details={"name": name},
        )


class CategoryAlreadyExistsError(AlreadyExistsError):
    """Category with the same name already exists."""

    def __init__(self, category_name: str):
        super().__init__(
            f"Category already exists: {category_name}",
            code="CATEGORY_ALREADY_EXISTS",
            details={"category_name": category_name},
        )


# Storage Exceptions
class StorageError(StockroomError):
    """Base exception for storage operations."""

    pass


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


class ConfigurationError(StockroomError):
    """Configuration error."""

    pass
