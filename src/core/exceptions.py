"""
Domain exceptions for the POS ledger.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class POSError(Exception):
    """Base exception for all POS ledger errors."""

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


# Validation Exceptions
class ValidationError(POSError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidSaleDataError(ValidationError):
    """Sale request is malformed (missing or non-sequence items, bad item fields)."""

    def __init__(self, reason: str, field: str = "items", value: Any = None):
        super().__init__(field=field, message=reason, value=value)
        self.code = "INVALID_SALE_DATA"


class UnknownStockItemError(ValidationError):
    """Sale references an id with no stock record while unknown items are rejected."""

    def __init__(self, item_id: int | str):
        super().__init__(
            field="items.id",
            message=f"No stock record for id {item_id!r}",
            value=item_id,
        )
        self.code = "UNKNOWN_STOCK_ITEM"
        self.details["item_id"] = item_id


class InsufficientStockError(ValidationError):
    """Sale would drive a stock record below zero while negative stock is disallowed."""

    def __init__(self, item_id: int | str, requested: int, available: int):
        super().__init__(
            field="items.quantity",
            message=(
                f"Insufficient stock for id {item_id!r}: "
                f"requested {requested}, available {available}"
            ),
            value=requested,
        )
        self.code = "INSUFFICIENT_STOCK"
        self.details.update(
            {
                "item_id": item_id,
                "requested": requested,
                "available": available,
            }
        )


# Storage Exceptions
class StorageError(POSError):
    """Base exception for storage operations."""

    pass


class StoreReadError(StorageError):
    """Persisted state could not be read or decoded."""

    def __init__(self, resource: str, reason: str):
        super().__init__(
            f"Failed to load {resource}",
            code="STORE_READ_FAILED",
            details={"resource": resource, "reason": reason},
        )


class StoreWriteError(StorageError):
    """Persisted state could not be written; the transaction was rolled back."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            f"Failed to {operation}",
            code="STORE_WRITE_FAILED",
            details={"operation": operation, "reason": reason},
        )


class ConcurrentUpdateError(StorageError):
    """A stock record changed between snapshot load and commit."""

    def __init__(self, item_ids: list[int | str], attempts: int | None = None):
        super().__init__(
            f"Stock records modified concurrently: {item_ids!r}",
            code="CONCURRENT_UPDATE",
            details={"item_ids": item_ids, "attempts": attempts},
        )


class SeedDataError(StorageError):
    """A legacy seed document is missing required structure."""

    def __init__(self, document: str, reason: str):
        super().__init__(
            f"Invalid seed document '{document}': {reason}",
            code="SEED_DATA_INVALID",
            details={"document": document, "reason": reason},
        )


class ConfigurationError(POSError):
    """Configuration error."""

    pass
