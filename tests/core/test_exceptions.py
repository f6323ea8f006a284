"""Unit tests for domain exceptions."""

from src.core.exceptions import (
    ConcurrentUpdateError,
    ConfigurationError,
    InsufficientStockError,
    InvalidSaleDataError,
    POSError,
    SeedDataError,
    StorageError,
    StoreReadError,
    StoreWriteError,
    UnknownStockItemError,
    ValidationError,
)


class TestPOSError:
    """Tests for base POSError exception."""

    def test_basic_initialization(self):
        error = POSError("Something went wrong")
        assert str(error) == "Something went wrong"
        assert error.message == "Something went wrong"
        assert error.code == "POSError"
        assert error.details == {}

    def test_with_custom_code(self):
        error = POSError("Error message", code="CUSTOM_ERROR")
        assert error.code == "CUSTOM_ERROR"

    def test_to_dict(self):
        error = POSError("Boom", code="BOOM", details={"key": "value"})
        assert error.to_dict() == {
            "error": "BOOM",
            "message": "Boom",
            "details": {"key": "value"},
        }


class TestValidationErrors:
    def test_validation_error(self):
        error = ValidationError("items", "must be a list", value="x")
        assert error.code == "VALIDATION_ERROR"
        assert error.details["field"] == "items"
        assert error.details["value"] == "x"
        assert "items" in error.message

    def test_invalid_sale_data(self):
        error = InvalidSaleDataError("items is required")
        assert isinstance(error, ValidationError)
        assert error.code == "INVALID_SALE_DATA"
        assert error.details["field"] == "items"
        assert error.details["message"] == "items is required"

    def test_invalid_sale_data_value_truncated(self):
        error = InvalidSaleDataError("bad", value="x" * 500)
        assert len(error.details["value"]) == 100

    def test_unknown_stock_item(self):
        error = UnknownStockItemError(999)
        assert isinstance(error, ValidationError)
        assert error.code == "UNKNOWN_STOCK_ITEM"
        assert error.details["item_id"] == 999

    def test_insufficient_stock(self):
        error = InsufficientStockError(item_id=1, requested=5, available=2)
        assert error.code == "INSUFFICIENT_STOCK"
        assert error.details["requested"] == 5
        assert error.details["available"] == 2
        assert "requested 5" in error.message


class TestStorageErrors:
    def test_read_error(self):
        error = StoreReadError("stock ledger", "disk gone")
        assert isinstance(error, StorageError)
        assert error.message == "Failed to load stock ledger"
        assert error.details["reason"] == "disk gone"

    def test_write_error(self):
        error = StoreWriteError("record sale", "readonly")
        assert error.code == "STORE_WRITE_FAILED"
        assert error.message == "Failed to record sale"

    def test_concurrent_update(self):
        error = ConcurrentUpdateError([1, "a"], attempts=4)
        assert isinstance(error, StorageError)
        assert error.details == {"item_ids": [1, "a"], "attempts": 4}

    def test_seed_data(self):
        error = SeedDataError("stock.json", "top-level value must be a list")
        assert error.code == "SEED_DATA_INVALID"
        assert "stock.json" in error.message


def test_configuration_error_is_pos_error():
    assert isinstance(ConfigurationError("bad"), POSError)
