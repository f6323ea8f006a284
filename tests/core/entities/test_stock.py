"""Tests for stock ledger entities."""

import pytest
from pydantic import ValidationError

from src.core.entities.stock import StockRecord, stock_key


def test_stock_key_distinguishes_number_and_string():
    assert stock_key(1) != stock_key("1")
    assert stock_key(1) == stock_key(1)


class TestStockRecord:
    def test_alias_and_field_name(self):
        assert StockRecord(id=1, stock=3, costPrice=2).cost_price == 2
        assert StockRecord(id=1, stock=3, cost_price=2).cost_price == 2

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            StockRecord(id=1, stock=3, costPrice=-1)

    def test_infinite_cost_rejected(self):
        with pytest.raises(ValidationError):
            StockRecord(id=1, stock=3, costPrice=float("inf"))

    def test_negative_stock_allowed(self):
        assert StockRecord(id=1, stock=-2, costPrice=1).stock == -2

    def test_to_document(self):
        record = StockRecord.model_validate(
            {"id": "a", "stock": 5, "costPrice": 3, "location": "back", "version": 7}
        )
        assert record.to_document() == {
            "id": "a",
            "stock": 5,
            "costPrice": 3,
            "location": "back",
        }
