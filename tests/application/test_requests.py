"""Tests for sale request parsing."""

import pytest

from src.application.dto.requests import PaginationParams, parse_sale_request
from src.core.exceptions import InvalidSaleDataError


class TestParseSaleRequest:
    def test_valid_body(self):
        request = parse_sale_request({"items": [{"id": 1, "quantity": 3, "price": 8}]})
        assert request.items[0].quantity == 3

    def test_empty_items(self):
        assert parse_sale_request({"items": []}).items == []

    def test_payload_is_independent_copy(self):
        body = {"items": [{"id": 1, "quantity": 1, "price": 2}], "meta": {"till": 3}}
        request = parse_sale_request(body)
        body["meta"]["till"] = 99
        assert request.payload["meta"] == {"till": 3}

    @pytest.mark.parametrize(
        "body",
        [
            [],
            "items",
            None,
            {},
            {"other": 1},
            {"items": None},
            {"items": "abc"},
            {"items": {"id": 1}},
            {"items": 5},
        ],
    )
    def test_rejects_bad_shape(self, body):
        with pytest.raises(InvalidSaleDataError):
            parse_sale_request(body)

    @pytest.mark.parametrize(
        "item",
        [
            {"quantity": 1, "price": 2},
            {"id": 1, "price": 2},
            {"id": 1, "quantity": 1},
            {"id": 1, "quantity": "many", "price": 2},
            {"id": 1, "quantity": 1, "price": "cheap"},
            "not-an-object",
        ],
    )
    def test_rejects_bad_items(self, item):
        with pytest.raises(InvalidSaleDataError) as exc_info:
            parse_sale_request({"items": [item]})
        assert exc_info.value.details["field"].startswith("items")

    def test_missing_items_field(self):
        with pytest.raises(InvalidSaleDataError) as exc_info:
            parse_sale_request({"total": 3})
        assert exc_info.value.details["message"] == "items is required"


def test_pagination_defaults():
    params = PaginationParams()
    assert (params.limit, params.offset) == (100, 0)
