"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import PaginationParams, parse_sale_request
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    ItemOutcomeResponse,
    ProviderHealthResponse,
    ReportResponse,
    SaleRecordedResponse,
    SalesListResponse,
    StockListResponse,
    StockRecordResponse,
)

__all__ = [
    # Requests
    "parse_sale_request",
    "PaginationParams",
    # Responses
    "SaleRecordedResponse",
    "ItemOutcomeResponse",
    "ReportResponse",
    "StockRecordResponse",
    "StockListResponse",
    "SalesListResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
]
