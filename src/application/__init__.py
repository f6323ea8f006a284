"""
Application layer - Use cases and DTOs.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services and stores

Use cases are the only entry point for API handlers.
"""

from src.application.dto import (
    ErrorResponse,
    HealthResponse,
    ReportResponse,
    SaleRecordedResponse,
    parse_sale_request,
)
from src.application.use_cases import (
    GenerateReportUseCase,
    ListProductsUseCase,
    RecordSaleUseCase,
)

__all__ = [
    # DTOs
    "parse_sale_request",
    "SaleRecordedResponse",
    "ReportResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "ListProductsUseCase",
    "RecordSaleUseCase",
    "GenerateReportUseCase",
]
