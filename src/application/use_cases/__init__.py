"""Application use cases."""

from src.application.use_cases.generate_report import GenerateReportUseCase
from src.application.use_cases.list_products import ListProductsUseCase
from src.application.use_cases.record_sale import RecordSaleResult, RecordSaleUseCase

__all__ = [
    "ListProductsUseCase",
    "RecordSaleUseCase",
    "RecordSaleResult",
    "GenerateReportUseCase",
]
