"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.report_aggregator import ReportAggregator
from src.core.services.sale_processor import (
    AppliedSale,
    SalePolicy,
    SaleProcessor,
    iso_timestamp,
)

__all__ = [
    # Sale processing
    "SaleProcessor",
    "SalePolicy",
    "AppliedSale",
    "iso_timestamp",
    # Reporting
    "ReportAggregator",
]
