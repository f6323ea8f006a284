"""
Dependency injection container for FastAPI.

Provides store and use case instances to route handlers.
"""

from fastapi import Depends

from src.application.use_cases import (
    GenerateReportUseCase,
    ListProductsUseCase,
    RecordSaleUseCase,
)
from src.core.interfaces import ICatalogStore, ILedgerStore
from src.infrastructure.storage import get_catalog_store, get_ledger_store


# Store dependencies
def get_catalog() -> ICatalogStore:
    """Get catalog store."""
    return get_catalog_store()


def get_ledger() -> ILedgerStore:
    """Get ledger store."""
    return get_ledger_store()


# Use case dependencies
def get_list_products_use_case(
    catalog: ICatalogStore = Depends(get_catalog),
) -> ListProductsUseCase:
    """Get list products use case."""
    return ListProductsUseCase(catalog_store=catalog)


def get_record_sale_use_case(
    ledger: ILedgerStore = Depends(get_ledger),
) -> RecordSaleUseCase:
    """Get record sale use case."""
    return RecordSaleUseCase(ledger_store=ledger)


def get_generate_report_use_case(
    ledger: ILedgerStore = Depends(get_ledger),
) -> GenerateReportUseCase:
    """Get generate report use case."""
    return GenerateReportUseCase(ledger_store=ledger)
