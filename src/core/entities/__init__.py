"""Core domain entities."""

from src.core.entities.product import Product
from src.core.entities.report import SalesReport
from src.core.entities.sale import (
    ItemOutcome,
    ItemStatus,
    SaleItem,
    SaleOutcome,
    SaleRecord,
    SaleRequest,
)
from src.core.entities.stock import ItemId, StockRecord, stock_key

__all__ = [
    # Catalog entities
    "Product",
    # Stock ledger entities
    "ItemId",
    "StockRecord",
    "stock_key",
    # Sale entities
    "SaleItem",
    "SaleRequest",
    "SaleRecord",
    "SaleOutcome",
    "ItemOutcome",
    "ItemStatus",
    # Report entities
    "SalesReport",
]
