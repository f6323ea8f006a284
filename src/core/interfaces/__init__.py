"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.catalog_store import ICatalogStore
from src.core.interfaces.ledger_store import ILedgerStore

__all__ = [
    "ICatalogStore",
    "ILedgerStore",
]
