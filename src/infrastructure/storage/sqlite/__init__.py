"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.catalog_store import SQLiteCatalogStore
from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore
from src.infrastructure.storage.sqlite.seed import (
    export_documents,
    import_documents,
    is_database_empty,
)

__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    # Store classes
    "SQLiteCatalogStore",
    "SQLiteLedgerStore",
    # Seed helpers
    "export_documents",
    "import_documents",
    "is_database_empty",
]
