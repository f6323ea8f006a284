"""
Storage infrastructure implementations.

Selects the configured backend (``STORAGE_BACKEND``) and owns the
process-wide store instances.
"""

from src.config import get_logger, get_settings
from src.core.interfaces import ICatalogStore, ILedgerStore
from src.infrastructure.storage.flat_files import (
    LedgerDocuments,
    read_documents,
    write_documents,
)
from src.infrastructure.storage.memory import InMemoryCatalogStore, InMemoryLedgerStore
from src.infrastructure.storage.sqlite import (
    SQLiteCatalogStore,
    SQLiteLedgerStore,
    close_pool,
    export_documents,
    import_documents,
    is_database_empty,
)

logger = get_logger(__name__)

# Singleton instances
_catalog_store: ICatalogStore | None = None
_ledger_store: ILedgerStore | None = None


def _build_memory_stores() -> tuple[InMemoryCatalogStore, InMemoryLedgerStore]:
    settings = get_settings()
    documents = LedgerDocuments()
    if settings.storage.seed_on_start:
        documents = read_documents(settings.storage.seed_dir)
    return (
        InMemoryCatalogStore(documents.products),
        InMemoryLedgerStore(documents.stock, documents.sales),
    )


def _ensure_stores() -> None:
    global _catalog_store, _ledger_store
    if _catalog_store is not None and _ledger_store is not None:
        return
    backend = get_settings().storage.backend
    if backend == "memory":
        _catalog_store, _ledger_store = _build_memory_stores()
    else:
        _catalog_store, _ledger_store = SQLiteCatalogStore(), SQLiteLedgerStore()
    logger.info("stores_created", backend=backend)


def get_catalog_store() -> ICatalogStore:
    """Get singleton catalog store for the configured backend."""
    _ensure_stores()
    return _catalog_store  # type: ignore[return-value]


def get_ledger_store() -> ILedgerStore:
    """Get singleton ledger store for the configured backend."""
    _ensure_stores()
    return _ledger_store  # type: ignore[return-value]


def reset_stores() -> None:
    """Drop singleton stores (for testing)."""
    global _catalog_store, _ledger_store
    _catalog_store = None
    _ledger_store = None


async def bootstrap_storage() -> None:
    """Prepare the configured backend: migrate and seed an empty database."""
    settings = get_settings()
    if settings.storage.backend == "memory":
        _ensure_stores()
        return

    from src.infrastructure.storage.sqlite.migrations import run_migrations

    await run_migrations()
    if settings.storage.seed_on_start and await is_database_empty():
        documents = read_documents(settings.storage.seed_dir)
        if not documents.is_empty:
            await import_documents(documents)
    _ensure_stores()


async def shutdown_storage() -> None:
    """Release backend resources."""
    if get_settings().storage.backend == "sqlite":
        await close_pool()
    reset_stores()


__all__ = [
    # Factories
    "get_catalog_store",
    "get_ledger_store",
    "reset_stores",
    "bootstrap_storage",
    "shutdown_storage",
    # Store classes
    "SQLiteCatalogStore",
    "SQLiteLedgerStore",
    "InMemoryCatalogStore",
    "InMemoryLedgerStore",
    # Flat files
    "LedgerDocuments",
    "read_documents",
    "write_documents",
    "export_documents",
    "import_documents",
]
