"""In-memory storage implementations."""

from src.infrastructure.storage.memory.stores import InMemoryCatalogStore, InMemoryLedgerStore

__all__ = ["InMemoryCatalogStore", "InMemoryLedgerStore"]
