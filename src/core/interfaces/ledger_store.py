"""Abstract interface for the Stock Ledger and Sales Journal."""

import asyncio
from abc import ABC, abstractmethod

from src.core.entities.sale import SaleRecord
from src.core.entities.stock import StockRecord


class ILedgerStore(ABC):
    """
    Persistence port for the Stock Ledger and the Sales Journal.

    Both live behind one store so that a sale's stock decrements and its
    journal entry are committed in a single atomic step. Writers must hold
    ``write_lock`` across the load-apply-commit cycle.
    """

    def __init__(self) -> None:
        self._write_lock = asyncio.Lock()

    @property
    def write_lock(self) -> asyncio.Lock:
        """Single-writer lock guarding ledger and journal mutation."""
        return self._write_lock

    @abstractmethod
    async def load_stock(self) -> list[StockRecord]:
        """Snapshot of every stock record, in ledger order, with versions."""
        pass

    @abstractmethod
    async def load_journal(self) -> list[SaleRecord]:
        """Every journal entry in recording order."""
        pass

    @abstractmethod
    async def list_sales(self, limit: int = 100, offset: int = 0) -> list[SaleRecord]:
        """Journal entries in recording order with pagination."""
        pass

    @abstractmethod
    async def commit_sale(
        self, changed: list[StockRecord], record: SaleRecord
    ) -> SaleRecord:
        """
        Atomically write changed stock records and append a journal entry.

        Each changed record carries the version it was loaded with; if any
        stored version differs, nothing is written and
        ``ConcurrentUpdateError`` is raised.

        Returns:
            The appended record with its journal ``sequence`` assigned.
        """
        pass
