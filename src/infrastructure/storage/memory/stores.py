"""
In-memory catalog and ledger stores.

Process-local state with the same commit contract as the SQLite stores;
used for the ``memory`` storage backend and as test doubles.
"""

import asyncio
from collections.abc import Iterable
from typing import Any

from src.config import get_logger
from src.core.entities.product import Product
from src.core.entities.sale import SaleRecord
from src.core.entities.stock import StockRecord
from src.core.exceptions import ConcurrentUpdateError
from src.core.interfaces.catalog_store import ICatalogStore
from src.core.interfaces.ledger_store import ILedgerStore

logger = get_logger(__name__)


class InMemoryCatalogStore(ICatalogStore):
    """Read-only product list held in memory."""

    def __init__(self, products: Iterable[Product | dict[str, Any]] = ()) -> None:
        self._products = [
            p if isinstance(p, Product) else Product.model_validate(p) for p in products
        ]

    async def list_products(self) -> list[Product]:
        await asyncio.sleep(0)
        return [p.model_copy(deep=True) for p in self._products]


class InMemoryLedgerStore(ILedgerStore):
    """
    Stock ledger and sales journal held in memory.

    Every load and commit yields to the event loop once, so unsynchronized
    callers interleave the way they would against real I/O.
    """

    def __init__(
        self,
        stock: Iterable[StockRecord | dict[str, Any]] = (),
        sales: Iterable[SaleRecord | dict[str, Any]] = (),
    ) -> None:
        super().__init__()
        self._stock: dict[str, StockRecord] = {}
        for entry in stock:
            record = entry if isinstance(entry, StockRecord) else StockRecord.model_validate(entry)
            self._stock[record.key] = record
        self._sales: list[SaleRecord] = []
        for entry in sales:
            data = entry.data if isinstance(entry, SaleRecord) else entry
            self._sales.append(SaleRecord(sequence=len(self._sales) + 1, data=dict(data)))

    async def load_stock(self) -> list[StockRecord]:
        await asyncio.sleep(0)
        return [record.model_copy(deep=True) for record in self._stock.values()]

    async def load_journal(self) -> list[SaleRecord]:
        await asyncio.sleep(0)
        return [record.model_copy(deep=True) for record in self._sales]

    async def list_sales(self, limit: int = 100, offset: int = 0) -> list[SaleRecord]:
        journal = await self.load_journal()
        return journal[offset : offset + limit]

    async def commit_sale(
        self, changed: list[StockRecord], record: SaleRecord
    ) -> SaleRecord:
        await asyncio.sleep(0)
        conflicts = [
            r.id
            for r in changed
            if r.key not in self._stock or self._stock[r.key].version != r.version
        ]
        if conflicts:
            raise ConcurrentUpdateError(conflicts)

        for r in changed:
            stored = self._stock[r.key]
            stored.stock = r.stock
            stored.version += 1
            r.version = stored.version

        committed = SaleRecord(sequence=len(self._sales) + 1, data=dict(record.data))
        self._sales.append(committed)
        logger.info("sale_committed", sale_id=committed.sequence, stock_records_updated=len(changed))
        return committed.model_copy(deep=True)
