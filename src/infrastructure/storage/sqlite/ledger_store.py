"""SQLite implementation of Stock Ledger and Sales Journal storage."""

import json
from datetime import UTC, datetime

import aiosqlite
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.sale import SaleRecord
from src.core.entities.stock import StockRecord
from src.core.exceptions import ConcurrentUpdateError, StoreReadError, StoreWriteError
from src.core.interfaces.ledger_store import ILedgerStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction

logger = get_logger(__name__)

# Errors that mean persisted state is unavailable or corrupt
_READ_ERRORS = (aiosqlite.Error, OSError, ValueError, PydanticValidationError)


class SQLiteLedgerStore(ILedgerStore):
    """
    SQLite implementation of the ledger store.

    A sale commit runs in one BEGIN IMMEDIATE transaction: every changed
    stock record is updated only if its ``version`` still matches the
    snapshot, and the journal row is inserted in the same transaction.
    """

    async def load_stock(self) -> list[StockRecord]:
        """Snapshot of every stock record, in ledger order."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM stock_records ORDER BY position, product_key"
                )
                rows = await cursor.fetchall()
            return [self._row_to_stock_record(row) for row in rows]
        except _READ_ERRORS as e:
            logger.error("stock_load_failed", error=str(e))
            raise StoreReadError("stock ledger", str(e)) from e

    async def load_journal(self) -> list[SaleRecord]:
        """Every journal entry in recording order."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute("SELECT * FROM sales ORDER BY id")
                rows = await cursor.fetchall()
            return [self._row_to_sale_record(row) for row in rows]
        except _READ_ERRORS as e:
            logger.error("journal_load_failed", error=str(e))
            raise StoreReadError("sales journal", str(e)) from e

    async def list_sales(self, limit: int = 100, offset: int = 0) -> list[SaleRecord]:
        """Journal entries in recording order with pagination."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM sales ORDER BY id LIMIT ? OFFSET ?",
                    (limit, offset),
                )
                rows = await cursor.fetchall()
            return [self._row_to_sale_record(row) for row in rows]
        except _READ_ERRORS as e:
            logger.error("journal_load_failed", error=str(e))
            raise StoreReadError("sales journal", str(e)) from e

    async def commit_sale(
        self, changed: list[StockRecord], record: SaleRecord
    ) -> SaleRecord:
        """Atomically write changed stock records and append the journal entry."""
        now = datetime.now(UTC).isoformat()
        try:
            async with get_transaction(immediate=True) as conn:
                conflicts = []
                for stock_record in changed:
                    cursor = await conn.execute(
                        """
                        UPDATE stock_records SET
                            stock = ?,
                            version = version + 1,
                            updated_at = ?
                        WHERE product_key = ? AND version = ?
                        """,
                        (stock_record.stock, now, stock_record.key, stock_record.version),
                    )
                    if cursor.rowcount != 1:
                        conflicts.append(stock_record.id)

                if conflicts:
                    raise ConcurrentUpdateError(conflicts)

                cursor = await conn.execute(
                    """
                    INSERT INTO sales (
                        recorded_at, total_profit, total_revenue, payload_json
                    ) VALUES (?, ?, ?, ?)
                    """,
                    (
                        record.timestamp or now,
                        record.total_profit,
                        record.total_revenue,
                        json.dumps(record.data),
                    ),
                )
                sequence = cursor.lastrowid
        except (aiosqlite.Error, OSError) as e:
            logger.error("store_commit_failed", error=str(e), changed=len(changed))
            raise StoreWriteError("record sale", str(e)) from e

        for stock_record in changed:
            stock_record.version += 1

        logger.info(
            "sale_committed",
            sale_id=sequence,
            stock_records_updated=len(changed),
        )
        return record.model_copy(update={"sequence": sequence})

    @staticmethod
    def _row_to_stock_record(row: aiosqlite.Row) -> StockRecord:
        """Convert a database row to a StockRecord entity."""
        extra = json.loads(row["extra_json"] or "{}")
        if not isinstance(extra, dict):
            raise ValueError(f"stock record {row['product_key']} extras are not an object")
        return StockRecord.model_validate(
            {
                **extra,
                "id": json.loads(row["product_key"]),
                "stock": row["stock"],
                "costPrice": row["cost_price"],
                "version": row["version"],
            }
        )

    @staticmethod
    def _row_to_sale_record(row: aiosqlite.Row) -> SaleRecord:
        """Convert a database row to a SaleRecord entity."""
        data = json.loads(row["payload_json"])
        if not isinstance(data, dict):
            raise ValueError(f"sale {row['id']} payload is not an object")
        return SaleRecord(sequence=row["id"], data=data)
