"""Seed import and export between flat-file documents and SQLite."""

import json
from datetime import UTC, datetime

import aiosqlite

from src.config import get_logger
from src.core.exceptions import StoreWriteError
from src.infrastructure.storage.flat_files import LedgerDocuments
from src.infrastructure.storage.sqlite.catalog_store import SQLiteCatalogStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore

logger = get_logger(__name__)


async def is_database_empty() -> bool:
    """True when products, stock records and sales are all empty."""
    async with get_connection() as conn:
        for table in ("products", "stock_records", "sales"):
            cursor = await conn.execute(f"SELECT 1 FROM {table} LIMIT 1")
            if await cursor.fetchone():
                return False
    return True


async def import_documents(documents: LedgerDocuments, replace: bool = False) -> None:
    """
    Load flat-file documents into the database in one transaction.

    With ``replace`` existing products and stock records are cleared first;
    journal entries are only ever appended.
    """
    now = datetime.now(UTC).isoformat()
    try:
        async with get_transaction(immediate=True) as conn:
            if replace:
                await conn.execute("DELETE FROM products")
                await conn.execute("DELETE FROM stock_records")

            await conn.executemany(
                "INSERT INTO products (product_key, position, payload_json) VALUES (?, ?, ?)",
                [
                    (json.dumps(product.id), position, json.dumps(product.model_dump(exclude_unset=True)))
                    for position, product in enumerate(documents.products)
                ],
            )

            await conn.executemany(
                """
                INSERT INTO stock_records (
                    product_key, position, stock, cost_price, extra_json, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        record.key,
                        position,
                        record.stock,
                        record.cost_price,
                        json.dumps(record.model_extra or {}),
                        now,
                    )
                    for position, record in enumerate(documents.stock)
                ],
            )

            await conn.executemany(
                """
                INSERT INTO sales (recorded_at, total_profit, total_revenue, payload_json)
                VALUES (?, ?, ?, ?)
                """,
                [
                    (
                        record.timestamp or now,
                        record.total_profit,
                        record.total_revenue,
                        json.dumps(record.data),
                    )
                    for record in documents.sales
                ],
            )
    except aiosqlite.Error as e:
        logger.error("seed_import_failed", error=str(e))
        raise StoreWriteError("import seed documents", str(e)) from e

    logger.info(
        "seed_imported",
        products=len(documents.products),
        stock=len(documents.stock),
        sales=len(documents.sales),
        replace=replace,
    )


async def export_documents() -> LedgerDocuments:
    """Read the current database contents back into flat-file documents."""
    ledger = SQLiteLedgerStore()
    return LedgerDocuments(
        products=await SQLiteCatalogStore().list_products(),
        stock=await ledger.load_stock(),
        sales=await ledger.load_journal(),
    )
