"""Tests for SQLite ledger store."""

import aiosqlite
import pytest

from src.core.entities.sale import SaleRecord
from src.core.exceptions import ConcurrentUpdateError, StoreReadError, StoreWriteError
from src.infrastructure.storage.flat_files import parse_documents
from src.infrastructure.storage.sqlite.ledger_store import SQLiteLedgerStore
from src.infrastructure.storage.sqlite.seed import import_documents


@pytest.fixture
async def seeded_db(sqlite_db):
    await import_documents(
        parse_documents(
            products=[],
            stock=[
                {"id": 1, "stock": 10, "costPrice": 5},
                {"id": "1", "stock": 3, "costPrice": 1.25, "bin": "A4"},
            ],
            sales=[],
        )
    )
    return sqlite_db


@pytest.fixture
def store() -> SQLiteLedgerStore:
    return SQLiteLedgerStore()


class TestSQLiteLedgerStore:
    async def test_load_stock(self, seeded_db, store):
        records = await store.load_stock()

        assert [(r.id, r.stock, r.cost_price) for r in records] == [(1, 10, 5), ("1", 3, 1.25)]
        assert isinstance(records[0].cost_price, int)
        assert records[1].model_extra == {"bin": "A4"}
        assert all(r.version == 0 for r in records)

    async def test_commit_sale(self, seeded_db, store):
        records = await store.load_stock()
        changed = records[0]
        changed.stock = 7
        record = SaleRecord(
            data={
                "items": [{"id": 1, "quantity": 3, "price": 8}],
                "totalProfit": 9,
                "totalRevenue": 24,
                "timestamp": "2024-01-01T00:00:00.000Z",
            }
        )

        committed = await store.commit_sale([changed], record)

        assert committed.sequence == 1
        assert changed.version == 1
        reloaded = await store.load_stock()
        assert reloaded[0].stock == 7
        assert reloaded[0].version == 1
        assert reloaded[1].stock == 3
        journal = await store.load_journal()
        assert journal[0].data == record.data
        assert journal[0].sequence == 1

    async def test_stale_version_rolls_back(self, seeded_db, store):
        first = await store.load_stock()
        second = await store.load_stock()

        first[0].stock = 9
        await store.commit_sale([first[0]], SaleRecord(data={"totalRevenue": 1}))

        second[0].stock = 8
        second[1].stock = 2
        with pytest.raises(ConcurrentUpdateError) as exc_info:
            await store.commit_sale(
                [second[1], second[0]], SaleRecord(data={"totalRevenue": 2})
            )

        assert exc_info.value.details["item_ids"] == [1]
        reloaded = await store.load_stock()
        assert [r.stock for r in reloaded] == [9, 3]
        assert len(await store.load_journal()) == 1

    async def test_empty_change_set_appends_journal(self, seeded_db, store):
        committed = await store.commit_sale([], SaleRecord(data={"items": []}))

        assert committed.sequence == 1
        assert (await store.load_journal())[0].data == {"items": []}

    async def test_list_sales_pagination(self, seeded_db, store):
        for n in range(5):
            await store.commit_sale([], SaleRecord(data={"n": n}))

        page = await store.list_sales(limit=2, offset=2)

        assert [r.data["n"] for r in page] == [2, 3]

    async def test_journal_is_append_only(self, seeded_db, store):
        await store.commit_sale([], SaleRecord(data={"n": 1}))

        async with aiosqlite.connect(seeded_db) as conn:
            with pytest.raises(aiosqlite.IntegrityError):
                await conn.execute("DELETE FROM sales")
            with pytest.raises(aiosqlite.IntegrityError):
                await conn.execute("UPDATE sales SET total_profit = 0")

    async def test_corrupt_payload_is_read_error(self, seeded_db, store):
        async with aiosqlite.connect(seeded_db) as conn:
            await conn.execute(
                "INSERT INTO sales (recorded_at, payload_json) VALUES ('now', '[1, 2]')"
            )
            await conn.commit()

        with pytest.raises(StoreReadError):
            await store.load_journal()

    async def test_write_failure_is_write_error(self, seeded_db, store):
        records = await store.load_stock()
        records[0].stock = 0

        async with aiosqlite.connect(seeded_db) as conn:
            await conn.execute("ALTER TABLE sales RENAME TO sales_old")
            await conn.commit()

        with pytest.raises(StoreWriteError):
            await store.commit_sale([records[0]], SaleRecord(data={"items": []}))

        assert (await store.load_stock())[0].stock == 10
