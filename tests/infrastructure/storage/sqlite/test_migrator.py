"""Tests for the schema migrator."""

from src.infrastructure.storage.sqlite.migrations import (
    discover_migrations,
    get_migration_status,
    run_migrations,
)


def test_discover_migrations():
    migrations = discover_migrations()

    assert migrations
    assert migrations[0].version == "001"
    assert migrations[0].name == "initial"
    assert len(migrations[0].checksum) == 16


async def test_run_migrations_fresh_database(tmp_path):
    db_path = tmp_path / "fresh.db"

    results = await run_migrations(db_path)

    assert results
    assert all(r.success for r in results)


async def test_run_migrations_is_idempotent(tmp_path):
    db_path = tmp_path / "again.db"
    await run_migrations(db_path)

    assert await run_migrations(db_path) == []


async def test_status_before_and_after(tmp_path):
    db_path = tmp_path / "status.db"

    before = await get_migration_status(db_path)
    assert before["exists"] is False
    assert "sales" in before["missing_tables"]

    await run_migrations(db_path)
    after = await get_migration_status(db_path)

    assert after["exists"] is True
    assert after["current_version"] == "001"
    assert after["pending_migrations"] == []
    assert after["missing_tables"] == []
