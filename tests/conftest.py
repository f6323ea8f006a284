"""Pytest configuration and fixtures."""

import os

# Tests run against the in-memory backend unless a fixture says otherwise
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("STORAGE_SEED_ON_START", "false")

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import (
    get_catalog,
    get_generate_report_use_case,
    get_ledger,
    get_list_products_use_case,
    get_record_sale_use_case,
)
from src.api.main import app
from src.application.use_cases import (
    GenerateReportUseCase,
    ListProductsUseCase,
    RecordSaleUseCase,
)
from src.core.services.sale_processor import SalePolicy, SaleProcessor
from src.infrastructure.storage import InMemoryCatalogStore, InMemoryLedgerStore, reset_stores
from src.infrastructure.storage.sqlite import connection as conn_module
from src.infrastructure.storage.sqlite.migrations import run_migrations


@pytest.fixture
def sample_products() -> list[dict]:
    return [
        {"id": 1, "name": "Widget", "price": 25, "category": "tools"},
        {"id": 2, "name": "Gadget", "price": 12.5},
    ]


@pytest.fixture
def sample_stock() -> list[dict]:
    return [
        {"id": 1, "stock": 10, "costPrice": 5},
        {"id": 2, "stock": 4, "costPrice": 2.5, "location": "shelf-b"},
    ]


@pytest.fixture
def catalog_store(sample_products) -> InMemoryCatalogStore:
    return InMemoryCatalogStore(sample_products)


@pytest.fixture
def ledger_store(sample_stock) -> InMemoryLedgerStore:
    return InMemoryLedgerStore(sample_stock)


@pytest.fixture
def lenient_processor() -> SaleProcessor:
    return SaleProcessor(SalePolicy())


@pytest_asyncio.fixture
async def async_client(
    catalog_store: InMemoryCatalogStore,
    ledger_store: InMemoryLedgerStore,
    lenient_processor: SaleProcessor,
) -> AsyncGenerator[AsyncClient, None]:
    """Async client wired to in-memory stores."""
    app.dependency_overrides[get_catalog] = lambda: catalog_store
    app.dependency_overrides[get_ledger] = lambda: ledger_store
    app.dependency_overrides[get_list_products_use_case] = lambda: ListProductsUseCase(
        catalog_store=catalog_store
    )
    app.dependency_overrides[get_record_sale_use_case] = lambda: RecordSaleUseCase(
        ledger_store=ledger_store,
        processor=lenient_processor,
        commit_retries=3,
    )
    app.dependency_overrides[get_generate_report_use_case] = lambda: GenerateReportUseCase(
        ledger_store=ledger_store
    )

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
        reset_stores()


@pytest_asyncio.fixture
async def sqlite_db(tmp_path: Path) -> AsyncGenerator[Path, None]:
    """Migrated temporary database with the global pool pointed at it."""
    db_path = tmp_path / "test_pos.db"

    conn_module._pool = None
    mock_settings = MagicMock()
    mock_settings.storage.db_path = db_path
    mock_settings.storage.pool_size = 2
    mock_settings.storage.busy_timeout = 5000

    await run_migrations(db_path)

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield db_path
        finally:
            await conn_module.close_pool()
