"""Integration tests: catalog, sale recording and report over SQLite."""

import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.dependencies import (
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
from src.infrastructure.storage.flat_files import parse_documents, read_documents, write_documents
from src.infrastructure.storage.sqlite import (
    SQLiteCatalogStore,
    SQLiteLedgerStore,
    export_documents,
    import_documents,
)


@pytest.fixture
def policy() -> SalePolicy:
    return SalePolicy()


@pytest_asyncio.fixture
async def sqlite_client(sqlite_db, policy):
    await import_documents(
        parse_documents(
            products=[{"id": 1, "name": "Widget", "price": 8}],
            stock=[
                {"id": 1, "stock": 10, "costPrice": 5},
                {"id": 2, "stock": 1, "costPrice": 2},
            ],
            sales=[],
        )
    )
    ledger = SQLiteLedgerStore()

    app.dependency_overrides[get_ledger] = lambda: ledger
    app.dependency_overrides[get_list_products_use_case] = lambda: ListProductsUseCase(
        catalog_store=SQLiteCatalogStore()
    )
    app.dependency_overrides[get_record_sale_use_case] = lambda: RecordSaleUseCase(
        ledger_store=ledger,
        processor=SaleProcessor(policy),
        commit_retries=3,
    )
    app.dependency_overrides[get_generate_report_use_case] = lambda: GenerateReportUseCase(
        ledger_store=ledger
    )

    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


class TestSaleFlow:
    async def test_sale_then_report(self, sqlite_client):
        products = (await sqlite_client.get("/api/products")).json()
        assert products == [{"id": 1, "name": "Widget", "price": 8}]

        sale = await sqlite_client.post(
            "/api/sale",
            json={"items": [{"id": 1, "quantity": 3, "price": 8}], "register": "front"},
        )
        assert sale.status_code == 200
        assert sale.json()["profit"] == 9

        stock = (await sqlite_client.get("/api/stock")).json()["items"]
        assert stock[0]["stock"] == 7

        report = (await sqlite_client.get("/api/report")).json()
        assert report == {"totalSales": 1, "totalRevenue": 24, "totalProfit": 9}

        sales = (await sqlite_client.get("/api/sales")).json()["sales"]
        assert sales[0]["register"] == "front"
        assert sales[0]["timestamp"].endswith("Z")

    async def test_concurrent_sales_keep_every_decrement(self, sqlite_client):
        responses = await asyncio.gather(
            *(
                sqlite_client.post(
                    "/api/sale", json={"items": [{"id": 1, "quantity": 1, "price": 8}]}
                )
                for _ in range(6)
            )
        )

        assert all(r.status_code == 200 for r in responses)
        stock = (await sqlite_client.get("/api/stock")).json()["items"]
        assert stock[0]["stock"] == 4
        report = (await sqlite_client.get("/api/report")).json()
        assert report["totalSales"] == 6

    @pytest.mark.parametrize("policy", [SalePolicy(allow_negative_stock=False)])
    async def test_last_unit_sold_once(self, policy, sqlite_client):
        responses = await asyncio.gather(
            *(
                sqlite_client.post(
                    "/api/sale", json={"items": [{"id": 2, "quantity": 1, "price": 5}]}
                )
                for _ in range(2)
            )
        )

        assert sorted(r.status_code for r in responses) == [200, 400]
        stock = (await sqlite_client.get("/api/stock")).json()["items"]
        assert stock[1]["stock"] == 0

    async def test_export_matches_state(self, sqlite_client, tmp_path):
        await sqlite_client.post(
            "/api/sale", json={"items": [{"id": 2, "quantity": 1, "price": 5}]}
        )

        write_documents(tmp_path / "export", await export_documents())
        documents = read_documents(tmp_path / "export")

        assert [s.stock for s in documents.stock] == [10, 0]
        assert documents.sales[0].total_revenue == 5
