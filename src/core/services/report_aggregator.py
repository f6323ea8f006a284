"""Report aggregation over the Sales Journal."""

from collections.abc import Iterable

from src.core.entities.report import SalesReport
from src.core.entities.sale import SaleRecord
from src.core.interfaces.ledger_store import ILedgerStore


class ReportAggregator:
    """Folds journal entries into sales count, revenue and profit totals."""

    def __init__(self, ledger_store: ILedgerStore) -> None:
        self._ledger_store = ledger_store

    async def generate_report(self) -> SalesReport:
        """Read the full journal and fold it. Read-only."""
        records = await self._ledger_store.load_journal()
        return self.fold(records)

    @staticmethod
    def fold(records: Iterable[SaleRecord]) -> SalesReport:
        """Fold entries; missing totals count as zero, an empty journal yields zeros."""
        report = SalesReport()
        for record in records:
            report.total_sales += 1
            report.total_revenue += record.total_revenue
            report.total_profit += record.total_profit
        return report
