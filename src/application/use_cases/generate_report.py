"""Generate Report Use Case: folds the Sales Journal into totals."""

from src.application.dto.responses import ReportResponse
from src.config import get_logger
from src.core.entities.report import SalesReport
from src.core.interfaces.ledger_store import ILedgerStore
from src.core.services.report_aggregator import ReportAggregator

logger = get_logger(__name__)


class GenerateReportUseCase:
    """Read-only sales report over the full journal."""

    def __init__(self, ledger_store: ILedgerStore | None = None):
        self._ledger_store = ledger_store

    def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from src.infrastructure.storage import get_ledger_store

            self._ledger_store = get_ledger_store()
        return self._ledger_store

    async def execute(self) -> SalesReport:
        """Execute generate report use case."""
        report = await ReportAggregator(self._get_ledger_store()).generate_report()
        logger.info(
            "report_generated",
            total_sales=report.total_sales,
            total_revenue=report.total_revenue,
            total_profit=report.total_profit,
        )
        return report

    def to_response(self, report: SalesReport) -> ReportResponse:
        """Convert report to API response."""
        return ReportResponse(
            total_sales=report.total_sales,
            total_revenue=report.total_revenue,
            total_profit=report.total_profit,
        )
