"""Record Sale Use Case: applies a sale to the ledger and appends it to the journal."""

from dataclasses import dataclass

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
)

from src.application.dto.responses import ItemOutcomeResponse, SaleRecordedResponse
from src.config import get_logger, get_settings
from src.core.entities.sale import SaleOutcome, SaleRequest
from src.core.exceptions import ConcurrentUpdateError
from src.core.interfaces.ledger_store import ILedgerStore
from src.core.services.sale_processor import SalePolicy, SaleProcessor

logger = get_logger(__name__)


@dataclass
class RecordSaleResult:
    """Result of recording a sale."""

    outcome: SaleOutcome
    attempts: int = 1


class RecordSaleUseCase:
    """
    Record a sale under the ledger store's single-writer lock.

    Load snapshot, apply, commit. An optimistic version conflict (another
    process wrote the ledger) reloads the snapshot and reapplies, up to
    ``commit_retries`` extra attempts.
    """

    def __init__(
        self,
        ledger_store: ILedgerStore | None = None,
        processor: SaleProcessor | None = None,
        commit_retries: int | None = None,
    ):
        self._ledger_store = ledger_store
        self._processor = processor
        self._commit_retries = commit_retries

    def _get_ledger_store(self) -> ILedgerStore:
        if self._ledger_store is None:
            from src.infrastructure.storage import get_ledger_store

            self._ledger_store = get_ledger_store()
        return self._ledger_store

    def _get_processor(self) -> SaleProcessor:
        if self._processor is None:
            self._processor = SaleProcessor(SalePolicy.from_settings(get_settings().sales))
        return self._processor

    def _get_commit_retries(self) -> int:
        if self._commit_retries is None:
            self._commit_retries = get_settings().sales.commit_retries
        return self._commit_retries

    @staticmethod
    def _log_conflict(retry_state: RetryCallState) -> None:
        """Log a version conflict before reloading the snapshot."""
        error = retry_state.outcome.exception() if retry_state.outcome else None
        logger.warning(
            "record_sale_conflict",
            attempt=retry_state.attempt_number,
            item_ids=getattr(error, "details", {}).get("item_ids"),
        )

    async def execute(self, request: SaleRequest) -> RecordSaleResult:
        """Execute record sale use case."""
        logger.info("record_sale_started", items=len(request.items))

        store = self._get_ledger_store()
        processor = self._get_processor()
        retrying = AsyncRetrying(
            stop=stop_after_attempt(self._get_commit_retries() + 1),
            retry=retry_if_exception_type(ConcurrentUpdateError),
            before_sleep=self._log_conflict,
        )
        attempts = 0

        async with store.write_lock:
            try:
                async for attempt in retrying:
                    with attempt:
                        attempts = attempt.retry_state.attempt_number
                        ledger = await store.load_stock()
                        applied = processor.apply(request, ledger)
                        committed = await store.commit_sale(applied.changed, applied.record)
            except RetryError as e:
                conflict = e.last_attempt.exception()
                item_ids = conflict.details.get("item_ids", []) if conflict else []
                logger.error("record_sale_conflict_exhausted", attempts=attempts, item_ids=item_ids)
                raise ConcurrentUpdateError(item_ids, attempts=attempts) from conflict

        outcome = applied.to_outcome(committed)
        logger.info(
            "sale_recorded",
            sale_id=outcome.sale_id,
            profit=outcome.total_profit,
            revenue=outcome.total_revenue,
            applied=outcome.applied_count,
            skipped=outcome.skipped_count,
        )
        return RecordSaleResult(outcome=outcome, attempts=attempts)

    def to_response(self, result: RecordSaleResult) -> SaleRecordedResponse:
        """Convert result to API response."""
        outcome = result.outcome
        return SaleRecordedResponse(
            profit=outcome.total_profit,
            revenue=outcome.total_revenue,
            sale_id=outcome.sale_id,
            timestamp=outcome.timestamp,
            outcomes=[
                ItemOutcomeResponse(
                    id=o.id,
                    status=o.status.value,
                    reason=o.reason,
                    quantity=o.quantity,
                    profit=o.profit,
                    revenue=o.revenue,
                )
                for o in outcome.outcomes
            ],
        )
