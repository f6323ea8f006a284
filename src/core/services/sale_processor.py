"""
Sale processing service.

Applies a sale request to a Stock Ledger snapshot: decrements matched
stock records, accumulates profit and revenue, and builds the Sales
Journal entry. Persistence is the caller's job; nothing here does I/O.
"""

import math
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from src.config import get_logger
from src.core.entities.sale import (
    ItemOutcome,
    ItemStatus,
    SaleOutcome,
    SaleRecord,
    SaleRequest,
)
from src.core.entities.stock import StockRecord, stock_key
from src.core.exceptions import (
    InsufficientStockError,
    InvalidSaleDataError,
    UnknownStockItemError,
)

logger = get_logger(__name__)

SKIP_REASON_UNKNOWN_ID = "unknown-id"


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC ISO-8601 timestamp with millisecond precision and ``Z`` suffix."""
    moment = (moment or datetime.now(UTC)).astimezone(UTC)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class SalePolicy:
    """Leniency switches for sale recording.

    The defaults accept unknown ids (skipped), negative stock and any
    quantity/price values.
    """

    unknown_items: str = "skip"  # "skip" | "reject"
    allow_negative_stock: bool = True
    strict_item_values: bool = False

    @classmethod
    def from_settings(cls, sales: Any) -> "SalePolicy":
        return cls(
            unknown_items=sales.unknown_items,
            allow_negative_stock=sales.allow_negative_stock,
            strict_item_values=sales.strict_item_values,
        )


@dataclass
class AppliedSale:
    """A sale applied in memory, ready to be committed."""

    changed: list[StockRecord]
    record: SaleRecord
    total_profit: int | float
    total_revenue: int | float
    outcomes: list[ItemOutcome] = field(default_factory=list)

    def to_outcome(self, committed: SaleRecord) -> SaleOutcome:
        return SaleOutcome(
            sale_id=committed.sequence,
            total_profit=self.total_profit,
            total_revenue=self.total_revenue,
            timestamp=committed.timestamp or iso_timestamp(),
            outcomes=self.outcomes,
        )


class SaleProcessor:
    """
    Applies sale requests to a ledger snapshot.

    Per item, in order: look up the stock record by id; skip unknown ids;
    otherwise decrement ``stock`` by ``quantity`` and accumulate
    ``quantity * (price - costPrice)`` profit and ``quantity * price``
    revenue. The input snapshot is never mutated; changed records are
    returned as copies.
    """

    def __init__(self, policy: SalePolicy | None = None) -> None:
        self._policy = policy or SalePolicy()

    @property
    def policy(self) -> SalePolicy:
        return self._policy

    def apply(
        self,
        request: SaleRequest,
        ledger: list[StockRecord],
        now: datetime | None = None,
    ) -> AppliedSale:
        """
        Apply ``request`` to ``ledger``.

        Raises:
            InvalidSaleDataError: strict item values are enabled and an item
                has ``quantity <= 0`` or ``price < 0``.
            UnknownStockItemError: unknown ids are rejected by policy.
            InsufficientStockError: negative stock is disallowed by policy.
        """
        if self._policy.strict_item_values:
            self._check_item_values(request)

        index = {record.key: record for record in ledger}
        working: dict[str, StockRecord] = {}
        outcomes: list[ItemOutcome] = []
        total_profit: int | float = 0
        total_revenue: int | float = 0

        for item in request.items:
            key = stock_key(item.id)
            record = working.get(key)
            if record is None and key in index:
                record = index[key].model_copy(deep=True)

            if record is None:
                if self._policy.unknown_items == "reject":
                    raise UnknownStockItemError(item.id)
                logger.info(
                    "sale_item_skipped",
                    item_id=item.id,
                    reason=SKIP_REASON_UNKNOWN_ID,
                )
                outcomes.append(
                    ItemOutcome(
                        id=item.id,
                        status=ItemStatus.SKIPPED,
                        reason=SKIP_REASON_UNKNOWN_ID,
                        quantity=item.quantity,
                    )
                )
                continue

            if not self._policy.allow_negative_stock and record.stock < item.quantity:
                raise InsufficientStockError(
                    item_id=item.id,
                    requested=item.quantity,
                    available=record.stock,
                )

            record.stock -= item.quantity
            working[key] = record

            profit = item.quantity * (item.price - record.cost_price)
            revenue = item.quantity * item.price
            total_profit += profit
            total_revenue += revenue

            outcomes.append(
                ItemOutcome(
                    id=item.id,
                    status=ItemStatus.APPLIED,
                    quantity=item.quantity,
                    profit=profit,
                    revenue=revenue,
                )
            )

        if not (math.isfinite(total_profit) and math.isfinite(total_revenue)):
            raise InvalidSaleDataError(
                "sale totals are out of range",
                value=f"profit={total_profit}, revenue={total_revenue}",
            )

        data = {
            **request.payload,
            "totalProfit": total_profit,
            "totalRevenue": total_revenue,
            "timestamp": iso_timestamp(now),
        }

        return AppliedSale(
            changed=list(working.values()),
            record=SaleRecord(data=data),
            total_profit=total_profit,
            total_revenue=total_revenue,
            outcomes=outcomes,
        )

    @staticmethod
    def _check_item_values(request: SaleRequest) -> None:
        for position, item in enumerate(request.items):
            if item.quantity <= 0:
                raise InvalidSaleDataError(
                    "quantity must be greater than zero",
                    field=f"items[{position}].quantity",
                    value=item.quantity,
                )
            if item.price < 0:
                raise InvalidSaleDataError(
                    "price must not be negative",
                    field=f"items[{position}].price",
                    value=item.price,
                )
