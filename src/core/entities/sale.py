"""Sale recording domain entities."""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, PrivateAttr

from src.core.entities.stock import ItemId


def _as_number(value: Any) -> int | float:
    """Numeric field value, or 0 for missing/non-numeric values."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


class ItemStatus(str, Enum):
    """Per-item result of applying a sale to the ledger."""

    APPLIED = "applied"
    SKIPPED = "skipped"


class SaleItem(BaseModel):
    """One line of an incoming sale request."""

    model_config = ConfigDict(extra="allow")

    id: ItemId
    quantity: int
    price: int | FiniteFloat  # unit sale price as supplied by the caller


class SaleRequest(BaseModel):
    """An incoming sale: ordered items plus arbitrary caller fields."""

    model_config = ConfigDict(extra="allow")

    items: list[SaleItem] = Field(default_factory=list)

    # Verbatim request body, preserved into the journal entry
    _payload: dict[str, Any] | None = PrivateAttr(default=None)

    @property
    def payload(self) -> dict[str, Any]:
        if self._payload is not None:
            return self._payload
        return self.model_dump(mode="json")

    def with_payload(self, payload: dict[str, Any]) -> "SaleRequest":
        self._payload = payload
        return self


class ItemOutcome(BaseModel):
    """What happened to one sale item."""

    id: ItemId
    status: ItemStatus
    reason: str | None = None  # "unknown-id" for skipped items
    quantity: int
    profit: int | float = 0
    revenue: int | float = 0


class SaleRecord(BaseModel):
    """A Sales Journal entry.

    ``data`` holds the request fields plus ``totalProfit``, ``totalRevenue``
    and ``timestamp``. Legacy entries may lack the computed totals, in which
    case they read as zero.
    """

    sequence: int | None = None  # journal position, assigned on commit
    data: dict[str, Any]

    @property
    def total_profit(self) -> int | float:
        return _as_number(self.data.get("totalProfit"))

    @property
    def total_revenue(self) -> int | float:
        return _as_number(self.data.get("totalRevenue"))

    @property
    def timestamp(self) -> str | None:
        value = self.data.get("timestamp")
        return value if isinstance(value, str) else None

    @property
    def items(self) -> list[Any]:
        items = self.data.get("items")
        return items if isinstance(items, list) else []

    def to_document(self) -> dict[str, Any]:
        return dict(self.data)


class SaleOutcome(BaseModel):
    """Result surfaced to the caller after a sale is committed."""

    sale_id: int | None = None
    total_profit: int | float = 0
    total_revenue: int | float = 0
    timestamp: str
    outcomes: list[ItemOutcome] = Field(default_factory=list)

    @property
    def applied_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == ItemStatus.APPLIED)

    @property
    def skipped_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == ItemStatus.SKIPPED)
