"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization. Wire names are
camelCase (``totalRevenue``, ``costPrice``) to match the public JSON API.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemOutcomeResponse(CamelModel):
    """Per-item outcome of a recorded sale."""

    id: int | str
    status: str = Field(..., description="applied or skipped")
    reason: str | None = Field(default=None, description="Why an item was skipped")
    quantity: int
    profit: int | float = 0
    revenue: int | float = 0


class SaleRecordedResponse(CamelModel):
    """Response for POST /api/sale."""

    message: str = "Sale recorded"
    profit: int | float
    revenue: int | float
    sale_id: int | None = None
    timestamp: str
    outcomes: list[ItemOutcomeResponse] = Field(default_factory=list)


class ReportResponse(CamelModel):
    """Aggregate journal totals."""

    total_sales: int
    total_revenue: int | float
    total_profit: int | float


class StockRecordResponse(CamelModel):
    """One stock ledger record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: int | str
    stock: int
    cost_price: int | float


class StockListResponse(BaseModel):
    """Stock ledger listing."""

    items: list[StockRecordResponse]
    total: int


class SalesListResponse(BaseModel):
    """Sales journal listing (entries as recorded)."""

    sales: list[dict[str, Any]]
    total: int
    limit: int
    offset: int


class ProviderHealthResponse(BaseModel):
    """Provider health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error: human-readable description
    - error_code: machine-readable code (e.g. INVALID_SALE_DATA)
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error: str = Field(..., description="Human-readable error description")
    error_code: str = Field(..., description="Machine-readable error code")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def message(self) -> str:
        """Alias for error."""
        return self.error
