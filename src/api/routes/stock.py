"""Stock ledger endpoints."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_ledger
from src.application.dto.responses import (
    ErrorResponse,
    StockListResponse,
    StockRecordResponse,
)
from src.core.interfaces import ILedgerStore

router = APIRouter(prefix="/api/stock", tags=["stock"])


@router.get(
    "",
    response_model=StockListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_stock(
    store: ILedgerStore = Depends(get_ledger),
) -> StockListResponse:
    """Current on-hand quantity and unit cost for every stock record."""
    records = await store.load_stock()
    return StockListResponse(
        items=[StockRecordResponse.model_validate(r.to_document()) for r in records],
        total=len(records),
    )
