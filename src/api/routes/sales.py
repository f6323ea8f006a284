"""Sale recording endpoints."""

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.api.dependencies import get_ledger, get_record_sale_use_case
from src.application.dto.requests import PaginationParams, parse_sale_request
from src.application.dto.responses import (
    ErrorResponse,
    SaleRecordedResponse,
    SalesListResponse,
)
from src.application.use_cases.record_sale import RecordSaleUseCase
from src.core.exceptions import InvalidSaleDataError
from src.core.interfaces import ILedgerStore

router = APIRouter(prefix="/api", tags=["sales"])


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-finite number {name} is not allowed")


@router.post(
    "/sale",
    response_model=SaleRecordedResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "required": ["items"],
                        "properties": {
                            "items": {
                                "type": "array",
                                "items": {
                                    "type": "object",
                                    "required": ["id", "quantity", "price"],
                                    "properties": {
                                        "id": {"type": ["integer", "string"]},
                                        "quantity": {"type": "integer"},
                                        "price": {"type": "number"},
                                    },
                                },
                            }
                        },
                        "additionalProperties": True,
                    }
                }
            },
        }
    },
)
async def record_sale(
    request: Request,
    use_case: RecordSaleUseCase = Depends(get_record_sale_use_case),
) -> SaleRecordedResponse:
    """Record a sale: decrement stock, compute profit/revenue, append to the journal."""
    try:
        body = json.loads(await request.body(), parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidSaleDataError(f"request body is not valid JSON: {e}", field="body") from e

    sale = parse_sale_request(body)
    result = await use_case.execute(sale)
    return use_case.to_response(result)


@router.get(
    "/sales",
    response_model=SalesListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_sales(
    params: Annotated[PaginationParams, Query()],
    store: ILedgerStore = Depends(get_ledger),
) -> SalesListResponse:
    """List journal entries in recording order."""
    records = await store.list_sales(limit=params.limit, offset=params.offset)
    return SalesListResponse(
        sales=[record.to_document() for record in records],
        total=len(records),
        limit=params.limit,
        offset=params.offset,
    )
