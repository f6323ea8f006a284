"""Product catalog endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from src.api.dependencies import get_list_products_use_case
from src.application.dto.responses import ErrorResponse
from src.application.use_cases.list_products import ListProductsUseCase

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get(
    "",
    response_model=list[dict[str, Any]],
    responses={500: {"model": ErrorResponse}},
)
async def list_products(
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> list[dict[str, Any]]:
    """List every product in the catalog, attributes passed through as stored."""
    products = await use_case.execute()
    return use_case.to_response(products)
