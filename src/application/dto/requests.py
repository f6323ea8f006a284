"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

import copy
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from src.core.entities.sale import SaleRequest
from src.core.exceptions import InvalidSaleDataError


def _describe(error: PydanticValidationError) -> tuple[str, str]:
    """First validation error as (dotted location, message)."""
    first = error.errors()[0]
    parts = [str(part) for part in first.get("loc", ())]
    location = ".".join(parts) if parts else "items"
    return location, first.get("msg", "invalid value")


def parse_sale_request(body: Any) -> SaleRequest:
    """
    Validate a decoded JSON body into a SaleRequest.

    The body must be an object whose ``items`` is a list (possibly empty)
    of objects carrying ``id``, ``quantity`` and ``price``. The original
    body is kept verbatim for the journal entry.

    Raises:
        InvalidSaleDataError: Before any side effect, for any other shape.
    """
    if not isinstance(body, dict):
        raise InvalidSaleDataError("request body must be a JSON object", field="body")
    if "items" not in body:
        raise InvalidSaleDataError("items is required")
    items = body["items"]
    if isinstance(items, str | bytes) or not isinstance(items, Sequence):
        raise InvalidSaleDataError("items must be a sequence", value=items)

    try:
        request = SaleRequest.model_validate(body)
    except PydanticValidationError as e:
        location, message = _describe(e)
        raise InvalidSaleDataError(message, field=location) from e

    return request.with_payload(copy.deepcopy(body))


class PaginationParams(BaseModel):
    """Limit/offset query parameters for listings."""

    limit: int = Field(default=100, ge=1, le=1000, description="Maximum entries to return")
    offset: int = Field(default=0, ge=0, description="Entries to skip")
