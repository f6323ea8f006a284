"""Stock ledger domain entities."""

import json

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

ItemId = int | str


def stock_key(item_id: ItemId) -> str:
    """Canonical storage key for a product/stock id.

    Ids match strictly: ``1`` and ``"1"`` produce different keys.
    """
    return json.dumps(item_id)


class StockRecord(BaseModel):
    """On-hand quantity and unit cost for one product."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: ItemId
    stock: int = 0
    cost_price: int | FiniteFloat = Field(default=0, ge=0, alias="costPrice")
    version: int = Field(default=0, exclude=True)  # optimistic concurrency counter

    @property
    def key(self) -> str:
        return stock_key(self.id)

    def to_document(self) -> dict:
        """Wire/flat-file representation: ``{id, stock, costPrice, ...extras}``."""
        return self.model_dump(by_alias=True)
