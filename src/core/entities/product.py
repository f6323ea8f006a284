"""Catalog domain entities."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """A sellable product as defined in the catalog.

    Only ``id`` is checked. ``name``, ``price`` and any other display
    attributes are returned exactly as stored.
    """

    model_config = ConfigDict(extra="allow")

    id: int | str
    name: Any = None
    price: Any = None
