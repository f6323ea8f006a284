"""List Products Use Case: catalog passthrough."""

from typing import Any

from src.core.entities.product import Product
from src.core.interfaces.catalog_store import ICatalogStore


class ListProductsUseCase:
    """Return the product catalog as stored."""

    def __init__(self, catalog_store: ICatalogStore | None = None):
        self._catalog_store = catalog_store

    def _get_catalog_store(self) -> ICatalogStore:
        if self._catalog_store is None:
            from src.infrastructure.storage import get_catalog_store

            self._catalog_store = get_catalog_store()
        return self._catalog_store

    async def execute(self) -> list[Product]:
        return await self._get_catalog_store().list_products()

    def to_response(self, products: list[Product]) -> list[dict[str, Any]]:
        return [p.model_dump(exclude_unset=True) for p in products]
