"""Abstract interface for catalog storage."""

from abc import ABC, abstractmethod

from src.core.entities.product import Product


class ICatalogStore(ABC):
    """Read-only access to product definitions."""

    @abstractmethod
    async def list_products(self) -> list[Product]:
        """List all products in catalog order."""
        pass
