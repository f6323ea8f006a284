"""SQLite implementation of catalog storage."""

import json

import aiosqlite
from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.product import Product
from src.core.exceptions import StoreReadError
from src.core.interfaces.catalog_store import ICatalogStore
from src.infrastructure.storage.sqlite.connection import get_connection

logger = get_logger(__name__)


class SQLiteCatalogStore(ICatalogStore):
    """SQLite implementation of read-only product catalog storage."""

    async def list_products(self) -> list[Product]:
        """List all products in catalog order."""
        try:
            async with get_connection() as conn:
                cursor = await conn.execute(
                    "SELECT * FROM products ORDER BY position, product_key"
                )
                rows = await cursor.fetchall()
            return [self._row_to_product(row) for row in rows]
        except (aiosqlite.Error, OSError, ValueError, PydanticValidationError) as e:
            logger.error("catalog_load_failed", error=str(e))
            raise StoreReadError("products", str(e)) from e

    @staticmethod
    def _row_to_product(row: aiosqlite.Row) -> Product:
        """Convert a database row to a Product entity."""
        payload = json.loads(row["payload_json"])
        if not isinstance(payload, dict):
            raise ValueError(f"product {row['product_key']} payload is not an object")
        return Product.model_validate(payload)
