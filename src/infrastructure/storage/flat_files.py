"""
Legacy flat-file documents.

The original deployment kept three JSON documents side by side, each a
top-level list: ``products.json``, ``stock.json`` and ``sales.json``.
They are used here as seed input and as an export format.
"""

import json
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from src.config import get_logger
from src.core.entities.product import Product
from src.core.entities.sale import SaleRecord
from src.core.entities.stock import StockRecord
from src.core.exceptions import SeedDataError

logger = get_logger(__name__)

PRODUCTS_FILE = "products.json"
STOCK_FILE = "stock.json"
SALES_FILE = "sales.json"


@dataclass
class LedgerDocuments:
    """Parsed contents of the three flat-file documents."""

    products: list[Product] = field(default_factory=list)
    stock: list[StockRecord] = field(default_factory=list)
    sales: list[SaleRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.products or self.stock or self.sales)


def _read_list(path: Path) -> list[Any]:
    """Read a JSON document whose top level must be a list; missing file -> []."""
    if not path.exists():
        return []
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise SeedDataError(path.name, str(e)) from e
    if not isinstance(data, list):
        raise SeedDataError(path.name, "top-level value must be a list")
    return data


def _unique(document: str, ids: list[str]) -> None:
    seen: set[str] = set()
    for key in ids:
        if key in seen:
            raise SeedDataError(document, f"duplicate id {key}")
        seen.add(key)


def parse_documents(
    products: list[Any],
    stock: list[Any],
    sales: list[Any],
) -> LedgerDocuments:
    """Validate raw document lists into entities."""
    try:
        parsed_products = [Product.model_validate(p) for p in products]
    except PydanticValidationError as e:
        raise SeedDataError(PRODUCTS_FILE, str(e)) from e
    try:
        parsed_stock = [StockRecord.model_validate(s) for s in stock]
    except PydanticValidationError as e:
        raise SeedDataError(STOCK_FILE, str(e)) from e

    _unique(PRODUCTS_FILE, [json.dumps(p.id) for p in parsed_products])
    _unique(STOCK_FILE, [s.key for s in parsed_stock])

    parsed_sales = []
    for position, entry in enumerate(sales):
        if not isinstance(entry, dict):
            raise SeedDataError(SALES_FILE, f"entry {position} is not an object")
        parsed_sales.append(SaleRecord(data=entry))

    return LedgerDocuments(products=parsed_products, stock=parsed_stock, sales=parsed_sales)


def read_documents(directory: Path) -> LedgerDocuments:
    """Read and validate ``products.json``, ``stock.json`` and ``sales.json``."""
    documents = parse_documents(
        _read_list(directory / PRODUCTS_FILE),
        _read_list(directory / STOCK_FILE),
        _read_list(directory / SALES_FILE),
    )
    logger.info(
        "flat_files_read",
        directory=str(directory),
        products=len(documents.products),
        stock=len(documents.stock),
        sales=len(documents.sales),
    )
    return documents


def _write_atomic(path: Path, data: list[Any]) -> None:
    """Write JSON via a temp file in the same directory, then rename over the target."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def write_documents(directory: Path, documents: LedgerDocuments) -> list[Path]:
    """Write the three documents (2-space indented JSON lists)."""
    directory.mkdir(parents=True, exist_ok=True)
    targets = {
        directory / PRODUCTS_FILE: [p.model_dump(exclude_unset=True) for p in documents.products],
        directory / STOCK_FILE: [s.to_document() for s in documents.stock],
        directory / SALES_FILE: [r.to_document() for r in documents.sales],
    }
    for path, data in targets.items():
        _write_atomic(path, data)
    logger.info("flat_files_written", directory=str(directory))
    return list(targets)
