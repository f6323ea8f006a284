"""API route modules."""

from src.api.routes.health import router as health_router
from src.api.routes.products import router as products_router
from src.api.routes.report import router as report_router
from src.api.routes.sales import router as sales_router
from src.api.routes.stock import router as stock_router

__all__ = [
    "health_router",
    "products_router",
    "sales_router",
    "report_router",
    "stock_router",
]
