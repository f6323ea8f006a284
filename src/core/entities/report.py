"""Report domain entities."""

from pydantic import BaseModel


class SalesReport(BaseModel):
    """Aggregate totals over the Sales Journal."""

    total_sales: int = 0
    total_revenue: int | float = 0
    total_profit: int | float = 0
