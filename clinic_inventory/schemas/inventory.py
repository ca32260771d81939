"""Inventory Schemas — derived statistics for the admin product dashboard.

Invariants:
    - Field names match the dicts produced by core/inventory_stats.py
    - InventoryReport.items is in the same order as the product list
"""

from pydantic import BaseModel

from clinic_inventory.core.domain_types import StockStatus


class ProductStats(BaseModel):
    """Per-product profit, markup and stock level."""
    product_id: int
    profit: float
    margin_percent: float | None = None
    stock_status: StockStatus


class InventorySummary(BaseModel):
    """Totals across every product."""
    total_products: int = 0
    total_stock: int = 0
    inventory_value: float = 0.0
    low_stock_items: int = 0


class InventoryReport(BaseModel):
    """Summary plus per-product stats."""
    summary: InventorySummary = InventorySummary()
    items: list[ProductStats] = []
