"""Inventory Stats — pure computation of per-product and collection-wide figures.

Invariants:
    - All inputs are already-normalized products (float prices, int stock); no IO, no DB
    - LOW_STOCK_THRESHOLD (20) is single source of truth for the low-stock cutoff
    - Out-of-stock products also count as low stock in the summary
    - Money rounded to 2 decimals, margin percentage to 1 decimal
    - margin_percent is None when purchase_price is not positive (stored rows
      bypass input validation)

Design Decisions:
    - Pure functions returning flat dicts, not methods on the schema: schemas are API
      contracts, stats are presentation
    - Margin is relative to purchase price (markup), matching the admin product cards
"""

from typing import Iterable, Protocol

from clinic_inventory.core.domain_types import StockStatus


LOW_STOCK_THRESHOLD: int = 20


class ProductLike(Protocol):
    """Structural contract for a normalized product."""
    id: int
    purchase_price: float
    selling_price: float
    stock: int


def classify_stock(stock: int) -> StockStatus:
    if stock == 0:
        return StockStatus.OUT_OF_STOCK
    if stock <= LOW_STOCK_THRESHOLD:
        return StockStatus.LOW_STOCK
    return StockStatus.IN_STOCK


def compute_product_stats(product: ProductLike) -> dict:
    """Profit, margin and stock status for one product. Pure, no IO."""
    profit = product.selling_price - product.purchase_price
    margin = None
    if product.purchase_price > 0:
        margin = round(profit / product.purchase_price * 100, 1)
    return {
        "product_id": product.id,
        "profit": round(profit, 2),
        "margin_percent": margin,
        "stock_status": classify_stock(product.stock),
    }


def compute_inventory_summary(products: Iterable[ProductLike]) -> dict:
    """Collection totals shown under the product list. Pure, no IO."""
    items = list(products)
    return {
        "total_products": len(items),
        "total_stock": sum(p.stock for p in items),
        "inventory_value": round(
            sum(p.purchase_price * p.stock for p in items), 2,
        ),
        "low_stock_items": sum(
            1 for p in items if p.stock <= LOW_STOCK_THRESHOLD
        ),
    }
