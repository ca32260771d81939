"""List Products — read-only product query plus the derived inventory report.

Invariants:
    - Every stored product returned, unfiltered and unpaginated, in insertion order
    - Prices leave this module as floats, stock as int (ProductRead normalizes)
    - build_inventory_report reads nothing: it works on an already-fetched list
"""

from clinic_inventory.core.inventory_stats import (
    compute_inventory_summary, compute_product_stats,
)
from clinic_inventory.core.repository_protocols import ProductRepository
from clinic_inventory.schemas.inventory import (
    InventoryReport, InventorySummary, ProductStats,
)
from clinic_inventory.schemas.product import ProductRead


async def list_products(products: ProductRepository) -> list[ProductRead]:
    """Return all products as normalized read models."""
    rows = await products.list_all()
    return [ProductRead.model_validate(row) for row in rows]


def build_inventory_report(products: list[ProductRead]) -> InventoryReport:
    return InventoryReport(
        summary=InventorySummary(**compute_inventory_summary(products)),
        items=[ProductStats(**compute_product_stats(p)) for p in products],
    )
