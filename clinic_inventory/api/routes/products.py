"""Products — admin-only inventory listing and summary.

Invariants:
    - Every endpoint depends on require_admin (401 UNAUTHORIZED otherwise)
    - Read-only: no create/update/delete routes
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_inventory.api.dependencies import require_admin
from clinic_inventory.infrastructure.database import get_db
from clinic_inventory.schemas.inventory import InventoryReport
from clinic_inventory.schemas.product import ProductRead
from clinic_inventory.schemas.user import UserRead
from clinic_inventory.services.list_products import (
    build_inventory_report, list_products,
)
from clinic_inventory.services.repositories import SqlProductRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=list[ProductRead])
async def get_products(
    admin: UserRead = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """List every product in insertion order."""
    products = await list_products(SqlProductRepository(db))
    logger.info(
        f"Listed {len(products)} products", extra={"user_id": admin.id},
    )
    return products


@router.get("/summary", response_model=InventoryReport)
async def get_inventory_summary(
    admin: UserRead = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Totals and per-product profit/stock figures for the admin dashboard."""
    products = await list_products(SqlProductRepository(db))
    return build_inventory_report(products)
