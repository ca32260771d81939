"""Demo Seed Data — sample clinic users and products for local development.

Invariants:
    - Only runs from `python -m clinic_inventory.db.seed`, never at app startup
    - Each table is seeded only when empty (re-running is a no-op)
    - Products inserted in list order, so their ids follow the same order

Design Decisions:
    - Sample data lives here instead of in the request handlers: production reads
      always go to the real store
"""

import asyncio
import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_inventory.config import get_settings
from clinic_inventory.core.domain_types import Role
from clinic_inventory.db.session import create_session_factory
from clinic_inventory.infrastructure.observability import setup_logging
from clinic_inventory.models.product import Product
from clinic_inventory.models.user import User
from clinic_inventory.schemas.user import UserCreate

logger = logging.getLogger(__name__)


DEMO_USERS = [
    {"username": "admin", "email": "admin@clinic.com", "role": Role.ADMIN},
    {"username": "staff", "email": "staff@clinic.com", "role": Role.USER},
]

DEMO_PRODUCTS = [
    ("Digital Thermometer", "Medical Equipment", "25.00", "35.00", 50),
    ("Blood Pressure Monitor", "Medical Equipment", "80.00", "120.00", 25),
    ("Surgical Gloves (Box of 100)", "Consumables", "15.00", "22.00", 200),
    ("Bandages", "Consumables", "5.00", "8.50", 150),
    ("Stethoscope", "Medical Equipment", "45.00", "75.00", 15),
    ("Antiseptic Solution (500ml)", "Pharmaceuticals", "8.00", "12.00", 80),
    ("Syringes (Pack of 50)", "Consumables", "12.00", "18.00", 120),
    ("Examination Table Paper", "Consumables", "20.00", "30.00", 75),
]


async def _is_empty(db: AsyncSession, model) -> bool:
    count = await db.scalar(select(func.count()).select_from(model))
    return not count


async def seed_demo_data(db: AsyncSession) -> dict:
    """Insert demo users and products into empty tables. Returns inserted counts."""
    inserted = {"users": 0, "products": 0}

    if await _is_empty(db, User):
        db.add_all(
            User(**UserCreate.model_validate(u).model_dump()) for u in DEMO_USERS
        )
        inserted["users"] = len(DEMO_USERS)

    if await _is_empty(db, Product):
        db.add_all(
            Product(
                name=name, category=category,
                purchase_price=Decimal(purchase), selling_price=Decimal(selling),
                stock=stock,
            )
            for name, category, purchase, selling, stock in DEMO_PRODUCTS
        )
        inserted["products"] = len(DEMO_PRODUCTS)

    await db.commit()
    return inserted


async def _main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, "text")
    session_factory = create_session_factory(settings.database_url)
    try:
        async with session_factory() as db:
            inserted = await seed_demo_data(db)
        logger.info(
            f"Seeded {inserted['users']} users and {inserted['products']} products",
        )
    finally:
        await session_factory.kw["bind"].dispose()


if __name__ == "__main__":
    asyncio.run(_main())
