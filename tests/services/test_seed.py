"""Demo Seed — sample users and products load once into empty tables."""

from sqlalchemy import select

from clinic_inventory.core.domain_types import Role
from clinic_inventory.db.seed import DEMO_PRODUCTS, seed_demo_data
from clinic_inventory.models.product import Product
from clinic_inventory.models.user import User
from clinic_inventory.services.authenticate_user import authenticate_user
from clinic_inventory.services.list_products import list_products
from clinic_inventory.services.repositories import (
    SqlProductRepository, SqlUserRepository,
)


async def test_seed_populates_empty_tables(test_db):
    inserted = await seed_demo_data(test_db)
    assert inserted == {"users": 2, "products": len(DEMO_PRODUCTS)}

    products = await list_products(SqlProductRepository(test_db))
    assert [p.name for p in products] == [row[0] for row in DEMO_PRODUCTS]
    assert products[3].selling_price == 8.5

    admin = await authenticate_user("admin", SqlUserRepository(test_db))
    assert admin.role == Role.ADMIN


async def test_seed_is_noop_when_tables_have_rows(test_db):
    await seed_demo_data(test_db)
    assert await seed_demo_data(test_db) == {"users": 0, "products": 0}

    users = (await test_db.execute(select(User))).scalars().all()
    products = (await test_db.execute(select(Product))).scalars().all()
    assert len(users) == 2
    assert len(products) == len(DEMO_PRODUCTS)
