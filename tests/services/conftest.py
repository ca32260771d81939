"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine for the readiness probe

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for lookup/list queries
    - StaticPool: every session shares the one in-memory connection
"""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from clinic_inventory.core.domain_types import Role
from clinic_inventory.db.base import Base
from clinic_inventory.infrastructure.database import get_db, DatabaseSessionManager
from clinic_inventory.main import app
from clinic_inventory.models.product import Product
from clinic_inventory.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    del app.state.db_manager


async def _insert(db: AsyncSession, *rows):
    db.add_all(rows)
    await db.commit()
    for row in rows:
        await db.refresh(row)
    return rows


@pytest.fixture
async def regular_user(test_db) -> User:
    (user,) = await _insert(
        test_db,
        User(username="testuser", email="test@example.com", role=Role.USER),
    )
    return user


@pytest.fixture
async def admin_user(test_db) -> User:
    (user,) = await _insert(
        test_db,
        User(username="admin", email="admin@clinic.com", role=Role.ADMIN),
    )
    return user


@pytest.fixture
async def three_products(test_db) -> tuple[Product, ...]:
    """Digital Thermometer (50), Blood Pressure Monitor (25), Surgical Gloves (200)."""
    return await _insert(
        test_db,
        Product(
            name="Digital Thermometer", category="Medical Equipment",
            purchase_price=Decimal("25.00"), selling_price=Decimal("35.00"),
            stock=50,
        ),
        Product(
            name="Blood Pressure Monitor", category="Medical Equipment",
            purchase_price=Decimal("80.50"), selling_price=Decimal("120.75"),
            stock=25,
        ),
        Product(
            name="Surgical Gloves", category="Consumables",
            purchase_price=Decimal("15.25"), selling_price=Decimal("22.99"),
            stock=200,
        ),
    )
