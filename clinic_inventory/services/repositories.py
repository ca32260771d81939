"""SQL Repositories — AsyncSession-backed implementations of the boundary protocols.

Invariants:
    - Each method issues exactly one SELECT; no caching, no retry
    - Lookups by id and by username are exact matches; no row → None
    - list_all returns products in insertion order (serial primary key)
    - SQLAlchemy errors propagate; the session manager maps them to DatabaseError

Design Decisions:
    - Session injected per request: no ambient connection, trivially swappable in tests
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_inventory.core.domain_types import UserId
from clinic_inventory.models.product import Product
from clinic_inventory.models.user import User


class SqlUserRepository:
    """UserRepository over the `users` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, user_id: UserId) -> User | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()


class SqlProductRepository:
    """ProductRepository over the `products` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> Sequence[Product]:
        result = await self.db.execute(select(Product).order_by(Product.id))
        return result.scalars().all()
