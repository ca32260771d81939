"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Meant for scripts (demo seeding) and test fixtures
    - Caller owns the returned engine via the factory's `kw["bind"]`

Design Decisions:
    - Separate from infrastructure/database.py: no pooling or error mapping needed
      for one-shot scripts
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker


def create_session_factory(
    database_url: str,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given database URL."""
    engine = create_async_engine(database_url, echo=False)
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
