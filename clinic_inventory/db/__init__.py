"""Database Infrastructure — async session factory, SQLAlchemy Base and demo seed data.

Invariants:
    - All sessions are async (AsyncSession)
    - Seeding only ever runs from an explicit command, never on startup

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
