"""Request Dependencies — bearer token extraction, identity resolution and role gating.

Invariants:
    - Every request resolves its identity from the Authorization header exactly once
    - A missing or non-Bearer header is an absent token (unauthenticated, not an error)
    - require_admin raises UnauthorizedError before the route body runs

Design Decisions:
    - Gate as a FastAPI dependency: protected routes declare it in their signature,
      public routes simply omit it
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_inventory.core.access_gate import require_role
from clinic_inventory.core.domain_types import Role
from clinic_inventory.core.token_parsing import extract_bearer_token
from clinic_inventory.infrastructure.database import get_db
from clinic_inventory.schemas.user import UserRead
from clinic_inventory.services.authenticate_user import authenticate_user
from clinic_inventory.services.repositories import SqlUserRepository


def get_bearer_token(
    authorization: str | None = Header(None),
) -> str | None:
    return extract_bearer_token(authorization)


async def get_current_user(
    token: str | None = Depends(get_bearer_token),
    db: AsyncSession = Depends(get_db),
) -> UserRead | None:
    """Resolve the caller's identity, or None when unauthenticated."""
    return await authenticate_user(token, SqlUserRepository(db))


async def require_admin(
    user: UserRead | None = Depends(get_current_user),
) -> UserRead:
    """Admin-only gate. Raises UnauthorizedError for anyone else."""
    require_role(user, Role.ADMIN)
    return user
