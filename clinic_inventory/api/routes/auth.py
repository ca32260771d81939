"""Authentication — public token resolution and identity echo.

Invariants:
    - Both endpoints are public: an unknown token yields {"user": null}, never 401
    - POST /authenticate resolves the token in the body; GET /me uses the bearer header
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from clinic_inventory.api.dependencies import get_current_user
from clinic_inventory.infrastructure.database import get_db
from clinic_inventory.schemas.user import (
    AuthenticateRequest, AuthenticateResponse, UserRead,
)
from clinic_inventory.services.authenticate_user import authenticate_user
from clinic_inventory.services.repositories import SqlUserRepository

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/authenticate", response_model=AuthenticateResponse)
async def authenticate(
    body: AuthenticateRequest, db: AsyncSession = Depends(get_db),
):
    """Resolve an explicit token to its identity."""
    user = await authenticate_user(body.token, SqlUserRepository(db))
    return AuthenticateResponse(user=user)


@router.get("/me", response_model=AuthenticateResponse)
async def current_user(user: UserRead | None = Depends(get_current_user)):
    """Echo the identity behind the request's bearer token."""
    return AuthenticateResponse(user=user)
