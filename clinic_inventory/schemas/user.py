"""User Schemas — identity payloads for the authentication endpoints.

Invariants:
    - UserRead mirrors every users column (id, username, email, role, created_at)
    - UserRead never re-validates stored email format: a row the store holds
      always round-trips, whatever domain its address uses
    - UserCreate validates email format on the write path (demo seeding)
    - role is validated against the Role enum; "ADMIN" is rejected
    - AuthenticateResponse.user is None for an unauthenticated caller

Design Decisions:
    - from_attributes: UserRead is built straight from the ORM row
    - EmailStr only on input schemas: users are created out-of-band, and the
      resolver must not fail on data it merely reads
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from clinic_inventory.core.domain_types import Role


class UserCreate(BaseModel):
    """User creation input — validates username and email format."""
    username: str = Field(min_length=1)
    email: EmailStr
    role: Role = Role.USER


class UserRead(BaseModel):
    """Authenticated identity returned to clients."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str = Field(min_length=1)
    email: str
    role: Role
    created_at: datetime


class AuthenticateRequest(BaseModel):
    """Token presented to the public authenticate operation."""
    token: str | None = None


class AuthenticateResponse(BaseModel):
    """Resolved identity, or null when the token matched nobody."""
    user: UserRead | None = None
