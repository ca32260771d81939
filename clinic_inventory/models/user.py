"""User ORM — persists identities that bearer tokens resolve to.

Invariants:
    - id is a serial integer primary key
    - username and email are unique and non-nullable
    - role is the `role` enum type, stored by value ("admin", "user"), default "user"
    - created_at set once by the database

Design Decisions:
    - values_callable on the Enum column: stores Role.ADMIN as "admin" (the value),
      not "ADMIN" (the member name), so the DB enum matches the wire format
"""

from datetime import datetime

from sqlalchemy import Enum, Integer, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from clinic_inventory.core.domain_types import Role
from clinic_inventory.db.base import Base


class User(Base):
    """User entity — an identity with exactly one role."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    role: Mapped[Role] = mapped_column(
        Enum(
            Role, name="role",
            values_callable=lambda roles: [r.value for r in roles],
        ),
        nullable=False,
        default=Role.USER,
        server_default=Role.USER.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
