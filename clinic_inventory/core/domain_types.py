"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps an int — never use a bare int user id in domain logic
    - Role is a closed enumeration; comparison against it is exact and case-sensitive
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders and compare equal to
      their lowercase value ("admin" == Role.ADMIN, "ADMIN" != Role.ADMIN)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    """Authorization roles — maps to the DB `role` enum type."""
    ADMIN = "admin"
    USER = "user"


class StockStatus(str, Enum):
    """Stock level classification shown next to each product."""
    OUT_OF_STOCK = "out_of_stock"
    LOW_STOCK = "low_stock"
    IN_STOCK = "in_stock"


class TokenKind(str, Enum):
    """How a bearer token should be looked up in the user store."""
    BY_ID = "by_id"
    BY_USERNAME = "by_username"
    NONE = "none"
