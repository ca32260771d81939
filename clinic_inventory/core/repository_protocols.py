"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All store reads accessed through Protocol types
    - Implementations provided by shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass plain fakes
    - Async in Protocol: implementations do IO, but the pure functions that decide
      what to look up (parse_token, authorize) are never async themselves
"""

from typing import Any, Protocol, Sequence

from clinic_inventory.core.domain_types import UserId


class UserRepository(Protocol):
    """Contract for user lookups — implemented by shell."""
    async def get_by_id(self, user_id: UserId) -> Any | None: ...
    async def get_by_username(self, username: str) -> Any | None: ...


class ProductRepository(Protocol):
    """Contract for product reads — implemented by shell."""
    async def list_all(self) -> Sequence[Any]: ...
