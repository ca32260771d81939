"""Authenticate User — resolves a bearer token to an identity through the user store.

Invariants:
    - Absent, empty or malformed tokens return None without touching the store
    - At most one store read per call
    - No matching row returns None (unauthenticated, not an error)
    - Store failures propagate: an outage is never reported as "no such user"
"""

import logging

from clinic_inventory.core.domain_types import TokenKind
from clinic_inventory.core.repository_protocols import UserRepository
from clinic_inventory.core.token_parsing import parse_token
from clinic_inventory.schemas.user import UserRead

logger = logging.getLogger(__name__)


async def authenticate_user(
    token: str | None, users: UserRepository,
) -> UserRead | None:
    """Resolve `token` to a UserRead, or None when it identifies nobody."""
    lookup = parse_token(token)

    if lookup.kind == TokenKind.BY_ID:
        user = await users.get_by_id(lookup.user_id)
    elif lookup.kind == TokenKind.BY_USERNAME:
        user = await users.get_by_username(lookup.username)
    else:
        return None

    if user is None:
        logger.debug(f"Token did not match any user ({lookup.kind.value})")
        return None
    return UserRead.model_validate(user)
