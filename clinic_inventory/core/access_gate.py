"""Access Gate — decides whether an identity may invoke a role-restricted operation.

Invariants:
    - authorize(None, role) is always False
    - authorize is True iff identity.role == required_role (exact, case-sensitive)
    - authorize never raises: internal faults are logged and become False (fail-closed)
    - require_role raises UnauthorizedError exactly when authorize returns False,
      even for a plain-str role or an identity whose attributes fail to load

Design Decisions:
    - Boolean decision separated from the raising wrapper: routes, tests and
      non-HTTP callers can ask "may they?" without exception control flow
    - Identity typed as a Protocol: the gate accepts UserRead, ORM rows, or any
      object with a `role` attribute
"""

import logging
from typing import Protocol

from clinic_inventory.core.domain_types import Role
from clinic_inventory.core.errors import (
    DEFAULT_UNAUTHORIZED_MESSAGE, ErrorContext, UnauthorizedError,
)

logger = logging.getLogger(__name__)


class IdentityLike(Protocol):
    """Structural contract for anything the gate can evaluate."""
    id: int
    role: Role


def authorize(identity: IdentityLike | None, required_role: Role) -> bool:
    """Return True iff the identity holds exactly the required role."""
    if identity is None:
        return False
    try:
        return bool(identity.role == required_role)
    except Exception as e:
        logger.error(f"Access check failed, denying: {e}", exc_info=True)
        return False


def require_role(
    identity: IdentityLike | None,
    required_role: Role,
    message: str = DEFAULT_UNAUTHORIZED_MESSAGE,
) -> None:
    """Raise UnauthorizedError unless authorize() grants access."""
    if authorize(identity, required_role):
        return
    user_id, role_value = _describe_denial(identity, required_role)
    logger.warning(
        "Access denied",
        extra={"user_id": user_id, "required_role": role_value},
    )
    raise UnauthorizedError(
        message, ErrorContext(user_id=user_id, required_role=role_value),
    )


def _describe_denial(
    identity: IdentityLike | None, required_role: Role | str,
) -> tuple[int | None, str]:
    """Best-effort context for a denial; never raises."""
    role_value = str(getattr(required_role, "value", required_role))
    try:
        user_id = getattr(identity, "id", None)
    except Exception:
        user_id = None
    return user_id, role_value
