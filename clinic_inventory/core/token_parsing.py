"""Token Parsing — decides how an opaque bearer token maps to a user store lookup.

Invariants:
    - parse_token is PURE: returns a lookup descriptor, performs no IO
    - Absent or empty token → TokenKind.NONE (never an error)
    - "user:<ASCII digits>" → TokenKind.BY_ID; any other suffix → TokenKind.NONE
      (no fallback to a username lookup)
    - Anything else → TokenKind.BY_USERNAME with the whole token as username

Design Decisions:
    - Lookup descriptor instead of a direct query: the shell performs exactly one
      read per descriptor, and the parsing rules are testable without a database
"""

from dataclasses import dataclass

from clinic_inventory.core.domain_types import TokenKind, UserId


USER_ID_PREFIX = "user:"
BEARER_PREFIX = "Bearer "


@dataclass(frozen=True)
class TokenLookup:
    """Which user store query a token resolves to."""
    kind: TokenKind
    user_id: UserId | None = None
    username: str | None = None


NO_LOOKUP = TokenLookup(kind=TokenKind.NONE)


def parse_token(token: str | None) -> TokenLookup:
    """Classify a token into an id lookup, a username lookup, or none."""
    if not token:
        return NO_LOOKUP

    if token.startswith(USER_ID_PREFIX):
        suffix = token[len(USER_ID_PREFIX):]
        if not (suffix.isascii() and suffix.isdigit()):
            return NO_LOOKUP
        return TokenLookup(kind=TokenKind.BY_ID, user_id=UserId(int(suffix)))

    return TokenLookup(kind=TokenKind.BY_USERNAME, username=token)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an `Authorization: Bearer <token>` header value."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        return authorization[len(BEARER_PREFIX):]
    return None
