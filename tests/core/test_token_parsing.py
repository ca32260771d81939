"""Token Parsing — tests for pure token classification and bearer extraction.

Tests cover:
    - absent/empty tokens produce no lookup
    - "user:<int>" produces an id lookup; non-integer suffixes produce none
    - everything else is a username lookup on the whole token
    - Bearer header parsing
"""

import pytest

from clinic_inventory.core.domain_types import TokenKind
from clinic_inventory.core.token_parsing import (
    NO_LOOKUP, extract_bearer_token, parse_token,
)


# ─── parse_token ─────────────────────────────────────────────────

@pytest.mark.parametrize("token", [None, ""])
def test_absent_or_empty_token_has_no_lookup(token):
    assert parse_token(token) == NO_LOOKUP


def test_user_prefix_with_integer_is_id_lookup():
    lookup = parse_token("user:42")
    assert lookup.kind == TokenKind.BY_ID
    assert lookup.user_id == 42
    assert lookup.username is None


def test_user_prefix_with_large_id():
    assert parse_token("user:999999").user_id == 999999


@pytest.mark.parametrize("token", [
    "user:invalid", "user:", "user:4.2", "user:abc1",
    "user:1_0", "user:\u0661", "user: 12", "user:-5", "user:+7",
])
def test_user_prefix_with_non_integer_has_no_lookup(token):
    assert parse_token(token).kind == TokenKind.NONE


def test_plain_token_is_username_lookup():
    lookup = parse_token("admin")
    assert lookup.kind == TokenKind.BY_USERNAME
    assert lookup.username == "admin"
    assert lookup.user_id is None


def test_username_lookup_keeps_case_and_whitespace():
    assert parse_token("Admin ").username == "Admin "


def test_prefix_match_is_case_sensitive():
    lookup = parse_token("USER:5")
    assert lookup.kind == TokenKind.BY_USERNAME
    assert lookup.username == "USER:5"


# ─── extract_bearer_token ────────────────────────────────────────

def test_bearer_header_yields_token():
    assert extract_bearer_token("Bearer user:1") == "user:1"


def test_missing_header_yields_none():
    assert extract_bearer_token(None) is None


@pytest.mark.parametrize("header", ["Basic abc", "bearer admin", "Token admin", "Bearer"])
def test_non_bearer_header_yields_none(header):
    assert extract_bearer_token(header) is None


def test_bearer_with_empty_token_yields_empty_string():
    assert extract_bearer_token("Bearer ") == ""
