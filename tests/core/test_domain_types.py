"""Domain Types — verifies rich type definitions and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Role has exactly two members and compares case-sensitively
    - Enums serialize to their string value
"""

from clinic_inventory.core.domain_types import (
    Role, StockStatus, TokenKind, UserId,
)


def test_user_id_wraps_int():
    assert UserId(7) == 7


def test_role_has_exactly_two_members():
    assert set(Role) == {Role.ADMIN, Role.USER}
    assert Role.ADMIN.value == "admin"
    assert Role.USER.value == "user"


def test_role_equality_is_case_sensitive():
    assert Role.ADMIN == "admin"
    assert Role.ADMIN != "ADMIN"
    assert Role.ADMIN != "Admin"


def test_role_lookup_by_value_rejects_uppercase():
    assert Role("admin") is Role.ADMIN
    try:
        Role("ADMIN")
    except ValueError:
        pass
    else:
        raise AssertionError("Role('ADMIN') should not resolve")


def test_stock_status_has_three_levels():
    assert {s.value for s in StockStatus} == {
        "out_of_stock", "low_stock", "in_stock",
    }


def test_token_kind_values():
    assert TokenKind.BY_ID.value == "by_id"
    assert TokenKind.BY_USERNAME.value == "by_username"
    assert TokenKind.NONE.value == "none"
