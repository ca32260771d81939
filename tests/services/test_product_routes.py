"""Product Routes — admin gate on GET /api/v1/products and /summary.

Invariants:
    - No token, unknown token, or non-admin token → 401 UNAUTHORIZED envelope
    - Admin token (by id or by username) → 200 with products in insertion order
"""

from decimal import Decimal

import pytest

from clinic_inventory.models.product import Product


def _bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def test_list_products_without_token_is_unauthorized(client, three_products):
    res = await client.get("/api/v1/products")
    assert res.status_code == 401
    error = res.json()["error"]
    assert error["code"] == "UNAUTHORIZED"
    assert error["message"] == "Access denied. Admin role required."
    assert error["category"] == "authorization"
    assert error["context"]["path"] == "/api/v1/products"


async def test_list_products_with_regular_user_is_unauthorized(
    client, regular_user, three_products,
):
    res = await client.get(
        "/api/v1/products", headers=_bearer(f"user:{regular_user.id}"),
    )
    assert res.status_code == 401
    assert res.json()["error"]["context"]["user_id"] == regular_user.id


@pytest.mark.parametrize("header", [
    "Bearer nonexistentuser", "Bearer user:999999", "Bearer user:invalid",
    "admin", "Basic admin",
])
async def test_list_products_with_unresolvable_header_is_unauthorized(
    client, admin_user, header,
):
    res = await client.get("/api/v1/products", headers={"Authorization": header})
    assert res.status_code == 401


async def test_list_products_as_admin_by_username(client, admin_user, three_products):
    res = await client.get("/api/v1/products", headers=_bearer("admin"))
    assert res.status_code == 200
    body = res.json()
    assert [p["name"] for p in body] == [
        "Digital Thermometer", "Blood Pressure Monitor", "Surgical Gloves",
    ]
    assert body[1]["purchase_price"] == 80.5
    assert body[1]["selling_price"] == 120.75
    assert isinstance(body[0]["stock"], int)


async def test_list_products_as_admin_by_id(client, admin_user):
    res = await client.get(
        "/api/v1/products", headers=_bearer(f"user:{admin_user.id}"),
    )
    assert res.status_code == 200
    assert res.json() == []


async def test_summary_requires_admin(client, regular_user):
    res = await client.get("/api/v1/products/summary", headers=_bearer("testuser"))
    assert res.status_code == 401


async def test_summary_as_admin(client, admin_user, three_products):
    res = await client.get("/api/v1/products/summary", headers=_bearer("admin"))
    assert res.status_code == 200
    body = res.json()
    assert body["summary"]["total_products"] == 3
    assert body["summary"]["total_stock"] == 275
    assert body["summary"]["low_stock_items"] == 0
    assert len(body["items"]) == 3
    assert body["items"][0]["margin_percent"] == 40.0
    assert body["items"][2]["stock_status"] == "in_stock"


async def test_summary_with_zero_priced_stored_product(client, admin_user, test_db):
    test_db.add(Product(
        name="Donated Gauze", category="Consumables",
        purchase_price=Decimal("0.00"), selling_price=Decimal("4.00"),
        stock=30,
    ))
    await test_db.commit()

    res = await client.get("/api/v1/products/summary", headers=_bearer("admin"))
    assert res.status_code == 200
    item = res.json()["items"][0]
    assert item["margin_percent"] is None
    assert item["profit"] == 4.0
