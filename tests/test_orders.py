# tests/test_orders.py
import pytest

from soora_api.models import OrderStatus


@pytest.fixture
def address(customer, make_address):
    return make_address(customer, is_default=True)


def test_place_order_captures_prices_and_updates_counters(client, db, customer, address, auth_headers, make_product):
    scarf = make_product(name="Scarf", price=20.0, stock=5, sales_count=1)
    mug = make_product(name="Mug", price=7.5, stock=10)

    resp = client.post(
        "/api/orders",
        json={
            "addressId": address.id,
            "items": [
                {"productId": scarf.id, "quantity": 2},
                {"productId": mug.id, "quantity": 1},
                {"productId": scarf.id, "quantity": 1},
            ],
        },
        headers=auth_headers(customer),
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "PENDING"
    assert body["deliveredAt"] is None
    assert body["deliveryFee"] == 0.0
    assert body["total"] == pytest.approx(67.5)
    assert {i["productId"]: i["quantity"] for i in body["items"]} == {scarf.id: 3, mug.id: 1}
    assert body["address"]["id"] == address.id

    db.refresh(scarf)
    db.refresh(mug)
    assert (scarf.stock, scarf.sales_count) == (2, 4)
    assert (mug.stock, mug.sales_count) == (9, 1)


def test_small_order_pays_delivery_fee(client, customer, address, auth_headers, make_product):
    p = make_product(price=10.0)

    body = client.post(
        "/api/orders",
        json={"addressId": address.id, "items": [{"productId": p.id, "quantity": 1}]},
        headers=auth_headers(customer),
    ).json()

    assert body["deliveryFee"] == 5.0
    assert body["total"] == pytest.approx(15.0)


def test_order_rejects_insufficient_stock_without_side_effects(client, db, customer, address, auth_headers, make_product):
    ok = make_product(name="Plenty", stock=10)
    short = make_product(name="Scarce", stock=1)

    resp = client.post(
        "/api/orders",
        json={"addressId": address.id, "items": [
            {"productId": ok.id, "quantity": 1},
            {"productId": short.id, "quantity": 2},
        ]},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "Insufficient stock for Scarce"}
    db.refresh(ok)
    assert (ok.stock, ok.sales_count) == (10, 0)


def test_order_rejects_inactive_product(client, customer, address, auth_headers, make_product):
    p = make_product(is_active=False)

    resp = client.post(
        "/api/orders",
        json={"addressId": address.id, "items": [{"productId": p.id, "quantity": 1}]},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 400


def test_order_with_someone_elses_address_is_not_found(client, customer, make_user, make_address, auth_headers, make_product):
    theirs = make_address(make_user())
    p = make_product()

    resp = client.post(
        "/api/orders",
        json={"addressId": theirs.id, "items": [{"productId": p.id, "quantity": 1}]},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 404


def test_order_requires_items(client, customer, address, auth_headers):
    resp = client.post("/api/orders", json={"addressId": address.id, "items": []}, headers=auth_headers(customer))

    assert resp.status_code == 400


def test_list_my_orders_is_scoped_and_filterable(client, customer, make_user, make_order, auth_headers):
    make_order(customer, status=OrderStatus.PENDING)
    make_order(customer, status=OrderStatus.DELIVERED)
    make_order(make_user(), status=OrderStatus.PENDING)

    all_mine = client.get("/api/orders", headers=auth_headers(customer)).json()
    pending = client.get("/api/orders", params={"status": "PENDING"}, headers=auth_headers(customer)).json()

    assert all_mine["pagination"]["total"] == 2
    assert pending["pagination"]["total"] == 1
    assert all(o["userId"] == customer.id for o in all_mine["orders"])


def test_get_someone_elses_order_is_not_found(client, customer, make_user, make_order, auth_headers):
    theirs = make_order(make_user())

    resp = client.get(f"/api/orders/{theirs.id}", headers=auth_headers(customer))

    assert resp.status_code == 404
    assert resp.json() == {"error": "Order not found"}


def test_tracking_timeline_marks_reached_milestones(client, customer, address, make_order, auth_headers):
    order = make_order(customer, status=OrderStatus.PROCESSING, address_id=address.id)

    body = client.get(f"/api/delivery/{order.id}/tracking", headers=auth_headers(customer)).json()

    assert body["orderId"] == order.id
    assert body["status"] == "PROCESSING"
    assert body["address"]["id"] == address.id
    assert [(s["status"], s["reached"]) for s in body["timeline"]] == [
        ("PENDING", True),
        ("CONFIRMED", True),
        ("PROCESSING", True),
        ("SHIPPED", False),
        ("DELIVERED", False),
    ]


def test_tracking_cancelled_order(client, customer, make_order, auth_headers):
    order = make_order(customer, status=OrderStatus.CANCELLED)

    body = client.get(f"/api/delivery/{order.id}/tracking", headers=auth_headers(customer)).json()

    assert [s["status"] for s in body["timeline"]] == ["PENDING", "CANCELLED"]
    assert body["address"] is None
