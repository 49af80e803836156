# tests/test_users.py
from soora_api.models import Address

ADDRESS_BODY = {
    "type": "HOME",
    "name": "Home",
    "street": "10 Tampines Ave",
    "unit": "#05-12",
    "building": "Tampines Court",
    "postalCode": "529123",
    "district": "Tampines",
    "deliveryNotes": "Leave at door",
}


def _defaults(db, user):
    db.expire_all()
    return [a.id for a in db.query(Address).filter(Address.user_id == user.id, Address.is_default.is_(True))]


# ---------- Profile ----------

def test_profile_requires_authentication(client):
    resp = client.get("/api/users/profile")

    assert resp.status_code == 401
    assert resp.json() == {"error": "Authentication required"}


def test_get_profile_returns_caller(client, customer, auth_headers):
    resp = client.get("/api/users/profile", headers=auth_headers(customer))

    assert resp.status_code == 200
    body = resp.json()
    assert body["id"] == customer.id
    assert body["email"] == customer.email
    assert body["role"] == "CUSTOMER"
    assert body["tier"] == "STANDARD"
    assert body["ageVerified"] is False


def test_update_profile_changes_name_and_phone(client, customer, auth_headers):
    resp = client.put(
        "/api/users/profile",
        json={"name": "Renamed", "phone": "+6598765432"},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Renamed"
    assert body["phone"] == "+6598765432"
    assert "createdAt" not in body


# ---------- Addresses ----------

def test_create_address_validates_postal_code(client, customer, auth_headers):
    resp = client.post(
        "/api/users/addresses",
        json={**ADDRESS_BODY, "postalCode": "12AB"},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 400
    assert any(e["field"] == "postalCode" for e in resp.json()["errors"])


def test_create_address_requires_street(client, customer, auth_headers):
    body = dict(ADDRESS_BODY)
    del body["street"]

    resp = client.post("/api/users/addresses", json=body, headers=auth_headers(customer))

    assert resp.status_code == 400


def test_create_default_address_unsets_previous_default(client, db, customer, auth_headers, make_address):
    old = make_address(customer, is_default=True)

    resp = client.post(
        "/api/users/addresses",
        json={**ADDRESS_BODY, "isDefault": True},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 201
    new_id = resp.json()["id"]
    assert resp.json()["isDefault"] is True
    assert _defaults(db, customer) == [new_id]
    db.refresh(old)
    assert old.is_default is False


def test_create_non_default_address_keeps_existing_default(client, db, customer, auth_headers, make_address):
    old = make_address(customer, is_default=True)

    resp = client.post("/api/users/addresses", json=ADDRESS_BODY, headers=auth_headers(customer))

    assert resp.status_code == 201
    assert resp.json()["isDefault"] is False
    assert _defaults(db, customer) == [old.id]


def test_default_toggle_does_not_touch_other_users(client, db, customer, make_user, auth_headers, make_address):
    other = make_user()
    other_default = make_address(other, is_default=True)

    client.post("/api/users/addresses", json={**ADDRESS_BODY, "isDefault": True}, headers=auth_headers(customer))

    assert _defaults(db, other) == [other_default.id]


def test_update_address_to_default_is_idempotent(client, db, customer, auth_headers, make_address):
    first = make_address(customer, is_default=True)
    second = make_address(customer, name="Office")
    third = make_address(customer, name="Parents")

    for _ in range(2):
        resp = client.put(
            f"/api/users/addresses/{second.id}",
            json={"isDefault": True},
            headers=auth_headers(customer),
        )
        assert resp.status_code == 200
        assert _defaults(db, customer) == [second.id]

    resp = client.put(
        f"/api/users/addresses/{third.id}",
        json={"isDefault": True},
        headers=auth_headers(customer),
    )
    assert _defaults(db, customer) == [third.id]
    db.refresh(first)
    assert first.is_default is False


def test_update_address_partial_fields(client, customer, auth_headers, make_address):
    addr = make_address(customer)

    resp = client.put(
        f"/api/users/addresses/{addr.id}",
        json={"deliveryNotes": "Ring twice", "unit": "#01-01"},
        headers=auth_headers(customer),
    )

    body = resp.json()
    assert body["deliveryNotes"] == "Ring twice"
    assert body["unit"] == "#01-01"
    assert body["street"] == "1 Orchard Road"


def test_list_addresses_puts_default_first_and_scopes_to_caller(client, customer, make_user, auth_headers, make_address):
    make_address(customer, name="Office")
    default = make_address(customer, name="Home", is_default=True)
    make_address(make_user(), name="Someone else")

    resp = client.get("/api/users/addresses", headers=auth_headers(customer))

    body = resp.json()
    assert len(body) == 2
    assert body[0]["id"] == default.id


def test_update_other_users_address_is_not_found(client, db, customer, make_user, auth_headers, make_address):
    other = make_user()
    theirs = make_address(other, name="Theirs")

    resp = client.put(
        f"/api/users/addresses/{theirs.id}",
        json={"name": "Hijacked", "isDefault": True},
        headers=auth_headers(customer),
    )

    assert resp.status_code == 404
    assert resp.json() == {"error": "Address not found"}
    db.refresh(theirs)
    assert theirs.name == "Theirs"
    assert theirs.is_default is False


def test_delete_other_users_address_is_not_found(client, db, customer, make_user, auth_headers, make_address):
    theirs = make_address(make_user())

    resp = client.delete(f"/api/users/addresses/{theirs.id}", headers=auth_headers(customer))

    assert resp.status_code == 404
    db.expire_all()
    assert db.get(Address, theirs.id) is not None


def test_delete_own_address(client, db, customer, auth_headers, make_address):
    mine_id = make_address(customer).id

    resp = client.delete(f"/api/users/addresses/{mine_id}", headers=auth_headers(customer))

    assert resp.status_code == 200
    assert resp.json() == {"message": "Address deleted"}
    db.expunge_all()
    assert db.get(Address, mine_id) is None
