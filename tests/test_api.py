from __future__ import annotations


def _customer_payload(email: str = "john.doe@test.com", **overrides) -> dict:
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "email": email,
        "phone": "555-1234",
        "customer_type": "Individual",
    }
    data.update(overrides)
    return data


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "up"}


def test_create_customer_with_primary_address(client):
    payload = _customer_payload(
        primary_address={"street": "123 Main St", "city": "Anytown", "state": "CA", "zip_code": "12345"}
    )
    res = client.post("/api/customers", json=payload)
    assert res.status_code == 201
    body = res.json()
    assert body["full_name"] == "John Doe"
    assert body["total_orders"] == 0
    assert body["addresses"] == [
        {
            "address_id": body["addresses"][0]["address_id"],
            "address_type": "Home",
            "full_address": "123 Main St, Anytown, CA 12345",
            "is_primary": True,
        }
    ]

    fetched = client.get(f"/api/customers/{body['customer_id']}")
    assert fetched.status_code == 200
    assert fetched.json()["email"] == "john.doe@test.com"


def test_duplicate_email_returns_conflict(client):
    assert client.post("/api/customers", json=_customer_payload()).status_code == 201
    res = client.post("/api/customers", json=_customer_payload(first_name="Jim"))
    assert res.status_code == 409
    assert res.json()["detail"]["code"] == "CONSTRAINT_VIOLATION"


def test_invalid_email_is_rejected(client):
    res = client.post("/api/customers", json=_customer_payload(email="nope"))
    assert res.status_code == 422


def test_missing_customer_returns_not_found(client):
    assert client.get("/api/customers/999").status_code == 404
    res = client.delete("/api/customers/999")
    assert res.status_code == 404
    assert res.json()["detail"]["entity"] == "Customer"


def test_soft_deleted_customer_leaves_list_but_stays_readable(client):
    john = client.post("/api/customers", json=_customer_payload()).json()
    jane = client.post(
        "/api/customers", json=_customer_payload("jane@test.com", first_name="Jane")
    ).json()

    assert client.delete(f"/api/customers/{jane['customer_id']}").status_code == 204

    listed = client.get("/api/customers").json()
    assert [c["customer_id"] for c in listed] == [john["customer_id"]]
    assert client.get(f"/api/customers/{jane['customer_id']}").json()["is_active"] is False


def test_search_and_type_filter(client):
    client.post("/api/customers", json=_customer_payload())
    client.post(
        "/api/customers",
        json=_customer_payload("acme@test.com", first_name="Acme", last_name="Corp", customer_type="Business"),
    )

    assert [c["full_name"] for c in client.get("/api/customers", params={"q": "Acme"}).json()] == ["Acme Corp"]
    assert [c["full_name"] for c in client.get("/api/customers", params={"customer_type": "Individual"}).json()] == [
        "John Doe"
    ]


def test_set_primary_address_endpoint(client):
    customer = client.post("/api/customers", json=_customer_payload()).json()
    cid = customer["customer_id"]
    address = {"street": "1 A St", "city": "A", "state": "CA", "zip_code": "1", "is_primary": True}
    first = client.post(f"/api/customers/{cid}/addresses", json=address).json()
    second = client.post(
        f"/api/customers/{cid}/addresses", json={**address, "street": "2 B St", "is_primary": False}
    ).json()

    res = client.put(f"/api/customers/{cid}/addresses/{second['address_id']}/primary")
    assert res.status_code == 200
    primaries = [a["address_id"] for a in res.json() if a["is_primary"]]
    assert primaries == [second["address_id"]]

    records = client.get(f"/api/customers/{cid}/addresses").json()
    assert {r["id"]: r["is_primary"] for r in records} == {
        first["address_id"]: False,
        second["address_id"]: True,
    }

    other = client.post("/api/customers", json=_customer_payload("o@test.com")).json()
    res = client.put(f"/api/customers/{other['customer_id']}/addresses/{first['address_id']}/primary")
    assert res.status_code == 404


def test_order_flow_with_roles_and_statistics(client):
    john = client.post("/api/customers", json=_customer_payload()).json()
    jane = client.post(
        "/api/customers", json=_customer_payload("jane@test.com", first_name="Jane", last_name="Smith")
    ).json()

    res = client.post(
        "/api/orders",
        json={
            "order_number": "ORD-002",
            "total_amount": "149.50",
            "customer_ids": [jane["customer_id"], john["customer_id"]],
        },
    )
    assert res.status_code == 201
    order = res.json()
    assert sorted((c["full_name"], c["role"]) for c in order["customers"]) == [
        ("Jane Smith", "Primary"),
        ("John Doe", "Secondary"),
    ]

    john_orders = client.get(f"/api/customers/{john['customer_id']}/orders").json()
    assert [o["order_id"] for o in john_orders] == [order["order_id"]]
    assert client.get(f"/api/customers/{john['customer_id']}").json()["total_orders"] == 1

    stats = client.get("/api/statistics").json()
    assert stats["total_customers"] == 2
    assert stats["active_customers"] == 2
    assert stats["inactive_customers"] == 0
    assert stats["total_orders"] == 1
    assert float(stats["total_revenue"]) == 149.50

    res = client.delete(f"/api/orders/{order['order_id']}/customers/{john['customer_id']}")
    assert res.status_code == 204
    assert client.get(f"/api/customers/{john['customer_id']}/orders").json() == []


def test_order_for_unknown_customer_returns_not_found(client):
    res = client.post(
        "/api/orders", json={"order_number": "ORD-1", "total_amount": "1.00", "customer_ids": [404]}
    )
    assert res.status_code == 404
    assert client.get("/api/orders").json() == []


def test_negative_order_amount_is_rejected(client):
    res = client.post("/api/orders", json={"order_number": "ORD-1", "total_amount": "-1.00"})
    assert res.status_code == 422


def test_customer_type_breakdown_endpoint(client):
    client.post("/api/customers", json=_customer_payload())
    client.post("/api/customers", json=_customer_payload("p@test.com", customer_type="Premium"))

    res = client.get("/api/statistics/customer-types")
    assert res.status_code == 200
    assert res.json() == [
        {"customer_type": "Individual", "count": 1},
        {"customer_type": "Premium", "count": 1},
    ]


def test_not_found_bodies_share_one_shape(client):
    for path, entity in (
        ("/api/customers/999", "Customer"),
        ("/api/customers/999/addresses", "Customer"),
        ("/api/customers/999/orders", "Customer"),
        ("/api/orders/999", "Order"),
    ):
        res = client.get(path)
        assert res.status_code == 404
        assert res.json()["detail"] == {
            "code": "NOT_FOUND",
            "message": f"{entity} 999 not found.",
            "entity": entity,
            "id": 999,
        }
