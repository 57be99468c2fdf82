from __future__ import annotations

PREFIX = "/api/v1"

LEAD = {
    "company_name": "Prairie Grain Co",
    "contact_person": "Lee Park",
    "email": "lee@prairiegrain.com",
    "phone": "555-0300",
    "origin_state": "ne",
}

ADDRESSES = {
    "origin_address": "1 Dock Rd",
    "origin_zip_code": "60601",
    "destination_address": "9 Market St",
    "destination_zip_code": "75201",
}


def test_health_and_root(client):
    assert client.get("/").json()["api_prefix"] == PREFIX
    assert client.get(f"{PREFIX}/health").json()["status"] == "ok"


def test_requests_without_token_are_unauthorized(client):
    assert client.get(f"{PREFIX}/leads").status_code == 401
    assert client.post(f"{PREFIX}/leads", json=LEAD).status_code == 401


def test_read_only_role_cannot_write(client, auth_headers):
    assert client.get(f"{PREFIX}/leads", headers=auth_headers("user")).status_code == 200
    assert client.post(f"{PREFIX}/leads", json=LEAD, headers=auth_headers("user")).status_code == 403


def test_lead_crud_and_transitions(client, auth_headers):
    broker = auth_headers("broker")
    created = client.post(f"{PREFIX}/leads", json=LEAD, headers=broker)
    assert created.status_code == 201
    lead = created.json()
    assert lead["status"] == "new"
    assert lead["derived_status"] == "new"
    assert lead["origin_state"] == "NE"

    illegal = client.patch(f"{PREFIX}/leads/{lead['id']}/status", json={"status": "converted"}, headers=broker)
    assert illegal.status_code == 422
    unknown = client.patch(f"{PREFIX}/leads/{lead['id']}/status", json={"status": "hot"}, headers=broker)
    assert unknown.status_code == 422

    moved = client.patch(f"{PREFIX}/leads/{lead['id']}/status", json={"status": "contacted"}, headers=broker)
    assert moved.json()["status"] == "contacted"

    listed = client.get(f"{PREFIX}/leads", params={"status": "contacted"}, headers=broker)
    assert [item["id"] for item in listed.json()] == [lead["id"]]

    assert client.delete(f"{PREFIX}/leads/{lead['id']}", headers=auth_headers("user")).status_code == 403
    assert client.delete(f"{PREFIX}/leads/{lead['id']}", headers=broker).status_code == 204
    assert client.get(f"{PREFIX}/leads/{lead['id']}", headers=broker).status_code == 404


def test_missing_records_return_not_found(client, auth_headers):
    admin = auth_headers("admin")
    for path in ("leads", "customers", "carriers", "quotes", "orders", "dispatches", "invoices", "followups"):
        assert client.get(f"{PREFIX}/{path}/9999", headers=admin).status_code == 404


def test_quote_acceptance_creates_order(client, auth_headers, sent_quote):
    broker = auth_headers("broker")
    direct = client.patch(f"{PREFIX}/quotes/{sent_quote.id}/status", json={"status": "accepted"}, headers=broker)
    assert direct.status_code == 422

    assert client.post(f"{PREFIX}/quotes/{sent_quote.id}/accept", json=ADDRESSES, headers=auth_headers("user")).status_code == 403

    accepted = client.post(f"{PREFIX}/quotes/{sent_quote.id}/accept", json=ADDRESSES, headers=broker)
    assert accepted.status_code == 200
    body = accepted.json()
    assert body["quote"]["status"] == "accepted"
    assert body["order"]["quote_id"] == sent_quote.id
    assert body["order"]["status"] == "needs_truck"

    orders = client.get(f"{PREFIX}/orders", headers=broker).json()
    assert [item["id"] for item in orders] == [body["order"]["id"]]


def test_dispatch_flow_updates_order(client, auth_headers, order, carrier):
    broker = auth_headers("broker")
    created = client.post(
        f"{PREFIX}/dispatches",
        json={"order_id": order.id, "carrier_id": carrier.id, "carrier_rate": "1900.00"},
        headers=broker,
    )
    assert created.status_code == 201
    dispatch_id = created.json()["id"]
    assert client.get(f"{PREFIX}/orders/{order.id}", headers=broker).json()["status"] == "dispatched"

    client.patch(f"{PREFIX}/dispatches/{dispatch_id}/status", json={"status": "picked_up"}, headers=broker)
    assert client.get(f"{PREFIX}/orders/{order.id}", headers=broker).json()["status"] == "in_transit"

    backwards = client.patch(f"{PREFIX}/orders/{order.id}/status", json={"status": "needs_truck"}, headers=broker)
    assert backwards.status_code == 422

    confirmation = client.get(f"{PREFIX}/dispatches/{dispatch_id}/rate-confirmation", headers=auth_headers("user"))
    assert confirmation.status_code == 200
    assert confirmation.headers["content-type"] == "application/pdf"
    assert confirmation.content.startswith(b"%PDF")


def test_carrier_with_dispatch_cannot_be_deleted(client, auth_headers, order, carrier):
    broker = auth_headers("broker")
    created = client.post(
        f"{PREFIX}/dispatches",
        json={"order_id": order.id, "carrier_id": carrier.id, "carrier_rate": "1900.00"},
        headers=broker,
    )
    dispatch_id = created.json()["id"]

    assert client.delete(f"{PREFIX}/carriers/{carrier.id}", headers=broker).status_code == 409
    assert client.get(f"{PREFIX}/carriers/{carrier.id}", headers=broker).status_code == 200
    assert client.delete(f"{PREFIX}/orders/{order.id}", headers=broker).status_code == 409

    confirmation = client.get(f"{PREFIX}/dispatches/{dispatch_id}/rate-confirmation", headers=broker)
    assert confirmation.status_code == 200

    assert client.delete(f"{PREFIX}/dispatches/{dispatch_id}", headers=broker).status_code == 204
    assert client.delete(f"{PREFIX}/carriers/{carrier.id}", headers=broker).status_code == 204


def test_deleting_customer_detaches_its_orders(client, session, auth_headers, order, customer):
    broker = auth_headers("broker")
    assert client.delete(f"{PREFIX}/customers/{customer.id}", headers=broker).status_code == 204
    session.expire_all()
    detached = client.get(f"{PREFIX}/orders/{order.id}", headers=broker)
    assert detached.status_code == 200
    assert detached.json()["customer_id"] is None


def test_v1_package_exports_router():
    from app.api.v1 import api_router, get_api_router

    assert get_api_router() is api_router
    paths = {route.path for route in api_router.routes}
    assert "/api/v1/orders/{order_id}" in paths


def test_invoice_overdue_is_derived(client, auth_headers, customer):
    broker = auth_headers("broker")
    created = client.post(
        f"{PREFIX}/invoices",
        json={"type": "customer", "customer_id": customer.id, "amount": "500.00", "due_date": "2020-01-01"},
        headers=broker,
    )
    assert created.status_code == 201
    invoice_id = created.json()["id"]
    sent = client.patch(f"{PREFIX}/invoices/{invoice_id}/status", json={"status": "sent"}, headers=broker)
    assert sent.json()["status"] == "sent"
    assert sent.json()["derived_status"] == "overdue"

    summary = client.get(f"{PREFIX}/invoices/summary", headers=auth_headers("user"))
    assert summary.status_code == 200
    assert summary.json()["overdue_count"] == 1

    pdf = client.get(f"{PREFIX}/invoices/{invoice_id}/pdf", headers=broker)
    assert pdf.content.startswith(b"%PDF")


def test_urgent_follow_ups_endpoint(client, auth_headers):
    broker = auth_headers("broker")
    for title, priority, due in (
        ("later", "urgent", "2030-01-09T09:00:00"),
        ("sooner", "high", "2030-01-02T09:00:00"),
        ("routine", "low", "2030-01-01T09:00:00"),
    ):
        response = client.post(
            f"{PREFIX}/followups",
            json={"title": title, "type": "call", "priority": priority, "due_date": due},
            headers=broker,
        )
        assert response.status_code == 201

    urgent = client.get(f"{PREFIX}/followups/urgent", params={"limit": 1}, headers=broker)
    assert [item["title"] for item in urgent.json()] == ["sooner"]
    assert client.get(f"{PREFIX}/followups/urgent", params={"limit": -1}, headers=broker).status_code == 422

    follow_up_id = urgent.json()[0]["id"]
    done = client.post(f"{PREFIX}/followups/{follow_up_id}/complete", headers=broker)
    assert done.json()["completed"] is True
    assert done.json()["derived_status"] == "completed"
    reopen = client.put(f"{PREFIX}/followups/{follow_up_id}", json={"completed": False}, headers=broker)
    assert reopen.status_code == 422


def test_dashboard_stats(client, auth_headers, sent_quote, order):
    stats = client.get(f"{PREFIX}/dashboard/stats", headers=auth_headers("user"))
    assert stats.status_code == 200
    body = stats.json()
    assert body["total_orders"] == 1
    assert body["active_orders"] == 1
    assert body["pending_quotes"] == 1

    half = client.get(f"{PREFIX}/dashboard/stats", params={"period_start": "2030-01-01"}, headers=auth_headers("user"))
    assert half.status_code == 422
    assert client.get(f"{PREFIX}/dashboard/stats").status_code == 401
