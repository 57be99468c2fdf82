from __future__ import annotations

PREFIX = "/api/v1"


def _register(client, username, password="s3cret-pass", headers=None, **extra):
    payload = {"username": username, "email": f"{username}@everflown.test", "password": password}
    payload.update(extra)
    return client.post(f"{PREFIX}/auth/register", json=payload, headers=headers or {})


def _login(client, username, password="s3cret-pass"):
    return client.post(f"{PREFIX}/auth/login", json={"username": username, "password": password})


def test_first_registered_user_is_admin(client):
    response = _register(client, "founder", role="user")
    assert response.status_code == 201
    assert response.json()["role"] == "admin"


def test_later_registration_requires_user_management(client, auth_headers):
    assert _register(client, "founder").status_code == 201
    assert _register(client, "walkin").status_code == 401
    assert _register(client, "walkin", headers=auth_headers("broker")).status_code == 403
    created = _register(client, "walkin", headers=auth_headers("admin"), role="broker")
    assert created.status_code == 201
    assert created.json()["role"] == "broker"


def test_login_me_and_refresh(client):
    _register(client, "founder")
    tokens = _login(client, "founder").json()
    assert tokens["token_type"] == "bearer"

    me = client.get(f"{PREFIX}/auth/me", headers={"Authorization": f"Bearer {tokens['access_token']}"})
    assert me.status_code == 200
    body = me.json()
    assert body["user"]["username"] == "founder"
    assert body["role_display_name"] == "Administrator"
    assert body["permissions"]["can_manage_users"] is True

    refreshed = client.post(f"{PREFIX}/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
    assert refreshed.status_code == 200
    assert refreshed.json()["access_token"]


def test_refresh_rejects_access_token(client):
    _register(client, "founder")
    tokens = _login(client, "founder").json()
    response = client.post(f"{PREFIX}/auth/refresh", json={"refresh_token": tokens["access_token"]})
    assert response.status_code == 401


def test_login_with_wrong_password_is_unauthorized(client):
    _register(client, "founder")
    assert _login(client, "founder", password="not-the-password").status_code == 401


def test_malformed_authorization_header(client):
    response = client.get(f"{PREFIX}/leads", headers={"Authorization": "Token abc"})
    assert response.status_code == 401
    response = client.get(f"{PREFIX}/leads", headers={"Authorization": "Bearer abc.def.ghi"})
    assert response.status_code == 401


def test_user_management_endpoints(client, auth_headers):
    admin = auth_headers("admin", user_id="user-admin")
    created = client.post(
        f"{PREFIX}/users",
        json={"username": "dispatch", "email": "dispatch@everflown.test", "password": "s3cret-pass", "role": "broker"},
        headers=admin,
    )
    assert created.status_code == 201
    user_id = created.json()["id"]

    assert client.get(f"{PREFIX}/users", headers=auth_headers("broker")).status_code == 403
    listed = client.get(f"{PREFIX}/users", headers=admin)
    assert {item["username"] for item in listed.json()} == {"dispatch", "user-admin-login", "user-broker-login"}

    updated = client.put(f"{PREFIX}/users/{user_id}", json={"role": "admin"}, headers=admin)
    assert updated.json()["role"] == "admin"

    own = auth_headers("admin", user_id=user_id)
    assert client.delete(f"{PREFIX}/users/{user_id}", headers=own).status_code == 409
    assert client.delete(f"{PREFIX}/users/{user_id}", headers=admin).status_code == 204


def test_users_manage_their_own_profile_but_not_their_role(client, auth_headers):
    admin = auth_headers("admin", user_id="user-admin")
    created = client.post(
        f"{PREFIX}/users",
        json={"username": "clerk", "email": "clerk@everflown.test", "password": "s3cret-pass"},
        headers=admin,
    )
    user_id = created.json()["id"]
    own = auth_headers("user", user_id=user_id)

    assert client.get(f"{PREFIX}/users/{user_id}", headers=own).status_code == 200
    renamed = client.put(f"{PREFIX}/users/{user_id}", json={"first_name": "Robin"}, headers=own)
    assert renamed.status_code == 200
    assert renamed.json()["first_name"] == "Robin"

    assert client.put(f"{PREFIX}/users/{user_id}", json={"role": "admin"}, headers=own).status_code == 403
    assert client.get(f"{PREFIX}/users/user-admin", headers=own).status_code == 403


def _broker_with_order(client, auth_headers, order):
    admin = auth_headers("admin", user_id="user-admin")
    created = client.post(
        f"{PREFIX}/users",
        json={"username": "dispatcher", "email": "dispatcher@everflown.test", "password": "s3cret-pass", "role": "broker"},
        headers=admin,
    )
    user_id = created.json()["id"]
    token = _login(client, "dispatcher").json()["access_token"]
    return admin, user_id, {"Authorization": f"Bearer {token}"}, order.id


def test_demoted_user_token_loses_write_access(client, auth_headers, order):
    admin, user_id, broker, order_id = _broker_with_order(client, auth_headers, order)
    assert client.get(f"{PREFIX}/orders/{order_id}", headers=broker).status_code == 200

    demoted = client.put(f"{PREFIX}/users/{user_id}", json={"role": "user"}, headers=admin)
    assert demoted.json()["role"] == "user"

    assert client.delete(f"{PREFIX}/orders/{order_id}", headers=broker).status_code == 403
    assert client.get(f"{PREFIX}/orders/{order_id}", headers=admin).status_code == 200


def test_deactivated_user_token_is_rejected(client, auth_headers, order):
    admin, user_id, broker, order_id = _broker_with_order(client, auth_headers, order)
    client.put(f"{PREFIX}/users/{user_id}", json={"is_active": False}, headers=admin)

    assert client.delete(f"{PREFIX}/orders/{order_id}", headers=broker).status_code == 401
    assert client.get(f"{PREFIX}/auth/me", headers=broker).status_code == 401
    assert client.get(f"{PREFIX}/orders/{order_id}", headers=admin).status_code == 200


def test_token_for_deleted_user_is_rejected(client, auth_headers, order):
    admin, user_id, broker, _ = _broker_with_order(client, auth_headers, order)
    assert client.delete(f"{PREFIX}/users/{user_id}", headers=admin).status_code == 204
    assert client.get(f"{PREFIX}/orders", headers=broker).status_code == 401


def test_user_update_cannot_clear_required_fields(client, auth_headers):
    admin = auth_headers("admin", user_id="user-admin")
    created = client.post(
        f"{PREFIX}/users",
        json={"username": "clerk", "email": "clerk@everflown.test", "password": "s3cret-pass"},
        headers=admin,
    )
    user_id = created.json()["id"]

    for field in ("role", "is_active", "email"):
        response = client.put(f"{PREFIX}/users/{user_id}", json={field: None}, headers=admin)
        assert response.status_code == 422, field

    unchanged = client.get(f"{PREFIX}/users/{user_id}", headers=admin).json()
    assert unchanged["role"] == "user"
    assert unchanged["is_active"] is True
