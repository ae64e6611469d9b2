"""Integration tests for staff account management."""

import pytest

from factories import PASSWORD, make_admin
from tradersbloc.domain.entities import Role
from tradersbloc.infrastructure.repositories import ActivityLogRepository, AdminRepository


@pytest.fixture()
def root(app_session, hasher):
    return make_admin(app_session, hasher, email="root@example.com", role=Role.SUPER_ADMIN)


@pytest.fixture()
def headers(root, auth_headers):
    return auth_headers(root.id, Role.SUPER_ADMIN, root.email)


def _create(client, headers, email="new.admin@example.com", **overrides):
    payload = {"name": "New Admin", "email": email, "password": PASSWORD, **overrides}
    return client.post("/super-admin/admins", json=payload, headers=headers)


def test_create_admin(client, headers):
    response = _create(client, headers)

    assert response.status_code == 201
    body = response.json()
    assert body["role"] == "ADMIN"
    assert body["status"] == "ACTIVE"

    login = client.post(
        "/auth/token", data={"username": "new.admin@example.com", "password": PASSWORD}
    )
    assert login.json()["role"] == "ADMIN"


def test_create_admin_rejects_duplicates_and_other_roles(client, headers):
    assert _create(client, headers).status_code == 201
    assert _create(client, headers).status_code == 409
    assert _create(client, headers, email="boss@example.com", role="SUPER_ADMIN").status_code == 400


def test_plain_admin_cannot_manage_staff(client, app_session, hasher, auth_headers):
    admin = make_admin(app_session, hasher)

    response = client.post(
        "/super-admin/admins",
        json={"name": "x", "email": "x@example.com", "password": PASSWORD},
        headers=auth_headers(admin.id, Role.ADMIN, admin.email),
        follow_redirects=False,
    )

    assert response.status_code == 307


def test_suspend_and_reactivate_admin(client, app_session, headers, root):
    admin_id = _create(client, headers).json()["id"]

    suspended = client.patch(
        f"/super-admin/admins/{admin_id}", json={"status": "SUSPENDED"}, headers=headers
    )
    assert suspended.status_code == 200
    assert suspended.json()["status"] == "SUSPENDED"

    login = client.post(
        "/auth/token", data={"username": "new.admin@example.com", "password": PASSWORD}
    )
    assert login.status_code == 403

    client.patch(f"/super-admin/admins/{admin_id}", json={"status": "ACTIVE"}, headers=headers)
    login = client.post(
        "/auth/token", data={"username": "new.admin@example.com", "password": PASSWORD}
    )
    assert login.status_code == 200

    entries = ActivityLogRepository(app_session).list_recent_for_admin(root.id)
    actions = [entry.action for entry in entries]
    assert actions == ["Updated admin: new.admin@example.com"] * 2


def test_update_admin_only_assigns_the_admin_role(client, headers):
    admin_id = _create(client, headers).json()["id"]

    response = client.patch(
        f"/super-admin/admins/{admin_id}",
        json={"status": "ACTIVE", "role": "SUPER_ADMIN"},
        headers=headers,
    )

    assert response.status_code == 400


def test_update_permissions(client, headers):
    admin_id = _create(client, headers).json()["id"]

    promoted = client.patch(
        f"/super-admin/admins/{admin_id}/permissions",
        json={"role": "SUPER_ADMIN"},
        headers=headers,
    )
    assert promoted.status_code == 200
    assert promoted.json()["role"] == "SUPER_ADMIN"

    invalid = client.patch(
        f"/super-admin/admins/{admin_id}/permissions", json={"role": "USER"}, headers=headers
    )
    assert invalid.status_code == 400


def test_delete_admin(client, app_session, headers, root):
    admin_id = _create(client, headers).json()["id"]

    response = client.delete(f"/super-admin/admins/{admin_id}", headers=headers)

    assert response.status_code == 204
    assert AdminRepository(app_session).get(admin_id) is None
    assert client.delete(f"/super-admin/admins/{admin_id}", headers=headers).status_code == 404
    entries = ActivityLogRepository(app_session).list_recent_for_admin(root.id)
    actions = [entry.action for entry in entries]
    assert actions == ["Deleted admin: new.admin@example.com"]
