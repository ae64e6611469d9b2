"""Tests for the prefix-based access middleware."""

import pytest

from factories import make_admin
from tradersbloc.domain.entities import Role
from tradersbloc.interfaces.api.access import RouteClass, classify_path


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/auth/token", RouteClass.PUBLIC),
        ("/health", RouteClass.PUBLIC),
        ("/unauthorized", RouteClass.PUBLIC),
        ("/admin", RouteClass.ADMIN),
        ("/admin/invoices/3", RouteClass.ADMIN),
        ("/super-admin/admins", RouteClass.SUPER_ADMIN),
        ("/users/me", RouteClass.OTHER),
        ("/administrator", RouteClass.OTHER),
    ],
)
def test_classify_path(path, expected):
    assert classify_path(path) is expected


def test_anonymous_admin_request_is_redirected(client):
    response = client.get("/admin/dashboard", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/unauthorized"


def test_customer_cannot_reach_admin_paths(client, auth_headers):
    response = client.get(
        "/admin/invoices",
        headers=auth_headers(1, Role.ORDINARY_USER),
        follow_redirects=False,
    )

    assert response.status_code == 307


def test_admin_cannot_reach_super_admin_paths(client, auth_headers):
    response = client.delete(
        "/super-admin/admins/5",
        headers=auth_headers(1, Role.ADMIN),
        follow_redirects=False,
    )

    assert response.status_code == 307


def test_redirect_target_reports_forbidden(client):
    response = client.get("/admin/dashboard")

    assert response.status_code == 403
    assert response.json()["kind"] == "FORBIDDEN"


def test_super_admin_passes_admin_paths(client, app_session, hasher, auth_headers):
    root = make_admin(app_session, hasher, email="root@example.com", role=Role.SUPER_ADMIN)

    response = client.get(
        "/admin/dashboard",
        headers=auth_headers(root.id, Role.SUPER_ADMIN, root.email),
        follow_redirects=False,
    )

    assert response.status_code == 200
    assert response.json()["admin"]["email"] == "root@example.com"


def test_tampered_token_is_treated_as_anonymous(client):
    response = client.get(
        "/admin/dashboard",
        headers={"Authorization": "Bearer not-a-token"},
        follow_redirects=False,
    )

    assert response.status_code == 307


def test_unprotected_prefix_defers_to_the_handler(client):
    response = client.get("/users/me", follow_redirects=False)

    assert response.status_code == 401
