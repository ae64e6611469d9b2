"""Tests for sign-in, registration and the public endpoints."""

from factories import PASSWORD, make_admin, make_user
from tradersbloc.domain.entities import AdminStatus, Role

REGISTRATION = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "phone_number": "+15550001",
    "email": "ada@example.com",
    "password": PASSWORD,
    "company_name": "Analytical Engines",
    "tax_id": "TX-001",
    "industry": "Manufacturing",
}


def _login(client, email: str, password: str = PASSWORD):
    return client.post("/auth/token", data={"username": email, "password": password})


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"message": "API up and running..."}


def test_register_then_sign_in_as_customer(client):
    response = client.post("/auth/register", json=REGISTRATION)
    assert response.status_code == 201
    body = response.json()
    assert body["email"] == REGISTRATION["email"]
    assert "password" not in body

    token_response = _login(client, REGISTRATION["email"])
    assert token_response.status_code == 200
    token = token_response.json()
    assert token["token_type"] == "bearer"
    assert token["role"] == Role.ORDINARY_USER.value
    assert token["access_token"]


def test_duplicate_registration_conflicts(client):
    assert client.post("/auth/register", json=REGISTRATION).status_code == 201

    response = client.post("/auth/register", json=REGISTRATION)

    assert response.status_code == 409
    assert response.json() == {"detail": "User already exists", "kind": "CONFLICT"}


def test_invalid_registration_payload_is_a_bad_request(client):
    response = client.post("/auth/register", json={**REGISTRATION, "email": "not-an-email"})

    assert response.status_code == 400
    body = response.json()
    assert body["kind"] == "BAD_REQUEST"
    assert body["detail"] == "Invalid request"
    assert body["errors"]


def test_wrong_password_is_unauthenticated(client, app_session, hasher):
    make_user(app_session, hasher, email="ada@example.com")

    response = _login(client, "ada@example.com", "WrongPass123")

    assert response.status_code == 401
    assert response.json()["kind"] == "UNAUTHORIZED"
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_unknown_email_is_unauthenticated(client):
    assert _login(client, "nobody@example.com").status_code == 401


def test_staff_sign_in_carries_their_role(client, app_session, hasher):
    make_admin(app_session, hasher, email="root@example.com", role=Role.SUPER_ADMIN)

    response = _login(client, "root@example.com")

    assert response.status_code == 200
    assert response.json()["role"] == "SUPER_ADMIN"


def test_staff_sign_in_when_email_is_also_a_customer(client, app_session, hasher):
    make_user(app_session, hasher, email="dup@example.com", password="CustomerPass1")
    make_admin(app_session, hasher, email="dup@example.com", password="AdminPass1")

    as_customer = _login(client, "dup@example.com", "CustomerPass1")
    assert as_customer.status_code == 200
    assert as_customer.json()["role"] == Role.ORDINARY_USER.value

    as_admin = _login(client, "dup@example.com", "AdminPass1")
    assert as_admin.status_code == 200
    assert as_admin.json()["role"] == "ADMIN"

    assert _login(client, "dup@example.com", "WrongPass123").status_code == 401


def test_suspended_admin_cannot_sign_in(client, app_session, hasher):
    make_admin(
        app_session, hasher, email="paused@example.com", status=AdminStatus.SUSPENDED
    )

    response = _login(client, "paused@example.com")

    assert response.status_code == 403
    assert response.json()["detail"] == "Account suspended"


def test_app_user_registration(client):
    payload = {
        "first_name": "Alan",
        "last_name": "Turing",
        "phone_number": "+15550009",
        "email": "alan@example.com",
        "password": PASSWORD,
        "profile_picture": "https://cdn.example.com/alan.png",
        "date_of_birth": "1990-06-23",
    }

    response = client.post("/app-users/register", json=payload)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["user"]["email"] == "alan@example.com"
    assert body["user"]["date_of_birth"] == "1990-06-23"

    assert client.post("/app-users/register", json=payload).status_code == 409
