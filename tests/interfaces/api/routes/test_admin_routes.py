"""Integration tests for the staff review endpoints."""

from datetime import timedelta

import pytest

from factories import PASSWORD, make_admin, make_invoice, make_user, make_vendor
from tradersbloc.domain.entities import Role
from tradersbloc.utils import now_utc


@pytest.fixture()
def admin(app_session, hasher):
    return make_admin(app_session, hasher)


@pytest.fixture()
def headers(admin, auth_headers):
    return auth_headers(admin.id, Role.ADMIN, admin.email)


@pytest.fixture()
def seeded(app_session, hasher, admin):
    """Two customers with one invoice each; the second one is overdue."""

    vendor = make_vendor(app_session, name="Acme Supplies", created_by=admin.id)
    first = make_user(app_session, hasher, email="first@example.com")
    second = make_user(app_session, hasher, email="second@example.com")
    current = make_invoice(
        app_session,
        user_id=first.id,
        vendor_id=vendor.id,
        invoice_number="INV-A",
        total_price=500,
    )
    overdue = make_invoice(
        app_session,
        user_id=second.id,
        vendor_id=vendor.id,
        invoice_number="INV-B",
        total_price=900,
        due_in_days=-3,
    )
    return {"vendor": vendor, "users": (first, second), "invoices": (current, overdue)}


def test_admin_profile_and_me(client, headers, admin):
    me = client.get("/admin/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["admin"]["email"] == admin.email
    assert me.json()["notifications"] == []

    profile = client.get("/admin/profile", headers=headers)
    assert profile.json()["role"] == "ADMIN"
    assert profile.json()["status"] == "ACTIVE"


def test_admin_profile_update_requires_both_passwords(client, headers):
    response = client.put("/admin/profile", json={"new_password": "Another123"}, headers=headers)
    assert response.status_code == 400

    renamed = client.put("/admin/profile", json={"name": "Grace B. Hopper"}, headers=headers)
    assert renamed.status_code == 200
    assert renamed.json()["name"] == "Grace B. Hopper"

    changed = client.put(
        "/admin/profile",
        json={"current_password": PASSWORD, "new_password": "Another123"},
        headers=headers,
    )
    assert changed.status_code == 200


def test_invoice_listing_metadata_and_filters(client, headers, seeded):
    page = client.get("/admin/invoices", params={"limit": 1}, headers=headers)
    assert page.status_code == 200
    body = page.json()
    assert body["metadata"] == {"total": 2, "page": 1, "limit": 1, "totalPages": 2}
    assert len(body["data"]) == 1

    overdue = client.get(
        "/admin/invoices", params={"dueDateFilter": "overdue"}, headers=headers
    )
    assert [item["invoice_number"] for item in overdue.json()["data"]] == ["INV-B"]

    search = client.get("/admin/invoices", params={"search": "inv-a"}, headers=headers)
    assert [item["invoice_number"] for item in search.json()["data"]] == ["INV-A"]

    by_total = client.get(
        "/admin/invoices",
        params={"sortBy": "total_price", "sortOrder": "asc"},
        headers=headers,
    )
    assert [item["total_price"] for item in by_total.json()["data"]] == [500, 900]


def test_invoice_search_treats_wildcards_literally(client, headers, seeded, app_session):
    make_invoice(
        app_session,
        user_id=seeded["users"][0].id,
        vendor_id=seeded["vendor"].id,
        invoice_number="INV_C",
    )

    underscore = client.get("/admin/invoices", params={"search": "_"}, headers=headers)
    assert [item["invoice_number"] for item in underscore.json()["data"]] == ["INV_C"]

    percent = client.get("/admin/invoices", params={"search": "%"}, headers=headers)
    assert percent.json()["data"] == []


@pytest.mark.parametrize(
    "params",
    [
        {"sortBy": "password"},
        {"sortOrder": "sideways"},
        {"page": 0},
        {"status": "archived"},
        {"dueDateFilter": "someday"},
    ],
)
def test_invalid_listing_parameters_are_bad_requests(client, headers, seeded, params):
    response = client.get("/admin/invoices", params=params, headers=headers)

    assert response.status_code == 400
    assert response.json()["kind"] == "BAD_REQUEST"


def test_invoice_review_notifies_owner_and_logs_activity(client, headers, seeded, admin):
    invoice = seeded["invoices"][0]

    response = client.patch(
        f"/admin/invoices/{invoice.id}/status", json={"status": "APPROVED"}, headers=headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "APPROVED"
    assert body["reviewed_by"] == admin.id
    assert body["review_date"] is not None

    dashboard = client.get("/admin/dashboard", headers=headers).json()
    assert dashboard["pending_invoices"] == 1
    assert [entry["action"] for entry in dashboard["recent_activity"]] == [
        "Invoice has been APPROVED"
    ]

    owner = client.get(f"/admin/users/{invoice.user_id}", headers=headers).json()
    assert [n["link"] for n in owner["notifications"]] == [f"/invoices/{invoice.id}"]

    approved = client.get("/admin/invoices", params={"status": "approved"}, headers=headers)
    assert [item["id"] for item in approved.json()["data"]] == [invoice.id]


def test_unknown_records_are_not_found(client, headers):
    assert client.get("/admin/invoices/404", headers=headers).status_code == 404
    assert client.get("/admin/milestones/404", headers=headers).status_code == 404
    assert client.get("/admin/kyc-documents/404", headers=headers).status_code == 404
    assert client.get("/admin/funding-requests/404", headers=headers).status_code == 404
    assert client.get("/admin/users/404", headers=headers).status_code == 404
    missing = client.patch(
        "/admin/invoices/404/status", json={"status": "APPROVED"}, headers=headers
    )
    assert missing.status_code == 404


def test_status_payload_must_be_a_known_status(client, headers, seeded):
    invoice = seeded["invoices"][0]

    response = client.patch(
        f"/admin/invoices/{invoice.id}/status", json={"status": "MAYBE"}, headers=headers
    )

    assert response.status_code == 400


def test_milestone_funding_and_kyc_review(client, headers, seeded, auth_headers):
    first, _ = seeded["users"]
    invoice = seeded["invoices"][0]
    customer = auth_headers(first.id, Role.ORDINARY_USER, first.email)
    due = (now_utc() + timedelta(days=10)).isoformat()

    milestone = client.post(
        "/users/milestones",
        json={
            "invoice_id": invoice.id,
            "title": "Deposit",
            "description": "First payment",
            "bank_account_no": "0001",
            "bank_name": "Canyon Bank",
            "payment_amount": 250.0,
            "due_date": due,
        },
        headers=customer,
    ).json()
    funding = client.post(
        "/users/funding-requests",
        json={"invoice_id": invoice.id, "requested_amount": 400.0, "your_contribution": 100.0},
        headers=customer,
    ).json()
    (document,) = client.post(
        "/users/me/kyc-documents",
        json={"documents": [{"document_type": "passport", "document_url": "https://f/p.pdf"}]},
        headers=customer,
    ).json()

    unpaid = client.get(
        "/admin/milestones",
        params={"paymentStatus": "unpaid", "minAmount": 100, "maxAmount": 300},
        headers=headers,
    )
    assert [item["id"] for item in unpaid.json()["data"]] == [milestone["id"]]
    paid = client.get("/admin/milestones", params={"paymentStatus": "paid"}, headers=headers)
    assert paid.json()["data"] == []

    reviewed = client.patch(
        f"/admin/milestones/{milestone['id']}/status",
        json={"status": "APPROVED"},
        headers=headers,
    )
    assert reviewed.json()["status"] == "APPROVED"

    pending_reviews = client.get(
        "/admin/funding-requests", params={"reviewStatus": "pending"}, headers=headers
    )
    assert [item["id"] for item in pending_reviews.json()["data"]] == [funding["id"]]
    client.patch(
        f"/admin/funding-requests/{funding['id']}/status",
        json={"status": "APPROVED"},
        headers=headers,
    )
    reviewed_requests = client.get(
        "/admin/funding-requests", params={"reviewStatus": "reviewed"}, headers=headers
    )
    assert [item["id"] for item in reviewed_requests.json()["data"]] == [funding["id"]]

    kyc = client.patch(
        f"/admin/kyc-documents/{document['id']}/status",
        json={"status": "REJECTED"},
        headers=headers,
    )
    assert kyc.json()["status"] == "REJECTED"
    kyc_page = client.get(
        "/admin/kyc-documents", params={"status": "rejected"}, headers=headers
    ).json()
    assert [item["id"] for item in kyc_page["data"]] == [document["id"]]

    dashboard = client.get("/admin/dashboard", headers=headers).json()
    assert dashboard["total_funded"] == 400.0
    assert dashboard["pending_milestones"] == 0
    assert dashboard["pending_fund_requests"] == 0


def test_vendor_management(client, headers, admin):
    payload = {
        "name": "Zeta Metals",
        "contact_person": "Zoe",
        "contact_person_phone_number": "+15550010",
        "phone_number": "+15550011",
        "address": "9 Foundry Lane",
        "email": "zoe@zeta.example.com",
        "bank_name": "Canyon Bank",
        "bank_account_number": "998877",
    }
    created = client.post("/admin/vendors", json=payload, headers=headers)
    assert created.status_code == 201
    assert created.json()["created_by"] == admin.id
    client.post("/admin/vendors", json={**payload, "name": "Alpha Alloys"}, headers=headers)

    listing = client.get("/admin/vendors", headers=headers).json()
    assert [item["name"] for item in listing["data"]] == ["Alpha Alloys", "Zeta Metals"]

    updated = client.put(
        f"/admin/vendors/{created.json()['id']}",
        json={"phone_number": "+15550099"},
        headers=headers,
    )
    assert updated.json()["phone_number"] == "+15550099"
    assert updated.json()["name"] == "Zeta Metals"

    assert client.put("/admin/vendors/404", json={"name": "x"}, headers=headers).status_code == 404


def test_reports_endpoint(client, headers, seeded):
    response = client.get("/admin/reports", params={"timeRange": "week"}, headers=headers)

    assert response.status_code == 200
    body = response.json()
    assert body["total_invoices"] == 2
    assert body["total_amount"] == 1400.0
    assert client.get(
        "/admin/reports", params={"timeRange": "decade"}, headers=headers
    ).status_code == 400


def test_admin_marks_broadcast_notification_as_read(
    client, app_session, hasher, headers, admin, auth_headers, seeded
):
    first, _ = seeded["users"]
    other_admin = make_admin(app_session, hasher, email="other@example.com")
    client.post(
        "/users/funding-requests",
        json={
            "invoice_id": seeded["invoices"][0].id,
            "requested_amount": 100.0,
            "your_contribution": 10.0,
        },
        headers=auth_headers(first.id, Role.ORDINARY_USER, first.email),
    )
    (notification,) = client.get("/admin/dashboard", headers=headers).json()[
        "unread_notifications"
    ]
    assert set(notification["admin_ids"]) == {admin.id, other_admin.id}

    response = client.post(f"/admin/notifications/{notification['id']}/read", headers=headers)

    assert response.status_code == 200
    assert response.json()["is_read"] is True
    assert client.get("/admin/dashboard", headers=headers).json()["unread_notifications"] == []


def test_only_recipients_or_super_admins_mark_notifications_read(
    client, app_session, hasher, headers, auth_headers, seeded
):
    first, _ = seeded["users"]
    root = make_admin(app_session, hasher, email="root@example.com", role=Role.SUPER_ADMIN)
    client.post(
        "/users/funding-requests",
        json={
            "invoice_id": seeded["invoices"][0].id,
            "requested_amount": 100.0,
            "your_contribution": 10.0,
        },
        headers=auth_headers(first.id, Role.ORDINARY_USER, first.email),
    )
    newcomer = make_admin(app_session, hasher, email="newcomer@example.com")
    (notification,) = client.get("/admin/dashboard", headers=headers).json()[
        "unread_notifications"
    ]

    denied = client.post(
        f"/admin/notifications/{notification['id']}/read",
        headers=auth_headers(newcomer.id, Role.ADMIN, newcomer.email),
    )
    assert denied.status_code == 403

    allowed = client.post(
        f"/admin/notifications/{notification['id']}/read",
        headers=auth_headers(root.id, Role.SUPER_ADMIN, root.email),
    )
    assert allowed.status_code == 200
