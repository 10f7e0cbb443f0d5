import time

from apps.shared.auth import SESSION_COOKIE_NAME
from apps.shared.session import SESSION_MAX_AGE, issue_session_token


def login(client, email, password):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_returns_token_and_user(client, admin, credentials):
    response = login(client, credentials["email"], credentials["password"])

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["expiresAt"]
    assert body["user"] == {
        "id": admin["id"],
        "email": credentials["email"],
        "name": credentials["name"],
    }
    assert SESSION_COOKIE_NAME in response.cookies


def test_login_email_is_case_insensitive(client, admin, credentials):
    response = login(client, credentials["email"].upper(), credentials["password"])

    assert response.status_code == 200


def test_wrong_password_and_unknown_email_fail_identically(client, admin, credentials):
    wrong_password = login(client, credentials["email"], "nope")
    unknown_email = login(client, "someone@example.com", credentials["password"])

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}


def test_login_without_any_admin_fails(client, credentials):
    response = login(client, credentials["email"], credentials["password"])

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid credentials"}


def test_session_reports_admin(client, admin, auth_headers):
    response = client.get("/api/auth/session", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["adminId"] == admin["id"]


def test_session_cookie_authenticates(client, admin, credentials):
    login(client, credentials["email"], credentials["password"])

    response = client.post("/api/skills", json={"name": "Go", "category": "backend"})

    assert response.status_code == 201


def test_logout_clears_cookie(client, admin, credentials):
    login(client, credentials["email"], credentials["password"])

    client.post("/api/auth/logout")

    assert client.get("/api/auth/session").status_code == 401


def test_missing_token_is_unauthorized(client):
    response = client.get("/api/auth/session")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_expired_token_is_rejected(client, admin):
    expired = issue_session_token(admin["id"], issued_at=int(time.time()) - SESSION_MAX_AGE - 5)

    response = client.post(
        "/api/projects",
        json={"title": "T", "description": "D"},
        headers={"Authorization": f"Bearer {expired}"},
    )

    assert response.status_code == 401


def test_forged_token_is_rejected(client):
    response = client.post(
        "/api/projects",
        json={"title": "T", "description": "D"},
        headers={"Authorization": "Bearer not-a-real-token"},
    )

    assert response.status_code == 401


def test_unauthenticated_writes_are_rejected(client):
    assert client.post("/api/projects", json={"title": "T", "description": "D"}).status_code == 401
    assert client.put("/api/experience/1", json={"company": "X"}).status_code == 401
    assert client.delete("/api/skills/1").status_code == 401
    assert client.post("/api/settings", json={"key": "k", "value": "v"}).status_code == 401
    assert client.delete("/api/settings", params={"key": "k"}).status_code == 401
    assert client.get("/api/messages").status_code == 401
    assert client.get("/api/admin/stats").status_code == 401
