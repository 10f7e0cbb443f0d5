def submit(client, **overrides):
    payload = {
        "name": "Jordan",
        "email": "jordan@example.com",
        "subject": "Collaboration",
        "message": "Would love to work together.",
        **overrides,
    }
    return client.post("/api/contact", json=payload)


def test_contact_submission_is_public(client):
    response = submit(client)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Jordan"
    assert body["read"] is False
    assert body["createdAt"]


def test_contact_rejects_invalid_email(client):
    response = submit(client, email="not-an-email")

    assert response.status_code == 400
    assert "email" in response.json()["error"]


def test_contact_subject_is_optional(client):
    response = client.post(
        "/api/contact",
        json={"name": "Sam", "email": "sam@example.com", "message": "Hi"},
    )

    assert response.status_code == 201
    assert response.json()["subject"] == ""


def test_list_requires_auth(client):
    submit(client)

    assert client.get("/api/messages").status_code == 401


def test_list_is_newest_first(client, auth_headers):
    first = submit(client, subject="first").json()
    second = submit(client, subject="second").json()

    ids = [m["id"] for m in client.get("/api/messages", headers=auth_headers).json()]

    assert ids == [second["id"], first["id"]]


def test_mark_as_read(client, auth_headers):
    created = submit(client).json()

    response = client.put(f"/api/messages/{created['id']}", json={"read": True}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["read"] is True
    assert response.json()["message"] == created["message"]


def test_get_and_delete(client, auth_headers):
    created = submit(client).json()

    assert client.get(f"/api/messages/{created['id']}").status_code == 401
    assert client.get(f"/api/messages/{created['id']}", headers=auth_headers).status_code == 200

    response = client.delete(f"/api/messages/{created['id']}", headers=auth_headers)
    assert response.json() == {"message": "Message deleted successfully"}

    response = client.get(f"/api/messages/{created['id']}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Message not found"}
