import pytest

from apps.skills import main as skills


def create_skill(client, headers, **payload):
    body = {"name": "Python", "category": "backend", **payload}
    return client.post("/api/skills", json=body, headers=headers)


def test_create_then_get(client, auth_headers):
    created = create_skill(client, auth_headers, proficiency=90).json()

    body = client.get(f"/api/skills/{created['id']}").json()

    assert body["name"] == "Python"
    assert body["category"] == "backend"
    assert body["proficiency"] == 90
    assert body["order"] == 0


def test_proficiency_defaults_to_50(client, auth_headers):
    assert create_skill(client, auth_headers).json()["proficiency"] == 50


def test_unknown_category_is_rejected(client, auth_headers):
    response = create_skill(client, auth_headers, category="cooking")

    assert response.status_code == 400
    assert "category" in response.json()["error"]


@pytest.mark.parametrize("proficiency", [0, 101, 150, -5])
def test_out_of_range_proficiency_is_rejected_by_default(client, auth_headers, proficiency):
    response = create_skill(client, auth_headers, name="Go", proficiency=proficiency)

    assert response.status_code == 400
    assert response.json() == {"error": "proficiency must be between 1 and 100"}


@pytest.mark.parametrize("proficiency,stored", [(150, 100), (0, 1), (1, 1), (100, 100)])
def test_clamp_policy(client, auth_headers, monkeypatch, proficiency, stored):
    monkeypatch.setattr(skills, "PROFICIENCY_POLICY", "clamp")

    response = create_skill(client, auth_headers, name="Go", proficiency=proficiency)

    assert response.status_code == 201
    assert response.json()["proficiency"] == stored


def test_policy_applies_to_updates(client, auth_headers):
    created = create_skill(client, auth_headers).json()

    response = client.put(
        f"/api/skills/{created['id']}",
        json={"proficiency": 250},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert client.get(f"/api/skills/{created['id']}").json()["proficiency"] == 50


def test_partial_update(client, auth_headers):
    created = create_skill(client, auth_headers, proficiency=70).json()

    body = client.put(
        f"/api/skills/{created['id']}",
        json={"category": "tools"},
        headers=auth_headers,
    ).json()

    assert body["category"] == "tools"
    assert body["name"] == "Python"
    assert body["proficiency"] == 70


def test_list_orders_by_order_then_newest(client, auth_headers):
    backend = create_skill(client, auth_headers, name="Go", category="backend").json()
    tools = create_skill(client, auth_headers, name="Docker", category="tools").json()
    first = create_skill(client, auth_headers, name="PyTorch", category="ml", order=-1).json()

    ids = [s["id"] for s in client.get("/api/skills").json()]

    # Category plays no part: the newer "tools" skill precedes "backend"
    assert ids == [first["id"], tools["id"], backend["id"]]


def test_delete(client, auth_headers):
    created = create_skill(client, auth_headers).json()

    assert client.delete(f"/api/skills/{created['id']}", headers=auth_headers).status_code == 200
    assert client.get(f"/api/skills/{created['id']}").status_code == 404


def test_unknown_policy_raises(monkeypatch):
    monkeypatch.setattr(skills, "PROFICIENCY_POLICY", "ignore")

    with pytest.raises(RuntimeError):
        skills.apply_proficiency_policy(500)
