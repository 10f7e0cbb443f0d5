"""
Shared fixtures. The environment is configured before any app module is
imported, since modules read their settings at import time.
"""
import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="portfolio-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["SESSION_SECRET"] = "test-session-secret"
os.environ["ADMIN_RESET_KEY"] = "test-reset-key"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from app.main import app
from apps.shared.database import Base, SessionLocal, engine


@pytest.fixture(autouse=True)
def clean_database():
    """Recreate every table so each test starts from an empty database."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def credentials():
    return {
        "email": "admin@example.com",
        "password": "correct horse battery staple",
        "name": "Site Owner",
    }


@pytest.fixture
def reset_key():
    return os.environ["ADMIN_RESET_KEY"]


@pytest.fixture
def admin(client, credentials):
    """Create the admin account through the setup endpoint."""
    response = client.post("/api/admin/setup", json=credentials)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def token(client, admin, credentials):
    response = client.post(
        "/api/auth/login",
        json={"email": credentials["email"], "password": credentials["password"]},
    )
    assert response.status_code == 200
    # Drop the login cookie so only explicit headers authenticate
    client.cookies.clear()
    return response.json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}
