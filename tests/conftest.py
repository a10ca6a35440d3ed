from __future__ import annotations

from typing import Callable, Dict

import pytest
from fastapi.testclient import TestClient

from portfolio_api.core.config import Settings
from portfolio_api.core.database import Store

ADMIN_PASSWORD = "admin-pass"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Fresh settings pointing every file at tmp_path"""
    return Settings(
        ENVIRONMENT="test",
        DB_PATH=str(tmp_path / "portfolio.db"),
        UPLOAD_PATH=str(tmp_path / "uploads"),
        MAX_FILE_SIZE=1024,
        JWT_SECRET="test-secret",
        ADMIN_USERNAME="admin",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        ADMIN_EMAIL="admin@example.com",
        RATE_LIMIT_MAX=10000,
    )


@pytest.fixture
async def store(settings):
    store = Store(settings)
    await store.initialize()
    yield store
    await store.close()


@pytest.fixture
async def db(store):
    async with store.session() as session:
        yield session


@pytest.fixture
def client(settings):
    from portfolio_api.main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def login(client: TestClient, username: str, password: str) -> str:
    response = client.post("/api/auth/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


@pytest.fixture
def admin_headers(client) -> Dict[str, str]:
    return bearer(login(client, "admin", ADMIN_PASSWORD))


@pytest.fixture
def make_user(client, admin_headers) -> Callable[..., Dict[str, str]]:
    """Create a user through the admin API and return its auth headers"""

    def _make(username: str, role: str, password: str = "secret123") -> Dict[str, str]:
        response = client.post(
            "/api/users",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
                "role": role,
            },
            headers=admin_headers,
        )
        assert response.status_code == 201, response.text
        return bearer(login(client, username, password))

    return _make


@pytest.fixture
def editor_headers(make_user) -> Dict[str, str]:
    return make_user("editor1", "editor")


@pytest.fixture
def viewer_headers(make_user) -> Dict[str, str]:
    return make_user("viewer1", "viewer")

