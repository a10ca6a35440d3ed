from datetime import timedelta

from portfolio_api.core.security import create_access_token
from tests.conftest import ADMIN_PASSWORD, bearer, login


def test_login_returns_user_and_token(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": ADMIN_PASSWORD})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"]["user"]["username"] == "admin"
    assert body["data"]["user"]["role"] == "admin"
    assert "password" not in body["data"]["user"]
    assert body["data"]["token"]


def test_login_with_wrong_password(client):
    response = client.post("/api/auth/login", json={"username": "admin", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Invalid credentials"}


def test_login_validation_failure_is_aggregated(client):
    response = client.post("/api/auth/login", json={})

    body = response.json()
    assert response.status_code == 400
    assert body["success"] is False
    assert body["error"] == "Validation failed"
    assert {d["field"] for d in body["details"]} == {"username", "password"}


def test_missing_token_is_401(client):
    response = client.get("/api/auth/profile")

    assert response.status_code == 401
    assert response.json()["error"] == "Access token required"


def test_bad_token_is_403(client):
    response = client.get("/api/auth/profile", headers=bearer("not-a-token"))

    assert response.status_code == 403
    assert response.json()["error"] == "Invalid or expired token"


def test_expired_token_is_403(client, settings):
    token = create_access_token("whoever", settings, expires_delta=timedelta(seconds=-10))

    response = client.get("/api/auth/profile", headers=bearer(token))

    assert response.status_code == 403


def test_token_for_deleted_user_is_401(client, settings):
    token = create_access_token("no-such-user", settings)

    response = client.get("/api/auth/profile", headers=bearer(token))

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or inactive user"


def test_profile_and_logout(client, admin_headers):
    profile = client.get("/api/auth/profile", headers=admin_headers)
    logout = client.post("/api/auth/logout", headers=admin_headers)

    assert profile.json()["data"]["username"] == "admin"
    assert logout.json() == {"success": True, "message": "Logout successful"}


def test_change_password(client, editor_headers):
    wrong = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "bad-guess", "newPassword": "newsecret"},
        headers=editor_headers,
    )
    changed = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "secret123", "newPassword": "newsecret"},
        headers=editor_headers,
    )

    assert wrong.status_code == 400
    assert wrong.json()["error"] == "Current password is incorrect"
    assert changed.status_code == 200
    assert login(client, "editor1", "newsecret")


def test_users_are_admin_only(client, admin_headers, editor_headers):
    assert client.get("/api/users").status_code == 401
    denied = client.get("/api/users", headers=editor_headers)
    allowed = client.get("/api/users", headers=admin_headers)

    assert denied.status_code == 403
    assert denied.json()["error"] == "Admin access required"
    assert allowed.status_code == 200
    assert {u["username"] for u in allowed.json()["data"]} == {"admin", "editor1"}


def test_duplicate_user_is_rejected(client, admin_headers, editor_headers):
    response = client.post(
        "/api/users",
        json={"username": "editor1", "email": "new@example.com", "password": "secret123"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Username already exists"


def test_admin_cannot_be_deleted(client, admin_headers):
    admin_id = client.get("/api/auth/profile", headers=admin_headers).json()["data"]["id"]

    response = client.delete(f"/api/users/{admin_id}", headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Cannot delete admin user"


def test_delete_user(client, admin_headers, editor_headers):
    users = client.get("/api/users", headers=admin_headers).json()["data"]
    editor_id = next(u["id"] for u in users if u["username"] == "editor1")

    deleted = client.delete(f"/api/users/{editor_id}", headers=admin_headers)
    again = client.delete(f"/api/users/{editor_id}", headers=admin_headers)

    assert deleted.status_code == 200
    assert again.status_code == 404
    assert client.get("/api/auth/profile", headers=editor_headers).status_code == 401


def test_rate_limit(settings):
    from fastapi.testclient import TestClient
    from portfolio_api.main import create_app

    limited = settings.model_copy(update={"RATE_LIMIT_MAX": 2})
    with TestClient(create_app(limited)) as client:
        statuses = [client.get("/health").status_code for _ in range(3)]
        blocked = client.get("/health")

    assert statuses[:2] == [200, 200]
    assert statuses[2] == 429
    assert blocked.json() == {
        "success": False,
        "error": "Too many requests from this IP, please try again later.",
    }
