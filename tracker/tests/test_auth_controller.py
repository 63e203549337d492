from __future__ import annotations

import pytest
from bson import ObjectId
from flask.testing import FlaskClient

from tracker.domain.users.entities import Identity

from .conftest import FakeContainer

PROTECTED_ROUTES = [
    ("get", "/api/auth/me"),
    ("get", "/api/tasks"),
    ("post", "/api/tasks"),
    ("put", f"/api/tasks/{ObjectId()}"),
    ("delete", f"/api/tasks/{ObjectId()}"),
    ("patch", f"/api/tasks/{ObjectId()}/toggle"),
    ("post", "/api/seed"),
    ("delete", "/api/cleanup"),
]


def test_register_returns_created_user(client: FlaskClient) -> None:
    response = client.post("/api/auth/register", json={"username": "alice", "password": "secret123"})

    assert response.status_code == 201
    payload = response.get_json()
    assert payload["message"] == "User registered successfully"
    assert payload["username"] == "alice"
    assert ObjectId.is_valid(payload["userId"])


def test_register_same_username_twice(client: FlaskClient) -> None:
    credentials = {"username": "alice", "password": "secret123"}

    first = client.post("/api/auth/register", json=credentials)
    second = client.post("/api/auth/register", json=credentials)

    assert first.status_code == 201
    assert second.status_code == 400
    assert second.get_json() == {"error": "Username already exists"}


@pytest.mark.parametrize(("password", "status"), [("1234", 400), ("12345", 201)])
def test_register_password_length(client: FlaskClient, password: str, status: int) -> None:
    response = client.post("/api/auth/register", json={"username": "bob", "password": password})

    assert response.status_code == status
    if status == 400:
        assert response.get_json() == {"error": "Password must be at least 5 characters long"}


@pytest.mark.parametrize(
    "body",
    [
        {"username": "alice"},
        {"password": "secret123"},
        {"username": "", "password": "secret123"},
        {"username": "   ", "password": "secret123"},
        {"username": 42, "password": "secret123"},
        ["alice", "secret123"],
        None,
    ],
)
@pytest.mark.parametrize("path", ["/api/auth/register", "/api/auth/login"])
def test_credentials_are_required(client: FlaskClient, path: str, body: object) -> None:
    response = client.post(path, json=body)

    assert response.status_code == 400
    assert response.get_json()["error"] == "Username and password are required"


def test_login_returns_token_and_user(client: FlaskClient) -> None:
    credentials = {"username": "alice", "password": "secret123"}
    user_id = client.post("/api/auth/register", json=credentials).get_json()["userId"]

    response = client.post("/api/auth/login", json=credentials)

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["message"] == "Login successful"
    assert payload["user"] == {"id": user_id, "username": "alice"}
    assert payload["token"]


def test_login_wrong_password_and_unknown_user_look_the_same(client: FlaskClient) -> None:
    client.post("/api/auth/register", json={"username": "alice", "password": "secret123"})

    wrong_password = client.post("/api/auth/login", json={"username": "alice", "password": "nope!"})
    unknown_user = client.post("/api/auth/login", json={"username": "carol", "password": "secret123"})

    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.get_json() == unknown_user.get_json()
    assert wrong_password.get_json() == {"error": "Invalid username or password"}


def test_me_returns_user_without_password_hash(
    client: FlaskClient, auth_headers: dict[str, str]
) -> None:
    response = client.get("/api/auth/me", headers=auth_headers)

    assert response.status_code == 200
    user = response.get_json()["user"]
    assert user["username"] == "alice"
    assert set(user) == {"_id", "username", "createdAt"}


def test_me_for_unknown_user_is_not_found(
    client: FlaskClient, container: FakeContainer
) -> None:
    token = container.token_service.issue(Identity(user_id=str(ObjectId()), username="ghost"))

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "User not found"}


@pytest.mark.parametrize(("method", "path"), PROTECTED_ROUTES)
def test_protected_routes_require_token(client: FlaskClient, method: str, path: str) -> None:
    response = getattr(client, method)(path)

    assert response.status_code == 401
    assert response.get_json() == {"error": "Access token required"}


@pytest.mark.parametrize(
    ("header", "status"),
    [("Bearer not-a-token", 403), ("Bearer ", 401), ("Basic YWxpY2U6c2VjcmV0", 401)],
)
def test_malformed_authorization_headers(client: FlaskClient, header: str, status: int) -> None:
    response = client.get("/api/tasks", headers={"Authorization": header})

    assert response.status_code == status


@pytest.mark.parametrize(("method", "path"), PROTECTED_ROUTES)
def test_invalid_token_is_forbidden_everywhere(client: FlaskClient, method: str, path: str) -> None:
    response = getattr(client, method)(path, headers={"Authorization": "Bearer abc.def.ghi"})

    assert response.status_code == 403
    assert response.get_json() == {"error": "Invalid or expired token"}


@pytest.mark.parametrize(("method", "path"), PROTECTED_ROUTES)
def test_login_token_is_accepted_everywhere(
    client: FlaskClient, auth_headers: dict[str, str], method: str, path: str
) -> None:
    response = getattr(client, method)(path, headers=auth_headers, json={})

    assert response.status_code not in (401, 403)
