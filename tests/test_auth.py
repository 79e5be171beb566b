# tests/test_auth.py

from datetime import timedelta

from taskboard.utils.security import create_access_token

from .factories import PASSWORD, auth_headers


def test_login_returns_token_usable_for_me(client, users):
    response = client.post("/auth/login", json={"email": "alice@taskboard.io", "password": PASSWORD})

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["id"] == users.alice.id

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["role"] == "employee"
    assert me.json()["department"] == "Engineering"


def test_login_with_wrong_password(client, users):
    response = client.post("/auth/login", json={"email": "alice@taskboard.io", "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials"}


def test_missing_token_is_rejected(client, users):
    response = client.get("/departments")

    assert response.status_code == 401
    assert "message" in response.json()


def test_garbage_token_is_rejected(client, users):
    response = client.get("/auth/me", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json() == {"message": "Could not validate credentials"}


def test_expired_token_is_rejected(client, users):
    token = create_access_token(data={"sub": users.alice.email}, expires_delta=timedelta(minutes=-5))

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_token_for_unknown_user_is_rejected(client, users):
    token = create_access_token(data={"sub": "ghost@taskboard.io"})

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_role_gate_message(client, users):
    response = client.get("/tasks", headers=auth_headers(users.alice))

    assert response.status_code == 401
    assert response.json() == {"message": "User role employee is not authorized to access this route"}
