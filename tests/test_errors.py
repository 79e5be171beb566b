# tests/test_errors.py

from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from main import app
from taskboard.services.task_service import TaskService

from .factories import auth_headers


def test_unexpected_failure_is_a_500_message(client, users, monkeypatch):
    def broken(self, caller):
        raise RuntimeError("store went away")

    monkeypatch.setattr(TaskService, "list", broken)
    quiet_client = TestClient(app, raise_server_exceptions=False)

    response = quiet_client.get("/tasks", headers=auth_headers(users.admin))

    assert response.status_code == 500
    assert response.json() == {"message": "Server Error"}


def test_integrity_error_is_a_generic_400(client, users, monkeypatch):
    def not_null_violation(self, caller):
        raise IntegrityError("INSERT INTO tasks ...", {}, Exception("NOT NULL constraint failed: tasks.title"))

    monkeypatch.setattr(TaskService, "list", not_null_violation)

    response = client.get("/tasks", headers=auth_headers(users.admin))

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid or duplicate field value"}


def test_unknown_route_uses_message_body(client):
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert "message" in response.json()
