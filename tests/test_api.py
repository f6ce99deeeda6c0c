"""API tests. Each test gets its own in-memory Logic; no data file is touched."""

import pytest
from fastapi.testclient import TestClient

from api.main import app
from networkbook.application import Logic
from networkbook.infrastructure import InMemoryModel


@pytest.fixture
def client():
    app.state.logic = Logic(InMemoryModel())
    yield TestClient(app)
    app.state.logic = None


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_command_then_persons(client):
    r = client.post("/commands", json={"text": "create n/Alice Tan p/999 g/AY2324-S1 pr/h"})
    assert r.status_code == 200
    body = r.json()
    assert body["feedback"].startswith("New person added: Alice Tan")
    assert body["ui_action"] == "none"

    r = client.get("/persons")
    assert r.status_code == 200
    persons = r.json()
    assert len(persons) == 1
    assert persons[0]["index"] == 1
    assert persons[0]["name"] == "Alice Tan"
    assert persons[0]["phones"] == ["999"]
    assert persons[0]["graduation"] == "AY2023/2024 Semester 1"
    assert persons[0]["priority"] == "high"
    assert persons[0]["tags"] == []


def test_invalid_command_is_bad_request(client):
    r = client.post("/commands", json={"text": "edit 1 n/Bob"})
    assert r.status_code == 400
    assert "invalid" in r.json()["detail"]

    r = client.post("/commands", json={"text": "jump"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Unknown command"


def test_exit_reports_ui_action(client):
    r = client.post("/commands", json={"text": "exit"})
    assert r.status_code == 200
    assert r.json()["ui_action"] == "exit"
