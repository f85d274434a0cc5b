"""Integration tests for the todo and audit log endpoints."""

from __future__ import annotations

import pytest
from sqlalchemy.exc import OperationalError

from tasktrail.infrastructure.repositories import AuditLogRepository


def _audit_logs(client, headers, **params) -> list[dict]:
    response = client.get("/api/audit-logs", headers=headers, params=params)
    assert response.status_code == 200, response.text
    return response.json()


def test_todo_crud_and_audit_trail(client, register) -> None:
    """Exercise the full lifecycle of a todo and the entries it leaves behind."""

    headers = register("alice@example.com")

    created = client.post(
        "/api/todos", json={"title": "Buy milk", "description": "2 litres"}, headers=headers
    )
    assert created.status_code == 201
    todo = created.json()
    assert todo["title"] == "Buy milk"
    assert todo["description"] == "2 litres"
    assert todo["completed"] is False
    todo_id = todo["id"]

    listed = client.get("/api/todos", headers=headers)
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()] == [todo_id]

    detail = client.get(f"/api/todos/{todo_id}", headers=headers)
    assert detail.status_code == 200
    assert detail.json() == todo

    toggled = client.put(f"/api/todos/{todo_id}", json={"completed": True}, headers=headers)
    assert toggled.status_code == 200
    assert toggled.json()["completed"] is True
    assert toggled.json()["title"] == "Buy milk"

    deleted = client.delete(f"/api/todos/{todo_id}", headers=headers)
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Todo deleted successfully"}
    assert client.get("/api/todos", headers=headers).json() == []

    entries = _audit_logs(client, headers)
    assert [entry["action"] for entry in entries] == ["DELETE", "UPDATE", "CREATE"]
    delete_entry, update_entry, create_entry = entries
    assert create_entry["details"] == {
        "title": "Buy milk",
        "description": "2 litres",
        "completed": False,
    }
    assert update_entry["details"] == {"completed": {"from": False, "to": True}}
    assert update_entry["details"]["completed"]["to"] is True
    assert delete_entry["details"]["title"] == "Buy milk"
    assert delete_entry["details"]["completed"] is True
    for entry in entries:
        assert entry["todo_id"] == todo_id
        assert entry["todo_title"] is None
        assert set(entry) == {
            "id",
            "user_id",
            "todo_id",
            "action",
            "details",
            "created_at",
            "todo_title",
        }


def test_update_reports_only_changed_fields(client, register) -> None:
    headers = register("alice@example.com")
    todo_id = client.post("/api/todos", json={"title": "A"}, headers=headers).json()["id"]

    response = client.put(f"/api/todos/{todo_id}", json={"title": "B"}, headers=headers)

    assert response.status_code == 200
    latest = _audit_logs(client, headers)[0]
    assert latest["action"] == "UPDATE"
    assert latest["details"] == {"title": {"from": "A", "to": "B"}}
    assert latest["todo_title"] == "B"


def test_noop_update_leaves_the_log_untouched(client, register) -> None:
    headers = register("alice@example.com")
    todo = client.post("/api/todos", json={"title": "A"}, headers=headers).json()

    response = client.put(
        f"/api/todos/{todo['id']}", json={"title": "A", "completed": False}, headers=headers
    )

    assert response.status_code == 200
    assert response.json() == todo
    assert [entry["action"] for entry in _audit_logs(client, headers)] == ["CREATE"]


def test_description_can_be_cleared(client, register) -> None:
    headers = register("alice@example.com")
    todo_id = client.post(
        "/api/todos", json={"title": "A", "description": "notes"}, headers=headers
    ).json()["id"]

    response = client.put(f"/api/todos/{todo_id}", json={"description": None}, headers=headers)

    assert response.status_code == 200
    assert response.json()["description"] is None
    assert _audit_logs(client, headers)[0]["details"] == {
        "description": {"from": "notes", "to": None}
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"completed": 1},
        {"completed": "true"},
        {"title": ""},
        {"owner": 2},
    ],
)
def test_malformed_updates_are_rejected(client, register, payload) -> None:
    headers = register("alice@example.com")
    todo_id = client.post("/api/todos", json={"title": "A"}, headers=headers).json()["id"]

    response = client.put(f"/api/todos/{todo_id}", json=payload, headers=headers)

    assert response.status_code == 422
    assert len(_audit_logs(client, headers)) == 1


def test_null_or_blank_title_is_rejected(client, register) -> None:
    headers = register("alice@example.com")
    todo_id = client.post("/api/todos", json={"title": "A"}, headers=headers).json()["id"]

    assert client.put(f"/api/todos/{todo_id}", json={"title": None}, headers=headers).status_code == 400
    assert client.put(f"/api/todos/{todo_id}", json={"title": "   "}, headers=headers).status_code == 400
    assert client.post("/api/todos", json={"title": "   "}, headers=headers).status_code == 400
    assert client.post("/api/todos", json={}, headers=headers).status_code == 422
    assert client.get(f"/api/todos/{todo_id}", headers=headers).json()["title"] == "A"


def test_users_cannot_see_each_others_todos(client, register) -> None:
    alice = register("alice@example.com")
    bob = register("bob@example.com")
    todo_id = client.post("/api/todos", json={"title": "secret"}, headers=alice).json()["id"]

    assert client.get("/api/todos", headers=bob).json() == []
    for response in (
        client.get(f"/api/todos/{todo_id}", headers=bob),
        client.put(f"/api/todos/{todo_id}", json={"title": "mine"}, headers=bob),
        client.delete(f"/api/todos/{todo_id}", headers=bob),
    ):
        assert response.status_code == 404
        assert response.json() == {"detail": "Todo not found"}

    assert _audit_logs(client, bob) == []
    assert client.get(f"/api/todos/{todo_id}", headers=alice).json()["title"] == "secret"


def test_missing_todo_returns_not_found(client, register) -> None:
    headers = register("alice@example.com")

    assert client.put("/api/todos/999", json={"title": "x"}, headers=headers).status_code == 404
    assert client.delete("/api/todos/999", headers=headers).status_code == 404


@pytest.mark.parametrize("task_id", ["99999999999999999999", "0", "-1"])
def test_out_of_range_todo_ids_are_rejected(client, register, task_id) -> None:
    headers = register("alice@example.com")
    url = f"/api/todos/{task_id}"

    for response in (
        client.get(url, headers=headers),
        client.put(url, json={"title": "x"}, headers=headers),
        client.delete(url, headers=headers),
    ):
        assert response.status_code == 422
    assert _audit_logs(client, headers) == []


def test_audit_logs_filter_by_action(client, register) -> None:
    headers = register("alice@example.com")
    first = client.post("/api/todos", json={"title": "one"}, headers=headers).json()["id"]
    client.post("/api/todos", json={"title": "two"}, headers=headers)
    client.delete(f"/api/todos/{first}", headers=headers)

    creates = _audit_logs(client, headers, action="CREATE")
    deletes = _audit_logs(client, headers, action="DELETE")

    assert [entry["details"]["title"] for entry in creates] == ["two", "one"]
    assert [entry["todo_id"] for entry in deletes] == [first]
    response = client.get("/api/audit-logs", headers=headers, params={"action": "ARCHIVE"})
    assert response.status_code == 422


def test_audit_logs_pagination(client, register) -> None:
    headers = register("alice@example.com")
    for title in ("a", "b", "c"):
        client.post("/api/todos", json={"title": title}, headers=headers)

    everything = _audit_logs(client, headers)
    page = _audit_logs(client, headers, limit=1, offset=1)

    assert [entry["id"] for entry in page] == [everything[1]["id"]]


def test_storage_failure_returns_server_error_without_partial_write(
    client, register, monkeypatch
) -> None:
    headers = register("alice@example.com")

    def _fail(self, entry):
        raise OperationalError("INSERT INTO audit_logs", {}, Exception("database is locked"))

    monkeypatch.setattr(AuditLogRepository, "create", _fail)
    response = client.post("/api/todos", json={"title": "lost"}, headers=headers)

    assert response.status_code == 500
    assert response.json() == {"detail": "Server error"}
    assert client.get("/api/todos", headers=headers).json() == []
    assert _audit_logs(client, headers) == []


def test_responses_carry_a_request_id(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["x-request-id"]
