import json
from datetime import datetime, timezone

import pytest

from schemaf.todos import (
    CreateTodoEndpoint,
    CreateTodoRequest,
    DeleteTodoEndpoint,
    DeleteTodoRequest,
    GetTodoEndpoint,
    GetTodoRequest,
    ListTodosEndpoint,
    ListTodosRequest,
    NotFoundError,
    Todo,
    UpdateTodoEndpoint,
    UpdateTodoRequest,
)


def test_list_todos_returns_empty_array():
    resp = ListTodosEndpoint().handle(ListTodosRequest())
    assert resp.todos == []
    assert json.loads(json.dumps(resp.to_dict())) == {"todos": []}


def test_create_todo_echoes_text():
    before = datetime.now(timezone.utc)
    todo = CreateTodoEndpoint().handle(CreateTodoRequest(text="buy milk"))
    after = datetime.now(timezone.utc)
    assert todo.text == "buy milk"
    assert todo.done is False
    assert todo.id == "stub"
    assert before <= todo.created_at <= after
    assert todo.to_dict()["text"] == "buy milk"


def test_get_todo_path_param():
    resp = GetTodoEndpoint().handle(GetTodoRequest(id="abc-123-uuid"))
    assert resp.todo.id == "abc-123-uuid"
    assert resp.to_dict()["todo"]["id"] == "abc-123-uuid"


def test_get_todo_without_id_is_not_found():
    with pytest.raises(NotFoundError):
        GetTodoEndpoint().handle(GetTodoRequest())


def test_update_todo_reflects_request():
    todo = UpdateTodoEndpoint().handle(UpdateTodoRequest(id="abc-123-uuid", text="walk", done=True))
    assert (todo.id, todo.text, todo.done) == ("abc-123-uuid", "walk", True)


def test_delete_todo_returns_empty_body():
    resp = DeleteTodoEndpoint().handle(DeleteTodoRequest(id="abc-123-uuid"))
    assert resp.to_dict() == {}


@pytest.mark.parametrize(
    "endpoint, method, path",
    [
        (ListTodosEndpoint, "GET", "/api/todos"),
        (GetTodoEndpoint, "GET", "/api/todos/{id}"),
        (CreateTodoEndpoint, "POST", "/api/todos"),
        (UpdateTodoEndpoint, "PUT", "/api/todos/{id}"),
        (DeleteTodoEndpoint, "DELETE", "/api/todos/{id}"),
    ],
)
def test_routes(endpoint, method, path):
    assert endpoint.method == method
    assert endpoint.path == path
    assert endpoint.auth is False


def test_todo_to_dict_fields():
    stamp = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
    todo = Todo(id="abc-123-uuid", text="buy milk", done=True, created_at=stamp)
    data = todo.to_dict()
    assert set(data) == {"id", "text", "done", "created_at"}
    assert datetime.fromisoformat(data["created_at"].replace("Z", "+00:00")) == stamp
    assert data["created_at"].endswith("Z")