"""Endpoints for the todo resource."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class NotFoundError(Exception):
    """The requested resource does not exist."""


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if value.utcoffset() == timedelta(0) and text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


@dataclass
class Todo:
    id: str = ""
    text: str = ""
    done: bool = False
    created_at: datetime = _ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "done": self.done,
            "created_at": _format_time(self.created_at),
        }


@dataclass
class ListTodosRequest:
    pass


@dataclass
class ListTodosResponse:
    todos: list[Todo] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"todos": [todo.to_dict() for todo in self.todos]}


class ListTodosEndpoint:
    """Returns all todo items ordered by creation date; empty when there are none."""

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = "/api/todos"
    auth: ClassVar[bool] = False

    def handle(self, req: ListTodosRequest) -> ListTodosResponse:
        return ListTodosResponse(todos=[])


@dataclass
class GetTodoRequest:
    id: str = ""


@dataclass
class GetTodoResponse:
    todo: Todo = field(default_factory=Todo)

    def to_dict(self) -> dict[str, Any]:
        return {"todo": self.todo.to_dict()}


class GetTodoEndpoint:
    """Retrieves a single todo item by ID."""

    method: ClassVar[str] = "GET"
    path: ClassVar[str] = "/api/todos/{id}"
    auth: ClassVar[bool] = False

    def handle(self, req: GetTodoRequest) -> GetTodoResponse:
        if not req.id:
            raise NotFoundError("not found")
        return GetTodoResponse(todo=Todo(id=req.id))


@dataclass
class CreateTodoRequest:
    text: str = ""


class CreateTodoEndpoint:
    """Creates a new todo item."""

    method: ClassVar[str] = "POST"
    path: ClassVar[str] = "/api/todos"
    auth: ClassVar[bool] = False

    def handle(self, req: CreateTodoRequest) -> Todo:
        return Todo(
            id="stub",
            text=req.text,
            done=False,
            created_at=datetime.now(timezone.utc).astimezone(),
        )


@dataclass
class UpdateTodoRequest:
    id: str = ""
    text: str = ""
    done: bool = False


class UpdateTodoEndpoint:
    """Updates the text and done status of a todo item."""

    method: ClassVar[str] = "PUT"
    path: ClassVar[str] = "/api/todos/{id}"
    auth: ClassVar[bool] = False

    def handle(self, req: UpdateTodoRequest) -> Todo:
        return Todo(
            id=req.id,
            text=req.text,
            done=req.done,
            created_at=datetime.now(timezone.utc).astimezone(),
        )


@dataclass
class DeleteTodoRequest:
    id: str = ""


@dataclass
class DeleteTodoResponse:
    def to_dict(self) -> dict[str, Any]:
        return {}


class DeleteTodoEndpoint:
    """Deletes a todo item by ID."""

    method: ClassVar[str] = "DELETE"
    path: ClassVar[str] = "/api/todos/{id}"
    auth: ClassVar[bool] = False

    def handle(self, req: DeleteTodoRequest) -> DeleteTodoResponse:
        return DeleteTodoResponse()