"""Typed queries for the todos table over a DB-API style connection.

The connection (or cursor) must provide ``execute(query, params)`` returning a
cursor with ``fetchone`` and ``fetchall``, and use the qmark parameter style.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, Sequence


class _Cursor(Protocol):
    def fetchone(self) -> Sequence[Any] | None: ...

    def fetchall(self) -> list[Sequence[Any]]: ...


class _DBTX(Protocol):
    def execute(self, query: str, params: Sequence[Any] = ...) -> _Cursor: ...


_CREATE_TODO = "INSERT INTO todos (text) VALUES (?) RETURNING id, text, done, created_at"
_DELETE_TODO = "DELETE FROM todos WHERE id = ?"
_GET_TODO = "SELECT id, text, done, created_at FROM todos WHERE id = ?"
_LIST_TODOS = "SELECT id, text, done, created_at FROM todos ORDER BY created_at DESC"
_UPDATE_TODO = (
    "UPDATE todos SET text = ?, done = ? WHERE id = ? "
    "RETURNING id, text, done, created_at"
)


@dataclass(frozen=True)
class Todo:
    id: uuid.UUID
    text: str
    done: bool
    created_at: datetime


@dataclass(frozen=True)
class UpdateTodoParams:
    id: uuid.UUID
    text: str
    done: bool


def _as_uuid(value: Any) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, bytes) and len(value) == 16:
        return uuid.UUID(bytes=value)
    return uuid.UUID(str(value))


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _scan(row: Sequence[Any]) -> Todo:
    todo_id, text, done, created_at = row
    return Todo(
        id=_as_uuid(todo_id),
        text=text,
        done=bool(done),
        created_at=_as_datetime(created_at),
    )


class Queries:
    """Query set bound to a connection or transaction."""

    def __init__(self, db: _DBTX) -> None:
        self._db = db

    def with_tx(self, tx: _DBTX) -> Queries:
        """Return a query set that runs on the given transaction."""
        return Queries(tx)

    def _one(self, query: str, params: Sequence[Any]) -> Todo:
        row = self._db.execute(query, params).fetchone()
        if row is None:
            raise LookupError("no rows in result set")
        return _scan(row)

    def create_todo(self, text: str) -> Todo:
        return self._one(_CREATE_TODO, (text,))

    def delete_todo(self, todo_id: uuid.UUID) -> None:
        self._db.execute(_DELETE_TODO, (str(todo_id),))

    def get_todo(self, todo_id: uuid.UUID) -> Todo:
        return self._one(_GET_TODO, (str(todo_id),))

    def list_todos(self) -> list[Todo]:
        return [_scan(row) for row in self._db.execute(_LIST_TODOS, ()).fetchall()]

    def update_todo(self, params: UpdateTodoParams) -> Todo:
        return self._one(_UPDATE_TODO, (params.text, params.done, str(params.id)))