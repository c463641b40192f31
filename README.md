# schemaf

Building blocks for a small todo web service. The package has no dependencies beyond the standard library.

- `schemaf.log`: a process-wide logger that writes structured JSON lines to stderr.
- `schemaf.queries`: typed queries over a `todos` table through a DB-API style connection.
- `schemaf.todos`: request, response and endpoint classes for listing, fetching, creating, updating and deleting todos.
- `schemaf.clock`: an endpoint that asks a clock sidecar service for the current time.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Logging

```python
from schemaf import log

log.info("server started", port=8080)
log.error("request failed", path="/api/todos")
```

The module has `debug`, `info`, `warn` and `error`. Each takes a message and any keyword arguments. Each record is one JSON object on stderr. It has the keys `time`, `level` (`DEBUG`, `INFO`, `WARN` or `ERROR`) and `msg`, then one key for each keyword argument. When exception information is attached, the record also has an `exc` key. Values that JSON cannot hold are written as strings. The default level is INFO.

`log.set_logger(logger)` replaces the global logger. It accepts only a `logging.Logger`; anything else raises `TypeError`. `log.get_logger()` returns the logger in use. `log.JsonFormatter` is the formatter used by the default logger, and you can attach it to your own handlers.

## Queries

`Queries` works with any connection or cursor whose `execute(query, params)` returns a cursor with `fetchone` and `fetchall`, and which uses the qmark (`?`) parameter style, such as `sqlite3`. The insert and update statements use `RETURNING`, so the database must support it.

```python
import sqlite3
from schemaf.queries import Queries, UpdateTodoParams

queries = Queries(sqlite3.connect("todos.db"))
todo = queries.create_todo("buy milk")
queries.update_todo(UpdateTodoParams(id=todo.id, text="buy oat milk", done=True))
for item in queries.list_todos():   # newest first
    print(item.text, item.done)
queries.delete_todo(todo.id)
```

Rows come back as frozen `Todo` dataclasses with the fields `id` (`uuid.UUID`), `text`, `done` and `created_at` (`datetime`). Ids and timestamps stored as strings are converted. Ids are passed to the database as strings. `get_todo`, `create_todo` and `update_todo` raise `LookupError` when the statement returns no row.

Call `queries.with_tx(transaction)` to get a `Queries` object that runs its statements on that transaction.

## Endpoints

Each endpoint class has `method`, `path` and `auth` class attributes and a `handle(req)` method:

| Class | Method | Path |
|---|---|---|
| `ListTodosEndpoint` | GET | `/api/todos` |
| `GetTodoEndpoint` | GET | `/api/todos/{id}` |
| `CreateTodoEndpoint` | POST | `/api/todos` |
| `UpdateTodoEndpoint` | PUT | `/api/todos/{id}` |
| `DeleteTodoEndpoint` | DELETE | `/api/todos/{id}` |
| `GetServerTimeEndpoint` | GET | `/api/time` |

None of them requires auth.

```python
from schemaf.todos import GetTodoEndpoint, GetTodoRequest, NotFoundError

try:
    response = GetTodoEndpoint().handle(GetTodoRequest(id="abc-123-uuid"))
    print(response.todo.to_dict())
except NotFoundError:
    ...
```

The `Todo` class in `schemaf.todos`, and the response classes, have `to_dict()`. It returns the JSON-ready body. Timestamps are ISO 8601 strings, and UTC is written with `Z`.

`GetServerTimeEndpoint` in `schemaf.clock` reads the sidecar address from the `CLOCK_URL` environment variable. If that variable is not set, it uses `http://clock:8080`. It expects a JSON object with an RFC 3339 `time` string. If `time` is missing, the result is the zero time, 0001-01-01 UTC. A reply with an HTTP error status is still read as a body. If the sidecar cannot be reached, or its reply cannot be decoded, the endpoint raises `ClockServiceError`.

## What this package does not do

- The todo endpoints do not use storage. `ListTodosEndpoint` always returns an empty list. `GetTodoEndpoint` returns a todo that carries only the requested id, and raises `NotFoundError` when the id is empty. `CreateTodoEndpoint` returns a todo with the id `"stub"`. `UpdateTodoEndpoint` echoes the request back, and `DeleteTodoEndpoint` does nothing. To reach a database, use `schemaf.queries` yourself.
- There is no HTTP server, router, request decoding, authentication or token handling. The endpoint classes are plain objects, and you serve them with your own web framework.
- There are no database migrations and no command-line program.