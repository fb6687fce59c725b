# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from todo_app.models import Todo


class FakeTodoStore:
    """
    In-memory TodoStore used for service unit tests.

    Records every call so tests can assert on what the service asked for,
    without going through SQLAlchemy.
    """

    def __init__(self, todos: list[Todo] | None = None) -> None:
        self.rows: dict[int, Todo] = {}
        self.calls: list[tuple[str, object]] = []
        self.transactions = 0
        self._next_id = 1
        for todo in todos or []:
            self.create(todo)
        self.calls.clear()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self.transactions += 1
        yield

    def create(self, todo: Todo) -> None:
        self.calls.append(("create", todo))
        todo.id = self._next_id
        self._next_id += 1
        self.rows[todo.id] = todo

    def find_all(self) -> list[Todo]:
        self.calls.append(("find_all", None))
        return list(self.rows.values())

    def find_by_id(self, todo_id: int, *, for_update: bool = False) -> Todo | None:
        self.calls.append(("find_by_id", todo_id))
        return self.rows.get(todo_id)

    def update(self, todo: Todo) -> None:
        self.calls.append(("update", todo))
        self.rows[todo.id] = todo

    def delete_by_id(self, todo_id: int) -> bool:
        self.calls.append(("delete_by_id", todo_id))
        return self.rows.pop(todo_id, None) is not None

    def count(self) -> int:
        return len(self.rows)
