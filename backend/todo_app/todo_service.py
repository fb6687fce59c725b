from __future__ import annotations

import logging

from todo_app.models import Todo
from todo_app.todo_store import TodoStore


logger = logging.getLogger("todo_app.service")


class TodoService:
    def __init__(self, store: TodoStore) -> None:
        self.store = store

    def save(self, todo: Todo) -> None:
        self.store.create(todo)

    def list_all(self) -> list[Todo]:
        return self.store.find_all()

    def update(self, todo_id: int, changes: Todo) -> None:
        """Copy content and completion from ``changes`` onto task ``todo_id``.

        A missing id is ignored: nothing is written and no error is raised.
        """
        with self.store.transaction():
            existing = self.store.find_by_id(todo_id, for_update=True)
            if existing is None:
                logger.info("update skipped, no task id=%s", todo_id)
                return
            existing.content = changes.content
            existing.is_complete = changes.is_complete
            self.store.update(existing)

    def delete(self, todo_id: int) -> None:
        """Remove task ``todo_id`` if it exists."""
        if not self.store.delete_by_id(todo_id):
            logger.info("delete skipped, no task id=%s", todo_id)
