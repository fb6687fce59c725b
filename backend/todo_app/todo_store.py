from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session, sessionmaker

from todo_app.models import Todo


logger = logging.getLogger("todo_app.store")


class TodoStore:
    """
    SQLAlchemy-backed storage for tasks.

    Every call runs in its own session and transaction (commit on success,
    rollback and re-raise on failure). Calls made inside ``transaction()``
    share that block's session instead, so a read and the write that
    depends on it commit together.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._current: ContextVar[Session | None] = ContextVar(
            f"todo_store_session_{id(self)}", default=None
        )

    @contextmanager
    def _session(self) -> Iterator[Session]:
        active = self._current.get()
        if active is not None:
            yield active
            return
        with self._session_factory.begin() as session:
            token = self._current.set(session)
            try:
                yield session
            finally:
                self._current.reset(token)

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Group several store calls into a single transaction."""
        with self._session():
            yield

    def create(self, todo: Todo) -> None:
        """Insert a new task; the database assigns ``todo.id``."""
        with self._session() as session:
            session.add(todo)
            session.flush()
        logger.info("created task id=%s", todo.id)

    def find_all(self) -> list[Todo]:
        with self._session() as session:
            return list(session.scalars(select(Todo).order_by(Todo.id)))

    def find_by_id(self, todo_id: int, *, for_update: bool = False) -> Todo | None:
        """Return the task with ``todo_id``, or None when there is none.

        ``for_update`` locks the row until the enclosing transaction ends
        on engines that support ``SELECT ... FOR UPDATE``.
        """
        with self._session() as session:
            return session.get(Todo, todo_id, with_for_update=for_update or None)

    def update(self, todo: Todo) -> None:
        """Write ``content`` and ``is_complete`` of ``todo`` to its row."""
        with self._session() as session:
            session.merge(todo)
        logger.info("updated task id=%s complete=%s", todo.id, todo.is_complete)

    def delete_by_id(self, todo_id: int) -> bool:
        with self._session() as session:
            result = session.execute(delete(Todo).where(Todo.id == todo_id))
        removed = bool(result.rowcount)
        if removed:
            logger.info("deleted task id=%s", todo_id)
        return removed

    def count(self) -> int:
        with self._session() as session:
            return int(session.scalar(select(func.count()).select_from(Todo)) or 0)
