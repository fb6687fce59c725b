# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from todo_app.app import create_app
from todo_app.db import init_db, make_engine, make_session_factory
from todo_app.todo_store import TodoStore


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'todo.sqlite3'}"


@pytest.fixture()
def store(database_url: str) -> Iterator[TodoStore]:
    """
    TodoStore over a fresh SQLite file.

    Real SQLite rather than a fake: the transactional behaviour is part of
    what the store tests check.
    """
    engine = make_engine(database_url)
    init_db(engine)
    yield TodoStore(make_session_factory(engine))
    engine.dispose()


@pytest.fixture()
def client(database_url: str) -> Iterator[TestClient]:
    app = create_app(database_url)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def app_store(client: TestClient, database_url: str) -> Iterator[TodoStore]:
    """A second store on the client's database, for checking what the routes wrote."""
    engine = make_engine(database_url)
    yield TodoStore(make_session_factory(engine))
    engine.dispose()
