from __future__ import annotations

import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker


DEFAULT_DATABASE_URL = "sqlite:///./todo.sqlite3"


def _database_url() -> str:
    return os.getenv("TODO_DATABASE_URL", DEFAULT_DATABASE_URL)


def _echo_enabled() -> bool:
    return str(os.getenv("TODO_DB_ECHO", "0")).lower() in ("1", "true", "yes", "on")


class Base(DeclarativeBase):
    pass


def make_engine(database_url: str | None = None) -> Engine:
    """Create the SQLAlchemy engine for the configured database URL."""
    url = database_url or _database_url()
    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        # Handlers run in FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=_echo_enabled(), connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker:
    # Rows returned from a committed session stay readable in the view
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create missing tables."""
    # Register the mapped classes on Base.metadata
    from todo_app import models  # noqa: F401

    Base.metadata.create_all(engine)
