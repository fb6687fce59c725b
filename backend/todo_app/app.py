import os
import logging
from pathlib import Path
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates

from todo_app.api.todos import create_router
from todo_app.db import init_db, make_engine, make_session_factory
from todo_app.todo_service import TodoService
from todo_app.todo_store import TodoStore


TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

logger = logging.getLogger("todo_app.app")


def _cors_origins() -> list[str]:
    raw = os.getenv("TODO_CORS_ORIGINS", "")
    return [o.strip() for o in raw.split(",") if o.strip()]


def create_app(database_url: str | None = None) -> FastAPI:
    """Wire store, service and routes into a FastAPI application.

    ``database_url`` overrides ``TODO_DATABASE_URL``.
    """
    engine = make_engine(database_url)
    init_db(engine)

    store = TodoStore(make_session_factory(engine))
    service = TodoService(store)
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app = FastAPI(title="Todo")
    origins = _cors_origins()
    if origins:
        # Pages are served same-origin; only listed origins may call in
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=False,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )
    app.include_router(create_router(service, templates))

    @app.get("/health")
    def health() -> dict[str, Any]:
        return {"status": "ok", "service": "todo"}

    logger.info(
        "app ready db=%s tasks=%d",
        engine.url.render_as_string(hide_password=True),
        store.count(),
    )
    return app
