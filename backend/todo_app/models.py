"""Task ORM model."""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from todo_app.db import Base


class Todo(Base):
    """A to-do item: its text and whether it is done."""

    __tablename__ = "task"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str | None] = mapped_column("to_do_content", Text, nullable=True)
    is_complete: Mapped[bool] = mapped_column(
        "is_complete", Boolean, nullable=False, default=False, server_default=false()
    )

    def __init__(self, content: str | None = None, is_complete: bool = False) -> None:
        self.content = content
        self.is_complete = is_complete

    def __repr__(self) -> str:
        return f"<Todo id={self.id} complete={self.is_complete}>"
