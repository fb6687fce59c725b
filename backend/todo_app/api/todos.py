import logging

from pydantic import BaseModel, ValidationError
from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from todo_app.models import Todo
from todo_app.todo_service import TodoService


logger = logging.getLogger("todo_app.api.todos")


class TodoForm(BaseModel):
    """Task fields posted by the list view's forms."""

    content: str | None = None
    is_complete: bool = False

    def to_todo(self) -> Todo:
        return Todo(content=self.content, is_complete=self.is_complete)


async def parse_todo_form(request: Request) -> TodoForm:
    """Read the raw form so an empty ``toDoContent`` stays ``""``."""
    form = await request.form()
    try:
        # Unchecked checkboxes are not submitted at all
        return TodoForm(
            content=form.get("toDoContent"),
            is_complete=form.get("isComplete") or False,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


def create_router(service: TodoService, templates: Jinja2Templates) -> APIRouter:
    """Build the to-do routes around ``service``."""
    router = APIRouter(tags=["todos"])

    @router.get("/", response_class=HTMLResponse)
    def list_todos(request: Request):
        todos = service.list_all()
        return templates.TemplateResponse(request, "task.html", {"todoList": todos})

    @router.post("/addtodo", response_class=PlainTextResponse)
    def create_todo(form: TodoForm = Depends(parse_todo_form)) -> str:
        try:
            service.save(form.to_todo())
        except Exception:
            logger.exception("create_todo failed")
            raise
        return "success"

    @router.post("/updatetodo/{todo_id}")
    def update_todo(todo_id: int, form: TodoForm = Depends(parse_todo_form)) -> RedirectResponse:
        try:
            service.update(todo_id, form.to_todo())
        except Exception:
            logger.exception("update_todo[%s] failed", todo_id)
            raise
        return _redirect_home()

    @router.get("/deleteToDo/{todo_id}")
    def delete_todo(todo_id: int) -> RedirectResponse:
        try:
            service.delete(todo_id)
        except Exception:
            logger.exception("delete_todo[%s] failed", todo_id)
            raise
        return _redirect_home()

    return router
