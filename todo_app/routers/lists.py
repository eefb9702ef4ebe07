"""
List and todo pages.

Mutating routes answer with a 303 redirect and queue a flash message.
Invalid names re-render the submitting page with status 422. Unknown ids
raise NotFoundException, which the application turns into a redirect to
the list index.
"""

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from ..dependencies import get_storage
from ..exceptions import ValidationException
from ..flash import flash
from ..logging_config import get_logger
from ..storage import TodoStorage
from ..templating import render
from ..validators import clean_name

logger = get_logger(__name__)

router = APIRouter(tags=["Lists"])

LISTS_PATH = "/lists"
INVALID_FORM_STATUS = 422


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def _list_path(list_id: int) -> str:
    return f"{LISTS_PATH}/{list_id}"


def _is_xhr(request: Request) -> bool:
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def _log_rejected(exc: ValidationException) -> None:
    logger.warning(
        "Name rejected",
        extra={"extra_fields": {"field": exc.field_name, "reason": exc.reason}},
    )


@router.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    return _redirect(LISTS_PATH)


@router.get(LISTS_PATH, response_class=HTMLResponse, summary="List index")
def list_index(request: Request, storage: TodoStorage = Depends(get_storage)):
    """Render every list, incomplete lists first."""
    return render(request, "lists.html", {"lists": storage.all_lists()})


@router.get(f"{LISTS_PATH}/new", response_class=HTMLResponse, summary="New list form")
def new_list_form(request: Request):
    return render(request, "new_list.html", {"list_name": ""})


@router.post(LISTS_PATH, summary="Create a list")
def create_list(
    request: Request,
    list_name: str = Form(""),
    storage: TodoStorage = Depends(get_storage),
):
    name = clean_name(list_name)
    try:
        storage.create_list(name)
    except ValidationException as exc:
        _log_rejected(exc)
        return render(
            request,
            "new_list.html",
            {"error": exc.reason, "list_name": name},
            status_code=INVALID_FORM_STATUS,
        )

    flash(request, "The list has been created.")
    return _redirect(LISTS_PATH)


@router.get(f"{LISTS_PATH}/{{list_id}}", response_class=HTMLResponse, summary="Show a list")
def show_list(
    request: Request,
    list_id: int,
    storage: TodoStorage = Depends(get_storage),
):
    """Render a single list, incomplete todos first."""
    return render(request, "list_detail.html", {"list": storage.find_list(list_id)})


@router.get(
    f"{LISTS_PATH}/{{list_id}}/edit",
    response_class=HTMLResponse,
    summary="Edit list form",
)
def edit_list_form(
    request: Request,
    list_id: int,
    storage: TodoStorage = Depends(get_storage),
):
    todo_list = storage.find_list(list_id)
    return render(request, "edit_list.html", {"list": todo_list, "list_name": todo_list.name})


@router.post(f"{LISTS_PATH}/{{list_id}}", summary="Rename a list")
def rename_list(
    request: Request,
    list_id: int,
    list_name: str = Form(""),
    storage: TodoStorage = Depends(get_storage),
):
    name = clean_name(list_name)
    try:
        storage.rename_list(list_id, name)
    except ValidationException as exc:
        _log_rejected(exc)
        return render(
            request,
            "edit_list.html",
            {"list": storage.find_list(list_id), "error": exc.reason, "list_name": name},
            status_code=INVALID_FORM_STATUS,
        )

    flash(request, "The list name has been updated.")
    return _redirect(_list_path(list_id))


@router.post(f"{LISTS_PATH}/{{list_id}}/delete", summary="Delete a list")
def delete_list(
    request: Request,
    list_id: int,
    storage: TodoStorage = Depends(get_storage),
):
    storage.delete_list(list_id)

    if _is_xhr(request):
        # Script callers navigate to the returned location themselves
        return PlainTextResponse(LISTS_PATH)

    flash(request, "The list has been deleted.")
    return _redirect(LISTS_PATH)


@router.post(f"{LISTS_PATH}/{{list_id}}/todos", summary="Add a todo")
def create_todo(
    request: Request,
    list_id: int,
    todo: str = Form(""),
    storage: TodoStorage = Depends(get_storage),
):
    name = clean_name(todo)
    try:
        storage.create_todo(list_id, name)
    except ValidationException as exc:
        _log_rejected(exc)
        return render(
            request,
            "list_detail.html",
            {"list": storage.find_list(list_id), "error": exc.reason, "todo_name": name},
            status_code=INVALID_FORM_STATUS,
        )

    flash(request, "The todo has been added.")
    return _redirect(_list_path(list_id))


@router.post(
    f"{LISTS_PATH}/{{list_id}}/todos/{{todo_id}}/delete",
    summary="Delete a todo",
)
def delete_todo(
    request: Request,
    list_id: int,
    todo_id: int,
    storage: TodoStorage = Depends(get_storage),
):
    storage.delete_todo(list_id, todo_id)

    if _is_xhr(request):
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    flash(request, "The todo has been deleted.")
    return _redirect(_list_path(list_id))


@router.post(
    f"{LISTS_PATH}/{{list_id}}/todos/{{todo_id}}",
    summary="Check or uncheck a todo",
)
def update_todo(
    request: Request,
    list_id: int,
    todo_id: int,
    completed: str = Form(""),
    storage: TodoStorage = Depends(get_storage),
):
    storage.set_todo_completed(list_id, todo_id, completed == "true")

    flash(request, "The todo has been updated.")
    return _redirect(_list_path(list_id))


@router.post(f"{LISTS_PATH}/{{list_id}}/complete_all", summary="Complete every todo")
def complete_all_todos(
    request: Request,
    list_id: int,
    storage: TodoStorage = Depends(get_storage),
):
    storage.complete_all_todos(list_id)

    flash(request, "All todos have been completed.")
    return _redirect(_list_path(list_id))
