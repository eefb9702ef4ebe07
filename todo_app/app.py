"""
Todo Lists Service - Main FastAPI Application.

Server-rendered to-do list manager. Lists are kept in the signed session
cookie or in a relational database, depending on ``STORAGE_BACKEND``.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from .config import settings
from .database import init_db
from .exceptions import ListNotFoundException, NotFoundException, TodoNotFoundException
from .flash import flash
from .logging_config import get_logger, setup_logging
from .middleware import RequestLoggingMiddleware
from .routers import lists_router
from .routers.lists import LISTS_PATH
from .schemas import HealthResponse
from .templating import BASE_PATH

setup_logging(
    log_level=settings.LOG_LEVEL,
    service_name=settings.SERVICE_NAME,
    use_json=settings.USE_JSON_LOGS,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Creates database tables on startup when the database backend is enabled.
    """
    logger.info(
        "Starting Todo Lists Service",
        extra={
            "extra_fields": {
                "storage_backend": settings.STORAGE_BACKEND,
                "debug_mode": settings.DEBUG,
                "log_level": settings.LOG_LEVEL,
            }
        },
    )

    if settings.uses_database:
        init_db()

    yield

    logger.info("Shutting down Todo Lists Service")


app = FastAPI(
    title=settings.APP_NAME,
    description="Server-rendered to-do list manager",
    version="1.0.0",
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url=None,
    lifespan=lifespan,
)

# Order matters - first added is innermost; the session must wrap everything
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE_NAME,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
)

app.mount(
    "/static",
    StaticFiles(directory=str(BASE_PATH / "static")),
    name="static",
)

app.include_router(lists_router)


@app.exception_handler(NotFoundException)
async def not_found_handler(request: Request, exc: NotFoundException) -> RedirectResponse:
    """Send unknown list/todo ids back to the list index with an error message."""
    logger.warning(
        "Requested resource does not exist",
        extra={
            "extra_fields": {
                "resource": exc.resource,
                "resource_id": exc.resource_id,
                "path": request.url.path,
            }
        },
    )
    flash(request, exc.message, category="error")
    return RedirectResponse(LISTS_PATH, status_code=303)


@app.exception_handler(RequestValidationError)
async def path_validation_handler(request: Request, exc: RequestValidationError):
    """Treat list/todo ids that are not integers as ids that do not exist."""
    bad_params = {error["loc"][-1] for error in exc.errors() if error["loc"][0] == "path"}
    path_params = request.path_params

    if "list_id" in bad_params:
        return await not_found_handler(request, ListNotFoundException(path_params["list_id"]))
    if "todo_id" in bad_params:
        return await not_found_handler(
            request,
            TodoNotFoundException(path_params["todo_id"], path_params.get("list_id")),
        )

    return await request_validation_exception_handler(request, exc)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    """Report that the service is running and which storage backend is active."""
    return HealthResponse(
        status="healthy",
        service=settings.SERVICE_NAME,
        storage_backend=settings.STORAGE_BACKEND,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
