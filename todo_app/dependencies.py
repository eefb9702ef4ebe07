"""
Shared dependencies for the application.

The storage a handler works on is built per request from the request itself
(its session) or a fresh database session, never from module state.
"""

from typing import Generator

from fastapi import Request

from .config import settings
from .database import SessionLocal
from .storage import DatabaseStorage, SessionStorage, TodoStorage


def get_storage(request: Request) -> Generator[TodoStorage, None, None]:
    """
    Provide the configured storage backend for one request.

    Yields:
        SessionStorage over ``request.session``, or DatabaseStorage over a
        SQLAlchemy session closed once the response is sent
    """
    if settings.uses_database:
        db = SessionLocal()
        try:
            yield DatabaseStorage(db)
        finally:
            db.close()
    else:
        yield SessionStorage(request.session)
