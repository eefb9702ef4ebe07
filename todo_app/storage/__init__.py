"""Storage backends for todo lists."""

from .base import TodoStorage
from .database_storage import DatabaseStorage
from .session_storage import SessionStorage

__all__ = ["TodoStorage", "SessionStorage", "DatabaseStorage"]
