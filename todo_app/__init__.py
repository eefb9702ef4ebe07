"""
Todo Lists Service Package.

Server-rendered to-do list manager built on FastAPI and Jinja2, with
session-cookie or SQLAlchemy-backed storage.
"""

__version__ = "1.0.0"
__description__ = "Server-rendered to-do list manager"

# Export main components
from .app import app
from .config import settings

__all__ = [
    "app",
    "settings",
    "__version__",
]
