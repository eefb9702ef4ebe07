"""HTTP routers."""

from .lists import router as lists_router

__all__ = ["lists_router"]
