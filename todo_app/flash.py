"""
One-time status messages.

Messages are queued in the session by a mutating request and popped by the
next full-page render, so each is shown exactly once.
"""

from typing import Dict, List

from fastapi import Request

FLASH_KEY = "flash"


def flash(request: Request, message: str, category: str = "success") -> None:
    """
    Queue a status message for the next rendered page.

    Args:
        request: Current request (its session holds the queue)
        message: Text to display
        category: "success" or "error", used as CSS class
    """
    messages = list(request.session.get(FLASH_KEY, []))
    messages.append({"category": category, "message": message})
    request.session[FLASH_KEY] = messages


def pop_flashes(request: Request) -> List[Dict[str, str]]:
    """Return queued messages and clear the queue."""
    return request.session.pop(FLASH_KEY, [])
