"""Jinja2 template setup and the page render helper."""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from .config import settings
from .display import TEMPLATE_GLOBALS
from .flash import pop_flashes

BASE_PATH = Path(__file__).resolve().parent

templates = Jinja2Templates(directory=str(BASE_PATH / "templates"))
templates.env.globals.update(TEMPLATE_GLOBALS)


def render(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> HTMLResponse:
    """
    Render a full page.

    Pending flash messages are consumed here, so they appear on exactly
    one page.

    Args:
        request: Current request
        name: Template file name
        context: Template variables
        status_code: HTTP status of the response

    Returns:
        Rendered HTML response
    """
    page_context: Dict[str, Any] = {
        "app_name": settings.APP_NAME,
        "flashes": pop_flashes(request),
    }
    page_context.update(context or {})

    return templates.TemplateResponse(
        request=request,
        name=name,
        context=page_context,
        status_code=status_code,
    )
