"""
Logging setup for the todo lists service.

One stdout handler on the root logger, formatted either as JSON lines or as
coloured text. Records emitted while a request is handled carry its id.
"""

import json
import logging
import sys
from contextvars import ContextVar
from typing import Any, Dict, Optional
from uuid import uuid4

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOGGER_NAME = "todo-service"

# Libraries that log every statement or request at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")

request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return getattr(record, "extra_fields", None) or {}


class StructuredFormatter(logging.Formatter):
    """
    One JSON object per record.

    ``extra={"extra_fields": {...}}`` keys are merged into the top level of
    the object, next to the request id.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        request_id = request_id_context.get()
        if request_id:
            entry["request_id"] = request_id

        entry.update(_extra_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class HumanReadableFormatter(logging.Formatter):
    """Coloured single-line output for local development."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.RESET)
        parts = [f"{color}{record.levelname:8}{self.RESET}", f"[{record.name}]"]

        request_id = request_id_context.get()
        if request_id:
            parts.append(f"[req:{request_id[:8]}]")

        parts.append(record.getMessage())
        parts.extend(f"{key}={value}" for key, value in _extra_fields(record).items())

        line = " ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(
    log_level: str = "INFO",
    service_name: str = DEFAULT_LOGGER_NAME,
    use_json: bool = False,
) -> logging.Logger:
    """
    Route all logging to stdout at ``log_level``.

    Args:
        log_level: Level name, DEBUG through CRITICAL
        service_name: Name of the returned service logger
        use_json: Emit JSON lines instead of coloured text

    Returns:
        The service logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    formatter_class = StructuredFormatter if use_json else HumanReadableFormatter

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(formatter_class(datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    service_logger = logging.getLogger(service_name)
    service_logger.setLevel(level)
    return service_logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)


def set_request_id(request_id: Optional[str] = None) -> str:
    """Bind ``request_id`` (a fresh UUID when omitted) to the current context."""
    request_id = request_id or str(uuid4())
    request_id_context.set(request_id)
    return request_id


def clear_request_id() -> None:
    request_id_context.set(None)
