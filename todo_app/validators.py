"""
Input validation for list and todo names.

The ``validate_*`` functions return a user-facing error message or ``None``;
the ``check_*`` variants raise :class:`ValidationException` instead.
"""

from typing import Iterable, Optional

from .exceptions import ValidationException
from .schemas import TodoList

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 100

LIST_NAME_LENGTH_ERROR = (
    f"List name must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
)
LIST_NAME_UNIQUE_ERROR = "List name must be unique."
TODO_NAME_LENGTH_ERROR = (
    f"Todo must be between {MIN_NAME_LENGTH} and {MAX_NAME_LENGTH} characters."
)


def clean_name(raw: Optional[str]) -> str:
    """Strip surrounding whitespace from a submitted form value."""
    return (raw or "").strip()


def _length_ok(name: str) -> bool:
    return MIN_NAME_LENGTH <= len(name) <= MAX_NAME_LENGTH


def validate_list_name(name: str, existing_lists: Iterable[TodoList]) -> Optional[str]:
    """
    Validate a list name against length bounds and existing list names.

    The comparison is case-sensitive. A list being renamed is part of
    ``existing_lists``, so keeping its current name is reported as a duplicate.

    Args:
        name: Candidate list name, already stripped
        existing_lists: Every list currently stored

    Returns:
        Error message, or None if the name is valid
    """
    if not _length_ok(name):
        return LIST_NAME_LENGTH_ERROR
    if any(todo_list.name == name for todo_list in existing_lists):
        return LIST_NAME_UNIQUE_ERROR
    return None


def validate_todo_name(name: str) -> Optional[str]:
    """Return an error message if the todo name length is out of bounds."""
    if not _length_ok(name):
        return TODO_NAME_LENGTH_ERROR
    return None


def check_list_name(name: str, existing_lists: Iterable[TodoList]) -> str:
    """
    Validate a list name, raising on failure.

    Raises:
        ValidationException: If the name is invalid
    """
    error = validate_list_name(name, existing_lists)
    if error:
        raise ValidationException("list_name", name, error)
    return name


def check_todo_name(name: str) -> str:
    """
    Validate a todo name, raising on failure.

    Raises:
        ValidationException: If the name is invalid
    """
    error = validate_todo_name(name)
    if error:
        raise ValidationException("todo", name, error)
    return name
