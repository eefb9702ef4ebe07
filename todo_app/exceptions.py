"""
Custom exception classes for the todo lists service.

Two kinds of failure reach the user: invalid names and unknown ids.
Both are recovered by the web layer and never retried.
"""

from typing import Any, Dict, Optional


class TodoAppException(Exception):
    """
    Base exception for all todo lists service errors.

    All custom exceptions inherit from this class
    for consistent error handling.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize todo service exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(TodoAppException):
    """
    Exception raised when a submitted name fails validation.

    The reason is the user-facing message shown next to the form.
    """

    def __init__(
        self,
        field_name: str,
        value: Any,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialize validation exception.

        Args:
            field_name: Name of the field that failed validation
            value: The invalid value
            reason: User-facing explanation of why validation failed
            details: Additional context about the error
        """
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(reason, details)


class NotFoundException(TodoAppException):
    """Exception raised when a list or todo id does not exist."""

    def __init__(
        self,
        resource: str,
        resource_id: int,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        default_message = f"The requested {resource} does not exist."
        super().__init__(message or default_message, details)


class ListNotFoundException(NotFoundException):
    """Exception raised when no list has the requested id."""

    def __init__(
        self,
        list_id: int,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.list_id = list_id
        super().__init__("list", list_id, details=details)


class TodoNotFoundException(NotFoundException):
    """Exception raised when a list has no todo with the requested id."""

    def __init__(
        self,
        todo_id: int,
        list_id: int,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.todo_id = todo_id
        self.list_id = list_id
        super().__init__("todo", todo_id, details=details)
