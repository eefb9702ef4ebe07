"""
Tests for custom exception classes.

Tests all custom exception types to ensure proper initialization
and error message formatting.
"""

from todo_app.exceptions import (
    ListNotFoundException,
    NotFoundException,
    TodoAppException,
    TodoNotFoundException,
    ValidationException,
)


def test_todo_app_exception_basic() -> None:
    """
    Test basic TodoAppException initialization.

    Verifies that the base exception can be created with just a message.
    """
    exc = TodoAppException("Test error")

    assert exc.message == "Test error"
    assert exc.details == {}
    assert str(exc) == "Test error"


def test_todo_app_exception_with_details() -> None:
    details = {"code": "ERR001"}
    exc = TodoAppException("Test error", details=details)

    assert exc.details["code"] == "ERR001"


def test_validation_exception() -> None:
    """
    Test ValidationException initialization.

    The reason is the user-facing message.
    """
    exc = ValidationException(
        field_name="list_name",
        value="",
        reason="List name must be between 1 and 100 characters.",
    )

    assert exc.field_name == "list_name"
    assert exc.value == ""
    assert exc.message == "List name must be between 1 and 100 characters."
    assert str(exc) == exc.reason


def test_not_found_exception_default_message() -> None:
    exc = NotFoundException("widget", 7)

    assert exc.resource == "widget"
    assert exc.resource_id == 7
    assert exc.message == "The requested widget does not exist."


def test_not_found_exception_custom_message() -> None:
    exc = NotFoundException("list", 7, message="Gone")

    assert exc.message == "Gone"


def test_list_and_todo_not_found() -> None:
    list_exc = ListNotFoundException(3)
    todo_exc = TodoNotFoundException(5, 3, details={"path": "/lists/3"})

    assert list_exc.resource == "list"
    assert list_exc.resource_id == 3
    assert todo_exc.resource == "todo"
    assert todo_exc.resource_id == 5
    assert todo_exc.list_id == 3
    assert todo_exc.details["path"] == "/lists/3"


def test_exception_inheritance() -> None:
    """
    Test that all custom exceptions inherit from base.

    Verifies proper exception hierarchy for consistent error handling.
    """
    for exc in (
        ValidationException("field", "value", "reason"),
        ListNotFoundException(1),
        TodoNotFoundException(1, 1),
    ):
        assert isinstance(exc, TodoAppException)
        assert isinstance(exc, Exception)

    assert isinstance(ListNotFoundException(1), NotFoundException)
    assert isinstance(TodoNotFoundException(1, 1), NotFoundException)
