"""
Display helpers for templates.

Lists and todos are shown incomplete first, complete last, keeping their
stored order inside each group.
"""

from typing import Callable, Iterable, List, Optional, TypeVar

from .schemas import Todo, TodoList

T = TypeVar("T")


def partition_for_display(items: Iterable[T], is_complete: Callable[[T], bool]) -> List[T]:
    """
    Order items incomplete-then-complete.

    The partition is stable: relative order within each group is preserved.
    The input is not modified.

    Args:
        items: Items in stored order
        is_complete: Predicate deciding which group an item belongs to

    Returns:
        New list with incomplete items followed by complete items
    """
    incomplete: List[T] = []
    complete: List[T] = []
    for item in items:
        (complete if is_complete(item) else incomplete).append(item)
    return incomplete + complete


def todos_count(todo_list: TodoList) -> int:
    return len(todo_list.todos)


def todos_remaining_count(todo_list: TodoList) -> int:
    return sum(1 for todo in todo_list.todos if not todo.completed)


def is_list_complete(todo_list: TodoList) -> bool:
    """A list is complete when it has at least one todo and none remaining."""
    return todos_count(todo_list) > 0 and todos_remaining_count(todo_list) == 0


def is_todo_complete(todo: Todo) -> bool:
    return todo.completed


def sort_lists(lists: Iterable[TodoList]) -> List[TodoList]:
    return partition_for_display(lists, is_list_complete)


def sort_todos(todos: Iterable[Todo]) -> List[Todo]:
    return partition_for_display(todos, is_todo_complete)


def list_class(todo_list: TodoList) -> Optional[str]:
    """CSS class for a list row."""
    return "complete" if is_list_complete(todo_list) else None


def todo_class(todo: Todo) -> Optional[str]:
    """CSS class for a todo row."""
    return "complete" if todo.completed else None


TEMPLATE_GLOBALS = {
    "todos_count": todos_count,
    "todos_remaining_count": todos_remaining_count,
    "is_list_complete": is_list_complete,
    "sort_lists": sort_lists,
    "sort_todos": sort_todos,
    "list_class": list_class,
    "todo_class": todo_class,
}
