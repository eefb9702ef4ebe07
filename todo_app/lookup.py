"""Lookup of lists and todos by id."""

from typing import Iterable

from .exceptions import ListNotFoundException, TodoNotFoundException
from .schemas import Todo, TodoList


def find_list(list_id: int, lists: Iterable[TodoList]) -> TodoList:
    """
    Return the list with the given id.

    Raises:
        ListNotFoundException: If no list has that id
    """
    for todo_list in lists:
        if todo_list.id == list_id:
            return todo_list
    raise ListNotFoundException(list_id)


def find_todo(todo_id: int, todo_list: TodoList) -> Todo:
    """
    Return the todo with the given id from a list.

    Raises:
        TodoNotFoundException: If the list has no todo with that id
    """
    for todo in todo_list.todos:
        if todo.id == todo_id:
            return todo
    raise TodoNotFoundException(todo_id, todo_list.id)
