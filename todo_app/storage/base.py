"""
Storage interface shared by the session and database backends.

Every method works on ids and returns fresh snapshots. Unknown ids raise
:class:`NotFoundException` subclasses; invalid names raise
:class:`ValidationException`.
"""

from abc import ABC, abstractmethod
from typing import List

from ..schemas import Todo, TodoList


class TodoStorage(ABC):
    """CRUD operations on a user's todo lists."""

    backend_name: str = "abstract"

    @abstractmethod
    def all_lists(self) -> List[TodoList]:
        """Return every list with its todos, ordered by id."""

    @abstractmethod
    def find_list(self, list_id: int) -> TodoList:
        """Return one list or raise ListNotFoundException."""

    @abstractmethod
    def create_list(self, name: str) -> TodoList:
        """Create an empty list under a new id."""

    @abstractmethod
    def rename_list(self, list_id: int, name: str) -> TodoList:
        """Give an existing list a new name."""

    @abstractmethod
    def delete_list(self, list_id: int) -> None:
        """Delete a list together with all of its todos."""

    @abstractmethod
    def create_todo(self, list_id: int, name: str) -> Todo:
        """Append an incomplete todo to a list."""

    @abstractmethod
    def delete_todo(self, list_id: int, todo_id: int) -> None:
        """Remove a todo from its list."""

    @abstractmethod
    def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> Todo:
        """Check or uncheck a todo."""

    @abstractmethod
    def complete_all_todos(self, list_id: int) -> TodoList:
        """Mark every todo of a list as completed."""
