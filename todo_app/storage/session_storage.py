"""
Session-backed storage.

Lists live in the request's session mapping, which Starlette's
``SessionMiddleware`` serializes into a signed cookie after the response.
The mapping is handed in per request; nothing is shared between users.

Session layout::

    {
        "lists": [{"id": 1, "name": "...", "todos": [...]}, ...],
        "last_list_id": 3,
        "last_todo_ids": {"1": 7, "3": 2},
    }

The ``last_*`` counters record the highest id ever issued so ids freed by
deletion are not handed out again.
"""

from typing import Any, Dict, List, MutableMapping

from ..ids import next_id
from ..logging_config import get_logger
from ..lookup import find_list, find_todo
from ..schemas import Todo, TodoList
from ..validators import check_list_name, check_todo_name
from .base import TodoStorage

logger = get_logger(__name__)

LISTS_KEY = "lists"
LAST_LIST_ID_KEY = "last_list_id"
LAST_TODO_IDS_KEY = "last_todo_ids"


class SessionStorage(TodoStorage):
    """Keeps a user's lists in their session."""

    backend_name = "session"

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self.session = session

    def _load(self) -> List[TodoList]:
        return [TodoList.model_validate(data) for data in self.session.get(LISTS_KEY, [])]

    def _save(self, lists: List[TodoList]) -> None:
        self.session[LISTS_KEY] = [todo_list.model_dump() for todo_list in lists]

    def _todo_counters(self) -> Dict[str, int]:
        return dict(self.session.get(LAST_TODO_IDS_KEY, {}))

    def all_lists(self) -> List[TodoList]:
        return self._load()

    def find_list(self, list_id: int) -> TodoList:
        return find_list(list_id, self._load())

    def create_list(self, name: str) -> TodoList:
        lists = self._load()
        check_list_name(name, lists)

        list_id = next_id(
            (todo_list.id for todo_list in lists),
            self.session.get(LAST_LIST_ID_KEY, 0),
        )
        todo_list = TodoList(id=list_id, name=name)
        lists.append(todo_list)

        self.session[LAST_LIST_ID_KEY] = list_id
        self._save(lists)

        logger.info(
            "List created",
            extra={"extra_fields": {"list_id": list_id, "backend": self.backend_name}},
        )
        return todo_list

    def rename_list(self, list_id: int, name: str) -> TodoList:
        lists = self._load()
        todo_list = find_list(list_id, lists)
        check_list_name(name, lists)

        todo_list.name = name
        self._save(lists)

        logger.info("List renamed", extra={"extra_fields": {"list_id": list_id}})
        return todo_list

    def delete_list(self, list_id: int) -> None:
        lists = self._load()
        find_list(list_id, lists)

        self._save([todo_list for todo_list in lists if todo_list.id != list_id])

        counters = self._todo_counters()
        counters.pop(str(list_id), None)
        self.session[LAST_TODO_IDS_KEY] = counters

        logger.info("List deleted", extra={"extra_fields": {"list_id": list_id}})

    def create_todo(self, list_id: int, name: str) -> Todo:
        lists = self._load()
        todo_list = find_list(list_id, lists)
        check_todo_name(name)

        counters = self._todo_counters()
        todo_id = next_id(
            (todo.id for todo in todo_list.todos),
            counters.get(str(list_id), 0),
        )
        todo = Todo(id=todo_id, name=name, completed=False)
        todo_list.todos.append(todo)

        counters[str(list_id)] = todo_id
        self.session[LAST_TODO_IDS_KEY] = counters
        self._save(lists)

        logger.info(
            "Todo created",
            extra={"extra_fields": {"list_id": list_id, "todo_id": todo_id}},
        )
        return todo

    def delete_todo(self, list_id: int, todo_id: int) -> None:
        lists = self._load()
        todo_list = find_list(list_id, lists)
        find_todo(todo_id, todo_list)

        todo_list.todos = [todo for todo in todo_list.todos if todo.id != todo_id]
        self._save(lists)

        logger.info(
            "Todo deleted",
            extra={"extra_fields": {"list_id": list_id, "todo_id": todo_id}},
        )

    def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> Todo:
        lists = self._load()
        todo = find_todo(todo_id, find_list(list_id, lists))

        todo.completed = completed
        self._save(lists)

        logger.info(
            "Todo updated",
            extra={
                "extra_fields": {
                    "list_id": list_id,
                    "todo_id": todo_id,
                    "completed": completed,
                }
            },
        )
        return todo

    def complete_all_todos(self, list_id: int) -> TodoList:
        lists = self._load()
        todo_list = find_list(list_id, lists)

        for todo in todo_list.todos:
            todo.completed = True
        self._save(lists)

        logger.info(
            "All todos completed",
            extra={"extra_fields": {"list_id": list_id, "count": len(todo_list.todos)}},
        )
        return todo_list
