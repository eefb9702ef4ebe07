"""
Relational storage on top of SQLAlchemy.

Each mutation commits before returning, so its effects are visible to the
next request. Ids come from AUTOINCREMENT primary keys and are never reused.
"""

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from ..exceptions import ListNotFoundException, TodoNotFoundException, ValidationException
from ..ids import is_storable_id
from ..logging_config import get_logger
from ..models import TodoListRecord, TodoRecord
from ..schemas import Todo, TodoList
from ..validators import LIST_NAME_UNIQUE_ERROR, check_list_name, check_todo_name
from .base import TodoStorage

logger = get_logger(__name__)


class DatabaseStorage(TodoStorage):
    """Keeps lists in the ``lists`` and ``todos`` tables."""

    backend_name = "database"

    def __init__(self, db: Session) -> None:
        self.db = db

    def _get_list_record(self, list_id: int) -> TodoListRecord:
        # Ids beyond the INTEGER range cannot be bound as query parameters
        record = self.db.get(TodoListRecord, list_id) if is_storable_id(list_id) else None
        if record is None:
            raise ListNotFoundException(list_id)
        return record

    def _get_todo_record(self, list_id: int, todo_id: int) -> TodoRecord:
        self._get_list_record(list_id)
        if not is_storable_id(todo_id):
            raise TodoNotFoundException(todo_id, list_id)
        record = (
            self.db.query(TodoRecord)
            .filter(TodoRecord.id == todo_id, TodoRecord.list_id == list_id)
            .first()
        )
        if record is None:
            raise TodoNotFoundException(todo_id, list_id)
        return record

    def _commit_list_name(self, name: str) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            # Another request took the name between the check and the commit
            self.db.rollback()
            raise ValidationException("list_name", name, LIST_NAME_UNIQUE_ERROR)

    def all_lists(self) -> List[TodoList]:
        records = (
            self.db.query(TodoListRecord)
            .options(selectinload(TodoListRecord.todos))
            .order_by(TodoListRecord.id)
            .all()
        )
        return [TodoList.model_validate(record) for record in records]

    def find_list(self, list_id: int) -> TodoList:
        return TodoList.model_validate(self._get_list_record(list_id))

    def create_list(self, name: str) -> TodoList:
        check_list_name(name, self.all_lists())

        record = TodoListRecord(name=name)
        self.db.add(record)
        self._commit_list_name(name)
        self.db.refresh(record)

        logger.info(
            "List created",
            extra={"extra_fields": {"list_id": record.id, "backend": self.backend_name}},
        )
        return TodoList.model_validate(record)

    def rename_list(self, list_id: int, name: str) -> TodoList:
        record = self._get_list_record(list_id)
        check_list_name(name, self.all_lists())

        record.name = name
        self._commit_list_name(name)
        self.db.refresh(record)

        logger.info("List renamed", extra={"extra_fields": {"list_id": list_id}})
        return TodoList.model_validate(record)

    def delete_list(self, list_id: int) -> None:
        record = self._get_list_record(list_id)
        self.db.delete(record)
        self.db.commit()

        logger.info("List deleted", extra={"extra_fields": {"list_id": list_id}})

    def create_todo(self, list_id: int, name: str) -> Todo:
        self._get_list_record(list_id)
        check_todo_name(name)

        record = TodoRecord(list_id=list_id, name=name, completed=False)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)

        logger.info(
            "Todo created",
            extra={"extra_fields": {"list_id": list_id, "todo_id": record.id}},
        )
        return Todo.model_validate(record)

    def delete_todo(self, list_id: int, todo_id: int) -> None:
        record = self._get_todo_record(list_id, todo_id)
        self.db.delete(record)
        self.db.commit()

        logger.info(
            "Todo deleted",
            extra={"extra_fields": {"list_id": list_id, "todo_id": todo_id}},
        )

    def set_todo_completed(self, list_id: int, todo_id: int, completed: bool) -> Todo:
        record = self._get_todo_record(list_id, todo_id)
        record.completed = completed
        self.db.commit()
        self.db.refresh(record)

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
        return Todo.model_validate(record)

    def complete_all_todos(self, list_id: int) -> TodoList:
        record = self._get_list_record(list_id)
        for todo in record.todos:
            todo.completed = True
        self.db.commit()
        self.db.refresh(record)

        logger.info(
            "All todos completed",
            extra={"extra_fields": {"list_id": list_id, "count": len(record.todos)}},
        )
        return TodoList.model_validate(record)
