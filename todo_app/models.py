"""
Database models for the todo lists service.

This module defines SQLAlchemy ORM models backing the database storage backend.
"""

from typing import Any

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String
from sqlalchemy.orm import declarative_base, relationship

Base: Any = declarative_base()

NAME_COLUMN_LENGTH = 100


class TodoListRecord(Base):
    """
    Persisted todo list.

    Attributes:
        id: Primary key; AUTOINCREMENT so deleted ids are never handed out again
        name: Unique list name
        todos: Todos of the list ordered by id, deleted with the list
    """

    __tablename__ = "lists"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_COLUMN_LENGTH), unique=True, nullable=False)

    todos = relationship(
        "TodoRecord",
        back_populates="todo_list",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TodoRecord.id",
    )

    def __repr__(self) -> str:
        return f"<TodoListRecord(id={self.id}, name='{self.name}')>"


class TodoRecord(Base):
    """Persisted todo item."""

    __tablename__ = "todos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    list_id = Column(
        Integer,
        ForeignKey("lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(NAME_COLUMN_LENGTH), nullable=False)
    completed = Column(Boolean, default=False, nullable=False)

    todo_list = relationship("TodoListRecord", back_populates="todos")

    def __repr__(self) -> str:
        return (
            f"<TodoRecord(id={self.id}, list_id={self.list_id}, "
            f"completed={self.completed})>"
        )
