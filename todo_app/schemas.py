"""Pydantic models for list and todo snapshots."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A completable work item belonging to one list."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., ge=1)
    name: str
    completed: bool = False


class TodoList(BaseModel):
    """Named, ordered collection of todos."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., ge=1)
    name: str
    todos: List[Todo] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    service: str
    storage_backend: str
