"""Todo data models using Pydantic."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """Stored todo record, including fields that never leave the store."""

    id: int = 0
    name: Optional[str] = None
    is_complete: bool = False
    secret: Optional[str] = None


class TodoItemDTO(BaseModel):
    """Public view of a todo item.

    Serves as both the response body and the create/update payload. ``id`` is
    ignored on input and unknown keys such as ``secret`` are dropped.
    """

    id: int = 0
    name: Optional[str] = None
    is_complete: bool = Field(False, alias="isComplete")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


def to_view(todo: Todo) -> TodoItemDTO:
    """Project a stored record onto its public view."""
    return TodoItemDTO(id=todo.id, name=todo.name, is_complete=todo.is_complete)
