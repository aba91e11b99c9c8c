"""Todo service - request handling logic."""

from __future__ import annotations

import logging
from typing import List

from todo_api.errors import TodoNotFoundError
from todo_api.models.todo import Todo, TodoItemDTO, to_view
from todo_api.repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Translates todo requests into store calls and projects the results."""

    def __init__(self, repository: TodoRepository) -> None:
        self._repository = repository

    def list_todos(self) -> List[TodoItemDTO]:
        """Get all todo items."""
        return [to_view(todo) for todo in self._repository.list_all()]

    def get_todo(self, todo_id: int) -> TodoItemDTO:
        """Get a specific todo by ID."""
        todo = self._repository.find_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        return to_view(todo)

    def create_todo(self, todo_data: TodoItemDTO) -> TodoItemDTO:
        """Create a new todo item from the name and completion flag of the payload."""
        todo = self._repository.insert(
            Todo(name=todo_data.name, is_complete=todo_data.is_complete)
        )
        logger.info("Created todo id=%s", todo.id)
        return to_view(todo)

    def update_todo(self, todo_id: int, todo_data: TodoItemDTO) -> None:
        """Replace the name and completion flag of an existing todo."""
        self._repository.update(
            todo_id, name=todo_data.name, is_complete=todo_data.is_complete
        )
        logger.info("Updated todo id=%s", todo_id)

    def delete_todo(self, todo_id: int) -> TodoItemDTO:
        """Delete a todo item and return its last state."""
        todo = self._repository.remove(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("Deleted todo id=%s", todo_id)
        return to_view(todo)
