"""Todo repository - data access layer."""

from __future__ import annotations

from typing import List, Optional

from todo_api.database import InMemoryDatabase
from todo_api.errors import TodoNotFoundError
from todo_api.models.todo import Todo


class TodoRepository:
    """Repository for todo data access over the in-memory database.

    Every operation holds the database lock, and records are copied on the way
    in and out so no caller shares an instance with the store.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    def list_all(self) -> List[Todo]:
        """Return all todos in insertion order."""
        with self._db.lock:
            return [todo.model_copy() for todo in self._db.todos.values()]

    def find_by_id(self, todo_id: int) -> Optional[Todo]:
        """Return a todo by ID, or None when absent."""
        with self._db.lock:
            todo = self._db.todos.get(todo_id)
            return todo.model_copy() if todo is not None else None

    def insert(self, todo: Todo) -> Todo:
        """Store a new todo under a freshly assigned ID."""
        with self._db.lock:
            stored = todo.model_copy(update={"id": self._db.next_id})
            self._db.todos[stored.id] = stored
            self._db.next_id += 1
            return stored.model_copy()

    def update(self, todo_id: int, *, name: Optional[str], is_complete: bool) -> Todo:
        """Overwrite the mutable fields of an existing todo."""
        with self._db.lock:
            todo = self._db.todos.get(todo_id)
            if todo is None:
                raise TodoNotFoundError(todo_id)
            todo.name = name
            todo.is_complete = is_complete
            return todo.model_copy()

    def remove(self, todo_id: int) -> Optional[Todo]:
        """Delete a todo and return it, or None when absent."""
        with self._db.lock:
            return self._db.todos.pop(todo_id, None)

    def count(self) -> int:
        """Return the number of stored todos."""
        with self._db.lock:
            return len(self._db.todos)
