"""In-memory database backing the todo store."""

import threading
from dataclasses import dataclass, field
from typing import Dict

from todo_api.models.todo import Todo


@dataclass
class InMemoryDatabase:
    """Keyed in-memory storage living for the process lifetime."""

    name: str = "TodoList"
    todos: Dict[int, Todo] = field(default_factory=dict)
    next_id: int = 1
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def reset(self) -> None:
        """Reset the database to an empty state."""
        with self.lock:
            self.todos.clear()
            self.next_id = 1
