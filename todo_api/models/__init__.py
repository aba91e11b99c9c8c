"""Todo models."""

from .todo import Todo, TodoItemDTO, to_view

__all__ = ["Todo", "TodoItemDTO", "to_view"]
