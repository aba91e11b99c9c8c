"""Domain errors for the todo API."""


class TodoNotFoundError(LookupError):
    """Raised when a todo item id is not present in the store."""

    def __init__(self, todo_id: int) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id
