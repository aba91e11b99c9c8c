"""API dependencies for todo management."""

from fastapi import Depends, Request

from todo_api.database import InMemoryDatabase
from todo_api.repositories.todo_repository import TodoRepository
from todo_api.services.todo_service import TodoService


def get_db(request: Request) -> InMemoryDatabase:
    """Provide the database owned by the running application."""
    return request.app.state.database


def get_todo_repository(
    database: InMemoryDatabase = Depends(get_db),
) -> TodoRepository:
    """Dependency for getting todo repository instance."""
    return TodoRepository(database)


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
