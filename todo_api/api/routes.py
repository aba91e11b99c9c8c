"""API routes for todo management."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from todo_api.api.dependencies import get_todo_service
from todo_api.models.todo import TodoItemDTO
from todo_api.services.todo_service import TodoService

router = APIRouter()


@router.get("/todoitems", response_model=List[TodoItemDTO])
def get_todos(
    service: TodoService = Depends(get_todo_service),
) -> List[TodoItemDTO]:
    """Get all todo items."""
    return service.list_todos()


@router.get("/todoitems/{todo_id}", response_model=TodoItemDTO)
def get_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> TodoItemDTO:
    """Get a specific todo item by ID."""
    return service.get_todo(todo_id)


@router.post("/todoitems", response_model=TodoItemDTO, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo_data: TodoItemDTO,
    response: Response,
    service: TodoService = Depends(get_todo_service),
) -> TodoItemDTO:
    """Create a new todo item."""
    todo = service.create_todo(todo_data)
    response.headers["Location"] = f"/todoitems/{todo.id}"
    return todo


@router.put("/todoitems/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_todo(
    todo_id: int,
    todo_data: TodoItemDTO,
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Update an existing todo item."""
    service.update_todo(todo_id, todo_data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/todoitems/{todo_id}", response_model=TodoItemDTO)
def delete_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> TodoItemDTO:
    """Delete a todo item."""
    return service.delete_todo(todo_id)
