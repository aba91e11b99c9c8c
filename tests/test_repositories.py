"""Repository tests."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from todo_api.database import InMemoryDatabase
from todo_api.errors import TodoNotFoundError
from todo_api.models.todo import Todo
from todo_api.repositories.todo_repository import TodoRepository


@pytest.fixture
def repository(database: InMemoryDatabase) -> TodoRepository:
    return TodoRepository(database)


def test_insert_assigns_increasing_ids(repository: TodoRepository) -> None:
    first = repository.insert(Todo(name="one"))
    second = repository.insert(Todo(name="two"))

    assert first.id == 1
    assert second.id == 2


def test_insert_ignores_incoming_id(repository: TodoRepository) -> None:
    repository.insert(Todo(name="one"))
    todo = repository.insert(Todo(id=1, name="clash"))

    assert todo.id == 2
    assert repository.find_by_id(1).name == "one"


def test_list_all_keeps_insertion_order(repository: TodoRepository) -> None:
    repository.insert(Todo(name="Todo 1"))
    repository.insert(Todo(name="Todo 2"))

    assert [todo.name for todo in repository.list_all()] == ["Todo 1", "Todo 2"]


def test_find_by_id_missing_returns_none(repository: TodoRepository) -> None:
    assert repository.find_by_id(42) is None


def test_update_changes_only_mutable_fields(repository: TodoRepository) -> None:
    todo = repository.insert(Todo(name="Original", secret="hidden"))

    updated = repository.update(todo.id, name="Updated", is_complete=True)

    assert updated.id == todo.id
    assert updated.name == "Updated"
    assert updated.is_complete is True
    assert updated.secret == "hidden"
    assert repository.find_by_id(todo.id) == updated


def test_update_missing_raises_and_leaves_store(repository: TodoRepository) -> None:
    todo = repository.insert(Todo(name="Keep"))

    with pytest.raises(TodoNotFoundError) as excinfo:
        repository.update(999, name="Nope", is_complete=True)

    assert excinfo.value.todo_id == 999
    assert repository.list_all() == [todo]


def test_remove_returns_record(repository: TodoRepository) -> None:
    todo = repository.insert(Todo(name="To delete"))

    removed = repository.remove(todo.id)

    assert removed == todo
    assert repository.find_by_id(todo.id) is None
    assert repository.remove(todo.id) is None
    assert repository.count() == 0


def test_returned_records_are_copies(repository: TodoRepository) -> None:
    todo = repository.insert(Todo(name="Original"))
    todo.name = "Mutated outside"

    fetched = repository.find_by_id(todo.id)
    fetched.is_complete = True

    assert repository.find_by_id(todo.id).name == "Original"
    assert repository.find_by_id(todo.id).is_complete is False


def test_concurrent_inserts_get_unique_ids(repository: TodoRepository) -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        todos = list(pool.map(lambda i: repository.insert(Todo(name=f"Todo {i}")), range(200)))

    ids = [todo.id for todo in todos]
    assert len(set(ids)) == 200
    assert repository.count() == 200


def test_database_reset_restarts_ids(database: InMemoryDatabase, repository: TodoRepository) -> None:
    repository.insert(Todo(name="Before reset"))
    database.reset()

    assert repository.list_all() == []
    assert repository.insert(Todo(name="After reset")).id == 1
