"""Test configuration for the todo API."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.database import InMemoryDatabase  # noqa: E402
from todo_api.main import create_app  # noqa: E402


@pytest.fixture
def database() -> InMemoryDatabase:
    """Provide an empty in-memory database."""
    return InMemoryDatabase()


@pytest.fixture
def client(database: InMemoryDatabase) -> TestClient:
    """Provide a TestClient bound to a fresh application."""
    return TestClient(create_app(database))
