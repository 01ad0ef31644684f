# tests/conftest.py

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from todo_mcp.main import create_app
from todo_mcp.mcp.server import MCPServer, create_mcp_server
from todo_mcp.services.task_store import TaskStore


@pytest.fixture()
def store() -> TaskStore:
    """A fresh, empty store per test."""
    return TaskStore()


@pytest.fixture()
def mcp_server(store: TaskStore) -> MCPServer:
    """Dispatcher wired to the per-test store with all tools registered."""
    return create_mcp_server(store)


@pytest.fixture()
def client(store: TaskStore) -> TestClient:
    """HTTP shell around the per-test store."""
    return TestClient(create_app(store))
