# tests/test_dispatcher.py

from __future__ import annotations

import pytest

from todo_mcp.mcp.base_tool import MCPToolError
from todo_mcp.mcp.server import MCPServer, ToolName
from todo_mcp.services.task_store import TaskStore

TASK_FIELDS = {"id", "title", "description", "completed", "created_at", "updated_at"}


def create(mcp_server: MCPServer, **arguments) -> dict:
    result = mcp_server.dispatch("create_todo", arguments)
    assert result["success"], result
    return result["data"]


def error_code(result: dict) -> str:
    assert result["success"] is False
    return result["error"]["code"]


def test_all_tools_registered(mcp_server: MCPServer) -> None:
    assert set(mcp_server.list_tools()) == {t.value for t in ToolName}


def test_tool_schemas_mark_required_fields(mcp_server: MCPServer) -> None:
    schemas = mcp_server.get_tool_schemas()

    assert schemas["create_todo"]["parameters"]["required"] == ["title"]
    assert schemas["update_todo"]["parameters"]["required"] == ["id"]
    assert "required" not in schemas["list_todos"]["parameters"]
    assert schemas["get_todo"]["description"] == "Get details of a single todo item"


def test_create_then_get(mcp_server: MCPServer) -> None:
    created = create(mcp_server, title="Buy milk")

    result = mcp_server.dispatch("get_todo", {"id": created["id"]})

    assert result["success"] is True
    todo = result["data"]
    assert set(todo) == TASK_FIELDS
    assert todo["title"] == "Buy milk"
    assert todo["description"] is None
    assert todo["completed"] is False
    assert isinstance(todo["created_at"], str)


def test_created_ids_are_distinct(mcp_server: MCPServer) -> None:
    ids = [create(mcp_server, title=f"task {i}")["id"] for i in range(50)]
    assert len(set(ids)) == 50


@pytest.mark.parametrize("arguments", [{"title": ""}, {"title": "   "}, {}, None])
def test_create_without_title_is_validation_error(mcp_server: MCPServer, store: TaskStore, arguments) -> None:
    result = mcp_server.dispatch("create_todo", arguments)

    assert error_code(result) == "VALIDATION_ERROR"
    assert result["error"]["details"] == {"field": "title"}
    assert store.count() == 0


def test_complete_is_idempotent(mcp_server: MCPServer) -> None:
    todo_id = create(mcp_server, title="Buy milk")["id"]

    first = mcp_server.dispatch("complete_todo", {"id": todo_id})
    second = mcp_server.dispatch("complete_todo", {"id": todo_id})

    assert first["data"]["completed"] is True
    assert second["success"] is True
    assert second["data"]["completed"] is True


def test_update_title_leaves_other_fields(mcp_server: MCPServer) -> None:
    todo_id = create(mcp_server, title="Buy milk", description="2 litres")["id"]
    mcp_server.dispatch("complete_todo", {"id": todo_id})

    result = mcp_server.dispatch("update_todo", {"id": todo_id, "title": "X"})

    assert result["data"]["title"] == "X"
    assert result["data"]["description"] == "2 litres"
    assert result["data"]["completed"] is True


def test_update_empty_title_is_validation_error(mcp_server: MCPServer) -> None:
    todo_id = create(mcp_server, title="Buy milk")["id"]

    result = mcp_server.dispatch("update_todo", {"id": todo_id, "title": ""})

    assert error_code(result) == "VALIDATION_ERROR"


def test_delete_then_get_is_not_found(mcp_server: MCPServer) -> None:
    todo_id = create(mcp_server, title="Buy milk")["id"]

    deleted = mcp_server.dispatch("delete_todo", {"id": todo_id})
    assert deleted["success"] is True
    assert deleted["data"] == {}

    result = mcp_server.dispatch("get_todo", {"id": todo_id})
    assert error_code(result) == "NOT_FOUND"
    assert result["error"]["details"] == {"id": todo_id}


@pytest.mark.parametrize(
    "tool, arguments",
    [
        ("get_todo", {"id": "nope"}),
        ("update_todo", {"id": "nope", "title": "X"}),
        ("delete_todo", {"id": "nope"}),
        ("complete_todo", {"id": "nope"}),
    ],
)
def test_unknown_id_is_not_found(mcp_server: MCPServer, tool: str, arguments: dict) -> None:
    assert error_code(mcp_server.dispatch(tool, arguments)) == "NOT_FOUND"


@pytest.mark.parametrize(
    "tool, arguments",
    [
        ("get_todo", {}),
        ("get_todo", {"id": 5}),
        ("update_todo", {"id": "x", "completed": "yes"}),
        ("create_todo", {"title": "ok", "priority": "high"}),
        ("create_todo", ["Buy milk"]),
        ("list_todos", {"filter": "all"}),
    ],
)
def test_malformed_arguments_are_rejected(
    mcp_server: MCPServer, store: TaskStore, tool: str, arguments
) -> None:
    result = mcp_server.dispatch(tool, arguments)

    assert error_code(result) == "INVALID_ARGUMENTS"
    assert store.count() == 0


def test_invalid_arguments_report_fields(mcp_server: MCPServer) -> None:
    result = mcp_server.dispatch("update_todo", {"id": "x", "completed": "yes"})

    fields = [err["field"] for err in result["error"]["details"]["errors"]]
    assert fields == ["completed"]


def test_unknown_tool_is_invalid_arguments(mcp_server: MCPServer) -> None:
    result = mcp_server.dispatch("drop_database", {})

    assert error_code(result) == "INVALID_ARGUMENTS"
    assert result["error"]["details"] == {"tool": "drop_database"}


def test_invoke_tool_raises(mcp_server: MCPServer) -> None:
    with pytest.raises(MCPToolError) as exc:
        mcp_server.invoke_tool("get_todo", {"id": "nope"})

    assert exc.value.code == "NOT_FOUND"


def test_list_after_creates_and_deletes(mcp_server: MCPServer) -> None:
    ids = [create(mcp_server, title=f"task {i}")["id"] for i in range(5)]
    mcp_server.dispatch("delete_todo", {"id": ids[1]})
    mcp_server.dispatch("delete_todo", {"id": ids[3]})
    mcp_server.dispatch("update_todo", {"id": ids[4], "description": "last"})

    result = mcp_server.dispatch("list_todos", None)

    assert result["success"] is True
    todos = result["data"]
    assert [t["id"] for t in todos] == [ids[0], ids[2], ids[4]]
    assert todos[2]["description"] == "last"
    assert result["message"] == "You have 3 todo items."


def test_unexpected_error_keeps_server_usable(
    mcp_server: MCPServer, store: TaskStore, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom() -> list:
        raise RuntimeError("boom")

    monkeypatch.setattr(store, "list", boom)

    result = mcp_server.dispatch("list_todos", {})
    assert error_code(result) == "INTERNAL_ERROR"

    monkeypatch.undo()
    assert mcp_server.dispatch("list_todos", {})["success"] is True


def test_register_rejects_unknown_tool_name(mcp_server: MCPServer) -> None:
    from todo_mcp.mcp.server import MCPTool
    from todo_mcp.schemas.task import ListTodosArgs

    tool = MCPTool(name="archive_todo", description="", arguments=ListTodosArgs, handler=lambda args: {})
    with pytest.raises(ValueError):
        mcp_server.register_tool(tool)
