"""Todo tools exposed by the MCP server."""

from .complete_todo import register_complete_todo_tool
from .create_todo import register_create_todo_tool
from .delete_todo import register_delete_todo_tool
from .get_todo import register_get_todo_tool
from .list_todos import register_list_todos_tool
from .update_todo import register_update_todo_tool


def register_all_tools(mcp_server) -> None:
    """Register every todo tool with the given MCP server"""
    register_list_todos_tool(mcp_server)
    register_create_todo_tool(mcp_server)
    register_update_todo_tool(mcp_server)
    register_delete_todo_tool(mcp_server)
    register_get_todo_tool(mcp_server)
    register_complete_todo_tool(mcp_server)


__all__ = ["register_all_tools"]
