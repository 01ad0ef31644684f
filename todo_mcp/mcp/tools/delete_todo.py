"""
Delete Todo MCP Tool

Permanently deletes a todo item.
"""

from typing import Any, Dict

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from todo_mcp.schemas.task import TodoIdArgs


class DeleteTodoTool(BaseMCPTool):
    """MCP Tool for deleting todo items"""

    name = "delete_todo"
    description = "Delete a todo item"
    arguments = TodoIdArgs

    def execute(self, args: TodoIdArgs) -> Dict[str, Any]:
        self.log_tool_invocation({"id": args.id})

        with self.store_errors():
            self.store.delete(args.id)

        return create_success_response(
            data={},
            message=f"Successfully deleted todo item with ID {args.id}"
        )


def register_delete_todo_tool(mcp_server):
    """Register delete_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=DeleteTodoTool.name,
        description=DeleteTodoTool.description,
        arguments=DeleteTodoTool.arguments,
        handler=lambda args: DeleteTodoTool(mcp_server.store).execute(args)
    ))
