"""
Get Todo MCP Tool

Retrieves the details of a single todo item.
"""

from typing import Any, Dict

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from todo_mcp.schemas.task import TodoIdArgs


class GetTodoTool(BaseMCPTool):
    """MCP Tool for viewing todo details"""

    name = "get_todo"
    description = "Get details of a single todo item"
    arguments = TodoIdArgs

    def execute(self, args: TodoIdArgs) -> Dict[str, Any]:
        self.log_tool_invocation({"id": args.id})

        with self.store_errors():
            task = self.store.get(args.id)

        return create_success_response(
            data=task.to_payload(),
            message=f"Here are the details for todo {args.id}"
        )


def register_get_todo_tool(mcp_server):
    """Register get_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=GetTodoTool.name,
        description=GetTodoTool.description,
        arguments=GetTodoTool.arguments,
        handler=lambda args: GetTodoTool(mcp_server.store).execute(args)
    ))
