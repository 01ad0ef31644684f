"""
Complete Todo MCP Tool

Marks a todo item as completed. Completing an already completed item succeeds.
"""

from typing import Any, Dict

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from todo_mcp.schemas.task import TodoIdArgs


class CompleteTodoTool(BaseMCPTool):
    """MCP Tool for completing todo items"""

    name = "complete_todo"
    description = "Mark a todo item as completed"
    arguments = TodoIdArgs

    def execute(self, args: TodoIdArgs) -> Dict[str, Any]:
        self.log_tool_invocation({"id": args.id})

        with self.store_errors():
            task = self.store.complete(args.id)

        return create_success_response(
            data=task.to_payload(),
            message=f"Todo '{task.title}' marked as completed"
        )


def register_complete_todo_tool(mcp_server):
    """Register complete_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=CompleteTodoTool.name,
        description=CompleteTodoTool.description,
        arguments=CompleteTodoTool.arguments,
        handler=lambda args: CompleteTodoTool(mcp_server.store).execute(args)
    ))
