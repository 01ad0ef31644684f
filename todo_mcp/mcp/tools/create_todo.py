"""
Create Todo MCP Tool

Creates a new todo item in the store.
"""

from typing import Any, Dict

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from todo_mcp.schemas.task import CreateTodoArgs


class CreateTodoTool(BaseMCPTool):
    """MCP Tool for creating todo items"""

    name = "create_todo"
    description = "Create a new todo item"
    arguments = CreateTodoArgs

    def execute(self, args: CreateTodoArgs) -> Dict[str, Any]:
        """
        Create a new todo item

        Args:
            args: title (required, non-empty) and optional description

        Returns:
            Created todo item
        """
        self.log_tool_invocation(args.model_dump())

        with self.store_errors():
            task = self.store.create(args.title, args.description)

        return create_success_response(
            data=task.to_payload(),
            message=f"Todo '{task.title}' created successfully"
        )


def register_create_todo_tool(mcp_server):
    """Register create_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=CreateTodoTool.name,
        description=CreateTodoTool.description,
        arguments=CreateTodoTool.arguments,
        handler=lambda args: CreateTodoTool(mcp_server.store).execute(args)
    ))
