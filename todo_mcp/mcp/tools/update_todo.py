"""
Update Todo MCP Tool

Updates the supplied fields of an existing todo item. Omitted fields keep
their current values.
"""

from typing import Any, Dict

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from todo_mcp.schemas.task import UpdateTodoArgs


class UpdateTodoTool(BaseMCPTool):
    """MCP Tool for updating todo items"""

    name = "update_todo"
    description = "Update a todo item"
    arguments = UpdateTodoArgs

    def execute(self, args: UpdateTodoArgs) -> Dict[str, Any]:
        """
        Update an existing todo item

        Args:
            args: id (required) plus optional title, description and completed

        Returns:
            Updated todo item
        """
        self.log_tool_invocation(args.model_dump())

        with self.store_errors():
            task = self.store.update(
                args.id,
                title=args.title,
                description=args.description,
                completed=args.completed,
            )

        return create_success_response(
            data=task.to_payload(),
            message=f"Todo '{task.title}' updated successfully"
        )


def register_update_todo_tool(mcp_server):
    """Register update_todo tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=UpdateTodoTool.name,
        description=UpdateTodoTool.description,
        arguments=UpdateTodoTool.arguments,
        handler=lambda args: UpdateTodoTool(mcp_server.store).execute(args)
    ))
