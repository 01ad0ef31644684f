"""
List Todos MCP Tool

Returns every todo item in creation order.
"""

from typing import Any, Dict

from todo_mcp.mcp.base_tool import BaseMCPTool, create_success_response
from todo_mcp.schemas.task import ListTodosArgs


class ListTodosTool(BaseMCPTool):
    """MCP Tool for listing todo items"""

    name = "list_todos"
    description = "List all todo items"
    arguments = ListTodosArgs

    def execute(self, args: ListTodosArgs) -> Dict[str, Any]:
        self.log_tool_invocation({})

        todos = [task.to_payload() for task in self.store.list()]
        return create_success_response(
            data=todos,
            message=self._generate_message(len(todos))
        )

    def _generate_message(self, count: int) -> str:
        """Generate user-friendly message based on results"""
        if count == 0:
            return "You have no todo items yet."
        return f"You have {count} todo item{'s' if count != 1 else ''}."


def register_list_todos_tool(mcp_server):
    """Register list_todos tool with MCP server"""
    from todo_mcp.mcp.server import MCPTool

    mcp_server.register_tool(MCPTool(
        name=ListTodosTool.name,
        description=ListTodosTool.description,
        arguments=ListTodosTool.arguments,
        handler=lambda args: ListTodosTool(mcp_server.store).execute(args)
    ))
