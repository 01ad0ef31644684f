"""
MCP Server Implementation

This module implements the tool dispatcher that maps named tool invocations
onto the task store and turns results or failures into response envelopes.
"""

from typing import Any, Callable, Dict, Optional, Type
from dataclasses import dataclass
from enum import Enum
import logging

from pydantic import BaseModel

from todo_mcp.mcp.base_tool import (
    INTERNAL_ERROR,
    INVALID_ARGUMENTS,
    MCPToolError,
    create_error_response,
    parse_arguments,
)
from todo_mcp.services.task_store import TaskStore

logger = logging.getLogger(__name__)

SERVER_NAME = "todo-mcp-server"

SERVER_INSTRUCTIONS = (
    "This is a todo server that helps you manage your todo list. "
    "Use list_todos to view all todos, create_todo to create new todos, "
    "update_todo to update existing todos, delete_todo to remove todos, "
    "get_todo to view todo details, and complete_todo to mark todos as completed."
)


class ToolName(str, Enum):
    """The closed set of tools exposed by the server"""
    LIST_TODOS = "list_todos"
    CREATE_TODO = "create_todo"
    UPDATE_TODO = "update_todo"
    DELETE_TODO = "delete_todo"
    GET_TODO = "get_todo"
    COMPLETE_TODO = "complete_todo"


@dataclass
class MCPTool:
    """MCP Tool definition"""
    name: str
    description: str
    arguments: Type[BaseModel]
    handler: Callable[[Any], Dict[str, Any]]

    @property
    def parameters(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments"""
        return self.arguments.model_json_schema()


class MCPServer:
    """
    MCP Server for todo management

    Owns no state of its own: every tool works against the TaskStore passed
    in at construction.
    """

    def __init__(self, store: TaskStore, name: str = SERVER_NAME):
        self.store = store
        self.tools: Dict[str, MCPTool] = {}
        self.name = name
        self.instructions = SERVER_INSTRUCTIONS
        logger.info(f"Initializing MCP Server: {self.name}")

    def register_tool(self, tool: MCPTool):
        """Register a tool with the MCP server"""
        try:
            ToolName(tool.name)
        except ValueError:
            raise ValueError(f"Unknown tool name: {tool.name}")

        if tool.name in self.tools:
            logger.warning(f"Tool {tool.name} already registered, overwriting")

        self.tools[tool.name] = tool
        logger.info(f"Registered MCP tool: {tool.name}")

    def get_tool(self, name: str) -> MCPTool:
        """Get a registered tool by name"""
        if name not in self.tools:
            raise MCPToolError(
                code=INVALID_ARGUMENTS,
                message=f"Tool {name} not found. Available tools: {self.list_tools()}",
                details={"tool": name}
            )
        return self.tools[name]

    def list_tools(self) -> list[str]:
        """List all registered tool names"""
        return list(self.tools.keys())

    def invoke_tool(self, tool_name: str, arguments: Optional[Any] = None) -> Dict[str, Any]:
        """
        Invoke a tool with a raw argument payload

        Args:
            tool_name: Name of the tool to invoke
            arguments: Raw argument payload (None means no arguments)

        Returns:
            Success response

        Raises:
            MCPToolError: If the tool is unknown, the arguments are malformed,
                or the store rejects the operation
        """
        tool = self.get_tool(tool_name)
        args = parse_arguments(tool.arguments, arguments)

        logger.debug(f"Invoking MCP tool: {tool_name}")
        result = tool.handler(args)
        logger.debug(f"Tool {tool_name} executed successfully")
        return result

    def dispatch(self, tool_name: str, arguments: Optional[Any] = None) -> Dict[str, Any]:
        """
        Invoke a tool and always return a response envelope

        Request errors become error responses; unexpected failures are logged
        and reported as INTERNAL_ERROR so the server stays usable.
        """
        try:
            return self.invoke_tool(tool_name, arguments)
        except MCPToolError as e:
            logger.warning(f"Tool {tool_name} failed: {e.code} {e.message}")
            return create_error_response(e)
        except Exception as e:
            logger.exception(f"Unexpected error in tool {tool_name}")
            return create_error_response(MCPToolError(
                code=INTERNAL_ERROR,
                message=f"Failed to execute tool: {str(e)}"
            ))

    def get_tool_schemas(self) -> Dict[str, Dict[str, Any]]:
        """Get JSON schemas for all registered tools"""
        return {
            name: {
                "name": tool.name,
                "description": tool.description,
                "parameters": tool.parameters
            }
            for name, tool in self.tools.items()
        }


def create_mcp_server(store: TaskStore) -> MCPServer:
    """Build an MCP server bound to the given store with all todo tools registered"""
    from todo_mcp.mcp.tools import register_all_tools

    server = MCPServer(store)
    register_all_tools(server)
    return server
