"""
MCP stdio transport

Exposes the todo tools to MCP clients over standard input/output using the
low-level server from the MCP Python SDK. Tool names and raw arguments are
handed to the dispatcher unchanged, so argument validation and error
reporting happen in one place.
"""

from typing import Any, Dict, List, Optional
import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from todo_mcp import __version__
from todo_mcp.mcp.server import MCPServer

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Raised with the dispatcher's error response when a tool call fails

    The SDK reports a raised exception to the client as an error result whose
    text is str(exception), i.e. the JSON error envelope.
    """
    def __init__(self, response: Dict[str, Any]):
        self.response = response
        super().__init__(json.dumps(response, indent=2))

    @property
    def code(self) -> str:
        return self.response["error"]["code"]


def tool_definitions(mcp_server: MCPServer) -> List[Tool]:
    """Describe the registered tools in MCP terms"""
    return [
        Tool(
            name=schema["name"],
            description=schema["description"],
            inputSchema=schema["parameters"]
        )
        for schema in mcp_server.get_tool_schemas().values()
    ]


def call_tool(mcp_server: MCPServer, name: str, arguments: Optional[Any]) -> List[TextContent]:
    """
    Run one tool call through the dispatcher

    Returns:
        The success envelope as JSON text content

    Raises:
        ToolCallFailed: carrying the error envelope
    """
    result = mcp_server.dispatch(name, arguments)
    if not result["success"]:
        raise ToolCallFailed(result)
    return [TextContent(type="text", text=json.dumps(result, indent=2))]


def create_stdio_server(mcp_server: MCPServer) -> Server:
    """Create the SDK server wired to the dispatcher"""
    server = Server(mcp_server.name, version=__version__, instructions=mcp_server.instructions)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        return tool_definitions(mcp_server)

    # The dispatcher validates arguments itself; SDK-side schema checks
    # would reject or coerce payloads before it sees them.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        return call_tool(mcp_server, name, arguments)

    return server


async def _run(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def serve_stdio(mcp_server: MCPServer) -> None:
    """Run the MCP server on stdin/stdout until the client disconnects"""
    logger.info("Starting MCP Todo Server on stdio")
    asyncio.run(_run(create_stdio_server(mcp_server)))
    logger.info("Service stopped")
