"""
MCP (Model Context Protocol) Server Package

This package implements the tool dispatcher that exposes the todo store to
MCP clients, plus the stdio transport shell.
"""

from .base_tool import MCPToolError
from .server import MCPServer, ToolName, create_mcp_server

__all__ = ["MCPServer", "MCPToolError", "ToolName", "create_mcp_server"]
