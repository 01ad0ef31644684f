"""In-memory todo list exposed to MCP clients as tools."""

__version__ = "0.1.0"
