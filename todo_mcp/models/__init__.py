"""Entity models for the todo MCP server."""

from .task import Task

__all__ = ["Task"]
