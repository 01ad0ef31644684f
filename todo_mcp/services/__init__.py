"""Services package for the todo MCP server."""

from .task_store import TaskNotFoundError, TaskStore, TaskStoreError, TaskValidationError

__all__ = ["TaskNotFoundError", "TaskStore", "TaskStoreError", "TaskValidationError"]
