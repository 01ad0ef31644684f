"""Argument schemas for the todo tools."""

from .task import (
    CreateTodoArgs,
    ListTodosArgs,
    TodoIdArgs,
    ToolArguments,
    UpdateTodoArgs,
)

__all__ = [
    "CreateTodoArgs",
    "ListTodosArgs",
    "TodoIdArgs",
    "ToolArguments",
    "UpdateTodoArgs",
]
