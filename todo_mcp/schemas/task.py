"""Tool argument schemas for todo operations."""
from pydantic import BaseModel, ConfigDict, Field
from typing import ClassVar, FrozenSet, Optional


class ToolArguments(BaseModel):
    """Base schema for tool arguments.

    Unknown fields and type coercion are rejected so that a malformed payload
    never reaches the store.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    # Fields whose absence is a domain validation failure rather than a
    # malformed request.
    validated_fields: ClassVar[FrozenSet[str]] = frozenset()


class ListTodosArgs(ToolArguments):
    """Schema for list_todos (takes no arguments)."""


class CreateTodoArgs(ToolArguments):
    """Schema for creating a todo item."""
    title: str = Field(..., description="Todo item title")
    description: Optional[str] = Field(None, description="Todo item description (optional)")

    validated_fields: ClassVar[FrozenSet[str]] = frozenset({"title"})


class UpdateTodoArgs(ToolArguments):
    """Schema for updating a todo item; omitted fields are left unchanged."""
    id: str = Field(..., description="Todo item ID")
    title: Optional[str] = Field(None, description="New title (optional)")
    description: Optional[str] = Field(None, description="New description (optional)")
    completed: Optional[bool] = Field(None, description="New completion state (optional)")


class TodoIdArgs(ToolArguments):
    """Schema for tools addressing a single todo item by ID."""
    id: str = Field(..., description="Todo item ID")
