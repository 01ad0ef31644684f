"""
MCP Base Tool Interface

Provides base functionality for all todo tools including:
- Argument parsing against the tool's schema
- Translation of store errors into tool errors
- Logging
"""

from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar
from contextlib import contextmanager
from abc import ABC, abstractmethod
import logging

from pydantic import BaseModel, ValidationError

from todo_mcp.schemas.task import ToolArguments
from todo_mcp.services.task_store import TaskNotFoundError, TaskStore, TaskValidationError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
INTERNAL_ERROR = "INTERNAL_ERROR"

ArgsT = TypeVar("ArgsT", bound=ToolArguments)


class MCPToolError(Exception):
    """Base exception for MCP tool errors"""
    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


def parse_arguments(schema: Type[ArgsT], arguments: Any) -> ArgsT:
    """
    Validate a raw argument payload against a tool schema

    Args:
        schema: The tool's argument model
        arguments: Raw payload as delivered by the transport (None means no arguments)

    Returns:
        Parsed argument model

    Raises:
        MCPToolError: VALIDATION_ERROR when a domain-validated field is missing,
            INVALID_ARGUMENTS for any other shape or type problem
    """
    if arguments is None:
        arguments = {}

    if not isinstance(arguments, dict):
        raise MCPToolError(
            code=INVALID_ARGUMENTS,
            message="Tool arguments must be an object",
            details={"type": type(arguments).__name__}
        )

    try:
        return schema.model_validate(arguments)
    except ValidationError as e:
        errors = _summarize_errors(e)
        missing_validated = [
            err["field"] for err in errors
            if err["type"] == "missing" and err["field"] in schema.validated_fields
        ]
        if missing_validated and len(missing_validated) == len(errors):
            raise MCPToolError(
                code=VALIDATION_ERROR,
                message=f"Todo {missing_validated[0]} is required",
                details={"field": missing_validated[0]}
            )
        raise MCPToolError(
            code=INVALID_ARGUMENTS,
            message="Invalid tool arguments",
            details={"errors": errors}
        )


def _summarize_errors(error: ValidationError) -> List[Dict[str, str]]:
    # Input values are left out so argument contents never end up in responses.
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "type": err["type"],
            "message": err["msg"],
        }
        for err in error.errors(include_url=False, include_context=False, include_input=False)
    ]


class BaseMCPTool(ABC):
    """
    Base class for all todo tools

    Provides common functionality:
    - Store access
    - Argument schema
    - Error translation
    - Audit logging
    """

    name: str = ""
    description: str = ""
    arguments: Type[BaseModel] = ToolArguments

    def __init__(self, store: TaskStore):
        self.store = store

    @contextmanager
    def store_errors(self) -> Iterator[None]:
        """Translate store exceptions raised inside the block into MCPToolError"""
        try:
            yield
        except TaskNotFoundError as e:
            raise MCPToolError(
                code=NOT_FOUND,
                message=str(e),
                details={"id": e.task_id}
            ) from e
        except TaskValidationError as e:
            raise MCPToolError(
                code=VALIDATION_ERROR,
                message=e.message,
                details={"field": e.field}
            ) from e

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """
        Log tool invocation for audit trail

        Only the IDs and the names of supplied fields are logged, never free text.
        """
        safe_params = {k: (v if k == "id" else "<set>") for k, v in params.items() if v is not None}
        logger.info(f"MCP Tool Invocation: {self.name} | Params: {safe_params}")

    @abstractmethod
    def execute(self, args: Any) -> Dict[str, Any]:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Args:
            args: Parsed argument model for this tool

        Returns:
            Success response
        """


def create_error_response(error: MCPToolError) -> Dict[str, Any]:
    """
    Create a standardized error response

    Args:
        error: The MCPToolError to convert

    Returns:
        Standardized error response dictionary
    """
    return {
        "success": False,
        "error": {
            "code": error.code,
            "message": error.message,
            "details": error.details
        }
    }


def create_success_response(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    """
    Create a standardized success response

    Args:
        data: The response data
        message: Optional success message

    Returns:
        Standardized success response dictionary
    """
    response = {
        "success": True,
        "data": data
    }

    if message:
        response["message"] = message

    return response
