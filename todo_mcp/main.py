"""FastAPI application and process entry point for the todo MCP server."""
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool
from typing import Any, Dict, Optional
import json
import logging

from todo_mcp import __version__
from todo_mcp.config import get_settings
from todo_mcp.logging_setup import setup_logging
from todo_mcp.mcp.base_tool import (
    INTERNAL_ERROR,
    INVALID_ARGUMENTS,
    NOT_FOUND,
    VALIDATION_ERROR,
    MCPToolError,
    create_error_response,
)
from todo_mcp.mcp.server import MCPServer, create_mcp_server
from todo_mcp.services.task_store import TaskStore

logger = logging.getLogger(__name__)

STATUS_BY_ERROR_CODE = {
    INVALID_ARGUMENTS: 400,
    NOT_FOUND: 404,
    VALIDATION_ERROR: 422,
    INTERNAL_ERROR: 500,
}

router = APIRouter(tags=["MCP"])


def get_mcp_server(request: Request) -> MCPServer:
    """Dependency for getting the application's MCP server."""
    return request.app.state.mcp_server


@router.get("/health")
async def health_check(mcp_server: MCPServer = Depends(get_mcp_server)):
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__, "tasks": mcp_server.store.count()}


@router.get("/")
async def root(mcp_server: MCPServer = Depends(get_mcp_server)):
    """Root endpoint - service info."""
    return {
        "name": mcp_server.name,
        "version": __version__,
        "instructions": mcp_server.instructions,
        "tools": mcp_server.list_tools(),
        "health": "/health",
    }


@router.get("/mcp/tools")
async def list_tool_schemas(mcp_server: MCPServer = Depends(get_mcp_server)) -> Dict[str, Any]:
    """JSON schemas of all registered tools."""
    return mcp_server.get_tool_schemas()


@router.post("/mcp/tools/{tool_name}")
async def call_tool(
    tool_name: str,
    request: Request,
    mcp_server: MCPServer = Depends(get_mcp_server),
):
    """Invoke a tool; the request body is the argument object and may be empty."""
    body_bytes = await request.body()

    arguments = None
    if body_bytes.strip():
        try:
            arguments = json.loads(body_bytes)
        except ValueError:
            result = create_error_response(MCPToolError(
                code=INVALID_ARGUMENTS,
                message="Request body is not valid JSON"
            ))
            return JSONResponse(status_code=400, content=result)

    # Store operations take locks; keep them off the event loop.
    result = await run_in_threadpool(mcp_server.dispatch, tool_name, arguments)
    if result["success"]:
        return JSONResponse(status_code=200, content=result)
    status_code = STATUS_BY_ERROR_CODE.get(result["error"]["code"], 500)
    return JSONResponse(status_code=status_code, content=result)


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Create the FastAPI application around a single task store."""
    app = FastAPI(
        title="Todo MCP Server",
        description="Tool endpoints for managing an in-memory todo list",
        version=__version__,
    )
    app.state.mcp_server = create_mcp_server(store if store is not None else TaskStore())
    app.include_router(router)
    logger.info(f"MCP Server initialized with tools: {app.state.mcp_server.list_tools()}")
    return app


def run() -> None:
    """Console entry point: serve over the configured transport."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)

    if settings.transport == "stdio":
        from todo_mcp.mcp.stdio_server import serve_stdio

        serve_stdio(create_mcp_server(TaskStore()))
        return

    import uvicorn

    logger.info(f"Starting HTTP server on {settings.host}:{settings.port}")
    uvicorn.run(create_app(), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
