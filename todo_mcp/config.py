"""Runtime configuration for the todo MCP server."""
from dataclasses import dataclass
import logging
import os

from dotenv import load_dotenv

# Load environment variables from a local .env file if one exists
load_dotenv()

TRANSPORTS = ("stdio", "http")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    """Process settings, read once at startup."""
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    log_json: bool = True


def get_settings() -> Settings:
    """Build settings from the environment, failing fast on invalid values."""
    transport = os.environ.get("TODO_MCP_TRANSPORT", "stdio").strip().lower()
    if transport not in TRANSPORTS:
        raise ValueError(f"TODO_MCP_TRANSPORT must be one of {TRANSPORTS}, got {transport!r}")

    raw_port = os.environ.get("TODO_MCP_PORT", "8000")
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"TODO_MCP_PORT must be an integer, got {raw_port!r}")
    if not 0 < port < 65536:
        raise ValueError(f"TODO_MCP_PORT out of range: {port}")

    log_level = os.environ.get("TODO_MCP_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown TODO_MCP_LOG_LEVEL: {log_level!r}")

    return Settings(
        transport=transport,
        host=os.environ.get("TODO_MCP_HOST", "127.0.0.1"),
        port=port,
        log_level=log_level,
        log_json=_env_bool("TODO_MCP_LOG_JSON", True),
    )
