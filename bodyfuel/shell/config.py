"""Server Configuration - Settings read from the environment.

All environment access for the shell is contained here.
"""

import os
from dataclasses import dataclass, field


DEFAULT_CORS_ORIGINS = ("http://localhost:5173",)
DEFAULT_MCP_ALLOWED_HOSTS = ("localhost:*", "127.0.0.1:*")


def _split_csv(raw: str | None, default: tuple[str, ...]) -> list[str]:
    """Split a comma-separated env value, falling back to default when unset or blank."""
    if raw is None:
        return list(default)
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or list(default)


@dataclass
class ServerConfig:
    """Configuration for the HTTP and MCP server.

    Attributes:
        host: Interface to bind
        port: Port to listen on
        log_level: Root logging level name
        cors_origins: Origins allowed by CORS
        mcp_allowed_hosts: Host headers accepted by the MCP transport
    """

    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    mcp_allowed_hosts: list[str] = field(default_factory=lambda: list(DEFAULT_MCP_ALLOWED_HOSTS))


def load_server_config(environ: dict[str, str] | None = None) -> ServerConfig:
    """Build a ServerConfig from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        ServerConfig with defaults for anything unset

    Raises:
        ValueError: If PORT is not an integer
    """
    env = os.environ if environ is None else environ

    return ServerConfig(
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT", 8080)),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_csv(env.get("CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
        mcp_allowed_hosts=_split_csv(env.get("MCP_ALLOWED_HOSTS"), DEFAULT_MCP_ALLOWED_HOSTS),
    )
