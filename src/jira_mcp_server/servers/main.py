"""Main FastMCP server setup for the Jira tools."""

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import MappingProxyType
from typing import Literal

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from jira_mcp_server.utils import is_env_truthy
from jira_mcp_server.utils.lifespan import APP_CONTEXT_KEY

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("jira-mcp-server.servers.main")

Transport = Literal["stdio", "sse", "streamable-http"]


async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Jira MCP server lifespan starting...")
    env = MappingProxyType(dict(os.environ))
    app_context = MainAppContext(
        env=env,
        read_only=is_env_truthy(env, "READ_ONLY_MODE", "false"),
    )
    logger.info(f"Read-only mode: {'ENABLED' if app_context.read_only else 'DISABLED'}")
    if not env.get("JIRA_URL"):
        logger.warning(
            "JIRA_URL is not set; tool calls will fail until it is configured."
        )

    try:
        yield {APP_CONTEXT_KEY: app_context}
    finally:
        logger.info("Jira MCP server lifespan shutdown complete.")


main_mcp = FastMCP(name="jira-mcp-server", lifespan=main_lifespan)
main_mcp.mount(jira_mcp, prefix="jira")


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def _health_check_route(request: Request) -> JSONResponse:
    return await health_check(request)


async def run_server(
    transport: Transport = "stdio", port: int = 8000, host: str = "0.0.0.0"
) -> None:
    """Run the Jira MCP server with the given transport.

    Args:
        transport: "stdio", "sse" or "streamable-http"
        port: Port to listen on for the HTTP transports
        host: Host to bind for the HTTP transports
    """
    if transport == "stdio":
        logger.info("Jira MCP server running on stdio")
        await main_mcp.run_async(transport="stdio")
    else:
        logger.info(f"Jira MCP server running on {transport} at {host}:{port}")
        await main_mcp.run_async(transport=transport, host=host, port=port)
