"""Dependency provider for JiraFetcher with context awareness.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from jira_mcp_server.exceptions import ConfigurationError
from jira_mcp_server.jira import JiraConfig, JiraFetcher
from jira_mcp_server.utils.lifespan import get_app_context

logger = logging.getLogger("jira-mcp-server.servers.dependencies")


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Return a JiraFetcher for the current tool call.

    The configuration is resolved on every call from the environment
    snapshot held by the lifespan context, so a missing URL or token is
    reported on the call that needs it.

    Raises:
        ConfigurationError: If the lifespan context is unavailable or the
            Jira URL or token is missing
    """
    app_ctx = get_app_context(ctx)
    if app_ctx is None:
        logger.error("Lifespan context not available; cannot resolve Jira config.")
        raise ConfigurationError(
            "Jira client (fetcher) not available. Ensure server is configured correctly."
        )
    config = JiraConfig.from_env(app_ctx.env)
    return JiraFetcher(config=config)
