"""Jira FastMCP server instance and tool definitions."""

import json
import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from pydantic import Field

from jira_mcp_server.jira.constants import DEFAULT_COMMENT_OFFSET, DEFAULT_MAX_COMMENTS
from jira_mcp_server.logging_config import log_operation
from jira_mcp_server.servers.dependencies import get_jira_fetcher
from jira_mcp_server.utils.decorators import check_write_access

logger = logging.getLogger("jira-mcp-server.servers.jira")

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions="Provides tools for reading and commenting on Jira Server issues.",
)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Issue", "readOnlyHint": True},
)
async def get_issue(
    ctx: Context,
    issueKey: Annotated[  # noqa: N803
        str, Field(description='Jira issue key (e.g., "PROJ-123")')
    ],
    maxComments: Annotated[  # noqa: N803
        int,
        Field(
            description="Maximum number of comments to return (default: 30)",
            ge=0,
        ),
    ] = DEFAULT_MAX_COMMENTS,
    offset: Annotated[
        int,
        Field(description="Offset for comments pagination (default: 0)", ge=0),
    ] = DEFAULT_COMMENT_OFFSET,
) -> str:
    """Get Jira issue details by key, including title, description, parent reference, and paginated comments with total count.

    Args:
        ctx: The FastMCP context.
        issueKey: Jira issue key.
        maxComments: Maximum number of comments to return.
        offset: Offset of the first comment to return.

    Returns:
        JSON string with title, description, parent, comments and totalComments.
    """
    with log_operation(logger, "jira_get_issue", issue_key=issueKey):
        jira = await get_jira_fetcher(ctx)
        issue = await jira.get_issue(
            issue_key=issueKey, max_comments=maxComments, offset=offset
        )
    return json.dumps(issue.to_simplified_dict(), indent=2, ensure_ascii=False)


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Add Comment", "destructiveHint": False},
)
@check_write_access
async def add_comment(
    ctx: Context,
    issueKey: Annotated[  # noqa: N803
        str, Field(description='Jira issue key (e.g., "PROJ-123")')
    ],
    comment: Annotated[str, Field(description="Comment text to add")],
) -> str:
    """Add a comment to a Jira issue.

    Args:
        ctx: The FastMCP context.
        issueKey: Jira issue key.
        comment: Comment text.

    Returns:
        JSON string with success and the id of the created comment.

    Raises:
        ValueError: If in read-only mode.
    """
    with log_operation(logger, "jira_add_comment", issue_key=issueKey):
        jira = await get_jira_fetcher(ctx)
        result = await jira.add_comment(issue_key=issueKey, comment=comment)
    return json.dumps(result.to_simplified_dict(), indent=2, ensure_ascii=False)
