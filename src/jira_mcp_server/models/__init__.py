"""
Pydantic models for the Jira MCP server.

These models normalize Jira REST payloads into the stable shapes returned
by the MCP tools.
"""

from .base import ApiModel
from .jira import CommentPostResult, JiraComment, JiraIssueSummary, JiraParentRef

__all__ = [
    "ApiModel",
    "CommentPostResult",
    "JiraComment",
    "JiraIssueSummary",
    "JiraParentRef",
]
