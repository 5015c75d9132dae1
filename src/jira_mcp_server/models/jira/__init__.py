"""
Jira data models for the Jira MCP server.

This package provides Pydantic models for the Jira API data structures
returned by the MCP tools.
"""

from .comment import CommentPostResult, JiraComment
from .issue import JiraIssueSummary, JiraParentRef

__all__ = [
    "CommentPostResult",
    "JiraComment",
    "JiraIssueSummary",
    "JiraParentRef",
]
