"""
Jira comment models.

This module provides Pydantic models for Jira comments and for the result
of posting one.
"""

import logging
from typing import Any, Literal

from ..base import ApiModel
from ..constants import EMPTY_STRING, UNKNOWN_AUTHOR

logger = logging.getLogger("jira-mcp-server.models.jira")


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    author: str = UNKNOWN_AUTHOR
    body: str = EMPTY_STRING
    created: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a Jira API response.

        The author is the display name, falling back to the account name
        and then to "Unknown".

        Args:
            data: The comment data from the Jira API

        Returns:
            A JiraComment instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received empty or non-dictionary comment data")
            return cls()

        author_data = data.get("author") or {}
        author = (
            author_data.get("displayName") or author_data.get("name") or UNKNOWN_AUTHOR
        )

        return cls(
            author=author,
            body=data.get("body") or EMPTY_STRING,
            created=data.get("created") or EMPTY_STRING,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "author": self.author,
            "body": self.body,
            "created": self.created,
        }


class CommentPostResult(ApiModel):
    """Confirmation that a comment was created."""

    success: Literal[True] = True
    comment_id: str = EMPTY_STRING

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "CommentPostResult":
        """Create a CommentPostResult from the created-comment response."""
        comment_id = data.get("id") if isinstance(data, dict) else None
        return cls(comment_id=str(comment_id) if comment_id else EMPTY_STRING)

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {"success": self.success, "commentId": self.comment_id}
