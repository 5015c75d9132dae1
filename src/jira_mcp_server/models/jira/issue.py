"""
Jira issue models.

This module provides the Pydantic model for an issue summary: a handful of
issue fields merged with one page of its comments.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING
from .comment import JiraComment

logger = logging.getLogger("jira-mcp-server.models.jira")


class JiraParentRef(ApiModel):
    """Reference to the parent of a sub-task."""

    key: str

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {"key": self.key}


class JiraIssueSummary(ApiModel):
    """
    Model representing an issue together with one page of comments.

    ``total_comments`` is the number of comments on the issue as reported
    by the server, not the length of ``comments``.
    """

    title: str = EMPTY_STRING
    description: str = EMPTY_STRING
    parent: JiraParentRef | None = None
    comments: list[JiraComment] = Field(default_factory=list)
    total_comments: int = 0

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueSummary":
        """
        Create a JiraIssueSummary from the issue and comment-page responses.

        Args:
            data: The issue data from the Jira API
            **kwargs: ``comments_data`` holds the comment page response and
                ``max_comments`` caps the number of comments kept

        Returns:
            A JiraIssueSummary instance
        """
        fields = (data.get("fields") if isinstance(data, dict) else None) or {}
        comments_data = kwargs.get("comments_data") or {}
        max_comments: int | None = kwargs.get("max_comments")

        raw_comments = comments_data.get("comments") or []
        if max_comments is not None:
            raw_comments = raw_comments[:max_comments]
        comments = [JiraComment.from_api_response(c) for c in raw_comments]

        parent = None
        parent_data = fields.get("parent")
        if parent_data and parent_data.get("key"):
            parent = JiraParentRef(key=parent_data["key"])

        total = comments_data.get("total")
        if total is None:
            logger.debug("Comment page has no total, using the page length")
            total = len(comments)

        return cls(
            title=fields.get("summary") or EMPTY_STRING,
            description=fields.get("description") or EMPTY_STRING,
            parent=parent,
            comments=comments,
            total_comments=total,
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return {
            "title": self.title,
            "description": self.description,
            "parent": self.parent.to_simplified_dict() if self.parent else None,
            "comments": [comment.to_simplified_dict() for comment in self.comments],
            "totalComments": self.total_comments,
        }
