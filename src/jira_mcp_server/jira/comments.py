"""Module for Jira comment operations."""

import logging

from ..models.jira import CommentPostResult
from .client import JiraClient

logger = logging.getLogger("jira-mcp-server.jira")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    async def add_comment(self, issue_key: str, comment: str) -> CommentPostResult:
        """Add a comment to an issue.

        Posting is not idempotent, so the only retries are the executor's
        replays of 5xx/406 responses and transport failures.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            comment: Comment text to add

        Returns:
            CommentPostResult with the id of the created comment

        Raises:
            UpstreamError: If Jira answers with a non-success status
            TransientTransportError: If Jira could not be reached
        """
        async with self._create_session() as session:
            response = await self._request(
                session,
                "POST",
                f"issue/{issue_key}/comment",
                json={"body": comment},
            )

        self._raise_for_status(response, f"Failed to add comment to {issue_key}")

        result = CommentPostResult.from_api_response(response.json())
        logger.info(f"Added comment {result.comment_id or '<no id>'} to {issue_key}")
        return result
