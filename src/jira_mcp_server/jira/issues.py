"""Module for Jira issue operations."""

import asyncio
import logging

from ..models.jira import JiraIssueSummary
from .client import JiraClient
from .constants import (
    DEFAULT_COMMENT_OFFSET,
    DEFAULT_MAX_COMMENTS,
    ISSUE_SUMMARY_FIELDS,
)

logger = logging.getLogger("jira-mcp-server.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    async def get_issue(
        self,
        issue_key: str,
        max_comments: int = DEFAULT_MAX_COMMENTS,
        offset: int = DEFAULT_COMMENT_OFFSET,
    ) -> JiraIssueSummary:
        """
        Get an issue summary with one page of its comments.

        The issue fields and the comment page are fetched concurrently and
        merged once both have arrived. A failure of either request fails
        the whole operation.

        Args:
            issue_key: The issue key (e.g. 'PROJ-123')
            max_comments: Maximum number of comments to return
            offset: Index of the first comment to return

        Returns:
            JiraIssueSummary with title, description, parent, comments and
            the total number of comments on the issue

        Raises:
            UpstreamError: If Jira answers either request with a non-success status
            TransientTransportError: If Jira could not be reached
        """
        async with self._create_session() as session:
            # Both requests finish before the session closes, even on failure.
            results = await asyncio.gather(
                self._request(
                    session,
                    "GET",
                    f"issue/{issue_key}",
                    params={"fields": ",".join(ISSUE_SUMMARY_FIELDS)},
                ),
                self._request(
                    session,
                    "GET",
                    f"issue/{issue_key}/comment",
                    params={"startAt": offset, "maxResults": max_comments},
                ),
                return_exceptions=True,
            )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        issue_response, comments_response = results

        self._raise_for_status(issue_response, f"Failed to fetch issue {issue_key}")
        self._raise_for_status(
            comments_response, f"Failed to fetch comments for {issue_key}"
        )

        summary = JiraIssueSummary.from_api_response(
            issue_response.json(),
            comments_data=comments_response.json(),
            max_comments=max_comments,
        )
        logger.info(
            f"Fetched issue {issue_key} with {len(summary.comments)} of "
            f"{summary.total_comments} comments (offset {offset})"
        )
        return summary
