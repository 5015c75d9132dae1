"""Jira Server API integration module.

This module provides access to Jira issues and comments through the Model
Context Protocol.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .issues import IssuesMixin


class JiraFetcher(IssuesMixin, CommentsMixin):
    """Main entry point for Jira operations.

    Combines the issue and comment mixins on top of the shared JiraClient.
    """


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
