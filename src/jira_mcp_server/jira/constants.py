"""Constants for the Jira Server REST client."""

from typing import Final

# Environment variable names
ENV_JIRA_URL: Final[str] = "JIRA_URL"
ENV_JIRA_USERNAME: Final[str] = "JIRA_USERNAME"
ENV_JIRA_API_TOKEN: Final[str] = "JIRA_API_TOKEN"
ENV_JIRA_SSL_VERIFY: Final[str] = "JIRA_SSL_VERIFY"
ENV_JIRA_TIMEOUT: Final[str] = "JIRA_TIMEOUT"

# Request headers
USER_AGENT: Final[str] = "Jira-MCP-Client/1.0"
JSON_CONTENT_TYPE: Final[str] = "application/json"

# Fields requested for an issue summary
ISSUE_SUMMARY_FIELDS: Final[tuple[str, ...]] = ("summary", "description", "parent")

# Retry policy
DEFAULT_MAX_ATTEMPTS: Final[int] = 3
DEFAULT_RETRY_DELAY_MS: Final[int] = 1000
# Jira Server answers 406 intermittently under load; replaying succeeds.
RETRYABLE_CLIENT_STATUS: Final[int] = 406

# Default values
DEFAULT_MAX_COMMENTS: Final[int] = 30
DEFAULT_COMMENT_OFFSET: Final[int] = 0
DEFAULT_SSL_VERIFY: Final[bool] = True
