"""Configuration module for Jira API interactions."""

import base64
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import ConfigurationError
from ..utils import getenv, is_env_ssl_verify, mask_sensitive
from .constants import (
    DEFAULT_SSL_VERIFY,
    ENV_JIRA_API_TOKEN,
    ENV_JIRA_SSL_VERIFY,
    ENV_JIRA_TIMEOUT,
    ENV_JIRA_URL,
    ENV_JIRA_USERNAME,
)

logger = logging.getLogger("jira-mcp-server.jira.config")


@dataclass(frozen=True)
class JiraConfig:
    """Jira Server API configuration.

    Holds the normalized REST base URL and a ready-to-send Authorization
    header. A username switches the scheme from Bearer (personal access
    token) to Basic (username and API token).
    """

    url: str  # REST base URL, no trailing slash
    auth_header: str  # Value of the Authorization header
    ssl_verify: bool = DEFAULT_SSL_VERIFY  # Whether to verify SSL certificates
    timeout: float | None = None  # Per-attempt timeout in seconds

    @property
    def auth_scheme(self) -> str:
        """Return the scheme of the Authorization header ("Basic" or "Bearer")."""
        return self.auth_header.split(" ", 1)[0]

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "JiraConfig":
        """Create configuration from an environment mapping.

        Args:
            env: Snapshot of the process environment

        Returns:
            JiraConfig built from the mapping

        Raises:
            ConfigurationError: If JIRA_URL or JIRA_API_TOKEN is missing,
                or JIRA_TIMEOUT is not a number
        """
        url = cls.get_url(env)
        auth_header = build_auth_header(
            api_token=getenv(env, ENV_JIRA_API_TOKEN),
            username=getenv(env, ENV_JIRA_USERNAME),
        )

        timeout: float | None = None
        timeout_env = getenv(env, ENV_JIRA_TIMEOUT)
        if timeout_env:
            try:
                timeout = float(timeout_env)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid {ENV_JIRA_TIMEOUT} value: {timeout_env!r}"
                ) from e

        config = cls(
            url=url,
            auth_header=auth_header,
            ssl_verify=is_env_ssl_verify(env, ENV_JIRA_SSL_VERIFY),
            timeout=timeout,
        )
        logger.debug(
            f"Resolved Jira config: url={config.url}, scheme={config.auth_scheme}, "
            f"credentials={mask_sensitive(auth_header.split(' ', 1)[1])}"
        )
        return config

    @staticmethod
    def get_url(env: Mapping[str, str]) -> str:
        """Get the normalized Jira URL from the environment mapping.

        Exactly one trailing slash is stripped.

        Raises:
            ConfigurationError: If JIRA_URL is missing. The message lists
                every available variable to help operators spot typos.
        """
        url = getenv(env, ENV_JIRA_URL)
        if not url:
            available = "\n".join(f"{key}={value}" for key, value in env.items())
            raise ConfigurationError(
                f"Missing required environment variable: {ENV_JIRA_URL}\n"
                f"Available environment variables:\n{available}"
            )
        return url[:-1] if url.endswith("/") else url


def build_auth_header(api_token: str | None, username: str | None = None) -> str:
    """Build the Authorization header value for Jira Server.

    Args:
        api_token: API token or personal access token (required)
        username: Optional username; selects Basic authentication

    Returns:
        "Basic <base64(username:token)>" when a username is given,
        otherwise "Bearer <token>"

    Raises:
        ConfigurationError: If the token is missing
    """
    if not api_token:
        raise ConfigurationError(
            f"Missing required environment variable: {ENV_JIRA_API_TOKEN}"
        )
    if username:
        credentials = f"{username}:{api_token}".encode()
        return f"Basic {base64.b64encode(credentials).decode()}"
    return f"Bearer {api_token}"
