"""Base client module for Jira API interactions."""

import logging
from typing import Any

import httpx

from ..exceptions import UpstreamError
from .config import JiraConfig
from .constants import JSON_CONTENT_TYPE, USER_AGENT
from .retry import RetryableRequest, send_with_retry

# Configure logging
logger = logging.getLogger("jira-mcp-server.jira")


class JiraClient:
    """Base client for Jira Server REST API interactions.

    Every request goes through ``send_with_retry``. An ``httpx.AsyncClient``
    is opened per operation and closed when the operation finishes.
    """

    def __init__(
        self,
        config: JiraConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Resolved Jira configuration.
            transport: Optional httpx transport, used to plug in a mock server.
        """
        self.config = config
        self._transport = transport

    def _create_session(self) -> httpx.AsyncClient:
        """Create an HTTP session for one operation.

        Returns:
            An unopened httpx.AsyncClient
        """
        kwargs: dict[str, Any] = {
            "verify": self.config.ssl_verify,
            "follow_redirects": True,
        }
        if self.config.timeout is not None:
            kwargs["timeout"] = self.config.timeout
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    def _headers(self, with_body: bool = False) -> dict[str, str]:
        headers = {
            "Authorization": self.config.auth_header,
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": USER_AGENT,
        }
        if with_body:
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    async def _request(
        self,
        session: httpx.AsyncClient,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> httpx.Response:
        """Send a request to ``{url}/{path}`` through the retrying executor."""
        url = f"{self.config.url}/{path}"
        logger.debug(f"Sending {method} request to {url}")
        request = RetryableRequest(
            method=method,
            url=url,
            headers=self._headers(with_body=json is not None),
            params=params,
            json=json,
        )
        return await send_with_retry(session, request)

    @staticmethod
    def _raise_for_status(response: httpx.Response, error_prefix: str) -> None:
        """Raise UpstreamError unless the response has a 2xx status.

        Args:
            response: The final response returned by the executor
            error_prefix: Description of the failed operation

        Raises:
            UpstreamError: If the response status is not 2xx
        """
        if response.is_success:
            return
        message = (
            f"{error_prefix}: {response.status_code} "
            f"{response.reason_phrase} - {response.text}"
        )
        logger.error(message)
        raise UpstreamError(
            message,
            status_code=response.status_code,
            reason=response.reason_phrase,
            body=response.text,
        )
