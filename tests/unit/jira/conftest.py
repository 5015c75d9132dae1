"""
Test fixtures for Jira unit tests.

Jira Server is simulated with ``httpx.MockTransport``: each test supplies a
handler that maps a request to a response, and the fixtures wire it into a
JiraFetcher. The retry delay is patched out so retries do not sleep.
"""

from collections.abc import Callable
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from jira_mcp_server.jira import JiraFetcher
from jira_mcp_server.jira.config import JiraConfig

JIRA_URL = "https://jira.example.com/rest/api/2"


@pytest.fixture
def jira_config_factory():
    """
    Factory for creating JiraConfig instances with customizable options.

    Returns:
        Callable: Function that creates JiraConfig instances
    """

    def _create_config(**overrides):
        defaults = {
            "url": JIRA_URL,
            "auth_header": "Bearer test-token",
        }
        return JiraConfig(**{**defaults, **overrides})

    return _create_config


@pytest.fixture
def jira_config(jira_config_factory):
    """Standard Bearer-token configuration."""
    return jira_config_factory()


@pytest.fixture
def mock_sleep():
    """Replace the executor's retry delay with an AsyncMock."""
    with patch("jira_mcp_server.jira.retry.asyncio") as mock_asyncio:
        mock_asyncio.sleep = AsyncMock(return_value=None)
        yield mock_asyncio.sleep


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by the mock transport, in arrival order."""
    return []


@pytest.fixture
def make_fetcher(jira_config, recorded_requests, mock_sleep):
    """
    Build a JiraFetcher backed by a mock transport.

    Example:
        fetcher = make_fetcher(lambda request: httpx.Response(200, json={}))
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> JiraFetcher:
        def _record(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return JiraFetcher(config=jira_config, transport=httpx.MockTransport(_record))

    return _make
