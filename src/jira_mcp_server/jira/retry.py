"""Retrying HTTP executor shared by every Jira REST call."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx

from ..exceptions import TransientTransportError
from .constants import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RETRY_DELAY_MS,
    RETRYABLE_CLIENT_STATUS,
)

logger = logging.getLogger("jira-mcp-server.jira.retry")


class ResponseClass(Enum):
    """How a completed HTTP response drives the retry loop."""

    SUCCESS = "success"
    RETRYABLE = "retryable"
    TERMINAL = "terminal"


class RetryState(Enum):
    """States of a single executor call."""

    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    FAILED_TERMINAL = "failed_terminal"
    FAILED_EXHAUSTED = "failed_exhausted"


@dataclass(frozen=True)
class RetryableRequest:
    """One outbound request together with its retry budget."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    json: Any = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.retry_delay_ms < 0:
            raise ValueError("retry_delay_ms must not be negative")


def classify_response(status_code: int) -> ResponseClass:
    """Classify an HTTP status for the retry policy.

    5xx and 406 are retryable; 2xx is success; everything else
    (including the remaining 4xx codes) is terminal. Redirects are
    followed by the client, so a 3xx seen here (e.g. 304) is final.
    """
    if 200 <= status_code < 300:
        return ResponseClass.SUCCESS
    if status_code >= 500 or status_code == RETRYABLE_CLIENT_STATUS:
        return ResponseClass.RETRYABLE
    return ResponseClass.TERMINAL


def next_state(
    response_class: ResponseClass, attempt: int, max_attempts: int
) -> RetryState:
    """Transition out of ATTEMPTING after attempt number ``attempt`` completed."""
    match response_class:
        case ResponseClass.SUCCESS:
            return RetryState.SUCCEEDED
        case ResponseClass.TERMINAL:
            return RetryState.FAILED_TERMINAL
        case ResponseClass.RETRYABLE if attempt >= max_attempts:
            return RetryState.FAILED_EXHAUSTED
        case _:
            return RetryState.ATTEMPTING


async def send_with_retry(
    client: httpx.AsyncClient, request: RetryableRequest
) -> httpx.Response:
    """Send a request, retrying transient failures with a fixed delay.

    Successful and terminal responses are returned immediately. Retryable
    responses (5xx, 406) are replayed until the attempt budget is spent,
    after which the last response is returned unchanged; classifying it
    into an error is up to the caller. Transport failures are replayed the
    same way and re-raised as TransientTransportError on the last attempt.

    Args:
        client: The httpx client used to send the request
        request: Request description and retry budget

    Returns:
        The final HTTP response

    Raises:
        TransientTransportError: If the last attempt failed at the transport level
    """
    delay = request.retry_delay_ms / 1000
    state = RetryState.ATTEMPTING
    attempt = 0
    response: httpx.Response | None = None

    while state is RetryState.ATTEMPTING:
        attempt += 1
        try:
            response = await client.request(
                request.method,
                request.url,
                headers=request.headers,
                params=request.params,
                json=request.json,
            )
        except httpx.TransportError as e:
            if attempt >= request.max_attempts:
                logger.error(
                    f"{request.method} {request.url} failed after "
                    f"{attempt} attempts: {e!r}"
                )
                raise TransientTransportError(
                    f"Request to {request.url} failed after {attempt} attempts: {e}"
                ) from e
            logger.warning(
                f"Attempt {attempt}/{request.max_attempts} failed with error: "
                f"{e!r}. Retrying in {request.retry_delay_ms}ms..."
            )
            await asyncio.sleep(delay)
            continue

        state = next_state(
            classify_response(response.status_code), attempt, request.max_attempts
        )
        if state is RetryState.ATTEMPTING:
            logger.warning(
                f"Attempt {attempt}/{request.max_attempts} failed: "
                f"{response.status_code} {response.reason_phrase} - "
                f"{response.text}. Retrying in {request.retry_delay_ms}ms..."
            )
            await asyncio.sleep(delay)

    logger.debug(
        f"{request.method} {request.url} finished in state {state.value} "
        f"after {attempt} attempt(s) with status {response.status_code}"
    )
    return response
