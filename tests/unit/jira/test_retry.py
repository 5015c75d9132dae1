"""Tests for the retrying request executor."""

import json

import httpx
import pytest

from jira_mcp_server.exceptions import ErrorKind, TransientTransportError
from jira_mcp_server.jira.retry import (
    ResponseClass,
    RetryableRequest,
    RetryState,
    classify_response,
    next_state,
    send_with_retry,
)

URL = "https://jira.example.com/rest/api/2/issue/PROJ-1"


def scripted_client(outcomes):
    """Build an AsyncClient whose responses follow ``outcomes`` in order.

    Each outcome is a status code or an exception instance to raise.
    """
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        outcome = outcomes[len(calls)]
        calls.append(request)
        if isinstance(outcome, Exception):
            raise outcome
        return httpx.Response(outcome, text=f"status {outcome}")

    return httpx.AsyncClient(transport=httpx.MockTransport(handler)), calls


class TestClassification:
    @pytest.mark.parametrize("status", [200, 201, 204])
    def test_success(self, status):
        assert classify_response(status) is ResponseClass.SUCCESS

    @pytest.mark.parametrize("status", [500, 502, 503, 504, 406])
    def test_retryable(self, status):
        assert classify_response(status) is ResponseClass.RETRYABLE

    @pytest.mark.parametrize("status", [301, 304, 400, 401, 403, 404, 409, 429])
    def test_terminal(self, status):
        assert classify_response(status) is ResponseClass.TERMINAL

    def test_transitions(self):
        assert next_state(ResponseClass.SUCCESS, 1, 3) is RetryState.SUCCEEDED
        assert next_state(ResponseClass.TERMINAL, 1, 3) is RetryState.FAILED_TERMINAL
        assert next_state(ResponseClass.RETRYABLE, 2, 3) is RetryState.ATTEMPTING
        assert (
            next_state(ResponseClass.RETRYABLE, 3, 3) is RetryState.FAILED_EXHAUSTED
        )


@pytest.mark.anyio
async def test_server_errors_then_success(mock_sleep):
    client, calls = scripted_client([500, 500, 200])
    async with client:
        response = await send_with_retry(
            client, RetryableRequest("GET", URL, max_attempts=3)
        )

    assert response.status_code == 200
    assert len(calls) == 3
    assert mock_sleep.await_count == 2
    mock_sleep.assert_awaited_with(1.0)


@pytest.mark.anyio
async def test_not_found_returned_immediately(mock_sleep):
    client, calls = scripted_client([404])
    async with client:
        response = await send_with_retry(client, RetryableRequest("GET", URL))

    assert response.status_code == 404
    assert len(calls) == 1
    mock_sleep.assert_not_awaited()


@pytest.mark.anyio
async def test_not_modified_returned_without_retry(mock_sleep):
    client, calls = scripted_client([304])
    async with client:
        response = await send_with_retry(client, RetryableRequest("GET", URL))

    assert response.status_code == 304
    assert len(calls) == 1
    mock_sleep.assert_not_awaited()


@pytest.mark.anyio
async def test_not_acceptable_is_retried_once(mock_sleep):
    client, calls = scripted_client([406, 200])
    async with client:
        response = await send_with_retry(client, RetryableRequest("GET", URL))

    assert response.status_code == 200
    assert len(calls) == 2
    assert mock_sleep.await_count == 1


@pytest.mark.anyio
async def test_exhausted_retries_return_last_response(mock_sleep):
    client, calls = scripted_client([503, 502, 500])
    async with client:
        response = await send_with_retry(client, RetryableRequest("GET", URL))

    assert response.status_code == 500
    assert response.text == "status 500"
    assert len(calls) == 3
    assert mock_sleep.await_count == 2


@pytest.mark.anyio
async def test_transport_error_then_success(mock_sleep):
    client, calls = scripted_client([httpx.ConnectError("refused"), 200])
    async with client:
        response = await send_with_retry(client, RetryableRequest("GET", URL))

    assert response.status_code == 200
    assert len(calls) == 2
    assert mock_sleep.await_count == 1


@pytest.mark.anyio
async def test_transport_error_on_every_attempt_is_raised(mock_sleep):
    original = httpx.ReadTimeout("timed out")
    client, calls = scripted_client(
        [httpx.ConnectError("refused"), httpx.ConnectError("refused"), original]
    )
    async with client:
        with pytest.raises(TransientTransportError) as exc_info:
            await send_with_retry(client, RetryableRequest("GET", URL))

    assert exc_info.value.kind is ErrorKind.TRANSIENT_TRANSPORT
    assert exc_info.value.__cause__ is original
    assert len(calls) == 3
    assert mock_sleep.await_count == 2


@pytest.mark.anyio
async def test_custom_budget_and_delay(mock_sleep):
    client, calls = scripted_client([500, 500, 500, 500, 500])
    async with client:
        response = await send_with_retry(
            client,
            RetryableRequest("GET", URL, max_attempts=5, retry_delay_ms=250),
        )

    assert response.status_code == 500
    assert len(calls) == 5
    assert mock_sleep.await_count == 4
    mock_sleep.assert_awaited_with(0.25)


@pytest.mark.anyio
async def test_single_attempt_never_sleeps(mock_sleep):
    client, calls = scripted_client([500])
    async with client:
        response = await send_with_retry(
            client, RetryableRequest("GET", URL, max_attempts=1)
        )

    assert response.status_code == 500
    assert len(calls) == 1
    mock_sleep.assert_not_awaited()


@pytest.mark.anyio
async def test_request_carries_headers_and_body(mock_sleep):
    client, calls = scripted_client([201])
    async with client:
        await send_with_retry(
            client,
            RetryableRequest(
                "POST",
                URL,
                headers={"Authorization": "Bearer pat"},
                json={"body": "hello"},
            ),
        )

    assert calls[0].method == "POST"
    assert calls[0].headers["Authorization"] == "Bearer pat"
    assert json.loads(calls[0].content) == {"body": "hello"}


def test_invalid_budget_rejected():
    with pytest.raises(ValueError):
        RetryableRequest("GET", URL, max_attempts=0)
    with pytest.raises(ValueError):
        RetryableRequest("GET", URL, retry_delay_ms=-1)


@pytest.mark.anyio
async def test_retry_is_logged(mock_sleep, caplog):
    client, _ = scripted_client([502, 200])
    with caplog.at_level("WARNING", logger="jira-mcp-server.jira.retry"):
        async with client:
            await send_with_retry(client, RetryableRequest("GET", URL))

    assert "Attempt 1/3 failed: 502" in caplog.text
    assert "Retrying in 1000ms" in caplog.text
