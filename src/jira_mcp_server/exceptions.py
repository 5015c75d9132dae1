"""Error taxonomy for the Jira MCP server."""

from enum import Enum


class ErrorKind(str, Enum):
    """Classification tag carried by every JiraMCPError."""

    CONFIGURATION = "configuration"
    TRANSIENT_TRANSPORT = "transient_transport"
    UPSTREAM = "upstream"


class JiraMCPError(Exception):
    """Base exception for Jira MCP server errors."""

    kind: ErrorKind


class ConfigurationError(JiraMCPError):
    """Raised when a required Jira URL or credential is missing."""

    kind = ErrorKind.CONFIGURATION


class TransientTransportError(JiraMCPError):
    """Raised when every attempt of a request failed at the transport level."""

    kind = ErrorKind.TRANSIENT_TRANSPORT


class UpstreamError(JiraMCPError):
    """Raised when Jira answers with a non-success HTTP status."""

    kind = ErrorKind.UPSTREAM

    def __init__(
        self, message: str, status_code: int, reason: str = "", body: str = ""
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body
