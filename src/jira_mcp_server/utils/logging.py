"""Logging helpers for the Jira MCP server."""


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Mask a credential for log output, keeping a few characters at each end.

    Args:
        value: The sensitive string (token, header value, ...)
        keep_chars: Number of characters to keep visible at each end

    Returns:
        The masked string, or "Not Provided" for empty values
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return (
        value[:keep_chars]
        + "*" * (len(value) - keep_chars * 2)
        + value[-keep_chars:]
    )
