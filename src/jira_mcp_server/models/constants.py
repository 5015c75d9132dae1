"""Default values shared by the Jira models."""

from typing import Final

EMPTY_STRING: Final[str] = ""
UNKNOWN_AUTHOR: Final[str] = "Unknown"
