"""
Utility functions for the Jira MCP server.
This package provides environment and logging helpers used throughout the codebase.
"""

from .env import getenv, is_env_ssl_verify, is_env_truthy
from .logging import mask_sensitive

__all__ = [
    "getenv",
    "is_env_ssl_verify",
    "is_env_truthy",
    "mask_sensitive",
]
