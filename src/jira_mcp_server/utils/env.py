"""Environment variable utility functions for the Jira MCP server."""

from collections.abc import Mapping


def getenv(
    env: Mapping[str, str], env_var_name: str, default: str | None = None
) -> str | None:
    """Retrieve a value from an environment mapping.

    Empty strings are treated as unset so that a blank line in a .env file
    behaves like a missing variable.

    Args:
        env: Mapping of environment variable names to values.
        env_var_name: The name of the variable to retrieve.
        default: Value returned when the variable is unset or empty.

    Returns:
        The value of the variable if set, otherwise ``default``.
    """
    value = env.get(env_var_name)
    return value if value else default


def is_env_truthy(
    env: Mapping[str, str], env_var_name: str, default: str = ""
) -> bool:
    """Check if a variable is set to an extended truthy value.

    Considers 'true', '1', 'yes', 'y', 'on' as truthy (case-insensitive).
    Used for READ_ONLY_MODE and similar flags.
    """
    value = getenv(env, env_var_name, default) or ""
    return value.lower() in ("true", "1", "yes", "y", "on")


def is_env_ssl_verify(
    env: Mapping[str, str], env_var_name: str, default: str = "true"
) -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env: Mapping of environment variable names to values.
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    value = getenv(env, env_var_name, default) or default
    return value.lower() not in ("false", "0", "no")
