import asyncio
import logging
import os

import click
from dotenv import load_dotenv

from .logging_config import log_operation, setup_logger

__version__ = "1.0.4"

logger = logging.getLogger("jira-mcp-server")


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse or streamable-http)",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for the HTTP transports",
)
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind for the HTTP transports",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--jira-url",
    help="Jira REST API base URL (e.g., https://jira.your-company.com/rest/api/2)",
)
@click.option("--jira-username", help="Jira username (switches to Basic auth)")
@click.option("--jira-token", help="Jira API token or Personal Access Token")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=None,
    help="Verify SSL certificates for Jira (default: verify)",
)
@click.option(
    "--read-only/--no-read-only",
    default=None,
    help="Refuse write tools such as jira_add_comment",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    port: int,
    host: str,
    log_dir: str | None,
    jira_url: str | None,
    jira_username: str | None,
    jira_token: str | None,
    jira_ssl_verify: bool | None,
    read_only: bool | None,
) -> None:
    """Jira MCP Server - issue and comment tools for Jira Server/Data Center.

    Exposes jira_get_issue and jira_add_comment over the Model Context Protocol.
    """
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    setup_logger(level=logging_level, log_dir=log_dir)

    with log_operation(logger, "application_startup", app_version=__version__):
        # Load environment variables from file if specified, otherwise try default .env
        if env_file:
            logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments override the environment
        if jira_url:
            os.environ["JIRA_URL"] = jira_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_token:
            os.environ["JIRA_API_TOKEN"] = jira_token
        if jira_ssl_verify is not None:
            os.environ["JIRA_SSL_VERIFY"] = str(jira_ssl_verify).lower()
        if read_only is not None:
            os.environ["READ_ONLY_MODE"] = str(read_only).lower()

        from .servers import run_server

        logger.info(f"Starting Jira MCP server v{__version__} with {transport} transport")

    asyncio.run(run_server(transport=transport, port=port, host=host))


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
