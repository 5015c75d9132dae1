"""Entry point for running the Jira MCP server with ``python -m``."""

from jira_mcp_server import main

if __name__ == "__main__":
    main()
