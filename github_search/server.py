"""
GitHub Search MCP Server - Main Entry Point

FastMCP server with STDIO and SSE transport support.
"""

import argparse
from fastmcp import FastMCP

from github_search.config import get_settings
from github_search.logging_config import setup_logging
from github_search.tools import search_session


def create_app() -> FastMCP:
    """Create and configure the MCP application."""
    mcp = FastMCP(
        name="github-search",
        instructions="Debounced GitHub repository search. Type text, read the search state.",
    )

    mcp.mount(search_session.router)

    return mcp


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="GitHub Search MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=None,
        help="Transport protocol (default: from env)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for SSE transport (default: from env)"
    )
    args = parser.parse_args()

    settings = get_settings()
    setup_logging(settings)
    transport = args.transport or settings.mcp.transport
    port = args.port or settings.mcp.port

    mcp = create_app()

    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=settings.mcp.host, port=port)


if __name__ == "__main__":
    main()
