"""Logging configuration for the search server."""

import logging
import sys

from github_search.config import get_settings


def setup_logging(settings=None) -> None:
    """Configure process-wide logging.

    Level comes from LOG_LEVEL. Output goes to stderr so that the stdio
    MCP transport keeps stdout for protocol messages.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log.level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
