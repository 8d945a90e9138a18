"""
Tools Module - MCP Tool Implementations
"""

from github_search.tools import search_session

__all__ = [
    "search_session",
]
