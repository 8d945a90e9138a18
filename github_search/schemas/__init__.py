"""
Schemas Module - Pydantic Models

Data models for search results and search-state snapshots.
"""

from github_search.schemas.search import (
    SearchResultKind,
    SearchResultItem,
    SearchResult,
)
from github_search.schemas.state import SearchState

__all__ = [
    "SearchResultKind",
    "SearchResultItem",
    "SearchResult",
    "SearchState",
]
