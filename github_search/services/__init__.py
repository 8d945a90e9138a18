"""
Services Module - Business Logic Layer

Provides caching, cached search, and the presentation-side search session.
"""

from github_search.services.cache_service import CacheService
from github_search.services.search_service import SearchService
from github_search.services.session_service import SearchSession

__all__ = [
    "CacheService",
    "SearchService",
    "SearchSession",
]
