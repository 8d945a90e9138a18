"""
Providers - Base Provider

Abstract base class for search providers.
"""

from abc import ABC, abstractmethod

from github_search.schemas import SearchResult


class BaseSearchProvider(ABC):
    """Base class for search provider implementations."""

    @abstractmethod
    async def search(self, term: str) -> SearchResult:
        """
        Run one search.

        Args:
            term: Search term as typed by the user

        Returns:
            SearchResult for the term

        Raises:
            Exception: Any transport or API failure
        """
        pass

    def is_available(self) -> bool:
        """Check if provider is available."""
        return True
