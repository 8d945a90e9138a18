"""
Providers Module - Search Provider Abstraction Layer

The pipeline only needs ``await provider.search(term)``; transport details
stay inside each provider.
"""

from github_search.providers.base_provider import BaseSearchProvider
from github_search.providers.github_provider import GitHubProvider

__all__ = [
    "BaseSearchProvider",
    "GitHubProvider",
    "get_provider",
]


def get_provider(settings=None):
    """Factory function to get configured search provider."""
    from github_search.config import get_settings
    settings = settings or get_settings()

    if settings.pipeline.provider == "github":
        return GitHubProvider(settings)
    else:
        raise ValueError(f"Unknown search provider: {settings.pipeline.provider}")
