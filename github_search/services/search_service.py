"""
Services - Search Service

Cached search on top of a provider. Satisfies the same ``search(term)``
contract as a provider, so the pipeline can use it directly.
"""

import logging
from typing import Optional

from github_search.config import get_settings
from github_search.providers import BaseSearchProvider, get_provider
from github_search.schemas import SearchResult
from github_search.services.cache_service import CacheService

logger = logging.getLogger(__name__)


class SearchService(BaseSearchProvider):
    """Provider wrapper adding the empty-term shortcut and a result cache."""

    def __init__(
        self,
        provider: Optional[BaseSearchProvider] = None,
        cache: Optional[CacheService] = None,
        settings=None,
    ):
        self.settings = settings or get_settings()
        self.provider = provider or get_provider(self.settings)
        self.cache = cache or CacheService(self.settings)

    async def search(self, term: str) -> SearchResult:
        """
        Search for ``term``.

        An empty term yields the no-term result without a request. Only
        successful results are cached; provider errors propagate.
        """
        if not term:
            return SearchResult.no_term()

        key = CacheService.key_for(term)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {term!r}")
            return cached

        result = await self.provider.search(term)
        self.cache.set(key, result)
        return result

    def is_available(self) -> bool:
        return self.provider.is_available()
