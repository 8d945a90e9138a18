"""
Services - Cache Service

TTL-based cache for completed search results.
"""

from typing import Any, Optional
from cachetools import TTLCache

from github_search.config import get_settings


class CacheService:
    """TTL cache keyed by search term."""

    def __init__(self, settings=None):
        self.settings = settings or get_settings()
        self._cache = TTLCache(
            maxsize=self.settings.cache.max_entries,
            ttl=self.settings.cache.ttl_seconds,
        )

    @staticmethod
    def key_for(term: str) -> str:
        return f"search:{term}"

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None
        """
        if not self.settings.cache.enabled:
            return None
        return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:
        """
        Set value in cache.

        Args:
            key: Cache key
            value: Value to cache
        """
        if not self.settings.cache.enabled:
            return
        self._cache[key] = value

    def delete(self, key: str) -> None:
        """Delete a key from cache."""
        self._cache.pop(key, None)

    def clear_all(self) -> None:
        """Clear the cache."""
        self._cache.clear()

    def get_stats(self) -> dict:
        """Get cache statistics."""
        return {
            "size": len(self._cache),
            "maxsize": self._cache.maxsize,
            "ttl": self._cache.ttl,
            "enabled": self.settings.cache.enabled,
        }
