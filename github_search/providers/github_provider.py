"""
Providers - GitHub Provider

Repository search against the GitHub REST API.
"""

import logging
from typing import Dict, Optional

import httpx

from github_search.config import get_settings
from github_search.providers.base_provider import BaseSearchProvider
from github_search.schemas import SearchResult

logger = logging.getLogger(__name__)


class GitHubProvider(BaseSearchProvider):
    """GitHub repository search provider."""

    def __init__(self, settings=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.github.api_url.rstrip("/")
        self.timeout = self.settings.github.timeout_ms / 1000
        self.per_page = self.settings.github.per_page
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "github-search-stream",
        }
        if self.settings.github.token:
            headers["Authorization"] = f"Bearer {self.settings.github.token}"
        return headers

    async def search(self, term: str) -> SearchResult:
        """Search repositories matching ``term``."""
        url = f"{self.base_url}/search/repositories"
        params = {"q": term, "per_page": self.per_page}

        async with httpx.AsyncClient(
            headers=self.headers,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()

        result = SearchResult.from_json(data.get("items", []))
        logger.debug(f"GitHub returned {len(result.items)} items for {term!r}")
        return result

    def is_available(self) -> bool:
        """Check if the GitHub API answers."""
        try:
            with httpx.Client(timeout=2.0) as client:
                response = client.get(f"{self.base_url}/rate_limit", headers=self.headers)
                return response.status_code == 200
        except httpx.HTTPError:
            return False
