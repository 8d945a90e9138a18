"""
Shared test helpers
"""

import asyncio

from github_search.schemas import SearchResult, SearchResultItem


class FakeProvider:
    """Provider with per-term latency and failures that records every call."""

    def __init__(self, delays=None, failures=()):
        self.delays = delays or {}
        self.failures = set(failures)
        self.calls = []
        self.cancelled = []

    async def search(self, term: str) -> SearchResult:
        self.calls.append(term)
        try:
            await asyncio.sleep(self.delays.get(term, 0))
        except asyncio.CancelledError:
            self.cancelled.append(term)
            raise
        if term in self.failures:
            raise RuntimeError(f"search for {term} failed")
        return result_for(term)


def result_for(term: str) -> SearchResult:
    return SearchResult.from_items([
        SearchResultItem(
            full_name=f"octo/{term}",
            url=f"https://github.com/octo/{term}",
            avatar_url="https://avatars.githubusercontent.com/u/1",
        )
    ])


async def timed_events(*events, tail: float = 0.0):
    """Yield values after the given delays, then stay open for ``tail`` seconds."""
    for delay, value in events:
        await asyncio.sleep(delay)
        yield value
    await asyncio.sleep(tail)
