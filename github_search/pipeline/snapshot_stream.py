"""
Pipeline - Snapshot Stream

Turns raw text events into a stream of SearchState snapshots:
distinct -> debounce -> switch-latest search, seeded with the initial state.
"""

import asyncio
import logging
from typing import AsyncIterable, AsyncIterator, Optional

from github_search.config import get_settings
from github_search.pipeline.operators import debounce, distinct_until_changed
from github_search.pipeline.switch_latest import SearchSwitch
from github_search.schemas import SearchState

logger = logging.getLogger(__name__)

_END = object()


class _InputFailed:
    """Carries an input-stream exception across the output queue."""

    def __init__(self, error: Exception):
        self.error = error


class SearchPipeline:
    """Debounced, cancel-on-supersede search over a stream of terms."""

    def __init__(self, provider, settings=None, debounce_ms: Optional[int] = None):
        self.settings = settings or get_settings()
        self.provider = provider
        if debounce_ms is None:
            debounce_ms = self.settings.pipeline.debounce_ms
        self.debounce_seconds = debounce_ms / 1000

    async def stream(self, text_events: AsyncIterable[str]) -> AsyncIterator[SearchState]:
        """
        Build the snapshot stream for ``text_events``.

        The first item is always ``SearchState.initial()``. The stream
        completes once ``text_events`` completes and the live search
        finishes; an exception from ``text_events`` is re-raised here.
        Closing the iterator cancels the live search.

        Args:
            text_events: Raw text, one item per change of the input field

        Yields:
            SearchState snapshots, newest search only
        """
        yield SearchState.initial()

        queue: asyncio.Queue = asyncio.Queue()
        switch = SearchSwitch(self.provider, queue.put_nowait)
        driver = asyncio.create_task(self._drive(text_events, switch, queue))
        try:
            while True:
                item = await queue.get()
                if item is _END:
                    return
                if isinstance(item, _InputFailed):
                    raise item.error
                yield item
        finally:
            driver.cancel()
            switch.cancel()

    async def _drive(self, text_events, switch: SearchSwitch, queue: asyncio.Queue) -> None:
        terms = debounce(distinct_until_changed(text_events), self.debounce_seconds)
        try:
            async for term in terms:
                switch.switch_to(term)
            await switch.wait()
        except Exception as e:
            logger.error(f"Text input stream failed: {e}")
            switch.cancel()
            queue.put_nowait(_InputFailed(e))
            return
        queue.put_nowait(_END)


def build_snapshot_stream(
    text_events: AsyncIterable[str],
    provider,
    debounce_ms: Optional[int] = None,
    settings=None,
) -> AsyncIterator[SearchState]:
    """
    Convert raw text events into search-state snapshots.

    Args:
        text_events: Hot stream of raw text; may repeat and arrive at any rate
        provider: Anything with ``async search(term) -> SearchResult``
        debounce_ms: Quiet period before a term is searched (default from settings)
        settings: Optional Settings instance

    Returns:
        Async iterator of SearchState, starting with the initial snapshot
    """
    pipeline = SearchPipeline(provider, settings=settings, debounce_ms=debounce_ms)
    return pipeline.stream(text_events)
