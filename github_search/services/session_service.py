"""
Services - Search Session

Presentation-side handle on one live search pipeline. A view feeds text in
with ``on_text_changed`` and reads snapshots back through ``state`` (last
known, synchronous) or ``subscribe()`` (live).
"""

import asyncio
import logging
from typing import AsyncIterator, List, Optional

from github_search.config import get_settings
from github_search.pipeline import SearchPipeline
from github_search.schemas import SearchState

logger = logging.getLogger(__name__)

_CLOSE = object()


class SearchSession:
    """Owns the text input stream and the pipeline task for one search box."""

    def __init__(self, provider, settings=None, debounce_ms: Optional[int] = None):
        self.settings = settings or get_settings()
        self.pipeline = SearchPipeline(provider, self.settings, debounce_ms)
        self._text_events: asyncio.Queue = asyncio.Queue()
        self._subscribers: List[asyncio.Queue] = []
        self._state = SearchState.initial()
        self._task: Optional[asyncio.Task] = None
        self._closed = False

    @property
    def state(self) -> SearchState:
        """Last snapshot emitted, or the initial one before any emission."""
        return self._state

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def on_text_changed(self, text: str) -> None:
        """Push the current contents of the input field."""
        if self._closed:
            raise RuntimeError("search session is closed")
        self._text_events.put_nowait(text)

    def start(self) -> None:
        """Start the pipeline on the running event loop."""
        if self._task is None:
            self._task = asyncio.create_task(self._run(), name="search-session")

    async def close(self) -> None:
        """Complete the input stream and wait for the pipeline to finish."""
        if self._closed:
            return
        self._closed = True
        self._text_events.put_nowait(_CLOSE)
        if self._task is None:
            for queue in self._subscribers:
                queue.put_nowait(_CLOSE)
        else:
            await self._task

    async def subscribe(self) -> AsyncIterator[SearchState]:
        """Yield the current snapshot, then every later one until close."""
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.append(queue)
        try:
            yield self._state
            if self._closed or (self._task is not None and self._task.done()):
                return
            while True:
                item = await queue.get()
                if item is _CLOSE:
                    return
                yield item
        finally:
            self._subscribers.remove(queue)

    async def settled(self, timeout: float) -> SearchState:
        """
        Wait for the next search to complete.

        Returns the first non-loading snapshot that follows a loading one,
        or the current state if none arrives within ``timeout`` seconds.
        The replayed current snapshot is skipped; only emissions that arrive
        after the call count.
        """
        async def next_settled() -> SearchState:
            subscription = self.subscribe()
            seen_loading = False
            try:
                await subscription.__anext__()
                async for snapshot in subscription:
                    if snapshot.is_loading:
                        seen_loading = True
                    elif seen_loading:
                        return snapshot
            finally:
                await subscription.aclose()
            return self._state

        try:
            return await asyncio.wait_for(next_settled(), timeout)
        except asyncio.TimeoutError:
            return self._state

    async def _text_stream(self) -> AsyncIterator[str]:
        while True:
            text = await self._text_events.get()
            if text is _CLOSE:
                return
            yield text

    async def _run(self) -> None:
        logger.info("Search session started")
        try:
            async for snapshot in self.pipeline.stream(self._text_stream()):
                self._publish(snapshot)
        finally:
            for queue in self._subscribers:
                queue.put_nowait(_CLOSE)
            logger.info("Search session stopped")

    def _publish(self, snapshot: SearchState) -> None:
        self._state = snapshot
        for queue in self._subscribers:
            queue.put_nowait(snapshot)
