"""
Pipeline - Switch-Latest Search Runner

Keeps exactly one search live. Each new term bumps a generation id and
cancels the previous search task; anything a task emits is tagged with the
generation it was started under and dropped unless that generation is
still current.
"""

import asyncio
import logging
from typing import Callable, Optional

from github_search.schemas import SearchState

logger = logging.getLogger(__name__)


class SearchSwitch:
    """
    Runs the loading -> (result | error) lifecycle for the latest term.

    Emissions go through ``emit`` in order. A superseded search is
    cancelled outright; the generation check also covers a provider that
    finishes between the switch and the cancellation taking effect.
    """

    def __init__(self, provider, emit: Callable[[SearchState], None]):
        self.provider = provider
        self._emit = emit
        self.generation = 0
        self._live: Optional[asyncio.Task] = None

    @property
    def is_searching(self) -> bool:
        return self._live is not None and not self._live.done()

    def switch_to(self, term: str) -> None:
        """Supersede the live search (if any) and start searching ``term``."""
        self.cancel()
        self.generation += 1
        generation = self.generation

        self._dispatch(generation, SearchState.loading())
        self._live = asyncio.create_task(
            self._run(generation, term),
            name=f"search[{generation}]",
        )

    def cancel(self) -> None:
        """Cancel the live search. Its pending emissions are never delivered."""
        if self.is_searching:
            logger.debug(f"Cancelling search generation {self.generation}")
            self._live.cancel()
        self._live = None

    async def wait(self) -> None:
        """Wait for the live search to finish, if one is running."""
        if self._live is not None:
            await asyncio.wait({self._live})

    async def _run(self, generation: int, term: str) -> None:
        logger.info(f"Searching for {term!r}")
        try:
            result = await self.provider.search(term)
        except asyncio.CancelledError:
            if self._live is not asyncio.current_task():
                raise
            logger.warning(f"Search for {term!r} was cancelled by the provider")
            self._dispatch(generation, SearchState.error())
            return
        except Exception as e:
            logger.warning(f"Search for {term!r} failed: {e}")
            self._dispatch(generation, SearchState.error())
            return
        self._dispatch(generation, SearchState.from_result(result))

    def _dispatch(self, generation: int, state: SearchState) -> None:
        if generation != self.generation:
            logger.debug(f"Dropping stale emission from generation {generation}")
            return
        self._emit(state)
