"""
Pipeline - Input Operators

Order-preserving, lossy filters applied to the raw text stream before any
search starts.
"""

import asyncio
from typing import AsyncIterable, AsyncIterator, TypeVar

T = TypeVar("T")

_NOTHING = object()
_VALUE = "value"
_DONE = "done"
_ERROR = "error"


async def distinct_until_changed(source: AsyncIterable[T]) -> AsyncIterator[T]:
    """Drop every value equal to the one right before it."""
    previous = _NOTHING
    async for value in source:
        if value == previous:
            continue
        previous = value
        yield value


async def debounce(source: AsyncIterable[T], delay: float) -> AsyncIterator[T]:
    """
    Forward a value once ``delay`` seconds pass without a newer one.

    A value superseded inside the window is discarded. When ``source``
    completes, the pending value (if any) is flushed at once; when it
    fails, the pending value is dropped and the exception is re-raised.

    Args:
        source: Upstream values
        delay: Quiet period in seconds
    """
    queue: asyncio.Queue = asyncio.Queue()

    async def pump():
        try:
            async for value in source:
                queue.put_nowait((_VALUE, value))
        except Exception as e:
            queue.put_nowait((_ERROR, e))
        else:
            queue.put_nowait((_DONE, None))

    pump_task = asyncio.create_task(pump())
    pending = _NOTHING
    try:
        while True:
            timeout = None if pending is _NOTHING else delay
            try:
                kind, value = await asyncio.wait_for(queue.get(), timeout)
            except asyncio.TimeoutError:
                ready, pending = pending, _NOTHING
                yield ready
                continue

            if kind == _VALUE:
                pending = value
            elif kind == _DONE:
                if pending is not _NOTHING:
                    yield pending
                return
            else:
                raise value
    finally:
        pump_task.cancel()
        await asyncio.gather(pump_task, return_exceptions=True)
