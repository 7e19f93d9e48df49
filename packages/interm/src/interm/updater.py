"""
Single-consumer update channel for a Block.

Many producers (tasks or threads) may want to change lines at the same time,
but only one writer may drive the terminal cursor. BlockUpdater is that
writer: producers push ``(index, content)`` messages and one consumer
coroutine applies them to the Block in arrival order.
"""
from __future__ import annotations

import asyncio
import contextlib
import logging
from dataclasses import dataclass

from .block import Block

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineUpdate:
    index: int
    content: str


class _Sentinel:
    """Sentinel value to signal the consumer to stop."""


_SENTINEL = _Sentinel()


class BlockUpdater:
    """
    Serialises line updates onto one Block.

    - submit(index, content): enqueue from the event loop thread
    - submit_threadsafe(index, content): enqueue from any other thread
    - run(): consume until close(); Block errors propagate out of run()
    - start() / close() / join(): task lifecycle helpers
    """

    def __init__(self, block: Block, move_cursor_back: bool = True) -> None:
        self.block = block
        self.move_cursor_back = move_cursor_back
        self._queue: asyncio.Queue[LineUpdate | _Sentinel] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._task: asyncio.Task[None] | None = None
        self._closed = False
        self.applied = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, index: int, content: str) -> None:
        """Queue an update. Must be called on the loop running the consumer."""
        if self._closed:
            raise RuntimeError("BlockUpdater is closed")
        self._queue.put_nowait(LineUpdate(index, content))

    def submit_threadsafe(self, index: int, content: str) -> None:
        """Queue an update from a thread other than the consumer's loop."""
        if self._loop is None:
            raise RuntimeError("BlockUpdater is not running")
        if self._closed:
            raise RuntimeError("BlockUpdater is closed")
        self._loop.call_soon_threadsafe(self._queue.put_nowait, LineUpdate(index, content))

    async def run(self) -> None:
        self._loop = asyncio.get_running_loop()
        while True:
            item = await self._queue.get()
            if isinstance(item, _Sentinel):
                break
            try:
                self.block.update_line(item.index, item.content, self.move_cursor_back)
            except Exception:
                logger.exception("Applying update to line %d failed; updater stopped", item.index)
                self._closed = True
                raise
            self.applied += 1

    def start(self) -> asyncio.Task[None]:
        """Run the consumer as a task on the running event loop."""
        if self._task is None:
            self._loop = asyncio.get_running_loop()
            self._task = asyncio.create_task(self.run())
        return self._task

    def close(self) -> None:
        """Stop accepting updates; the consumer exits after draining the queue."""
        if self._closed:
            return
        self._closed = True
        self._queue.put_nowait(_SENTINEL)

    async def join(self) -> None:
        if self._task is not None:
            await self._task

    async def __aenter__(self) -> "BlockUpdater":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
        if exc_type is None:
            await self.join()
            return
        task = self._task
        if task is None:
            return
        if not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        elif not task.cancelled() and task.exception() is not None:
            # Producers only see "closed"; surface the Block's own error.
            raise task.exception() from exc
