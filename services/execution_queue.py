from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable


logger = logging.getLogger(__name__)


class ExecutionQueueClosed(RuntimeError):
    pass


class ExecutionQueue:
    """
    One-way channel between the console and whatever executes commands.

    submit() never blocks and never reports completion; a consumer either
    awaits run() (TUI) or calls drain() between input lines (shell).
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[str] = asyncio.Queue()
        self._closed = False
        self.submitted = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def pending(self) -> int:
        return self._queue.qsize()

    def submit(self, command_line: str) -> None:
        if self._closed:
            raise ExecutionQueueClosed("Execution queue is closed.")
        self._queue.put_nowait(command_line)
        self.submitted += 1
        logger.debug("Queued %r (%d pending)", command_line, self._queue.qsize())

    def drain(self) -> list[str]:
        lines: list[str] = []
        while True:
            try:
                lines.append(self._queue.get_nowait())
            except asyncio.QueueEmpty:
                return lines
            self._queue.task_done()

    async def run(self, handler: Callable[[str], Awaitable[None]]) -> None:
        while True:
            command_line = await self._queue.get()
            try:
                await handler(command_line)
            except asyncio.CancelledError:
                raise
            except Exception:
                logger.exception("Command handler failed for %r", command_line)
            finally:
                self._queue.task_done()

    async def join(self) -> None:
        await self._queue.join()

    def close(self) -> list[str]:
        self._closed = True
        return self.drain()
