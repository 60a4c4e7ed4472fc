"""
Response Task Spawner

Runs each response as a detached asyncio task. The spawner only keeps
tasks alive until they finish and logs their failures; it never cancels
or retries them.
"""

import asyncio
from functools import partial
from typing import Any, Awaitable, Mapping, Optional

from ..utils.errors import BotError
from ..utils.logger import get_logger, log_absorbed_error

logger = get_logger(__name__)


class ResponseTaskSpawner:
    """
    Fire-and-forget task runner with a logging error sink.

    Args:
        max_inflight: Concurrency bound; 0 means unbounded
    """

    def __init__(self, max_inflight: int = 0):
        self._tasks: set[asyncio.Task] = set()
        self._semaphore: Optional[asyncio.Semaphore] = (
            asyncio.Semaphore(max_inflight) if max_inflight > 0 else None
        )

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def spawn(
        self,
        work: Awaitable[Any],
        context: Optional[Mapping[str, Any]] = None,
    ) -> asyncio.Task:
        """Schedule work on the running loop and return without waiting."""
        task = asyncio.create_task(self._run(work))
        # The loop holds only a weak reference to tasks
        self._tasks.add(task)
        task.add_done_callback(partial(self._on_done, context=context))
        return task

    async def _run(self, work: Awaitable[Any]) -> Any:
        if self._semaphore is None:
            return await work
        async with self._semaphore:
            return await work

    def _on_done(self, task: asyncio.Task, context: Optional[Mapping[str, Any]] = None) -> None:
        self._tasks.discard(task)

        if task.cancelled():
            logger.debug("Response task cancelled")
            return

        error = task.exception()
        if error is None:
            return

        log_absorbed_error(
            logger,
            error,
            source="response_task",
            context=context,
            with_traceback=not isinstance(error, BotError),
        )

    async def wait_idle(self) -> None:
        """Wait until every task spawned so far (and any they spawn) is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def abandon(self) -> int:
        """Report tasks left running at shutdown. They are not awaited."""
        count = len(self._tasks)
        if count:
            logger.warning(f"Shutting down with {count} response task(s) in flight")
        return count
