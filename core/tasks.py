"""
Detached background tasks.

Handlers use DetachedTasks.spawn() for work that must outlive the request: the task is
scheduled on the running loop, kept referenced until it finishes, and its failure
is logged instead of being raised to anyone. Cancelling the originating request
does not cancel the task; shutdown() cancels whatever is still pending.
"""
import asyncio
import logging
from typing import Coroutine, Any

logger = logging.getLogger(__name__)


class DetachedTasks:
    def __init__(self):
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def spawn(self, coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        logger.info("Detached task %s started", name)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            logger.warning("Detached task %s was cancelled", task.get_name())
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Detached task %s failed: %s", task.get_name(), exc, exc_info=exc)
        else:
            logger.info("Detached task %s finished", task.get_name())

    async def shutdown(self) -> None:
        if not self._tasks:
            return
        logger.info("Cancelling %d pending detached task(s)", len(self._tasks))
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
