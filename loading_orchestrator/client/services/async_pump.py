import asyncio
import logging
from typing import Coroutine, Any, Set

logger = logging.getLogger(__name__)

class AsyncPump:
    """
    Runs an asyncio event loop inside Arcade's frame loop.

    Architecture Note:
        Arcade owns the main thread, so the event loop never runs on its own.
        Each `pump()` processes whatever is ready right now (finished sleeps,
        results posted back from worker threads) and returns immediately, so
        a frame is never blocked waiting on a coroutine. Everything, including
        view switches made by the orchestrator, happens on the UI thread.
    """

    def __init__(self):
        self.loop = asyncio.new_event_loop()
        self._tasks: Set[asyncio.Task] = set()

    @property
    def is_idle(self) -> bool:
        return not self._tasks

    def submit(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task:
        """Schedules a coroutine; it starts on the next pump()."""
        task = self.loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def pump(self, *_):
        """
        Runs one iteration of the event loop.
        Extra positional args are accepted so this can be passed to arcade.schedule.
        """
        if self.loop.is_closed():
            return
        self.loop.call_soon(self.loop.stop)
        self.loop.run_forever()

    def close(self):
        """Cancels unfinished tasks, lets them unwind, and closes the loop."""
        if self.loop.is_closed():
            return

        pending = list(self._tasks)
        for task in pending:
            task.cancel()
        if pending:
            self.loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))

        self.loop.run_until_complete(self.loop.shutdown_default_executor())
        self.loop.close()

    def _on_task_done(self, task: asyncio.Task):
        self._tasks.discard(task)
        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            logger.error("Background task failed: %s", error, exc_info=error)
