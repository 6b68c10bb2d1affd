import logging
from typing import Any, Optional, Sequence

from loading_orchestrator.core.interfaces import (
    CompletionHook, ErrorHook, Operation, ProgressCallback, ViewHost,
)
from loading_orchestrator.core.sequencer import execute_steps
from loading_orchestrator.core.step import LoadingStep

logger = logging.getLogger(__name__)


class LoadingOrchestrator:
    """
    Orchestrates multistep loading operations behind a loading screen.

    Architecture Note:
        The orchestrator only knows the host through the ViewHost protocol
        (attach/detach). Which screen to show is decided per call, so one
        orchestrator can serve the startup sequence, save loading, etc.

    Lifecycle of every `execute_with_loading_screen` call:
        1. Attach: the screen is handed to the host and becomes live.
        2. Run: the operation (then `on_complete`) runs, reporting progress to the screen.
        3. Detach: the screen is removed. Runs on every exit path, exactly once.
    """

    def __init__(self, host: ViewHost):
        self.host = host

    async def execute_steps(self, steps: Sequence[LoadingStep],
                            on_progress: Optional[ProgressCallback] = None) -> None:
        """
        Executes loading steps with aggregate progress tracking, without a screen.
        See `loading_orchestrator.core.sequencer.execute_steps`.
        """
        await execute_steps(steps, on_progress)

    async def execute_with_loading_screen(self,
                                          loading_screen: Any,
                                          operation: Operation,
                                          on_complete: Optional[CompletionHook] = None,
                                          on_error: Optional[ErrorHook] = None) -> None:
        """
        Executes an operation while a loading screen is attached to the host.

        Args:
            loading_screen: Pre-built screen object. If it implements
                `update_loading_state` it receives every progress report;
                otherwise reports are dropped.
            operation: Coroutine function receiving the progress callback.
            on_complete: Awaited after a successful operation, still in front
                of the loading screen. Its errors are handled like the operation's.
            on_error: Awaited with the exception while the screen is still
                attached. If it returns normally the error counts as handled
                and is not re-raised.
        """
        # Looked up once per call; screens without the method are legal and get nothing.
        update_state = getattr(loading_screen, "update_loading_state", None)
        if not callable(update_state):
            update_state = None

        def progress_callback(progress: float, status: Any):
            if update_state is not None:
                update_state(progress, status)

        logger.debug("Attaching loading screen %s", type(loading_screen).__name__)
        self.host.attach(loading_screen)

        try:
            await operation(progress_callback)

            if on_complete:
                await on_complete()

        except Exception as e:
            if on_error is None:
                logger.error("Loading failed: %s", e)
                raise

            logger.warning("Loading failed, passing error to handler: %s", e)
            await on_error(e)

        finally:
            logger.debug("Detaching loading screen %s", type(loading_screen).__name__)
            self.host.detach(loading_screen)

    async def execute_steps_with_loading_screen(self,
                                                loading_screen: Any,
                                                steps: Sequence[LoadingStep],
                                                on_complete: Optional[CompletionHook] = None,
                                                on_error: Optional[ErrorHook] = None) -> None:
        """
        Executes loading steps behind a loading screen (convenience method).
        """
        async def run_steps(progress_callback: ProgressCallback):
            await execute_steps(steps, progress_callback)

        await self.execute_with_loading_screen(loading_screen, run_steps, on_complete, on_error)
