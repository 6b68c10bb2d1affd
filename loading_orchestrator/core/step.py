import asyncio
import math
from dataclasses import dataclass
from typing import Generic, Optional, Union, Callable, Any

from loading_orchestrator.core.interfaces import AsyncLoadable, AsyncAction, ProgressCallback, TStatus


@dataclass(frozen=True)
class LoadablePayload:
    """Step work done by a self-reporting loadable."""
    loadable: AsyncLoadable


@dataclass(frozen=True)
class ActionPayload:
    """Step work done by a bare coroutine function with no progress of its own."""
    action: AsyncAction


StepPayload = Union[LoadablePayload, ActionPayload]


@dataclass(frozen=True)
class LoadingStep(Generic[TStatus]):
    """
    A single step in a multistep loading process.

    Architecture Note:
        The payload is either a LoadablePayload or an ActionPayload, never both.
        Use the `from_loadable` / `from_action` factories rather than building
        the payload by hand.

    Attributes:
        weight: Relative share of the total expected duration. Finite and > 0.
        payload: What the step runs.
        status: Reported around an action. Loadable steps report the
            loadable's own statuses, so it is optional there.
    """
    weight: float
    payload: StepPayload
    status: Optional[TStatus] = None

    def __post_init__(self):
        if not (math.isfinite(self.weight) and self.weight > 0):
            raise ValueError(f"Weight must be a finite number greater than zero, got {self.weight!r}")
        if not isinstance(self.payload, (LoadablePayload, ActionPayload)):
            raise TypeError(f"Unsupported step payload: {type(self.payload).__name__}")

    @classmethod
    def from_loadable(cls, weight: float, loadable: AsyncLoadable,
                      status: Optional[TStatus] = None) -> "LoadingStep[TStatus]":
        """Creates a step that delegates to an AsyncLoadable."""
        return cls(weight, LoadablePayload(loadable), status)

    @classmethod
    def from_action(cls, weight: float, status: TStatus, action: AsyncAction) -> "LoadingStep[TStatus]":
        """Creates a step that awaits `action()` between a 0.0 and a 1.0 report."""
        return cls(weight, ActionPayload(action), status)

    @classmethod
    def from_blocking(cls, weight: float, status: TStatus,
                      func: Callable[..., Any], *args: Any) -> "LoadingStep[TStatus]":
        """
        Creates an action step around a plain blocking function.

        The function runs in a worker thread so the event loop (and the UI it
        drives) keeps rendering while it works. Its return value is discarded.
        """
        async def run_blocking():
            await asyncio.to_thread(func, *args)

        return cls.from_action(weight, status, run_blocking)

    @property
    def loadable(self) -> Optional[AsyncLoadable]:
        return self.payload.loadable if isinstance(self.payload, LoadablePayload) else None

    @property
    def action(self) -> Optional[AsyncAction]:
        return self.payload.action if isinstance(self.payload, ActionPayload) else None

    async def execute(self, on_progress: Optional[ProgressCallback] = None) -> None:
        """
        Executes this step.

        Errors raised by the loadable or the action propagate unchanged.

        Args:
            on_progress: Callback(fraction 0.0-1.0, status).
        """
        payload = self.payload

        if isinstance(payload, LoadablePayload):
            # The loadable owns the whole progress stream, statuses included.
            await payload.loadable.load_resources(on_progress)
            return

        if on_progress: on_progress(0.0, self.status)
        await payload.action()
        if on_progress: on_progress(1.0, self.status)
