from typing import Protocol, Callable, Awaitable, Optional, TypeVar, Any, runtime_checkable

TStatus = TypeVar("TStatus")

# (fraction 0.0-1.0, status) -> None. Called synchronously, never awaited.
ProgressCallback = Callable[[float, Any], None]

AsyncAction = Callable[[], Awaitable[None]]
CompletionHook = Callable[[], Awaitable[None]]
ErrorHook = Callable[[BaseException], Awaitable[None]]

# An operation receives the progress callback it should report through.
Operation = Callable[[ProgressCallback], Awaitable[None]]


@runtime_checkable
class AsyncLoadable(Protocol):
    """
    Interface for resources that load themselves and report their own progress.

    The orchestrator never reads `is_loaded`; it exists for the application
    (e.g. to skip a step that already ran).
    """

    @property
    def is_loaded(self) -> bool:
        ...

    async def load_resources(self, on_progress: Optional[ProgressCallback] = None) -> None:
        """
        Loads the resource.

        Args:
            on_progress: Callback(fraction, status). A loadable that wants its
                consumers to see full progress should finish with fraction 1.0.
        """
        ...


@runtime_checkable
class LoadingScreen(Protocol):
    """
    Optional capability of a loading screen object.
    Screens can have any internal structure; only this method is required
    for them to receive progress. Screens without it are still attached and
    detached, they just never see updates.
    """

    def update_loading_state(self, progress: float, status: Any) -> None:
        ...


class ViewHost(Protocol):
    """
    The environment a loading screen lives in while an operation runs.
    Both methods are synchronous and expected not to fail.
    """

    def attach(self, view: Any) -> None:
        """Makes the view live (visible, receiving frames)."""
        ...

    def detach(self, view: Any) -> None:
        """Removes the view and releases whatever the host holds for it."""
        ...
