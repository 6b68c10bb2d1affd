import logging
from typing import List, Optional, Sequence, Tuple

from loading_orchestrator.core.interfaces import ProgressCallback
from loading_orchestrator.core.step import LoadingStep

logger = logging.getLogger(__name__)


def step_intervals(steps: Sequence[LoadingStep]) -> List[Tuple[float, float]]:
    """
    Splits [0, 1] into one sub-interval per step, proportional to weight.

    Intervals are assigned in list order and abut each other: step i spans
    [sum(w[:i]) / W, sum(w[:i+1]) / W]. An empty list yields no intervals.
    """
    total_weight = sum(step.weight for step in steps)
    intervals = []
    current = 0.0

    for step in steps:
        step_end = current + step.weight / total_weight
        intervals.append((current, step_end))
        current = step_end

    return intervals


def _rescaled(on_progress: ProgressCallback, start: float, end: float) -> ProgressCallback:
    """Maps a step-local fraction into the step's slice of the overall range."""
    span = end - start

    def report(fraction: float, status):
        on_progress(start + span * fraction, status)

    return report


async def execute_steps(steps: Sequence[LoadingStep], on_progress: Optional[ProgressCallback] = None) -> None:
    """
    Executes loading steps one after another with aggregate progress tracking.

    Each step's local 0.0-1.0 progress is rescaled linearly into its weighted
    slice of the overall 0.0-1.0 range before reaching `on_progress`. Reports
    are neither clamped nor reordered.

    The first step that raises stops the sequence; the error propagates
    unchanged and later steps never start.

    Args:
        steps: Steps to execute, in order.
        on_progress: Callback(overall fraction 0.0-1.0, status).
    """
    steps = list(steps)
    if not steps:
        return

    for index, (step, (step_start, step_end)) in enumerate(zip(steps, step_intervals(steps))):
        logger.debug("Step %d/%d started (%.3f-%.3f)", index + 1, len(steps), step_start, step_end)

        callback = _rescaled(on_progress, step_start, step_end) if on_progress else None
        await step.execute(callback)

        logger.debug("Step %d/%d finished", index + 1, len(steps))
