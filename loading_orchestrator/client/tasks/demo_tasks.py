import asyncio
import time
from typing import List, Optional
from loading_orchestrator.core.interfaces import ProgressCallback

class StagedLoadable:
    """
    Demo AsyncLoadable that walks through named stages, reporting after each.

    Stands in for real content loaders (database tables, texture atlases...)
    in the demo entry point. Each stage just sleeps for `stage_delay` seconds.
    """

    def __init__(self, name: str, stages: List[str], stage_delay: float = 0.3):
        self.name = name
        self.stages = stages
        self.stage_delay = stage_delay
        self.is_loaded = False

    async def load_resources(self, on_progress: Optional[ProgressCallback] = None):
        total = len(self.stages)

        for index, stage in enumerate(self.stages):
            if on_progress: on_progress(index / total, f"{self.name}: {stage}")
            await asyncio.sleep(self.stage_delay)

        self.is_loaded = True
        if on_progress: on_progress(1.0, f"{self.name}: done")


def compile_lookup_tables(seconds: float = 1.0):
    """Blocking CPU-style work for the demo's thread-backed step."""
    time.sleep(seconds)
