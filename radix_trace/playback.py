"""Lockstep stepping through LSD and MSD traces."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterator

from . import constants
from .run_types import Algorithm
from .trace_types import RunResult, TraceStep

logger = logging.getLogger(__name__)

Frame = dict[Algorithm, TraceStep]


class TracePlayer:
    """Shared cursor over one or both traces.

    The cursor runs to the longer trace's last step; a shorter trace keeps
    showing its own last step once it runs out.
    """

    def __init__(self, lsd: RunResult | None = None, msd: RunResult | None = None):
        self._results: dict[Algorithm, RunResult] = {}
        if lsd is not None:
            self._results[Algorithm.LSD] = lsd
        if msd is not None:
            self._results[Algorithm.MSD] = msd
        self.max_steps = max((len(r.steps) for r in self._results.values()), default=0)
        self.step_index = 0

    @property
    def at_end(self) -> bool:
        return self.step_index >= self.max_steps - 1

    def seek(self, index: int) -> int:
        self.step_index = max(0, min(index, self.max_steps - 1))
        return self.step_index

    def step(self) -> int:
        return self.seek(self.step_index + 1)

    def reset(self) -> int:
        self.step_index = 0
        return self.step_index

    def frame_at(self, index: int) -> Frame:
        return {
            algorithm: result.steps[min(index, len(result.steps) - 1)]
            for algorithm, result in self._results.items()
            if result.steps
        }

    def current(self) -> Frame:
        return self.frame_at(self.step_index)

    def frames(self) -> Iterator[tuple[int, Frame]]:
        """Yield the current frame and every later one, advancing the cursor."""
        if not self.max_steps:
            return
        yield self.step_index, self.current()
        while not self.at_end:
            self.step()
            yield self.step_index, self.current()

    def play(
        self,
        on_frame: Callable[[int, Frame], None],
        interval_ms: int = constants.DEFAULT_INTERVAL_MS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Call *on_frame* for each remaining frame, pausing between frames.

        Raises:
            ValueError: If *interval_ms* is negative; no frame is shown.
        """
        if interval_ms < 0:
            raise ValueError(f"interval must be >= 0 ms, got {interval_ms}")
        logger.info(
            "Playing %d steps from %d at %dms",
            self.max_steps,
            self.step_index,
            interval_ms,
        )
        for i, (index, frame) in enumerate(self.frames()):
            if i:
                sleep(interval_ms / 1000)
            on_frame(index, frame)
