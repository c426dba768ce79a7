"""MSD radix sort with split / base-case / merge trace recording.

The sort is the usual recursive descent: split a subarray into buckets by the
digit at ``position``, sort every non-empty bucket at ``position - 1``, then
concatenate the results in digit order. Python ints are unbounded, so the
descent is driven by an explicit frame stack instead of the call stack; the
depth never exceeds the input's ``max_digit_count``. Steps come out in the
same order the recursive form would emit them: a node's split, then each
child's steps, then the node's merge.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable

from . import constants
from .digits import digit_at, max_digit_count, place_title
from .run_types import Algorithm, SortInput
from .trace_types import MsdStats, RunResult, StepKind, TraceStep, freeze_buckets

logger = logging.getLogger(__name__)


@dataclass
class _MsdAccumulator:
    """Counters and trace shared by every call of one run."""

    base: int
    operations: int = 0
    recursive_calls: int = 0
    steps: list[TraceStep] = field(default_factory=list)


@dataclass
class _Frame:
    """A split whose buckets are still being sorted."""

    position: int
    depth: int
    buckets: list[list[int]]
    merged: list[int] = field(default_factory=list)
    next_digit: int = 0

    def next_bucket(self) -> list[int] | None:
        """Advance to the next non-empty bucket, or None once all are consumed."""
        while self.next_digit < len(self.buckets):
            bucket = self.buckets[self.next_digit]
            self.next_digit += 1
            if bucket:
                return bucket
        return None


def _enter(
    values: list[int], position: int, depth: int, acc: _MsdAccumulator
) -> _Frame | list[int]:
    """Start one call: emit its base or split step.

    Returns the sorted copy for a base case, otherwise the frame whose
    buckets still need sorting.
    """
    acc.recursive_calls += 1

    if len(values) <= 1 or position < 0:
        acc.steps.append(
            TraceStep(
                label=(
                    constants.MSD_ROOT_BASE_LABEL
                    if depth == 0
                    else constants.MSD_BASE_LABEL.format(depth=depth)
                ),
                kind=StepKind.BASE,
                focus_digit=position if position >= 0 else None,
                array_before=tuple(values),
                array_after=tuple(values),
                operations_snapshot=acc.operations,
                depth=depth if depth > 0 else None,
            )
        )
        return list(values)

    buckets: list[list[int]] = [[] for _ in range(acc.base)]
    for value in values:
        buckets[digit_at(value, position, acc.base)].append(value)
        acc.operations += 1

    acc.steps.append(
        TraceStep(
            label=constants.MSD_SPLIT_LABEL.format(
                depth=depth, place=place_title(position)
            ),
            kind=StepKind.SPLIT,
            focus_digit=position,
            buckets=freeze_buckets(buckets),
            array_before=tuple(values),
            operations_snapshot=acc.operations,
            depth=depth,
        )
    )
    logger.debug(
        "MSD split depth=%d position=%d sizes=%s",
        depth,
        position,
        [len(b) for b in buckets],
    )
    return _Frame(position=position, depth=depth, buckets=buckets)


def _leave(frame: _Frame, acc: _MsdAccumulator) -> list[int]:
    """Finish a call: emit the merge step and hand back the merged order."""
    acc.steps.append(
        TraceStep(
            label=constants.MSD_MERGE_LABEL.format(depth=frame.depth),
            kind=StepKind.MERGE,
            focus_digit=frame.position,
            buckets=tuple(() for _ in frame.buckets),
            array_after=tuple(frame.merged),
            operations_snapshot=acc.operations,
            depth=frame.depth,
        )
    )
    return frame.merged


def _sort_from(values: list[int], position: int, acc: _MsdAccumulator) -> list[int]:
    """Sort *values* starting at digit *position*, recording into *acc*."""
    entered = _enter(values, position, 0, acc)
    if isinstance(entered, list):
        return entered

    stack: list[_Frame] = [entered]
    while True:
        frame = stack[-1]
        bucket = frame.next_bucket()
        if bucket is not None:
            child = _enter(bucket, frame.position - 1, frame.depth + 1, acc)
            if isinstance(child, list):
                frame.merged.extend(child)
            else:
                stack.append(child)
            continue

        stack.pop()
        merged = _leave(frame, acc)
        if not stack:
            return merged
        stack[-1].merged.extend(merged)


def run_msd(values: Iterable[int], base: int = constants.DEFAULT_BASE) -> RunResult:
    """Sort *values* most-significant digit first, recording every call.

    Every call records exactly one ``split`` or ``base`` step, so the number
    of those steps equals ``stats.recursive_calls``. A final ``complete``
    step carries the sorted order.

    Raises:
        ValueError: If a value is negative or not an int, or *base* < 2.
    """
    request = SortInput(values=list(values), base=base)
    working = list(request.values)
    top_position = max_digit_count(working, request.base) - 1
    logger.info(
        "run_msd: %d values, base=%d, top position=%d",
        len(working),
        request.base,
        top_position,
    )

    acc = _MsdAccumulator(base=request.base)
    start = time.perf_counter()
    result = _sort_from(working, top_position, acc)
    elapsed_ms = (time.perf_counter() - start) * 1000

    acc.steps.append(
        TraceStep(
            label=constants.MSD_COMPLETE_LABEL,
            kind=StepKind.COMPLETE,
            array_after=tuple(result),
            operations_snapshot=acc.operations,
        )
    )

    stats = MsdStats(
        recursive_calls=acc.recursive_calls,
        operations=acc.operations,
        time_ms=elapsed_ms,
    )
    logger.info(
        "run_msd finished: %d calls, %d operations in %.3fms",
        stats.recursive_calls,
        stats.operations,
        stats.time_ms,
    )
    return RunResult(
        algorithm=Algorithm.MSD,
        base=request.base,
        sorted=tuple(result),
        steps=tuple(acc.steps),
        stats=stats,
    )
