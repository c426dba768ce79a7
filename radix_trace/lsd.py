"""LSD radix sort with per-pass trace recording."""

from __future__ import annotations

import logging
import time
from typing import Iterable

from . import constants
from .digits import digit_at, max_digit_count, place_title
from .run_types import Algorithm, SortInput
from .trace_types import LsdStats, RunResult, StepKind, TraceStep, freeze_buckets

logger = logging.getLogger(__name__)


def run_lsd(values: Iterable[int], base: int = constants.DEFAULT_BASE) -> RunResult:
    """Sort *values* least-significant digit first, recording every pass.

    The number of passes is fixed up front from the widest input value. Each
    pass distributes the working order into ``base`` buckets by the digit at
    that position and concatenates them back in digit order; values sharing a
    digit keep their relative order, which is what makes the final order
    correct.

    Args:
        values: Non-negative integers. Not mutated.
        base: Radix, at least 2.

    Returns:
        A RunResult with one ``pass`` step per digit position followed by a
        single ``complete`` step.

    Raises:
        ValueError: If a value is negative or not an int, or *base* < 2.
    """
    request = SortInput(values=list(values), base=base)
    base = request.base
    working = list(request.values)
    passes = max_digit_count(working, base)
    logger.info("run_lsd: %d values, base=%d, passes=%d", len(working), base, passes)

    steps: list[TraceStep] = []
    operations = 0

    start = time.perf_counter()
    for position in range(passes):
        buckets: list[list[int]] = [[] for _ in range(base)]
        for value in working:
            buckets[digit_at(value, position, base)].append(value)
            operations += 1
        redistributed = [value for bucket in buckets for value in bucket]
        steps.append(
            TraceStep(
                label=constants.LSD_PASS_LABEL.format(
                    number=position + 1, place=place_title(position)
                ),
                kind=StepKind.PASS,
                focus_digit=position,
                buckets=freeze_buckets(buckets),
                array_before=tuple(working),
                array_after=tuple(redistributed),
                operations_snapshot=operations,
            )
        )
        logger.debug("LSD pass %d: %s", position + 1, redistributed)
        working = redistributed
    elapsed_ms = (time.perf_counter() - start) * 1000

    steps.append(
        TraceStep(
            label=constants.LSD_COMPLETE_LABEL,
            kind=StepKind.COMPLETE,
            array_after=tuple(working),
            operations_snapshot=operations,
        )
    )

    stats = LsdStats(passes=passes, operations=operations, time_ms=elapsed_ms)
    logger.info(
        "run_lsd finished: %d operations in %.3fms", stats.operations, stats.time_ms
    )
    return RunResult(
        algorithm=Algorithm.LSD,
        base=base,
        sorted=tuple(working),
        steps=tuple(steps),
        stats=stats,
    )
