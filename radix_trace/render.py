"""Plain-text rendering of sort traces.

Works from TraceStep fields alone, so LSD and MSD traces render the same way.
"""

from __future__ import annotations

import math
from typing import Sequence

from . import constants
from .digits import digit_at, digit_count, max_digit_count
from .trace_types import RunResult, StepKind, TraceStep


def format_number(
    value: int, focus_digit: int | None, width: int, base: int = constants.DEFAULT_BASE
) -> str:
    """Zero-pad *value* to *width* digits and bracket the digit at *focus_digit*.

    Bases beyond ``0-9a-z`` write each digit as a zero-padded decimal group,
    separated by dots.

    >>> format_number(45, 1, 3)
    '0[4]5'
    >>> format_number(45, 0, 2, 40)
    '01.[05]'
    """
    width = max(width, digit_count(value, base))
    grouped = base > len(constants.DIGIT_ALPHABET)
    group_width = len(str(base - 1))
    chars = []
    for position in range(width - 1, -1, -1):
        digit = digit_at(value, position, base)
        if grouped:
            char = str(digit).zfill(group_width)
        else:
            char = constants.DIGIT_ALPHABET[digit]
        chars.append(f"[{char}]" if position == focus_digit else char)
    return ("." if grouped else "").join(chars)


def format_time(ms: float) -> str:
    if not math.isfinite(ms):
        return "--"
    if ms < 1:
        return f"{ms * 1000:.0f} us"
    if ms < 1000:
        return f"{ms:.2f} ms"
    return f"{ms / 1000:.2f} s"


def _format_values(
    values: Sequence[int], focus_digit: int | None, width: int, base: int
) -> str:
    return " ".join(format_number(v, focus_digit, width, base) for v in values)


def _digit_symbol(digit: int) -> str:
    if digit < len(constants.DIGIT_ALPHABET):
        return constants.DIGIT_ALPHABET[digit]
    return str(digit)


def _empty_buckets_text(step: TraceStep) -> str:
    if step.kind == StepKind.BASE:
        return constants.BASE_CASE_TEXT
    if step.kind == StepKind.COMPLETE:
        return constants.COMPLETE_TEXT
    return constants.NO_BUCKETS_TEXT


def render_step(result: RunResult, index: int, width: int | None = None) -> str:
    """Render the step at *index* (clamped into the trace) as a text block."""
    if not result.steps:
        return constants.EMPTY_TRACE_TEXT
    if width is None:
        width = max_digit_count(result.sorted, result.base)

    index = max(0, min(index, len(result.steps) - 1))
    step = result.steps[index]
    lines = [f"Step {index + 1} of {len(result.steps)}: {step.label}"]

    array = step.display_array(result.sorted)
    if array:
        lines.append(
            "  array:   " + _format_values(array, step.focus_digit, width, result.base)
        )
    else:
        lines.append("  array:   " + constants.EMPTY_ARRAY_TEXT)

    if step.buckets is None:
        lines.append("  buckets: " + _empty_buckets_text(step))
        return "\n".join(lines)

    lines.append("  buckets:")
    for digit, bucket in enumerate(step.buckets):
        contents = (
            _format_values(bucket, step.focus_digit, width, result.base)
            if bucket
            else constants.EMPTY_BUCKET_TEXT
        )
        lines.append(f"   {_digit_symbol(digit):>2} | {contents}")
    return "\n".join(lines)


def render_trace(result: RunResult, width: int | None = None) -> str:
    """Render every step of *result*, followed by its statistics."""
    if width is None:
        width = max_digit_count(result.sorted, result.base)
    blocks = [render_step(result, i, width) for i in range(len(result.steps))]
    blocks.append(
        f"{result.algorithm.value.upper()} sorted {len(result.sorted)} values"
        f" in {format_time(result.stats.time_ms)}"
    )
    blocks.append(result.stats.report())
    return "\n\n".join(blocks)
