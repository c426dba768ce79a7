"""Shared helpers for the radix trace test suite."""

from collections import Counter

from radix_trace.trace_types import RunResult, StepKind, TraceStep

EXAMPLE_VALUES: list[int] = [170, 45, 75, 90, 802, 24, 2, 66]
EXAMPLE_SORTED: tuple[int, ...] = (2, 24, 45, 66, 75, 90, 170, 802)


def flatten(buckets: tuple[tuple[int, ...], ...]) -> list[int]:
    """Concatenate buckets in digit order."""
    return [value for bucket in buckets for value in bucket]


def kinds(result: RunResult) -> list[StepKind]:
    """Return the step kinds of *result* in trace order."""
    return [step.kind for step in result.steps]


def assert_operations_monotonic(result: RunResult) -> None:
    """Snapshots never decrease and end at the run's total."""
    snapshots = [step.operations_snapshot for step in result.steps]
    assert snapshots == sorted(snapshots)
    assert snapshots[-1] == result.stats.operations


def assert_buckets_complete(step: TraceStep) -> None:
    """Every value of the step's input landed in exactly one bucket."""
    assert step.buckets is not None
    assert Counter(flatten(step.buckets)) == Counter(step.array_before)
