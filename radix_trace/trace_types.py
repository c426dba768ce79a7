"""Trace data types for step-by-step sort replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from .run_types import Algorithm


class StepKind(str, Enum):
    PASS = "pass"
    SPLIT = "split"
    MERGE = "merge"
    BASE = "base"
    COMPLETE = "complete"


def freeze_buckets(buckets: Sequence[Sequence[int]]) -> tuple[tuple[int, ...], ...]:
    """Copy working buckets into an immutable snapshot."""
    return tuple(tuple(bucket) for bucket in buckets)


def _optional_list(values: tuple[int, ...] | None) -> list[int] | None:
    return list(values) if values is not None else None


@dataclass(frozen=True)
class TraceStep:
    """A single event in a sort trace.

    Buckets and arrays are tuples copied out of the engine's working buffers,
    so nothing the engine does afterwards can change a recorded step.
    ``buckets`` is indexed by digit value; it is ``None`` for base-case and
    completion steps, and holds empty placeholders for merge steps.
    """

    label: str
    kind: StepKind
    operations_snapshot: int
    focus_digit: int | None = None
    buckets: tuple[tuple[int, ...], ...] | None = None
    array_before: tuple[int, ...] | None = None
    array_after: tuple[int, ...] | None = None
    depth: int | None = None

    def display_array(self, fallback: Sequence[int] = ()) -> tuple[int, ...]:
        """The array a renderer should show: after, else before, else *fallback*."""
        if self.array_after is not None:
            return self.array_after
        if self.array_before is not None:
            return self.array_before
        return tuple(fallback)

    def to_dict(self) -> dict:
        d: dict[str, Any] = {
            "label": self.label,
            "kind": self.kind.value,
            "focus_digit": self.focus_digit,
            "buckets": (
                [list(b) for b in self.buckets] if self.buckets is not None else None
            ),
            "array_before": _optional_list(self.array_before),
            "array_after": _optional_list(self.array_after),
            "operations_snapshot": self.operations_snapshot,
        }
        if self.depth is not None:
            d["depth"] = self.depth
        return d


@dataclass(frozen=True)
class SortStats:
    """Metrics common to both engines."""

    operations: int = 0
    time_ms: float = 0.0

    def to_dict(self) -> dict:
        return {"operations": self.operations, "time_ms": self.time_ms}

    def _report_lines(self) -> list[str]:
        return [
            f"  {'Operations':<16} {self.operations:>12,}",
            f"  {'Time':<16} {self.time_ms:>10.3f}ms",
        ]

    def report(self) -> str:
        return "\n".join(self._report_lines())


@dataclass(frozen=True)
class LsdStats(SortStats):
    passes: int = 0

    def to_dict(self) -> dict:
        return {"passes": self.passes, **super().to_dict()}

    def report(self) -> str:
        lines = ["═══ LSD Statistics ═══", f"  {'Passes':<16} {self.passes:>12}"]
        return "\n".join(lines + self._report_lines())


@dataclass(frozen=True)
class MsdStats(SortStats):
    recursive_calls: int = 0

    def to_dict(self) -> dict:
        return {"recursive_calls": self.recursive_calls, **super().to_dict()}

    def report(self) -> str:
        lines = [
            "═══ MSD Statistics ═══",
            f"  {'Recursive calls':<16} {self.recursive_calls:>12}",
        ]
        return "\n".join(lines + self._report_lines())


@dataclass(frozen=True)
class RunResult:
    """Complete outcome of one engine invocation.

    ``sorted`` is a copy of the final order, ``steps`` are in execution order.
    """

    algorithm: Algorithm
    base: int
    sorted: tuple[int, ...] = ()
    steps: tuple[TraceStep, ...] = ()
    stats: SortStats = field(default_factory=SortStats)

    @property
    def initial_order(self) -> tuple[int, ...]:
        """The input order, as seen by the first recorded step."""
        if not self.steps:
            return ()
        return self.steps[0].array_before or ()

    def steps_of(self, kind: StepKind) -> list[TraceStep]:
        return [s for s in self.steps if s.kind == kind]

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm.value,
            "base": self.base,
            "sorted": list(self.sorted),
            "steps": [s.to_dict() for s in self.steps],
            "stats": self.stats.to_dict(),
        }
