"""Composable API functions for radix sort tracing.

Each function corresponds to a CLI workflow (default text dump, --json,
demo mode) but is callable programmatically without argparse.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from . import constants
from .dataset import generate_dataset
from .lsd import run_lsd
from .msd import run_msd
from .render import render_trace
from .run_types import Algorithm, DemoConfig
from .trace_types import RunResult

logger = logging.getLogger(__name__)

_ENGINES = {
    Algorithm.LSD: run_lsd,
    Algorithm.MSD: run_msd,
}


def run_algorithm(
    algorithm: Algorithm, values: Iterable[int], base: int = constants.DEFAULT_BASE
) -> RunResult:
    """Run the engine for *algorithm* on *values*."""
    return _ENGINES[Algorithm(algorithm)](values, base)


def run_both(
    values: Iterable[int], base: int = constants.DEFAULT_BASE
) -> dict[Algorithm, RunResult]:
    """Run LSD and MSD independently over the same input.

    Args:
        values: Non-negative integers.
        base: Radix, at least 2.

    Returns:
        A dict mapping each Algorithm to its RunResult.
    """
    items = list(values)
    logger.info("run_both: %d values, base=%d", len(items), base)
    return {algorithm: engine(items, base) for algorithm, engine in _ENGINES.items()}


def run_selected(
    values: Iterable[int],
    algorithm: Algorithm | None = None,
    base: int = constants.DEFAULT_BASE,
) -> dict[Algorithm, RunResult]:
    """Run one engine, or both when *algorithm* is None."""
    if algorithm is None:
        return run_both(values, base)
    chosen = Algorithm(algorithm)
    return {chosen: run_algorithm(chosen, values, base)}


def run_demo(
    config: DemoConfig = DemoConfig(), algorithm: Algorithm | None = None
) -> dict[Algorithm, RunResult]:
    """Generate a dataset from *config* and run the selected engine(s) over it.

    Each result's ``initial_order`` holds the generated dataset.
    """
    dataset = generate_dataset(config.size, config.max_digits, config.seed)
    return run_selected(dataset, algorithm, config.base)


def dump_trace(result: RunResult) -> str:
    """Return the full text rendering of a run's steps and statistics."""
    return render_trace(result)


def dump_json(result: RunResult) -> str:
    """Return a run as indented JSON."""
    return json.dumps(result.to_dict(), indent=2)
