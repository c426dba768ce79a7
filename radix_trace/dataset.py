"""Seeded dataset generation for demo runs."""

from __future__ import annotations

import logging
import time
from typing import Iterator

from . import constants

logger = logging.getLogger(__name__)


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def lcg(seed: int) -> Iterator[float]:
    """Park-Miller minimal standard generator yielding floats in [0, 1)."""
    state = seed % constants.LCG_MODULUS
    if state <= 0:
        state += constants.LCG_MODULUS - 1
    while True:
        state = (state * constants.LCG_MULTIPLIER) % constants.LCG_MODULUS
        yield (state - 1) / (constants.LCG_MODULUS - 1)


def generate_dataset(size: int, max_digits: int, seed: int | None = None) -> list[int]:
    """Generate *size* non-negative integers with up to *max_digits* decimal digits.

    Each item first draws its own digit count, so short and long values are
    mixed evenly instead of being dominated by the widest range. The same
    seed always produces the same dataset.

    Args:
        size: Number of items, clamped to [2, 100].
        max_digits: Widest digit count, clamped to [1, 8].
        seed: Generator seed; the current time in milliseconds when None.
    """
    size = clamp(size, constants.DATASET_MIN_SIZE, constants.DATASET_MAX_SIZE)
    max_digits = clamp(
        max_digits, constants.DATASET_MIN_DIGITS, constants.DATASET_MAX_DIGITS
    )
    if seed is None:
        seed = int(time.time() * 1000)
    logger.info(
        "generate_dataset: size=%d, max_digits=%d, seed=%d", size, max_digits, seed
    )

    rng = lcg(seed)
    items: list[int] = []
    for _ in range(size):
        digits = clamp(int(next(rng) * max_digits) + 1, 1, max_digits)
        high = 10**digits - 1
        low = 0 if digits == 1 else 10 ** (digits - 1)
        items.append(int(next(rng) * (high - low + 1)) + low)
    return items
