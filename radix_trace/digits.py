"""Digit arithmetic shared by the LSD and MSD engines."""

from __future__ import annotations

from typing import Iterable

from . import constants


def _check_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int) or base < constants.MIN_BASE:
        raise ValueError(f"base must be an integer >= {constants.MIN_BASE}, got {base!r}")


def digit_at(value: int, position: int, base: int) -> int:
    """Return the digit of *value* at *position* (0 = least significant) in *base*.

    Routing every value into its bucket goes through this function, so it
    defines what "sorted" means for both engines.

    Raises:
        ValueError: If *base* is below 2 or *position* is negative.
    """
    _check_base(base)
    if position < 0:
        raise ValueError(f"digit position must be >= 0, got {position}")
    return (abs(value) // base**position) % base


def digit_count(value: int, base: int) -> int:
    """Number of base-*base* digits needed to write *value*; 1 for zero."""
    _check_base(base)
    remaining = abs(value)
    count = 1
    while remaining >= base:
        remaining //= base
        count += 1
    return count


def max_digit_count(values: Iterable[int], base: int) -> int:
    """Widest digit count over *values*, or 1 for an empty collection."""
    _check_base(base)
    return max((digit_count(v, base) for v in values), default=1)


def place_name(position: int) -> str:
    """Human-readable name of a digit position ("ones", "tens", ..., "10^6")."""
    if 0 <= position < len(constants.PLACE_NAMES):
        return constants.PLACE_NAMES[position]
    return constants.GENERIC_PLACE_TEMPLATE.format(position=position)


def place_title(position: int) -> str:
    """``place_name`` with its first letter upper-cased, for step labels."""
    name = place_name(position)
    return name[:1].upper() + name[1:]
