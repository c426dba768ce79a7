"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

from . import constants

NonNegativeValue = Annotated[StrictInt, Field(ge=0)]
Radix = Annotated[StrictInt, Field(ge=constants.MIN_BASE)]


class Algorithm(str, Enum):
    """Which radix sort variant to run."""

    LSD = constants.ALGORITHM_LSD
    MSD = constants.ALGORITHM_MSD


class SortInput(BaseModel):
    """Validated engine input.

    Rejects negative values, floats, bools, and bases below 2 with a
    pydantic ``ValidationError`` (a ``ValueError`` subclass).
    """

    values: list[NonNegativeValue]
    base: Radix = constants.DEFAULT_BASE


@dataclass(frozen=True)
class DemoConfig:
    """Groups demo-run configuration: dataset shape, radix and playback pace."""

    size: int = constants.DEFAULT_DATASET_SIZE
    max_digits: int = constants.DEFAULT_DATASET_DIGITS
    seed: int | None = None
    base: int = constants.DEFAULT_BASE
    interval_ms: int = constants.DEFAULT_INTERVAL_MS
