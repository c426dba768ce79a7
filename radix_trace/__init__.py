"""Radix sort tracing engine package."""

from .lsd import run_lsd  # noqa: F401
from .msd import run_msd  # noqa: F401
from .digits import (  # noqa: F401
    digit_at,
    digit_count,
    max_digit_count,
)
from .api import (  # noqa: F401
    run_both,
    run_demo,
    run_selected,
    dump_trace,
    dump_json,
)
