"""Tests for plain-text step rendering."""

import math

import pytest

from radix_trace import constants
from radix_trace.lsd import run_lsd
from radix_trace.msd import run_msd
from radix_trace.render import format_number, format_time, render_step, render_trace
from radix_trace.run_types import Algorithm
from radix_trace.trace_types import RunResult

from tests.unit.conftest import EXAMPLE_VALUES


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, focus, width, base, expected",
        [
            (45, 1, 3, 10, "0[4]5"),
            (45, None, 3, 10, "045"),
            (45, 0, 2, 10, "4[5]"),
            (1234, 0, 2, 10, "123[4]"),
            (0, 0, 1, 10, "[0]"),
            (5, 0, 4, 2, "010[1]"),
            (255, 1, 2, 16, "[f]f"),
            (7, 3, 2, 10, "07"),
        ],
    )
    def test_formats(self, value, focus, width, base, expected):
        assert format_number(value, focus, width, base) == expected

    @pytest.mark.parametrize(
        "value, focus, width, base, expected",
        [
            (45, 0, 2, 40, "01.[05]"),
            (45, 1, 3, 40, "00.[01].05"),
            (45, None, 1, 40, "01.05"),
            (12, 0, 1, 100, "[12]"),
            (1005, 1, 2, 1000, "[001].005"),
        ],
    )
    def test_large_bases_keep_focus_in_decimal_groups(
        self, value, focus, width, base, expected
    ):
        assert format_number(value, focus, width, base) == expected


class TestFormatTime:
    @pytest.mark.parametrize(
        "ms, expected",
        [
            (0.5, "500 us"),
            (0.0, "0 us"),
            (12.5, "12.50 ms"),
            (2500.0, "2.50 s"),
            (math.inf, "--"),
            (math.nan, "--"),
        ],
    )
    def test_formats(self, ms, expected):
        assert format_time(ms) == expected


class TestRenderStep:
    def test_pass_step(self):
        text = render_step(run_lsd(EXAMPLE_VALUES, 10), 0)
        lines = text.split("\n")
        assert lines[0] == "Step 1 of 4: Pass 1: Ones place"
        assert "    0 | 17[0] 09[0]" in lines
        assert "    1 | --" in lines
        assert "    5 | 04[5] 07[5]" in lines

    def test_complete_step_without_buckets(self):
        text = render_step(run_lsd(EXAMPLE_VALUES, 10), 3)
        assert "Sorted (LSD complete)" in text
        assert constants.COMPLETE_TEXT in text
        assert "002 024 045" in text

    def test_base_step(self):
        text = render_step(run_msd([7], 10), 0)
        assert "Step 1 of 2: Base case" in text
        assert constants.BASE_CASE_TEXT in text

    def test_split_step_shows_array_before(self):
        text = render_step(run_msd(EXAMPLE_VALUES, 10), 0)
        assert "[1]70 [0]45" in text

    def test_index_is_clamped(self):
        result = run_lsd(EXAMPLE_VALUES, 10)
        assert render_step(result, 99) == render_step(result, 3)
        assert render_step(result, -5) == render_step(result, 0)

    def test_empty_trace(self):
        assert render_step(RunResult(algorithm=Algorithm.LSD, base=10), 0) == (
            constants.EMPTY_TRACE_TEXT
        )

    def test_empty_array(self):
        text = render_step(run_lsd([], 10), 0)
        assert constants.EMPTY_ARRAY_TEXT in text


class TestRenderTrace:
    def test_contains_every_step_and_stats(self):
        result = run_msd(EXAMPLE_VALUES, 10)
        text = render_trace(result)
        for step in result.steps:
            assert step.label in text
        assert "═══ MSD Statistics ═══" in text
        assert "MSD sorted 8 values in" in text
