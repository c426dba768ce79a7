"""Tests for digit arithmetic: digit_at, digit_count, max_digit_count, place names."""

import pytest

from radix_trace.digits import (
    digit_at,
    digit_count,
    max_digit_count,
    place_name,
    place_title,
)


class TestDigitAt:
    @pytest.mark.parametrize(
        "value, position, base, expected",
        [
            (802, 0, 10, 2),
            (802, 1, 10, 0),
            (802, 2, 10, 8),
            (802, 3, 10, 0),
            (5, 0, 2, 1),
            (5, 1, 2, 0),
            (5, 2, 2, 1),
            (255, 1, 16, 15),
            (10**20, 20, 10, 1),
        ],
    )
    def test_extracts_positional_digit(self, value, position, base, expected):
        assert digit_at(value, position, base) == expected

    @pytest.mark.parametrize("position", [0, 1, 5, 40])
    def test_zero_has_zero_digits_everywhere(self, position):
        assert digit_at(0, position, 10) == 0

    def test_result_is_within_alphabet(self):
        assert all(0 <= digit_at(v, 1, 7) < 7 for v in range(200))

    @pytest.mark.parametrize("base", [1, 0, -10])
    def test_rejects_base_below_two(self, base):
        with pytest.raises(ValueError, match="base"):
            digit_at(5, 0, base)

    def test_rejects_negative_position(self):
        with pytest.raises(ValueError, match="position"):
            digit_at(5, -1, 10)


class TestDigitCount:
    @pytest.mark.parametrize(
        "value, base, expected",
        [
            (0, 10, 1),
            (9, 10, 1),
            (10, 10, 2),
            (999, 10, 3),
            (1000, 10, 4),
            (1, 2, 1),
            (2, 2, 2),
            (255, 16, 2),
            (256, 16, 3),
        ],
    )
    def test_known_counts(self, value, base, expected):
        assert digit_count(value, base) == expected

    @pytest.mark.parametrize("base", [2, 3, 7, 10, 16, 36])
    def test_boundary_around_base(self, base):
        assert digit_count(0, base) == 1
        assert digit_count(base - 1, base) == 1
        assert digit_count(base, base) == 2

    @pytest.mark.parametrize("base", [2, 3, 10, 1000])
    @pytest.mark.parametrize("exponent", [1, 3, 5, 15, 30])
    def test_exact_powers_are_not_off_by_one(self, base, exponent):
        assert digit_count(base**exponent, base) == exponent + 1
        assert digit_count(base**exponent - 1, base) == exponent

    def test_rejects_base_below_two(self):
        with pytest.raises(ValueError):
            digit_count(10, 1)


class TestMaxDigitCount:
    def test_empty_collection_is_one(self):
        assert max_digit_count([], 10) == 1

    def test_widest_value_wins(self):
        assert max_digit_count([170, 45, 75, 90, 802, 24, 2, 66], 10) == 3

    def test_all_zeros(self):
        assert max_digit_count([0, 0, 0], 10) == 1

    def test_depends_on_base(self):
        assert max_digit_count([8], 2) == 4
        assert max_digit_count([8], 10) == 1

    def test_accepts_generator(self):
        assert max_digit_count((v for v in [1, 22, 333]), 10) == 3


class TestPlaceName:
    @pytest.mark.parametrize(
        "position, expected",
        [
            (0, "ones"),
            (1, "tens"),
            (2, "hundreds"),
            (3, "thousands"),
            (4, "ten-thousands"),
            (5, "hundred-thousands"),
            (6, "10^6"),
            (12, "10^12"),
        ],
    )
    def test_names(self, position, expected):
        assert place_name(position) == expected

    def test_title_capitalises_first_letter_only(self):
        assert place_title(4) == "Ten-thousands"
        assert place_title(7) == "10^7"
