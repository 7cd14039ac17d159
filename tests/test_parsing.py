"""Tests for amount string -> amount parsing.

Python 3.13+. Uses pytest.
"""

import math

import pytest

from moneythings.parsing import (
    amount_string_to_float_number,
    amount_string_to_integer_with_decimals,
)


class TestAmountStringToIntegerWithDecimals:
    """Amount string -> whole cents."""

    @pytest.mark.parametrize(
        ("amount_string", "expected"),
        [
            ("1 234,56", 123456),
            ("5,5", 550),
            ("5", 500),
            ("0,29", 29),
            ("-5,50", -550),
            ("1 234 567", 123456700),
        ],
    )
    def test_default_separators(self, amount_string: str, expected: int) -> None:
        """Space groups and comma decimal point by default."""
        assert amount_string_to_integer_with_decimals(amount_string) == expected

    def test_extra_fraction_digits_are_rounded(self) -> None:
        """Digits beyond cents are rounded, not rejected."""
        assert amount_string_to_integer_with_decimals("1 234,567") == 123457

    def test_custom_separators(self) -> None:
        """English-style separators."""
        result = amount_string_to_integer_with_decimals(
            "1,234.56", decimal_point=".", thousands_separator=","
        )
        assert result == 123456

    def test_only_first_decimal_point_is_replaced(self) -> None:
        """Everything after a second decimal point is ignored."""
        assert amount_string_to_integer_with_decimals("1,5,7") == 150

    def test_empty_thousands_separator(self) -> None:
        """An empty separator removes nothing."""
        assert amount_string_to_integer_with_decimals("1234,5", thousands_separator="") == 123450

    def test_trailing_garbage_is_ignored(self) -> None:
        """Parsing stops at the first character that is not part of a number."""
        assert amount_string_to_integer_with_decimals("12abc") == 1200

    @pytest.mark.parametrize("amount_string", ["", "abc", "€", "--5"])
    def test_malformed_input_gives_nan(self, amount_string: str) -> None:
        """Malformed input propagates NaN instead of raising or defaulting to 0."""
        assert math.isnan(amount_string_to_integer_with_decimals(amount_string))


class TestAmountStringToFloatNumber:
    """Amount string -> float."""

    def test_parses(self) -> None:
        """15,50 is 15.5."""
        assert amount_string_to_float_number("15,50") == 15.5

    def test_rounds_through_cents(self) -> None:
        """Sub-cent digits are rounded away."""
        assert amount_string_to_float_number("0,125") == 0.13

    def test_nan(self) -> None:
        """Malformed input yields NaN."""
        assert math.isnan(amount_string_to_float_number("not money"))
