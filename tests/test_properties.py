"""Property-based tests for formatting/parsing round trips.

Python 3.13+. Uses Hypothesis.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from moneythings import (
    DecimalPolicy,
    MoneyThings,
    amount_string_to_integer_with_decimals,
    create_money_things,
    float_number_to_integer_with_decimals,
    integer_with_decimals_to_amount_string,
    integer_with_decimals_to_float_number,
)
from tests.strategies import cents, decimal_policies, non_negative_cents, separator_pairs

_MONEY: MoneyThings = create_money_things(["usd", "eur"])


class TestRoundTrips:
    """Formatting and parsing are inverse on whole cents."""

    @given(amount=cents(), separators=separator_pairs())
    def test_show_always_round_trip(self, amount: int, separators: tuple[str, str]) -> None:
        """showAlways strings parse back to the same cents."""
        decimal_point, thousands_separator = separators
        amount_string = integer_with_decimals_to_amount_string(
            amount,
            decimal_point=decimal_point,
            thousands_separator=thousands_separator,
            decimal_policy=DecimalPolicy.SHOW_ALWAYS,
        )
        parsed = amount_string_to_integer_with_decimals(
            amount_string, decimal_point=decimal_point, thousands_separator=thousands_separator
        )
        assert parsed == amount

    @given(amount=st.integers(min_value=-(10**13), max_value=10**13))
    def test_scaling_round_trip(self, amount: int) -> None:
        """Cents -> float -> cents is the identity."""
        assert float_number_to_integer_with_decimals(integer_with_decimals_to_float_number(amount)) == amount

    @given(amount=cents(), policy=decimal_policies())
    def test_formatting_is_idempotent(self, amount: int, policy: DecimalPolicy) -> None:
        """Formatting a re-parsed amount gives the same string again."""
        first = integer_with_decimals_to_amount_string(amount, decimal_policy=policy)
        reparsed = amount_string_to_integer_with_decimals(first)
        assert integer_with_decimals_to_amount_string(reparsed, decimal_policy=policy) == first


class TestValidatorProperties:
    """Formatted non-negative amounts are valid input."""

    @given(amount=non_negative_cents(), policy=decimal_policies())
    def test_formatted_amounts_validate(self, amount: int, policy: DecimalPolicy) -> None:
        """Every default-formatted amount passes its own validator."""
        amount_string = _MONEY.integer_with_decimals_to_amount_string(amount, decimal_policy=policy)
        parsed = _MONEY.amount_integer_with_decimals_validator.validate_python(amount_string)
        assert parsed == _MONEY.amount_string_to_integer_with_decimals(amount_string)

    @given(amount=non_negative_cents())
    def test_show_always_validates_to_amount(self, amount: int) -> None:
        """showAlways strings validate back to the original cents."""
        amount_string = _MONEY.integer_with_decimals_to_amount_string(amount, decimal_policy="showAlways")
        assert _MONEY.amount_integer_with_decimals_validator.validate_python(amount_string) == amount

    @given(digits=st.text(alphabet="0123456789", min_size=3, max_size=6))
    def test_three_or_more_fraction_digits_rejected(self, digits: str) -> None:
        """At most two fractional digits are accepted."""
        with pytest.raises(ValidationError):
            _MONEY.amount_raw_validator.validate_python(f"12,{digits}")
