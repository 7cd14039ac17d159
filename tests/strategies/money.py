"""Hypothesis strategies for amounts, separators and decimal policies.

Amounts stay within +/- 10**12 cents (ten billion major units), well inside
the range where cents survive the float narrowing exactly.

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from moneythings import DecimalPolicy

MAX_CENTS: int = 10**12

# (decimal_point, thousands_separator) pairs seen in real locales, plus one
# without grouping
SEPARATOR_PAIRS: list[tuple[str, str]] = [
    (",", " "),
    (".", ","),
    (",", "."),
    (".", "'"),
    (",", "\u00a0"),
    (",", ""),
]


def cents() -> st.SearchStrategy[int]:
    """Signed amounts in cents."""
    return st.integers(min_value=-MAX_CENTS, max_value=MAX_CENTS)


def non_negative_cents() -> st.SearchStrategy[int]:
    """Amounts in cents accepted by the validators."""
    return st.integers(min_value=0, max_value=MAX_CENTS)


def decimal_policies() -> st.SearchStrategy[DecimalPolicy]:
    """Any decimal policy."""
    return st.sampled_from(list(DecimalPolicy))


@composite
def separator_pairs(draw: st.DrawFn) -> tuple[str, str]:
    """Draw a (decimal_point, thousands_separator) pair."""
    pair = draw(st.sampled_from(SEPARATOR_PAIRS))
    event(f"separators={pair!r}")
    return pair
