"""Hypothesis strategies for moneythings property-based testing.

Usage:
    from tests.strategies import cents, separator_pairs
"""

from .money import (
    SEPARATOR_PAIRS,
    cents,
    decimal_policies,
    non_negative_cents,
    separator_pairs,
)

__all__ = [
    "SEPARATOR_PAIRS",
    "cents",
    "decimal_policies",
    "non_negative_cents",
    "separator_pairs",
]
