"""Shared constants for moneythings.

This module provides centralized configuration defaults used across the
formatting, parsing and validation modules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Currency symbols: Built-in code -> symbol table
- Formatting defaults: Separators, policies, symbol placement
- Canonical form: Babel pattern and locale of the intermediate rendering
- Validation messages: Fixed human-readable validator errors

Python 3.13+.
"""

from types import MappingProxyType

from .enums import AmountType, DecimalPolicy, SymbolPosition

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency symbols
    "DEFAULT_CURRENCY_SYMBOL_MAP",
    # Formatting defaults
    "DEFAULT_AMOUNT_TYPE",
    "DEFAULT_DECIMAL_POINT",
    "DEFAULT_DECIMAL_POLICY",
    "DEFAULT_THOUSANDS_SEPARATOR",
    "DEFAULT_SYMBOL_POSITION",
    "DEFAULT_SYMBOL_DELIMITER",
    # Scaling
    "DECIMALS_FACTOR",
    # Canonical form
    "CANONICAL_LOCALE",
    "CANONICAL_PATTERN",
    "CANONICAL_GROUP_SEPARATOR",
    "CANONICAL_DECIMAL_SEPARATOR",
    "PATTERN_FALLBACK_DECIMAL_POINT",
    # Validation messages
    "AMOUNT_PATTERN_MESSAGE",
    "AMOUNT_RANGE_MESSAGE",
]

# ============================================================================
# CURRENCY SYMBOLS
# ============================================================================

DEFAULT_CURRENCY_SYMBOL_MAP: MappingProxyType[str, str] = MappingProxyType({
    "usd": "$",
    "rub": "\u20bd",  # ₽
    "gbp": "\u00a3",  # £
    "eur": "\u20ac",  # €
    "usdt": "\u20ae",  # ₮
})

# ============================================================================
# FORMATTING DEFAULTS
# ============================================================================

DEFAULT_AMOUNT_TYPE: AmountType = AmountType.INTEGER_WITH_DECIMALS
DEFAULT_DECIMAL_POINT: str = ","
DEFAULT_DECIMAL_POLICY: DecimalPolicy = DecimalPolicy.HIDE_IF_ZERO
DEFAULT_THOUSANDS_SEPARATOR: str = " "
DEFAULT_SYMBOL_POSITION: SymbolPosition = SymbolPosition.BEFORE
DEFAULT_SYMBOL_DELIMITER: str = ""

# ============================================================================
# SCALING
# ============================================================================

# Integer-with-decimals amounts are major units x 100 (two decimal places).
DECIMALS_FACTOR: int = 100

# ============================================================================
# CANONICAL FORM
# ============================================================================
#
# Amounts are first rendered by Babel into a fixed "1.234,56" form and then
# reassembled with the caller's separators. German CLDR data ships with
# Babel, so the canonical form never depends on the host's locale setup.

CANONICAL_LOCALE: str = "de_DE"
CANONICAL_PATTERN: str = "#,##0.00"
CANONICAL_GROUP_SEPARATOR: str = "."
CANONICAL_DECIMAL_SEPARATOR: str = ","

# Decimal point used to build the validator regex when the configured one is
# not exactly one character long.
PATTERN_FALLBACK_DECIMAL_POINT: str = "."

# ============================================================================
# VALIDATION MESSAGES
# ============================================================================

AMOUNT_PATTERN_MESSAGE: str = "Should be a positive number with optional two decimal places"

# PydanticCustomError template, filled with showAlways renderings of the bounds.
AMOUNT_RANGE_MESSAGE: str = "Should be between {minimum} and {maximum}"
