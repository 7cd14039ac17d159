"""moneythings - money amounts as integer cents, display strings and validators.

Converts between integer-with-decimals amounts (cents), floats and
human-readable amount strings with a configurable decimal point, thousands
separator, decimal policy and currency symbol placement. Validates
user-entered amount strings with pydantic.

Public API:
    create_money_things - Build a MoneyThings bundle from configuration defaults
    MoneyThings - Formatting, conversion and validation bound to one MoneyConfig
    MoneyConfig - Immutable configuration value object
    ToMoneyOptions - Options record for MoneyThings.format_money()

Enums:
    AmountType, DecimalPolicy, SymbolPosition

Exceptions:
    MoneyThingsError - Base exception class
    MoneyConfigError - Invalid factory configuration

Submodules:
    moneythings.scaling - Integer/float scaling and rounding primitives
    moneythings.formatting - Amount -> amount string
    moneythings.parsing - Amount string -> amount
    moneythings.money - Currency-symbol decoration (format_money)
    moneythings.validators - pydantic Annotated validator types

Example:
    >>> from moneythings import create_money_things
    >>> money = create_money_things(["usd", "eur"])
    >>> money.to_money(123456700)
    '$1 234 567'
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import MoneyConfig
from .constants import DEFAULT_CURRENCY_SYMBOL_MAP
from .enums import AmountType, DecimalPolicy, SymbolPosition
from .errors import MoneyConfigError, MoneyThingsError
from .formatting import float_number_to_amount_string, integer_with_decimals_to_amount_string
from .money import ToMoneyOptions, format_money
from .parsing import amount_string_to_float_number, amount_string_to_integer_with_decimals
from .scaling import (
    float_number_to_integer_with_decimals,
    integer_with_decimals_to_float_number,
    round_half_away_from_zero,
)
from .things import MoneyThings, create_money_things

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("moneythings")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_CURRENCY_SYMBOL_MAP",
    "AmountType",
    "DecimalPolicy",
    "MoneyConfig",
    "MoneyConfigError",
    "MoneyThings",
    "MoneyThingsError",
    "SymbolPosition",
    "ToMoneyOptions",
    "__version__",
    "amount_string_to_float_number",
    "amount_string_to_integer_with_decimals",
    "create_money_things",
    "float_number_to_amount_string",
    "float_number_to_integer_with_decimals",
    "format_money",
    "integer_with_decimals_to_amount_string",
    "integer_with_decimals_to_float_number",
    "round_half_away_from_zero",
]
