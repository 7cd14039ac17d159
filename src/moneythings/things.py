"""MoneyThings: formatting, parsing and validation bound to one configuration.

create_money_things() builds a MoneyConfig once and returns a MoneyThings
whose methods fill unset arguments from it. Every method is a pure function
of its arguments and the frozen configuration.

Example:
    >>> money = create_money_things(["usd", "eur"])
    >>> money.to_money(1500)
    '$15'
    >>> money.to_money(1550, currency="eur", symbol_position="after", symbol_delimiter=" ")
    '15,50 €'
    >>> money.amount_integer_with_decimals_validator.validate_python("1 234,56")
    123456

Thread Safety:
    Thread-safe. Holds only the immutable MoneyConfig and pydantic
    TypeAdapters built at construction time.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypedDict, Unpack

from pydantic import TypeAdapter

from .config import MoneyConfig
from .constants import (
    DEFAULT_AMOUNT_TYPE,
    DEFAULT_CURRENCY_SYMBOL_MAP,
    DEFAULT_DECIMAL_POINT,
    DEFAULT_DECIMAL_POLICY,
    DEFAULT_SYMBOL_DELIMITER,
    DEFAULT_SYMBOL_POSITION,
    DEFAULT_THOUSANDS_SEPARATOR,
)
from .enums import AmountType, DecimalPolicy, SymbolPosition
from .formatting import float_number_to_amount_string, integer_with_decimals_to_amount_string
from .money import ToMoneyOptions, format_money
from .parsing import amount_string_to_float_number, amount_string_to_integer_with_decimals
from .scaling import float_number_to_integer_with_decimals, integer_with_decimals_to_float_number
from .validators import (
    amount_float_number_type,
    amount_integer_with_decimals_type,
    amount_raw_type,
    currency_type,
)

__all__ = ["MoneyThings", "ToMoneyKwargs", "create_money_things"]

logger = logging.getLogger(__name__)


class ToMoneyKwargs(TypedDict, total=False):
    """Keyword options of MoneyThings.to_money() (ToMoneyOptions without amount)."""

    amount_type: AmountType | str
    currency: str
    decimal_point: str
    decimal_policy: DecimalPolicy | str
    thousands_separator: str
    symbol: str
    symbol_position: SymbolPosition | str
    symbol_delimiter: str
    hide_symbol: bool


class MoneyThings:
    """Bundle of money functions and validators sharing one MoneyConfig.

    Formatting:
        to_money(amount, **options), format_money(options)

    Converters:
        integer_with_decimals_to_amount_string, amount_string_to_integer_with_decimals,
        float_number_to_integer_with_decimals, integer_with_decimals_to_float_number,
        float_number_to_amount_string, amount_string_to_float_number

    Validators (pydantic TypeAdapter, use validate_python()):
        currency_validator, amount_raw_validator,
        amount_integer_with_decimals_validator, amount_float_number_validator,
        and the *_limited_validator(minimum, maximum) builders

    Annotated types for pydantic model fields:
        currency_type, amount_raw_type, amount_integer_with_decimals_type,
        amount_float_number_type
    """

    __slots__ = (
        "_config",
        "amount_float_number_type",
        "amount_float_number_validator",
        "amount_integer_with_decimals_type",
        "amount_integer_with_decimals_validator",
        "amount_raw_type",
        "amount_raw_validator",
        "currency_type",
        "currency_validator",
    )

    def __init__(self, config: MoneyConfig) -> None:
        self._config = config
        self.currency_type: Any = currency_type(config)
        self.amount_raw_type: Any = amount_raw_type(config)
        self.amount_integer_with_decimals_type: Any = amount_integer_with_decimals_type(config)
        self.amount_float_number_type: Any = amount_float_number_type(config)

        self.currency_validator: TypeAdapter[str] = TypeAdapter(self.currency_type)
        self.amount_raw_validator: TypeAdapter[str] = TypeAdapter(self.amount_raw_type)
        self.amount_integer_with_decimals_validator: TypeAdapter[int] = TypeAdapter(
            self.amount_integer_with_decimals_type
        )
        self.amount_float_number_validator: TypeAdapter[float] = TypeAdapter(
            self.amount_float_number_type
        )
        logger.debug(
            "MoneyThings created: currencies=%s, default=%s",
            list(config.currencies),
            config.default_currency,
        )

    def __repr__(self) -> str:
        return f"MoneyThings(currencies={list(self.currencies)!r})"

    @property
    def config(self) -> MoneyConfig:
        """Configuration every default is taken from."""
        return self._config

    @property
    def currencies(self) -> tuple[str, ...]:
        """Allowed currency codes, default-candidate first."""
        return self._config.currencies

    @property
    def currency_symbol_map(self) -> Mapping[str, str]:
        """Read-only currency code -> symbol map."""
        return self._config.currency_symbol_map

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_money(self, amount: int | float, /, **options: Unpack[ToMoneyKwargs]) -> str:
        """Format an amount with its currency symbol.

        Covers the bare-amount form (to_money(1500)) and the amount-plus-options
        form (to_money(1500, currency="eur") or to_money(1500, **options)).
        """
        return self.format_money(ToMoneyOptions(amount=amount, **options))

    def format_money(self, options: ToMoneyOptions) -> str:
        """Format an amount described by a single options record."""
        return format_money(options, self._config)

    # ------------------------------------------------------------------
    # Converters
    # ------------------------------------------------------------------

    def integer_with_decimals_to_amount_string(
        self,
        amount: int | float,
        *,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
        decimal_policy: DecimalPolicy | str | None = None,
    ) -> str:
        """Format whole cents as an amount string, without symbol."""
        return integer_with_decimals_to_amount_string(
            amount,
            decimal_point=self._decimal_point(decimal_point),
            thousands_separator=self._thousands_separator(thousands_separator),
            decimal_policy=self._config.default_decimal_policy if decimal_policy is None else decimal_policy,
        )

    def float_number_to_amount_string(
        self,
        amount: float,
        *,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
        decimal_policy: DecimalPolicy | str | None = None,
    ) -> str:
        """Format a float in major units as an amount string, without symbol."""
        return float_number_to_amount_string(
            amount,
            decimal_point=self._decimal_point(decimal_point),
            thousands_separator=self._thousands_separator(thousands_separator),
            decimal_policy=self._config.default_decimal_policy if decimal_policy is None else decimal_policy,
        )

    def amount_string_to_integer_with_decimals(
        self,
        amount_string: str,
        *,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
    ) -> int | float:
        """Parse an amount string into whole cents (NaN if it holds no number)."""
        return amount_string_to_integer_with_decimals(
            amount_string,
            decimal_point=self._decimal_point(decimal_point),
            thousands_separator=self._thousands_separator(thousands_separator),
        )

    def amount_string_to_float_number(
        self,
        amount_string: str,
        *,
        decimal_point: str | None = None,
        thousands_separator: str | None = None,
    ) -> float:
        """Parse an amount string into a float (NaN if it holds no number)."""
        return amount_string_to_float_number(
            amount_string,
            decimal_point=self._decimal_point(decimal_point),
            thousands_separator=self._thousands_separator(thousands_separator),
        )

    @staticmethod
    def float_number_to_integer_with_decimals(number: float) -> int | float:
        """Scale a float to whole cents, rounding half away from zero."""
        return float_number_to_integer_with_decimals(number)

    @staticmethod
    def integer_with_decimals_to_float_number(integer_with_decimals: int) -> float:
        """Scale whole cents to a float in major units."""
        return integer_with_decimals_to_float_number(integer_with_decimals)

    # ------------------------------------------------------------------
    # Range-limited validators
    # ------------------------------------------------------------------

    def amount_raw_limited_validator(self, minimum: int, maximum: int) -> TypeAdapter[str]:
        """Amount-string validator restricted to [minimum, maximum] cents."""
        return TypeAdapter(amount_raw_type(self._config, minimum, maximum))

    def amount_integer_with_decimals_limited_validator(
        self, minimum: int, maximum: int
    ) -> TypeAdapter[int]:
        """Like amount_raw_limited_validator(), validating to whole cents."""
        return TypeAdapter(amount_integer_with_decimals_type(self._config, minimum, maximum))

    def amount_float_number_limited_validator(self, minimum: int, maximum: int) -> TypeAdapter[float]:
        """Like amount_raw_limited_validator(), validating to a float."""
        return TypeAdapter(amount_float_number_type(self._config, minimum, maximum))

    def _decimal_point(self, value: str | None) -> str:
        return self._config.default_decimal_point if value is None else value

    def _thousands_separator(self, value: str | None) -> str:
        return self._config.default_thousands_separator if value is None else value


def create_money_things(
    currencies: Iterable[str],
    *,
    default_amount_type: AmountType | str = DEFAULT_AMOUNT_TYPE,
    default_currency: str | None = None,
    default_decimal_point: str = DEFAULT_DECIMAL_POINT,
    default_decimal_policy: DecimalPolicy | str = DEFAULT_DECIMAL_POLICY,
    default_thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
    default_symbol_position: SymbolPosition | str = DEFAULT_SYMBOL_POSITION,
    default_symbol_delimiter: str = DEFAULT_SYMBOL_DELIMITER,
    currency_symbol_map: Mapping[str, str] = DEFAULT_CURRENCY_SYMBOL_MAP,
) -> MoneyThings:
    """Build a MoneyThings bundle.

    Args:
        currencies: Allowed currency codes; the first is the default currency
        default_amount_type: integerWithDecimals (default) or floatNumber
        default_currency: Overrides the first currency as default
        default_decimal_point: Decimal point (default ",")
        default_decimal_policy: hideIfZero (default), showAlways or hideAlways
        default_thousands_separator: Group separator (default " ")
        default_symbol_position: before (default) or after
        default_symbol_delimiter: Text between symbol and amount (default "")
        currency_symbol_map: Code -> symbol (default: usd, rub, gbp, eur, usdt)

    Returns:
        MoneyThings bound to the resulting configuration

    Raises:
        MoneyConfigError: If the configuration is inconsistent

    Examples:
        >>> money = create_money_things(["eur", "usd"], default_symbol_position="after")
        >>> money.to_money(123456, symbol_delimiter=" ")
        '1 234,56 €'
    """
    config = MoneyConfig(
        currencies=currencies,  # type: ignore[arg-type]
        default_amount_type=default_amount_type,  # type: ignore[arg-type]
        default_currency=default_currency,
        default_decimal_point=default_decimal_point,
        default_decimal_policy=default_decimal_policy,  # type: ignore[arg-type]
        default_thousands_separator=default_thousands_separator,
        default_symbol_position=default_symbol_position,  # type: ignore[arg-type]
        default_symbol_delimiter=default_symbol_delimiter,
        currency_symbol_map=currency_symbol_map,
    )
    return MoneyThings(config)
