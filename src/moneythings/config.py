"""Immutable configuration shared by every function of a MoneyThings bundle.

MoneyConfig is built once by create_money_things() and never mutated.
Per-call overrides are plain keyword arguments resolved against it, so
one call can never leak its overrides into the next.

Thread Safety:
    Frozen dataclass with a read-only symbol map. Safe to share.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

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
from .errors import MoneyConfigError

__all__ = ["MoneyConfig"]


@dataclass(frozen=True, slots=True)
class MoneyConfig:
    """Formatting defaults and allowed currencies.

    Attributes:
        currencies: Allowed currency codes, first one is the implicit default
        default_amount_type: Representation of amounts passed to to_money()
        default_currency: Currency used when a call names none (None -> first code)
        default_decimal_point: Decimal point of amount strings
        default_decimal_policy: When to show the two-digit fraction
        default_thousands_separator: Separator between groups of three digits
        default_symbol_position: Symbol before or after the amount
        default_symbol_delimiter: Text between symbol and amount
        currency_symbol_map: Currency code -> display symbol

    Raises:
        MoneyConfigError: On construction, if any value is inconsistent

    Example:
        >>> config = MoneyConfig(currencies=("usd", "eur"))
        >>> config.default_currency
        'usd'
        >>> config.replace(default_decimal_point=".").default_decimal_point
        '.'
    """

    currencies: tuple[str, ...]
    default_amount_type: AmountType = DEFAULT_AMOUNT_TYPE
    default_currency: str | None = None
    default_decimal_point: str = DEFAULT_DECIMAL_POINT
    default_decimal_policy: DecimalPolicy = DEFAULT_DECIMAL_POLICY
    default_thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR
    default_symbol_position: SymbolPosition = DEFAULT_SYMBOL_POSITION
    default_symbol_delimiter: str = DEFAULT_SYMBOL_DELIMITER
    currency_symbol_map: Mapping[str, str] = field(default=DEFAULT_CURRENCY_SYMBOL_MAP)

    def __post_init__(self) -> None:
        # Frozen dataclass: normalized values go through object.__setattr__
        currencies = _normalize_currencies(self.currencies)
        object.__setattr__(self, "currencies", currencies)

        default_currency = currencies[0] if self.default_currency is None else self.default_currency
        if default_currency not in currencies:
            msg = (
                f"Default currency {default_currency!r} is not one of the "
                f"allowed currencies {list(currencies)!r}"
            )
            raise MoneyConfigError(msg, field_name="default_currency")
        object.__setattr__(self, "default_currency", default_currency)

        object.__setattr__(
            self, "default_amount_type", _coerce(AmountType, self.default_amount_type, "default_amount_type")
        )
        object.__setattr__(
            self,
            "default_decimal_policy",
            _coerce(DecimalPolicy, self.default_decimal_policy, "default_decimal_policy"),
        )
        object.__setattr__(
            self,
            "default_symbol_position",
            _coerce(SymbolPosition, self.default_symbol_position, "default_symbol_position"),
        )

        for name in ("default_decimal_point", "default_thousands_separator", "default_symbol_delimiter"):
            if not isinstance(getattr(self, name), str):
                msg = f"{name} must be a string, got {type(getattr(self, name)).__name__}"
                raise MoneyConfigError(msg, field_name=name)
        if not self.default_decimal_point:
            raise MoneyConfigError("Decimal point must not be empty", field_name="default_decimal_point")
        if not self.default_decimal_point.strip():
            msg = f"Decimal point must not be whitespace only, got {self.default_decimal_point!r}"
            raise MoneyConfigError(msg, field_name="default_decimal_point")
        if self.default_decimal_point == self.default_thousands_separator:
            msg = f"Decimal point and thousands separator are both {self.default_decimal_point!r}"
            raise MoneyConfigError(msg, field_name="default_thousands_separator")

        object.__setattr__(
            self, "currency_symbol_map", MappingProxyType(dict(self.currency_symbol_map))
        )

    @property
    def resolved_default_currency(self) -> str:
        """Default currency as a plain string (never None after construction)."""
        # __post_init__ always fills default_currency
        return self.default_currency or self.currencies[0]

    def symbol_for(self, currency: str) -> str | None:
        """Return the display symbol of a currency, or None if it has none."""
        return self.currency_symbol_map.get(currency)

    def replace(self, **changes: object) -> MoneyConfig:
        """Return a validated copy with some fields changed."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


def _normalize_currencies(currencies: Iterable[str]) -> tuple[str, ...]:
    if isinstance(currencies, str):
        # A bare string would otherwise be split into single-letter codes
        currencies = (currencies,)
    normalized = tuple(currencies)
    if not normalized:
        raise MoneyConfigError("At least one currency is required", field_name="currencies")
    for code in normalized:
        if not isinstance(code, str) or not code:
            msg = f"Currency codes must be non-empty strings, got {code!r}"
            raise MoneyConfigError(msg, field_name="currencies")
    if len(set(normalized)) != len(normalized):
        msg = f"Duplicate currency codes in {list(normalized)!r}"
        raise MoneyConfigError(msg, field_name="currencies")
    return normalized


def _coerce[E: (AmountType, DecimalPolicy, SymbolPosition)](
    enum_class: type[E], value: object, field_name: str
) -> E:
    try:
        return enum_class(value)
    except ValueError as e:
        allowed = ", ".join(repr(member.value) for member in enum_class)
        msg = f"{field_name} must be one of {allowed}, got {value!r}"
        raise MoneyConfigError(msg, field_name=field_name) from e
