"""Exception hierarchy for moneythings.

Formatting and conversion functions never raise for malformed amount
strings (NaN propagates instead); user input is rejected by the pydantic
validators in moneythings.validators. The exceptions below cover invalid
factory configuration only.

Python 3.13+.
"""

__all__ = ["MoneyConfigError", "MoneyThingsError"]


class MoneyThingsError(Exception):
    """Base exception for all moneythings errors."""


class MoneyConfigError(MoneyThingsError, ValueError):
    """Invalid factory configuration.

    Raised while building a MoneyConfig, for example when the currency list
    is empty or the default currency is not one of the allowed currencies.

    Attributes:
        field_name: Name of the offending configuration field
    """

    def __init__(self, message: str, *, field_name: str = "") -> None:
        """Initialize MoneyConfigError.

        Args:
            message: Human-readable description of the problem
            field_name: Configuration field that failed validation
        """
        super().__init__(message)
        self.field_name = field_name
