"""Errors raised by monetary value objects.

Each error also derives from the builtin exception that callers would catch
for the same kind of problem (`ValueError`, `ZeroDivisionError`), so code that
only knows the builtins keeps working.
"""


class MonetaryError(Exception):
    """Base class for all errors raised by the monetary domain."""


class InvalidAmount(MonetaryError, ValueError):
    """Amount cannot be interpreted as a number with two decimal digits."""


class InvalidOperand(MonetaryError, ValueError):
    """Operand (multiplier, divisor, target count, ratio, rate) has an unsupported type or value."""


class InvalidRoundingMode(MonetaryError, ValueError):
    """Rounding mode is not one of the `RoundingMode` members."""


class CurrencyMismatch(MonetaryError, ValueError):
    """Binary operation was attempted between different currencies."""


class DivisionByZero(MonetaryError, ZeroDivisionError):
    """Divisor is zero (explicit, or implicit via zero ratio total)."""


class ParseError(MonetaryError, ValueError):
    """Text does not match the money grammar."""
