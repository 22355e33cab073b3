from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import TypeAlias

from suite_money.domain.monetary.errors import InvalidOperand

# Use where an exact factor is expected (multiplier, ratio, conversion rate). Floats are not accepted.
Operand: TypeAlias = int | Decimal

# Use where a value is parsed into an amount. Strings are converted with `Decimal(str)`.
DecimalLike: TypeAlias = Decimal | int | str


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal`.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is a `bool`, `float` or other unsupported type.
        InvalidOperation: If $value is a string that is not a number.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass, but True/False are never amounts
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise TypeError(f"$value must be Decimal, int or str, but provided value is: {value!r} (type '{type(value).__name__}')")

    return Decimal(value.strip()) if isinstance(value, str) else Decimal(value)


def is_int(value: object) -> bool:
    """True for plain integers; `bool` is excluded."""
    return isinstance(value, int) and not isinstance(value, bool)


def require_int(value: object, name: str, caller: str) -> int:
    """Return $value when it is a plain integer, otherwise raise `InvalidOperand`."""
    if not is_int(value):
        raise InvalidOperand(f"Cannot call `{caller}` because ${name} must be an integer, but provided value is: {value!r} (type '{type(value).__name__}')")
    return value


def require_operand(value: object, name: str, caller: str) -> Operand:
    """Return $value when it is an `Operand` (int or finite Decimal), otherwise raise `InvalidOperand`."""
    if is_int(value):
        return value
    if isinstance(value, Decimal) and value.is_finite():
        return value
    raise InvalidOperand(f"Cannot call `{caller}` because ${name} must be int or finite Decimal, but provided value is: {value!r} (type '{type(value).__name__}')")


def as_fraction(value: Operand) -> Fraction:
    """Exact rational value of an `Operand`, used for rounding-free intermediate arithmetic."""
    try:
        return Fraction(value)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidOperand(f"Cannot convert $value ({value!r}) to an exact fraction") from e
