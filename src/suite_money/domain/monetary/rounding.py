from __future__ import annotations

from enum import Enum

from suite_money.domain.monetary.errors import DivisionByZero, InvalidRoundingMode


class RoundingMode(Enum):
    """How a result exactly halfway between two representable values is rounded.

    Results that are not halfway always go to the nearest value.
    """

    HALF_UP = "HALF_UP"  # Away from zero: 0.125 -> 0.13, -0.125 -> -0.13
    HALF_DOWN = "HALF_DOWN"  # Toward zero: 0.125 -> 0.12
    HALF_EVEN = "HALF_EVEN"  # To even last digit (banker's rounding): 0.125 -> 0.12, 0.135 -> 0.14
    HALF_ODD = "HALF_ODD"  # To odd last digit: 0.125 -> 0.13, 0.135 -> 0.13


DEFAULT_ROUNDING_MODE = RoundingMode.HALF_UP


def require_rounding_mode(rounding_mode: RoundingMode, caller: str) -> RoundingMode:
    """Return $rounding_mode unchanged, or raise when it is not a `RoundingMode` member.

    Args:
        rounding_mode: Value to validate.
        caller: Name of the calling operation, used in the error message.

    Raises:
        InvalidRoundingMode: If $rounding_mode is not a `RoundingMode`.
    """
    if not isinstance(rounding_mode, RoundingMode):
        allowed = ", ".join(f"RoundingMode.{m.name}" for m in RoundingMode)
        raise InvalidRoundingMode(f"Cannot call `{caller}` because $rounding_mode ({rounding_mode!r}) is not one of: {allowed}")
    return rounding_mode


def round_quotient(numerator: int, denominator: int, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> int:
    """Divide two integers and round the exact quotient to an integer.

    Works purely on integers, so no precision is lost before rounding.

    Args:
        numerator: Dividend.
        denominator: Divisor, must not be zero.
        rounding_mode: Tie-breaking rule used when the quotient is exactly halfway.

    Returns:
        The rounded quotient.

    Raises:
        DivisionByZero: If $denominator is zero.

    Examples:
        >>> round_quotient(5, 2)
        3
        >>> round_quotient(-5, 2)
        -3
        >>> round_quotient(5, 2, RoundingMode.HALF_EVEN)
        2
        >>> round_quotient(7, 3)
        2
    """
    if denominator == 0:
        raise DivisionByZero(f"Cannot call `round_quotient` because $denominator is zero (numerator {numerator})")

    negative = (numerator < 0) != (denominator < 0)
    quotient, remainder = divmod(abs(numerator), abs(denominator))

    twice_remainder = 2 * remainder
    if twice_remainder > abs(denominator):
        quotient += 1
    elif twice_remainder == abs(denominator):
        if rounding_mode == RoundingMode.HALF_UP:
            quotient += 1
        elif rounding_mode == RoundingMode.HALF_EVEN:
            quotient += quotient % 2
        elif rounding_mode == RoundingMode.HALF_ODD:
            quotient += 1 - quotient % 2
        # HALF_DOWN keeps the truncated quotient

    return -quotient if negative else quotient
