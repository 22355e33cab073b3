from __future__ import annotations

# Splitting of a FixedPointDecimal into shares whose sum is always exactly the original.
# Shares are computed in smallest units and each result is constructed once.

import logging
from collections.abc import Sequence
from fractions import Fraction

from suite_money.domain.monetary.errors import DivisionByZero, InvalidOperand
from suite_money.domain.monetary.fixed_point_decimal import FixedPointDecimal
from suite_money.domain.monetary.rounding import RoundingMode, round_quotient
from suite_money.utils.numeric_tools import Operand, as_fraction, require_int, require_operand

logger = logging.getLogger(__name__)


def allocate_by_ratios(amount: FixedPointDecimal, ratios: Sequence[Operand]) -> list[FixedPointDecimal]:
    """Split $amount proportionally to $ratios.

    Each share is `amount * ratio / total` rounded half-up to two decimal digits.
    The rounding leftover (positive or negative, in smallest units) is then handed
    out one unit at a time to the first shares with a non-zero ratio, in ratio order.
    When rounding over-allocated, units are taken back only from non-zero shares,
    so zero-ratio shares stay zero and no share gets the opposite sign of $amount.

    Args:
        amount: Value to split.
        ratios: Non-empty sequence of non-negative int or Decimal weights.

    Returns:
        list[FixedPointDecimal]: One share per ratio, in input order. The sum equals $amount.

    Raises:
        InvalidOperand: If $ratios is empty, or contains a negative or non-numeric value.
        DivisionByZero: If all ratios are zero.

    Examples:
        >>> [str(s) for s in allocate_by_ratios(FixedPointDecimal.from_value(1000), [1, 1, 1])]
        ['333.34', '333.33', '333.33']
    """
    # Raise: a str or a mapping would otherwise iterate to something meaningless
    if isinstance(ratios, (str, bytes)) or not isinstance(ratios, Sequence):
        raise InvalidOperand(f"Cannot call `allocate` because $ratios must be a sequence, but provided value is: {ratios!r}")

    # Raise: nothing to allocate to
    if len(ratios) == 0:
        raise InvalidOperand("Cannot call `allocate` because $ratios is empty")

    fractions: list[Fraction] = []
    for ratio in ratios:
        require_operand(ratio, "ratio", "allocate")
        # Raise: negative weights make shares larger than the whole
        if ratio < 0:
            raise InvalidOperand(f"Cannot call `allocate` because $ratios contains negative value {ratio}")
        fractions.append(as_fraction(ratio))

    total = sum(fractions, Fraction(0))
    # Raise: every share would be divided by zero
    if total == 0:
        raise DivisionByZero(f"Cannot call `allocate` because $ratios sum to zero: {list(ratios)}")

    share_units: list[int] = []
    for ratio in fractions:
        exact_share = amount.units * ratio / total
        share_units.append(round_quotient(exact_share.numerator, exact_share.denominator, RoundingMode.HALF_UP))

    remainder = amount.units - sum(share_units)
    # Zero-ratio recipients never receive or give back units
    eligible = [i for i, ratio in enumerate(fractions) if ratio > 0]
    if remainder != 0 and (remainder > 0) != (amount.units > 0):
        # Over-allocated by rounding: take back only from non-zero shares so no share changes sign
        eligible = [i for i in eligible if share_units[i] != 0]
    _distribute_remainder(share_units, remainder, eligible)

    logger.debug(f"Allocated {amount} by {len(ratios)} ratio(s); distributed remainder of {remainder} unit(s)")
    return [FixedPointDecimal.from_units(units) for units in share_units]


def allocate_evenly(amount: FixedPointDecimal, n: int) -> list[FixedPointDecimal]:
    """Split $amount into $n shares that differ by at most one smallest unit.

    The first `|amount| mod n` shares (in smallest units) receive one extra unit.

    Args:
        amount: Value to split.
        n: Number of shares.

    Returns:
        list[FixedPointDecimal]: $n shares whose sum equals $amount.

    Raises:
        InvalidOperand: If $n is not an integer or is negative.
        DivisionByZero: If $n is zero.

    Examples:
        >>> [str(s) for s in allocate_evenly(FixedPointDecimal.from_value(1001), 3)]
        ['333.67', '333.67', '333.66']
    """
    require_int(n, "n", "allocate_to")
    if n == 0:
        raise DivisionByZero("Cannot call `allocate_to` because $n is zero")
    if n < 0:
        raise InvalidOperand(f"Cannot call `allocate_to` because $n ({n}) is negative")

    base, remainder = divmod(abs(amount.units), n)
    sign = -1 if amount.is_negative() else 1
    share_units = [sign * base] * n
    _distribute_remainder(share_units, sign * remainder, list(range(n)))

    logger.debug(f"Allocated {amount} into {n} share(s); distributed remainder of {sign * remainder} unit(s)")
    return [FixedPointDecimal.from_units(units) for units in share_units]


def _distribute_remainder(share_units: list[int], remainder: int, eligible: list[int]) -> None:
    """Add one unit with the sign of $remainder to each of the first |remainder| $eligible shares."""
    step = 1 if remainder > 0 else -1
    for i in range(abs(remainder)):
        share_units[eligible[i % len(eligible)]] += step
