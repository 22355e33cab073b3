import pytest

from suite_money.domain.monetary.errors import DivisionByZero, InvalidRoundingMode
from suite_money.domain.monetary.rounding import RoundingMode, require_rounding_mode, round_quotient


# tests
@pytest.mark.parametrize(
    "numerator, denominator, rounding_mode, expected",
    [
        (5, 2, RoundingMode.HALF_UP, 3),
        (5, 2, RoundingMode.HALF_DOWN, 2),
        (5, 2, RoundingMode.HALF_EVEN, 2),
        (5, 2, RoundingMode.HALF_ODD, 3),
        (7, 2, RoundingMode.HALF_EVEN, 4),
        (7, 2, RoundingMode.HALF_ODD, 3),
        (-5, 2, RoundingMode.HALF_UP, -3),
        (-5, 2, RoundingMode.HALF_DOWN, -2),
        (5, -2, RoundingMode.HALF_UP, -3),
        (-5, -2, RoundingMode.HALF_UP, 3),
    ],
)
def test_ties(numerator, denominator, rounding_mode, expected):
    assert round_quotient(numerator, denominator, rounding_mode) == expected


@pytest.mark.parametrize("rounding_mode", list(RoundingMode))
def test_non_ties_round_to_nearest(rounding_mode):
    assert round_quotient(7, 3, rounding_mode) == 2
    assert round_quotient(8, 3, rounding_mode) == 3
    assert round_quotient(-8, 3, rounding_mode) == -3
    assert round_quotient(9, 3, rounding_mode) == 3


def test_zero_denominator():
    with pytest.raises(DivisionByZero):
        round_quotient(1, 0)


def test_require_rounding_mode():
    assert require_rounding_mode(RoundingMode.HALF_ODD, "test") is RoundingMode.HALF_ODD
    for invalid in ["HALF_UP", 1, None]:
        with pytest.raises(InvalidRoundingMode):
            require_rounding_mode(invalid, "test")
