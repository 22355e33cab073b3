from decimal import Decimal as D
from fractions import Fraction

import pytest

from suite_money.domain.monetary.errors import InvalidOperand
from suite_money.utils.numeric_tools import as_decimal, as_fraction, is_int, require_int, require_operand


# tests
def test_as_decimal():
    assert as_decimal(D("1.5")) == D("1.5")
    assert as_decimal(3) == D(3)
    assert as_decimal(" 2.25 ") == D("2.25")
    with pytest.raises(TypeError):
        as_decimal(1.5)
    with pytest.raises(TypeError):
        as_decimal(False)


def test_is_int_excludes_bool():
    assert is_int(0)
    assert not is_int(True)
    assert not is_int(D(1))


def test_require_int():
    assert require_int(5, "n", "test") == 5
    with pytest.raises(InvalidOperand):
        require_int(5.0, "n", "test")


def test_require_operand():
    assert require_operand(D("0.5"), "rate", "test") == D("0.5")
    assert require_operand(2, "rate", "test") == 2
    for invalid in [0.5, "1", None, True, D("NaN"), D("-Infinity")]:
        with pytest.raises(InvalidOperand):
            require_operand(invalid, "rate", "test")


def test_as_fraction_is_exact():
    assert as_fraction(D("0.1")) == Fraction(1, 10)
    assert as_fraction(7) == Fraction(7)
