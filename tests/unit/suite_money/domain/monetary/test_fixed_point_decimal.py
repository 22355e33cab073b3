from decimal import Decimal as D

import pytest

from suite_money.domain.monetary.errors import DivisionByZero, InvalidAmount, InvalidOperand, InvalidRoundingMode
from suite_money.domain.monetary.fixed_point_decimal import FixedPointDecimal
from suite_money.domain.monetary.rounding import RoundingMode


def fpd(value) -> FixedPointDecimal:
    return FixedPointDecimal.from_value(value)


# tests
def test_from_int_is_whole_units():
    assert fpd(12).units == 1200
    assert str(fpd(12)) == "12.00"
    assert str(fpd(-3)) == "-3.00"


def test_from_decimal_and_str():
    assert fpd(D("12.5")).units == 1250
    assert fpd("0.05").units == 5
    assert fpd(" -7.10 ").units == -710
    assert fpd(D("1E+2")).units == 10000


def test_from_copies_instance():
    original = fpd("3.33")
    copy = FixedPointDecimal.from_value(original)
    assert copy == original
    assert copy is not original


@pytest.mark.parametrize("value", ["abc", "", "1.2.3", 1.5, True, None, D("NaN"), D("Infinity"), "0.001", D("1.999")])
def test_from_rejects_non_two_digit_numbers(value):
    with pytest.raises(InvalidAmount):
        FixedPointDecimal.from_value(value)


def test_from_rejects_non_integer_units():
    with pytest.raises(InvalidAmount):
        FixedPointDecimal.from_units(D("1"))


def test_add_and_subtract_are_exact():
    assert fpd("0.10").add(fpd("0.20")) == fpd("0.30")
    assert fpd("1.00").subtract("1.01") == fpd("-0.01")
    assert fpd(5).add(3).units == 800
    assert sum([fpd("0.10")] * 10) == fpd(1)


def test_multiply_by_integer_and_decimal():
    assert fpd("12.34").multiply_by(3) == fpd("37.02")
    assert fpd("10.00").multiply_by(D("0.125")) == fpd("1.25")
    # 0.05 * 0.5 = 0.025 -> rounded half up
    assert fpd("0.05").multiply_by(D("0.5")) == fpd("0.03")
    assert fpd("-0.05").multiply_by(D("0.5")) == fpd("-0.03")


@pytest.mark.parametrize(
    "rounding_mode, expected",
    [
        (RoundingMode.HALF_UP, "0.03"),
        (RoundingMode.HALF_DOWN, "0.02"),
        (RoundingMode.HALF_EVEN, "0.02"),
        (RoundingMode.HALF_ODD, "0.03"),
    ],
)
def test_multiply_by_honours_rounding_mode(rounding_mode, expected):
    assert fpd("0.05").multiply_by(D("0.5"), rounding_mode) == fpd(expected)


def test_multiply_by_rejects_float_and_bad_mode():
    with pytest.raises(InvalidOperand):
        fpd(1).multiply_by(1.5)
    with pytest.raises(InvalidRoundingMode):
        fpd(1).multiply_by(2, "HALF_UP")


def test_divide_rounds_half_up():
    assert fpd(10).divide(3) == fpd("3.33")
    assert fpd(20).divide(3) == fpd("6.67")
    assert fpd("0.01").divide(2) == fpd("0.01")
    assert fpd("-0.01").divide(2) == fpd("-0.01")
    assert fpd("0.01").divide(2, RoundingMode.HALF_DOWN) == fpd("0.00")
    assert fpd(1).divide(D("0.5")) == fpd(2)


def test_divide_by_zero():
    with pytest.raises(DivisionByZero):
        fpd(10).divide(0)
    with pytest.raises(DivisionByZero):
        fpd(10).divide(D("0.00"))
    with pytest.raises(ZeroDivisionError):
        fpd(10).divide(0)


def test_modulo():
    assert fpd(1001).modulo(3) == fpd(2)
    assert fpd("10.50").modulo(3) == fpd("1.50")
    assert fpd("-10.50").modulo(3) == fpd("-1.50")
    assert fpd(9).modulo(3).is_zero()
    with pytest.raises(DivisionByZero):
        fpd(1).modulo(0)
    with pytest.raises(InvalidOperand):
        fpd(1).modulo(D("2"))


def test_compare_and_ordering():
    assert fpd(1).compare(fpd(2)) == -1
    assert fpd(2).compare(fpd(2)) == 0
    assert fpd("2.01").compare(fpd(2)) == 1
    assert fpd(1) < fpd("1.01") <= fpd("1.01") < fpd(2)
    assert fpd(2) > fpd(1)
    assert sorted([fpd(3), fpd("-1"), fpd("0.5")]) == [fpd(-1), fpd("0.5"), fpd(3)]


def test_sign_predicates():
    assert fpd(0).is_zero()
    assert fpd("0.01").is_positive()
    assert fpd("-0.01").is_negative()
    assert not fpd("-0.01").is_zero()
    assert not fpd(0).is_positive() and not fpd(0).is_negative()


def test_integer_value_truncates():
    assert fpd("12.99").integer_value() == 12
    assert fpd("-12.99").integer_value() == -12
    assert fpd("-0.50").integer_value() == 0


def test_negate_and_absolute():
    assert -fpd("1.25") == fpd("-1.25")
    assert abs(fpd("-1.25")) == fpd("1.25")


def test_string_rendering():
    assert str(FixedPointDecimal.from_units(0)) == "0.00"
    assert str(FixedPointDecimal.from_units(-5)) == "-0.05"
    assert str(FixedPointDecimal.from_units(123456)) == "1234.56"
    assert repr(fpd("1.5")) == "FixedPointDecimal('1.50')"
    assert fpd("1.5").to_decimal() == D("1.50")


def test_is_hashable_and_immutable():
    assert len({fpd(1), fpd("1.00"), fpd(2)}) == 2
    value = fpd(1)
    with pytest.raises(AttributeError):
        value.units = 5
