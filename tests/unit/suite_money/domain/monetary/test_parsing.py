import pytest

from suite_money.domain.monetary.errors import ParseError
from suite_money.domain.monetary.fixed_point_decimal import FixedPointDecimal
from suite_money.domain.monetary.parsing import string_to_units


# tests
@pytest.mark.parametrize(
    "text, expected",
    [
        ("-12.5", -1250),
        ("3,4", 340),
        ("1000", 100000),
        ("+7", 700),
        ("0.01", 1),
        ("12.", 1200),
        (".5", 50),
        (",05", 5),
        ("-0,99", -99),
        ("  42.10  ", 4210),
        ("007.07", 707),
    ],
)
def test_valid_strings(text, expected):
    assert string_to_units(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "-", "+", ".", "1.234", "1.2.3", "1,2.3", "1a", "a1", "--1", "1 000", "1e5", "١٢"])
def test_invalid_strings(text):
    with pytest.raises(ParseError):
        string_to_units(text)


def test_non_string_input():
    with pytest.raises(ParseError):
        string_to_units(12)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        string_to_units("x")


@pytest.mark.parametrize("units", [0, 1, -1, 5, -5, 99, 100, -1250, 123456789])
def test_rendering_parses_back(units):
    assert string_to_units(str(FixedPointDecimal.from_units(units))) == units
