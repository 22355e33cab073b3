__version__ = "0.0.1"

from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import (
    CurrencyMismatch,
    DivisionByZero,
    InvalidAmount,
    InvalidOperand,
    InvalidRoundingMode,
    MonetaryError,
    ParseError,
)
from suite_money.domain.monetary.fixed_point_decimal import FixedPointDecimal
from suite_money.domain.monetary.money import Money, MoneyWithoutCurrency
from suite_money.domain.monetary.parsing import string_to_units
from suite_money.domain.monetary.rounding import RoundingMode

__all__ = [
    "Currency",
    "CurrencyMismatch",
    "DivisionByZero",
    "FixedPointDecimal",
    "InvalidAmount",
    "InvalidOperand",
    "InvalidRoundingMode",
    "MonetaryError",
    "Money",
    "MoneyWithoutCurrency",
    "ParseError",
    "RoundingMode",
    "string_to_units",
]
