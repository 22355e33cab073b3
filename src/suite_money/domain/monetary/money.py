from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TypeVar

from suite_money.domain.monetary.allocation import allocate_by_ratios, allocate_evenly
from suite_money.domain.monetary.currency import Currency
from suite_money.domain.monetary.errors import CurrencyMismatch, DivisionByZero, InvalidOperand
from suite_money.domain.monetary.fixed_point_decimal import FixedPointDecimal
from suite_money.domain.monetary.parsing import string_to_units
from suite_money.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, require_rounding_mode
from suite_money.utils.numeric_tools import DecimalLike, Operand, require_int, require_operand

M = TypeVar("M", bound="_BaseMoney")


class _BaseMoney(ABC):
    """Amount arithmetic shared by `Money` and `MoneyWithoutCurrency`.

    Subclasses decide how a new instance is built (`_new_instance`) and which
    operands are compatible (`_check_compatible`).
    """

    __slots__ = ("_amount",)

    def __init__(self, amount: FixedPointDecimal | DecimalLike):
        self._amount = FixedPointDecimal.from_value(amount)

    @abstractmethod
    def _new_instance(self: M, amount: FixedPointDecimal) -> M:
        """Build an instance of the concrete type holding $amount."""
        ...

    def _check_compatible(self, other: _BaseMoney, caller: str) -> None:
        # Raise: Money and MoneyWithoutCurrency never mix
        if type(other) is not type(self):
            raise InvalidOperand(f"Cannot call `{caller}` because $other must be {type(self).__name__}, but provided value is: {other!r} (type '{type(other).__name__}')")

    @property
    def amount(self) -> FixedPointDecimal:
        """Full amount including the fractional part."""
        return self._amount

    def get_amount(self) -> int:
        """Whole-unit part of the amount; the fractional part is truncated, not rounded."""
        return self._amount.integer_value()

    # region Comparison

    def compare(self, other: M) -> int:
        """Return -1, 0 or 1 when this amount is less than, equal to or greater than $other."""
        self._check_compatible(other, f"{type(self).__name__}.compare")
        return self._amount.compare(other._amount)

    def greater_than(self, other: M) -> bool:
        return self.compare(other) == 1

    def less_than(self, other: M) -> bool:
        return self.compare(other) == -1

    def is_zero(self) -> bool:
        return self._amount.is_zero()

    def is_positive(self) -> bool:
        return self._amount.is_positive()

    def is_negative(self) -> bool:
        return self._amount.is_negative()

    # endregion

    # region Arithmetic

    def add(self: M, addend: M) -> M:
        self._check_compatible(addend, f"{type(self).__name__}.add")
        return self._new_instance(self._amount.add(addend._amount))

    def subtract(self: M, subtrahend: M) -> M:
        self._check_compatible(subtrahend, f"{type(self).__name__}.subtract")
        return self._new_instance(self._amount.subtract(subtrahend._amount))

    def multiply(self: M, multiplier: int, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> M:
        """Multiply by an integer.

        Args:
            multiplier: Integer factor.
            rounding_mode: Passed to the decimal multiplication. An integer product of a
                two-digit amount is always exact, so no rounding actually happens.

        Raises:
            InvalidOperand: If $multiplier is not an integer.
            InvalidRoundingMode: If $rounding_mode is not a `RoundingMode`.
        """
        caller = f"{type(self).__name__}.multiply"
        require_int(multiplier, "multiplier", caller)
        require_rounding_mode(rounding_mode, caller)
        return self._new_instance(self._amount.multiply_by(multiplier, rounding_mode))

    def divide(self: M, divisor: int, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> M:
        """Divide by an integer, rounding the quotient to two decimal digits.

        Raises:
            InvalidOperand: If $divisor is not an integer.
            DivisionByZero: If $divisor is zero.
            InvalidRoundingMode: If $rounding_mode is not a `RoundingMode`.
        """
        caller = f"{type(self).__name__}.divide"
        require_int(divisor, "divisor", caller)
        require_rounding_mode(rounding_mode, caller)
        if divisor == 0:
            raise DivisionByZero(f"Cannot call `{caller}` because $divisor is zero (dividend {self!r})")
        return self._new_instance(self._amount.divide(divisor, rounding_mode))

    def allocate(self: M, ratios: Sequence[Operand]) -> list[M]:
        """Split proportionally to $ratios; the shares always add up to this amount.

        See `allocate_by_ratios` for the rounding and remainder rules.
        """
        return [self._new_instance(share) for share in allocate_by_ratios(self._amount, ratios)]

    def allocate_to(self: M, n: int) -> list[M]:
        """Split into $n shares differing by at most 0.01; earlier shares get the extra units."""
        return [self._new_instance(share) for share in allocate_evenly(self._amount, n)]

    # endregion

    # region Parsing

    @staticmethod
    def string_to_units(text: str) -> int:
        """Parse '[sign]digits[.|,][d][d]' into smallest units, e.g. '-12.5' -> -1250."""
        return string_to_units(text)

    # endregion

    # region Operators

    def __lt__(self, other) -> bool:
        if not isinstance(other, _BaseMoney):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, _BaseMoney):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, _BaseMoney):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, _BaseMoney):
            return NotImplemented
        return self.compare(other) >= 0

    def __add__(self, other):
        if not isinstance(other, _BaseMoney):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, _BaseMoney):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self._new_instance(self._amount.negate())

    def __pos__(self):
        return self._new_instance(self._amount)

    def __abs__(self):
        return self._new_instance(self._amount.absolute())

    # endregion


class Money(_BaseMoney):
    """Immutable monetary amount with a currency.

    The amount always has exactly two decimal digits. Operations between two
    `Money` values require the same currency; the only cross-currency operation
    is `convert`.

    Examples:
        >>> from suite_money.domain.monetary.currencies import USD
        >>> [str(m) for m in Money(1000, USD).allocate([1, 1, 1])]
        ['333.34 USD', '333.33 USD', '333.33 USD']
    """

    __slots__ = ("_currency",)

    def __init__(self, amount: FixedPointDecimal | DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Integer whole units, Decimal or str with up to two decimals, or `FixedPointDecimal`.
            currency (Currency): Currency object.

        Raises:
            InvalidAmount: If $amount cannot be interpreted as a two-digit decimal number.
            TypeError: If $currency is not a Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency!r}")

        super().__init__(amount)
        self._currency = currency

    @classmethod
    def from_string(cls, text: str, currency: Currency) -> Money:
        """Parse $text with `string_to_units` into Money, e.g. ('12,5', USD) -> 12.50 USD."""
        return cls(FixedPointDecimal.from_units(string_to_units(text)), currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(FixedPointDecimal.zero(), currency)

    def _new_instance(self, amount: FixedPointDecimal) -> Money:
        return Money(amount, self._currency)

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def is_same_currency(self, other: Money) -> bool:
        """True when $other is Money in the same currency; any other type is never the same currency."""
        if not isinstance(other, Money):
            return False
        return self._currency.equals(other.currency)

    def _check_compatible(self, other: _BaseMoney, caller: str) -> None:
        super()._check_compatible(other, caller)
        # Raise: amounts in different currencies cannot be combined or ordered
        if not self.is_same_currency(other):
            raise CurrencyMismatch(f"Cannot call `{caller}` because currency of $other ({other.currency}) differs from {self._currency}")

    def equals(self, other: Money) -> bool:
        """True when $other has the same currency and an equal amount."""
        return isinstance(other, Money) and self.is_same_currency(other) and self._amount.compare(other._amount) == 0

    def convert(self, target_currency: Currency, rate: Operand, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> Money:
        """Convert into $target_currency by multiplying the amount with $rate.

        Args:
            target_currency: Currency of the result.
            rate: Conversion rate as int or Decimal.
            rounding_mode: Applied when the converted amount has more than two decimal digits.

        Returns:
            Money: New amount in $target_currency.

        Raises:
            InvalidOperand: If $rate is not int or Decimal.
            InvalidRoundingMode: If $rounding_mode is not a `RoundingMode`.
            TypeError: If $target_currency is not a Currency instance.
        """
        require_operand(rate, "rate", "Money.convert")
        require_rounding_mode(rounding_mode, "Money.convert")
        return Money(self._amount.multiply_by(rate, rounding_mode), target_currency)

    def without_currency(self) -> MoneyWithoutCurrency:
        return MoneyWithoutCurrency(self._amount)

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self._amount, self._currency.code))

    def __str__(self) -> str:
        """Return string like '1000.50 USD'."""
        return f"{self._amount} {self._currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000.50, USD)'."""
        return f"{self.__class__.__name__}({self._amount}, {self._currency.code})"


class MoneyWithoutCurrency(_BaseMoney):
    """`Money` semantics for amounts whose currency is tracked elsewhere.

    There are no currency checks. `compare` orders amounts the same way `Money` does.
    """

    __slots__ = ()

    @classmethod
    def from_amount(cls, amount: FixedPointDecimal | DecimalLike) -> MoneyWithoutCurrency:
        return cls(amount)

    @classmethod
    def from_string(cls, text: str) -> MoneyWithoutCurrency:
        return cls(FixedPointDecimal.from_units(string_to_units(text)))

    @classmethod
    def zero(cls) -> MoneyWithoutCurrency:
        return cls(FixedPointDecimal.zero())

    def _new_instance(self, amount: FixedPointDecimal) -> MoneyWithoutCurrency:
        return MoneyWithoutCurrency(amount)

    def equals(self, other: MoneyWithoutCurrency) -> bool:
        return isinstance(other, MoneyWithoutCurrency) and self._amount.compare(other._amount) == 0

    def with_currency(self, currency: Currency) -> Money:
        return Money(self._amount, currency)

    def __eq__(self, other) -> bool:
        if not isinstance(other, MoneyWithoutCurrency):
            return False
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self._amount)

    def __str__(self) -> str:
        return str(self._amount)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount})"
