from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction

from suite_money.domain.monetary.errors import DivisionByZero, InvalidAmount
from suite_money.domain.monetary.rounding import DEFAULT_ROUNDING_MODE, RoundingMode, require_rounding_mode, round_quotient
from suite_money.utils.numeric_tools import DecimalLike, Operand, as_decimal, as_fraction, is_int, require_int, require_operand


class FixedPointDecimal:
    """Signed decimal number with exactly two decimal digits.

    The value is stored as a single integer scaled by 100 ($units), so there is
    no floating-point error and no hidden precision beyond two digits.
    Instances are immutable; every operation returns a new instance.

    Examples:
        >>> FixedPointDecimal.from_value(12)
        FixedPointDecimal('12.00')
        >>> FixedPointDecimal.from_value("0.5").add(1)
        FixedPointDecimal('1.50')
        >>> str(FixedPointDecimal.from_units(-5))
        '-0.05'
    """

    DECIMAL_PLACES = 2
    SCALE = 10**DECIMAL_PLACES

    __slots__ = ("_units",)

    def __init__(self, units: int):
        """Initialize from an integer count of hundredths.

        Prefer `from_value` / `from_units` in calling code.

        Args:
            units: Value multiplied by `SCALE`.

        Raises:
            InvalidAmount: If $units is not a plain integer.
        """
        # Raise: the scaled representation is always an integer
        if not is_int(units):
            raise InvalidAmount(f"$units must be an integer, but provided value is: {units!r} (type '{type(units).__name__}')")
        self._units = units

    # region Construction

    @classmethod
    def from_value(cls, value: FixedPointDecimal | DecimalLike) -> FixedPointDecimal:
        """Create from an integer (whole units), a Decimal/str with up to two decimals, or another instance.

        Args:
            value: Integer amount of whole units, `Decimal`, numeric `str` or `FixedPointDecimal`.

        Returns:
            FixedPointDecimal: New instance (a copy when $value already is one).

        Raises:
            InvalidAmount: If $value cannot be interpreted as a number with at most two decimal digits.
        """
        if isinstance(value, FixedPointDecimal):
            return cls(value._units)

        if is_int(value):
            return cls(value * cls.SCALE)

        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise InvalidAmount(f"Cannot call `FixedPointDecimal.from_value` because $value ({value!r}) cannot be converted to Decimal") from e

        # Raise: NaN and Infinity are not amounts
        if not decimal_value.is_finite():
            raise InvalidAmount(f"Cannot call `FixedPointDecimal.from_value` because $value ({value!r}) is not finite")

        # Scale through Fraction, Decimal multiplication would round at the context precision
        scaled = Fraction(decimal_value) * cls.SCALE
        # Raise: digits beyond the second decimal would be silently lost
        if scaled.denominator != 1:
            raise InvalidAmount(f"Cannot call `FixedPointDecimal.from_value` because $value ({value!r}) has more than {cls.DECIMAL_PLACES} decimal digits")

        return cls(scaled.numerator)

    @classmethod
    def from_units(cls, units: int) -> FixedPointDecimal:
        """Create from an integer count of smallest units (hundredths), e.g. 1250 -> 12.50."""
        if not is_int(units):
            raise InvalidAmount(f"Cannot call `FixedPointDecimal.from_units` because $units must be an integer, but provided value is: {units!r}")
        return cls(units)

    @classmethod
    def zero(cls) -> FixedPointDecimal:
        return cls(0)

    # endregion

    # region Properties

    @property
    def units(self) -> int:
        """Value in smallest units (hundredths)."""
        return self._units

    def to_decimal(self) -> Decimal:
        """Exact `Decimal` with two decimal places."""
        return Decimal(str(self))

    def integer_value(self) -> int:
        """Whole-unit part, truncated toward zero (no rounding): 12.99 -> 12, -12.99 -> -12."""
        whole = abs(self._units) // self.SCALE
        return -whole if self._units < 0 else whole

    # endregion

    # region Arithmetic

    def add(self, other: FixedPointDecimal | DecimalLike) -> FixedPointDecimal:
        return FixedPointDecimal(self._units + FixedPointDecimal.from_value(other)._units)

    def subtract(self, other: FixedPointDecimal | DecimalLike) -> FixedPointDecimal:
        return FixedPointDecimal(self._units - FixedPointDecimal.from_value(other)._units)

    def multiply_by(self, factor: Operand, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> FixedPointDecimal:
        """Multiply by an integer or Decimal factor and round back to two decimal digits.

        Args:
            factor: `int` or finite `Decimal`.
            rounding_mode: Rule applied when the exact product has more than two decimal digits.

        Returns:
            FixedPointDecimal: The rounded product.

        Raises:
            InvalidOperand: If $factor is not int or Decimal.
            InvalidRoundingMode: If $rounding_mode is not a `RoundingMode`.
        """
        require_operand(factor, "factor", "FixedPointDecimal.multiply_by")
        require_rounding_mode(rounding_mode, "FixedPointDecimal.multiply_by")

        product = as_fraction(factor) * self._units
        return FixedPointDecimal(round_quotient(product.numerator, product.denominator, rounding_mode))

    def divide(self, divisor: Operand, rounding_mode: RoundingMode = DEFAULT_ROUNDING_MODE) -> FixedPointDecimal:
        """Divide by an integer or Decimal divisor and round to two decimal digits.

        Raises:
            DivisionByZero: If $divisor is zero. Nothing is computed in that case.
            InvalidOperand: If $divisor is not int or Decimal.
            InvalidRoundingMode: If $rounding_mode is not a `RoundingMode`.
        """
        require_operand(divisor, "divisor", "FixedPointDecimal.divide")
        require_rounding_mode(rounding_mode, "FixedPointDecimal.divide")

        # Raise: division by zero is checked before any arithmetic
        if divisor == 0:
            raise DivisionByZero(f"Cannot call `FixedPointDecimal.divide` because $divisor is zero (dividend {self})")

        quotient = self._units / as_fraction(divisor)
        return FixedPointDecimal(round_quotient(quotient.numerator, quotient.denominator, rounding_mode))

    def modulo(self, n: int) -> FixedPointDecimal:
        """Remainder of the truncating division of this value by integer $n.

        The sign follows the dividend, like `Decimal` remainders: 10.50 mod 3 == 1.50,
        -10.50 mod 3 == -1.50.

        Raises:
            InvalidOperand: If $n is not an integer.
            DivisionByZero: If $n is zero.
        """
        require_int(n, "n", "FixedPointDecimal.modulo")
        if n == 0:
            raise DivisionByZero(f"Cannot call `FixedPointDecimal.modulo` because $n is zero (dividend {self})")

        remainder = abs(self._units) % (abs(n) * self.SCALE)
        return FixedPointDecimal(-remainder if self._units < 0 else remainder)

    def negate(self) -> FixedPointDecimal:
        return FixedPointDecimal(-self._units)

    def absolute(self) -> FixedPointDecimal:
        return FixedPointDecimal(abs(self._units))

    # endregion

    # region Comparison

    def compare(self, other: FixedPointDecimal | DecimalLike) -> int:
        """Return -1, 0 or 1 when this value is less than, equal to or greater than $other."""
        other_units = FixedPointDecimal.from_value(other)._units
        if self._units < other_units:
            return -1
        if self._units > other_units:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self._units == 0

    def is_positive(self) -> bool:
        return self._units > 0

    def is_negative(self) -> bool:
        return self._units < 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, FixedPointDecimal):
            return NotImplemented
        return self._units == other._units

    def __lt__(self, other) -> bool:
        if not isinstance(other, FixedPointDecimal):
            return NotImplemented
        return self._units < other._units

    def __le__(self, other) -> bool:
        if not isinstance(other, FixedPointDecimal):
            return NotImplemented
        return self._units <= other._units

    def __gt__(self, other) -> bool:
        if not isinstance(other, FixedPointDecimal):
            return NotImplemented
        return self._units > other._units

    def __ge__(self, other) -> bool:
        if not isinstance(other, FixedPointDecimal):
            return NotImplemented
        return self._units >= other._units

    def __hash__(self) -> int:
        return hash(self._units)

    # endregion

    # region Operators

    def __add__(self, other):
        try:
            return self.add(other)
        except InvalidAmount:
            return NotImplemented

    def __radd__(self, other):
        # Supports `sum(...)`, which starts from int 0
        return self.__add__(other)

    def __sub__(self, other):
        try:
            return self.subtract(other)
        except InvalidAmount:
            return NotImplemented

    def __neg__(self) -> FixedPointDecimal:
        return self.negate()

    def __abs__(self) -> FixedPointDecimal:
        return self.absolute()

    # endregion

    # region String representations

    def __str__(self) -> str:
        """Canonical form: optional '-' sign, digits, '.', exactly two decimal digits."""
        whole, fraction = divmod(abs(self._units), self.SCALE)
        sign = "-" if self._units < 0 else ""
        return f"{sign}{whole}.{fraction:0{self.DECIMAL_PLACES}d}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self}')"

    # endregion
