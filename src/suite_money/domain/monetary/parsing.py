from __future__ import annotations

import re

from suite_money.domain.monetary.errors import ParseError

# [sign]digits[separator][decimal1][decimal2]; ASCII digits only
MONEY_PATTERN = re.compile(
    r"^(?P<sign>[-+])?"
    r"(?P<digits>[0-9]*)"
    r"(?P<separator>[.,])?"
    r"(?P<decimal1>[0-9])?"
    r"(?P<decimal2>[0-9])?$"
)


def string_to_units(text: str) -> int:
    """Parse a money string into an integer number of smallest units (hundredths).

    Accepted form after stripping surrounding whitespace: optional '+' or '-' sign,
    whole-unit digits, optional '.' or ',' separator, up to two decimal digits.
    Missing decimal digits count as zero. At least one digit must be present.

    Args:
        text: The string to parse.

    Returns:
        int: Signed amount in hundredths.

    Raises:
        ParseError: If $text is not a string or does not match the format.

    Examples:
        >>> string_to_units("-12.5")
        -1250
        >>> string_to_units("3,4")
        340
        >>> string_to_units("+7")
        700
    """
    if not isinstance(text, str):
        raise ParseError(f"Cannot call `string_to_units` because $text must be a string, but provided value is: {text!r}")

    match = MONEY_PATTERN.match(text.strip())
    if match is None:
        raise ParseError(f"The value '{text}' could not be parsed as money")

    digits = match.group("digits")
    decimal1 = match.group("decimal1")
    decimal2 = match.group("decimal2")

    # Raise: sign or separator alone is not a number
    if not digits and decimal1 is None:
        raise ParseError(f"The value '{text}' could not be parsed as money because it contains no digits")

    units = int(digits or "0") * 100 + int(decimal1 or "0") * 10 + int(decimal2 or "0")
    return -units if match.group("sign") == "-" else units
