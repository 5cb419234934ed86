# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exact rational conversion for EXIF RATIONAL fields

EXIF stores apertures, exposure times, coordinates and the like as
numerator/denominator pairs. String accessors hand them over either as
"12345/100" or as a decimal such as "123.45"; both forms are turned back into
an exact (numerator, denominator) pair here.

Copyright 2025 DNAi inc.
"""

import re
from decimal import Decimal, InvalidOperation, localcontext
from typing import List, NamedTuple, Optional

# Largest denominator the decimal path may reach before giving up
MAX_DENOMINATOR = 10_000_000_000

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')


class Rational(NamedTuple):
    """
    An unreduced EXIF rational.

    Being a tuple, a Rational unpacks as ``num, den = value`` wherever
    plain (numerator, denominator) pairs are expected.
    """
    numerator: int
    denominator: int

    def to_float(self) -> Optional[float]:
        """Return the rational as a float, or None for a zero denominator."""
        if self.denominator == 0:
            return None
        return self.numerator / self.denominator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def parse_int64(text: str) -> Optional[int]:
    """
    Parse a signed 64-bit integer literal.

    Accepts an optional sign followed by decimal digits only; whitespace,
    underscores and out-of-range values are rejected.
    """
    if not _INTEGER_PATTERN.match(text):
        return None
    value = int(text)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def to_rational(s: Optional[str]) -> Optional[Rational]:
    """
    Convert a string to an exact rational.

    Args:
        s: Either "numerator/denominator" or a decimal number

    Returns:
        Rational, or None when the string is not convertible

    Example:
        >>> to_rational("12345/100")
        Rational(numerator=12345, denominator=100)
        >>> to_rational("123.45")
        Rational(numerator=12345, denominator=100)
    """
    if s is None:
        return None

    # "12345/100": taken as is, no reduction and no zero check
    parts = s.split('/')
    if len(parts) == 2:
        numerator = parse_int64(parts[0])
        denominator = parse_int64(parts[1])
        if numerator is None or denominator is None:
            return None
        return Rational(numerator, denominator)

    # "123.45"; digit grouping underscores are not part of a literal
    if '_' in s:
        return None
    try:
        value = Decimal(s.strip())
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    if value == 0:
        return Rational(0, 1)

    denominator = 1
    with localcontext() as ctx:
        # scaleb only moves the exponent; keep every input digit
        ctx.prec = max(ctx.prec, len(s) + 12)
        while value != value.to_integral_value():
            denominator *= 10
            value = value.scaleb(1)
            if denominator > MAX_DENOMINATOR:
                return None
    numerator = int(value)
    if numerator < INT64_MIN or numerator > INT64_MAX:
        return None
    return Rational(numerator, denominator)


def to_rational_array(s: Optional[str]) -> Optional[List[Rational]]:
    """
    Convert a comma-separated list of rationals.

    Pieces that do not convert are dropped; the survivors keep their
    input order.

    Args:
        s: String such as "51/1,30/1,1234/100"

    Returns:
        List of Rational, or None when no piece converts
    """
    if s is None:
        return None
    rationals = []
    for piece in s.split(','):
        rational = to_rational(piece)
        if rational is not None:
            rationals.append(rational)
    if not rationals:
        return None
    return rationals
