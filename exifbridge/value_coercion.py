# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value coercion from source strings to typed directory values

Source stores hand every attribute over as a string. Directories expect the
EXIF type of the tag: integers for SHORT and LONG fields, Rational pairs for
RATIONAL fields, lists of Rational for multi-valued rationals and plain
strings for text fields.

Copyright 2025 DNAi inc.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from exifbridge.rational import parse_int64, to_rational, to_rational_array

SHORT_MIN = -32768
SHORT_MAX = 65535


class TagFormat(Enum):
    """EXIF value format a directory expects for a tag."""
    ASCII = "ascii"
    COMMENT = "comment"
    BYTE = "byte"
    SHORT = "short"
    LONG = "long"
    RATIONAL = "rational"
    RATIONAL_ARRAY = "rational_array"
    UNDEFINED = "undefined"


def _passthrough(raw: str) -> Optional[str]:
    return raw


def _to_byte(raw: str) -> None:
    # TODO: decode single-byte fields (GPSAltitudeRef, GPSVersionID) once the
    # source string layout for BYTE arrays is pinned down
    return None


def to_short(raw: str) -> Optional[int]:
    """Parse a 16-bit integer, accepting both signed and unsigned ranges."""
    value = parse_int64(raw)
    if value is None or value < SHORT_MIN or value > SHORT_MAX:
        return None
    return value


def to_long(raw: str) -> Optional[int]:
    """Parse a signed 64-bit integer."""
    return parse_int64(raw)


_CONVERTERS: Dict[TagFormat, Callable[[str], Any]] = {
    TagFormat.ASCII: _passthrough,
    TagFormat.COMMENT: _passthrough,
    TagFormat.UNDEFINED: _passthrough,
    TagFormat.BYTE: _to_byte,
    TagFormat.SHORT: to_short,
    TagFormat.LONG: to_long,
    TagFormat.RATIONAL: to_rational,
    TagFormat.RATIONAL_ARRAY: to_rational_array,
}


def coerce(raw: Optional[str], fmt: Optional[TagFormat]) -> Any:
    """
    Convert a raw source string into the value type of a tag format.

    Args:
        raw: String value as reported by the source store
        fmt: Expected tag format, or None for tags that are known but not
             meaningfully convertible

    Returns:
        str, int, Rational or list of Rational; None when the string does not
        parse, the format is BYTE, or no format is given

    Example:
        >>> coerce("3", TagFormat.SHORT)
        3
        >>> coerce("28/10", TagFormat.RATIONAL)
        Rational(numerator=28, denominator=10)
    """
    if raw is None or fmt is None:
        return None
    return _CONVERTERS[fmt](raw)

