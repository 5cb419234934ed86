"""Tests for format-driven value coercion."""

import pytest

from exifbridge.rational import Rational
from exifbridge.value_coercion import (
    _CONVERTERS,
    TagFormat,
    coerce,
    to_long,
    to_short,
)


def test_every_format_has_a_converter():
    """A format without a dispatch arm would fail at lookup time."""

    assert set(_CONVERTERS) == set(TagFormat)


@pytest.mark.parametrize("fmt", [TagFormat.ASCII, TagFormat.COMMENT, TagFormat.UNDEFINED])
def test_text_formats_pass_through_unchanged(fmt):
    assert coerce("  Canon EOS \x00", fmt) == "  Canon EOS \x00"


@pytest.mark.parametrize("raw", ["0", "1", "2,2,2,0", "abc"])
def test_byte_never_converts(raw):
    assert coerce(raw, TagFormat.BYTE) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", 0),
        ("6", 6),
        ("+7", 7),
        ("65535", 65535),
        ("-32768", -32768),
        ("65536", None),
        ("-32769", None),
        ("1.0", None),
        (" 1", None),
        ("1,2", None),
        ("", None),
    ],
)
def test_short(raw, expected):
    assert coerce(raw, TagFormat.SHORT) == expected
    assert to_short(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("4000", 4000),
        ("-1", -1),
        ("9223372036854775807", 9223372036854775807),
        ("9223372036854775808", None),
        ("4000px", None),
        ("4e3", None),
    ],
)
def test_long(raw, expected):
    assert coerce(raw, TagFormat.LONG) == expected
    assert to_long(raw) == expected


def test_rational_formats():
    assert coerce("28/10", TagFormat.RATIONAL) == Rational(28, 10)
    assert coerce("2.8", TagFormat.RATIONAL) == Rational(28, 10)
    assert coerce("f/2.8", TagFormat.RATIONAL) is None
    assert coerce("1/2,bad,3/4", TagFormat.RATIONAL_ARRAY) == [Rational(1, 2), Rational(3, 4)]


def test_no_format_or_no_value_skips_coercion():
    assert coerce("6", None) is None
    assert coerce(None, TagFormat.ASCII) is None

