"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_codecs.py
@DateTime: 2026-03-02
@Docs: Tests for built-in codecs.
内置 codecs 测试。
"""

from decimal import Decimal

import pytest

from influx_lineproto.codecs import (
    BooleanCodec,
    DecimalCodec,
    Float32Codec,
    SignedIntegerCodec,
    StringCodec,
    UnsignedIntegerCodec,
    escape_string_value,
    format_float32,
    format_float64,
    is_number,
)


def test_is_number() -> None:
    assert is_number(1)
    assert is_number(1.2)
    assert is_number(-1.2)
    assert is_number(Decimal("3"))
    assert not is_number("1")
    assert not is_number("a")
    assert not is_number(True)
    assert not is_number(None)


def test_signed_integer_codec() -> None:
    codec = SignedIntegerCodec()
    assert codec.parse(2**63 - 1) == 2**63 - 1
    assert codec.format(-5) == "-5i"
    with pytest.raises(ValueError):
        codec.parse(2**63)
    with pytest.raises(ValueError):
        codec.parse(float("nan"))
    with pytest.raises(ValueError):
        codec.parse(True)


def test_unsigned_integer_codec() -> None:
    codec = UnsignedIntegerCodec()
    assert codec.parse(2**64 - 1) == 2**64 - 1
    assert codec.format(5) == "5u"
    with pytest.raises(ValueError):
        codec.parse(-1)


def test_float32_codec() -> None:
    codec = Float32Codec()
    assert codec.parse(35) == 35.0
    with pytest.raises(ValueError):
        codec.parse(1e300)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (35.0, "35"),
        (-2.5, "-2.5"),
        (1.1, "1.1"),
        (0.0001, "0.0001"),
        (0.00001, "1E-05"),
        (1234567.0, "1234567"),
        (12345678.0, "12345678"),
        (1e10, "1E+10"),
        (0.0, "0"),
    ],
)
def test_format_float32(value: float, expected: str) -> None:
    assert format_float32(Float32Codec().parse(value)) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (250.69, "250.69"),
        (13.3, "13.300000000000001"),
        (2.0, "2"),
        (1e20, "1E+20"),
        (-0.5, "-0.5"),
    ],
)
def test_format_float64(value: float, expected: str) -> None:
    assert format_float64(value) == expected


def test_boolean_codec() -> None:
    codec = BooleanCodec()
    assert codec.parse(False) is False
    assert codec.format(True) == "true"
    with pytest.raises(ValueError):
        codec.parse(1)


def test_string_codec() -> None:
    codec = StringCodec()
    assert codec.format('a"b\\c') == '"a\\"b\\\\c"'
    with pytest.raises(ValueError):
        codec.parse(10)
    assert escape_string_value("plain") == "plain"


def test_decimal_codec() -> None:
    codec = DecimalCodec()
    assert codec.format(codec.parse(25.6)) == "25.6"
    assert codec.format(Decimal("12.340")) == "12.34"
    assert codec.format(Decimal("1E+2")) == "100"
    assert codec.format(Decimal("-0.50")) == "-0.5"
