"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: builtins.py
@DateTime: 2026-03-02
@Docs: Built-in codecs for line protocol field kinds.
行协议字段类型的内置编解码器。
"""

import math
import numbers
import struct
from decimal import ROUND_HALF_EVEN, Decimal

from influx_lineproto.codecs.base import Codec, is_number

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1

# Single precision switches to exponent form past 7 integral digits.
_FLOAT32_GENERAL_DIGITS = 7
_FLOAT32_MAX_DIGITS = 9


def escape_string_value(value: str) -> str:
    """Escape backslash and double quote inside a string field value.
    转义字符串字段值中的反斜杠与双引号。
    """
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_float32(value: float) -> float:
    """Round a double to the nearest single precision value.
    将双精度值舍入为最接近的单精度值。

    Raises:
        ValueError: If the value is finite but outside the single precision range.
            有限值超出单精度范围时抛出。
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"Value [{value}] is out of float32 range") from exc


def _general_exponent(digits: str, exponent: int, negative: bool) -> str:
    mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
    sign = "-" if exponent < 0 else "+"
    return f"{'-' if negative else ''}{mantissa}E{sign}{abs(exponent):02d}"


def _general_fixed(digits: str, exponent: int, negative: bool) -> str:
    position = exponent + 1
    if position <= 0:
        text = "0." + "0" * (-position) + digits
    elif position >= len(digits):
        text = digits + "0" * (position - len(digits))
    else:
        text = f"{digits[:position]}.{digits[position:]}"
    return f"{'-' if negative else ''}{text}"


def format_float32(value: float) -> str:
    """Format a single precision value with the shortest round-trip digits.
    以最短可往返位数格式化单精度值。

    Fixed notation is used while the decimal exponent stays within the general
    range, otherwise ``1E+07`` style.
    十进制指数处于常规范围内时使用定点表示，否则使用 ``1E+07`` 形式。
    """
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    for precision in range(_FLOAT32_MAX_DIGITS):
        text = format(value, f".{precision}e")
        if to_float32(float(text)) == value:
            break
    mantissa, _, exp_text = text.partition("e")
    negative = mantissa.startswith("-")
    digits = mantissa.lstrip("-").replace(".", "").rstrip("0") or "0"
    exponent = int(exp_text)
    position = exponent + 1
    if position > max(len(digits), _FLOAT32_GENERAL_DIGITS) or position < -3:
        return _general_exponent(digits, exponent, negative)
    return _general_fixed(digits, exponent, negative)


def format_float64(value: float) -> str:
    """Format a double with 17 significant digits (round-trip safe).
    以 17 位有效数字格式化双精度值（可往返）。
    """
    return format(value, ".17g").replace("e", "E")


class _IntegerCodec(Codec[int]):
    suffix = "i"
    minimum = INT64_MIN
    maximum = INT64_MAX

    def parse(self, value: object) -> int:
        if not is_number(value):
            raise ValueError(f"Value [{value}] is not a number")
        if isinstance(value, numbers.Integral):
            result = int(value)
        elif isinstance(value, Decimal):
            if not value.is_finite():
                raise ValueError(f"Value [{value}] is not finite")
            result = int(value.to_integral_value(rounding=ROUND_HALF_EVEN))
        else:
            number = float(value)  # type: ignore[arg-type]
            if not math.isfinite(number):
                raise ValueError(f"Value [{value}] is not finite")
            result = round(number)
        if not self.minimum <= result <= self.maximum:
            raise ValueError(f"Value [{value}] is out of range [{self.minimum}, {self.maximum}]")
        return result

    def format(self, value: int) -> str:
        return f"{int(value)}{self.suffix}"


class SignedIntegerCodec(_IntegerCodec):
    """Codec for 64-bit signed integers, rendered with an ``i`` suffix.
    64 位有符号整数编解码器，渲染时带 ``i`` 后缀。
    """


class UnsignedIntegerCodec(_IntegerCodec):
    """Codec for 64-bit unsigned integers, rendered with a ``u`` suffix.
    64 位无符号整数编解码器，渲染时带 ``u`` 后缀。
    """

    suffix = "u"
    minimum = 0
    maximum = UINT64_MAX


class Float64Codec(Codec[float]):
    """Codec for double precision floats (``G17`` text, no suffix).
    双精度浮点编解码器（``G17`` 文本，无后缀）。
    """

    def parse(self, value: object) -> float:
        if not is_number(value):
            raise ValueError(f"Value [{value}] is not a double")
        try:
            return float(value)  # type: ignore[arg-type]
        except OverflowError as exc:
            raise ValueError(f"Value [{value}] is out of double range") from exc

    def format(self, value: float) -> str:
        return format_float64(value)


class Float32Codec(Codec[float]):
    """Codec for single precision floats (shortest text, no suffix).
    单精度浮点编解码器（最短文本，无后缀）。
    """

    def parse(self, value: object) -> float:
        return to_float32(Float64Codec().parse(value))

    def format(self, value: float) -> str:
        return format_float32(value)


class BooleanCodec(Codec[bool]):
    """Codec for booleans, rendered bare as ``true``/``false``.
    布尔编解码器，渲染为不带引号的 ``true``/``false``。
    """

    def parse(self, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if getattr(getattr(value, "dtype", None), "kind", None) == "b":
            return bool(value)
        raise ValueError(f"Value [{value}] is not a boolean")

    def format(self, value: bool) -> str:
        return "true" if value else "false"


class StringCodec(Codec[str]):
    """Codec for strings, rendered double-quoted.
    字符串编解码器，渲染时加双引号。
    """

    def parse(self, value: object) -> str:
        if isinstance(value, str):
            return value
        raise ValueError(f"Value [{value}] is not a string")

    def format(self, value: str) -> str:
        return f'"{escape_string_value(value)}"'


class DecimalCodec(Codec[Decimal]):
    """Codec for Decimal values, rendered as plain decimal text.
    Decimal 编解码器，渲染为普通十进制文本。
    """

    def parse(self, value: object) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if not is_number(value):
            raise ValueError(f"Value [{value}] is not a decimal")
        return Decimal(str(value))

    def format(self, value: Decimal) -> str:
        if not value.is_finite():
            return str(value)
        exponent = value.as_tuple().exponent
        if isinstance(exponent, int) and exponent < 0:
            return format(value, "f").rstrip("0").rstrip(".")
        return format(value, "f")


class DisplayCodec(Codec[str]):
    """Codec for arbitrary objects, stored and rendered as their display string.
    任意对象编解码器，以其显示字符串保存并加引号渲染。
    """

    def parse(self, value: object) -> str:
        return str(value)

    def format(self, value: str) -> str:
        return f'"{escape_string_value(value)}"'
