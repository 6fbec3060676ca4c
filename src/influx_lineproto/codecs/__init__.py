"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-02
@Docs: Codecs for coercing/formatting line protocol field values.
行协议字段值的强制转换与格式化编解码器。
"""

from influx_lineproto.codecs.base import Codec, is_number
from influx_lineproto.codecs.builtins import (
    BooleanCodec,
    DecimalCodec,
    DisplayCodec,
    Float32Codec,
    Float64Codec,
    SignedIntegerCodec,
    StringCodec,
    UnsignedIntegerCodec,
    escape_string_value,
    format_float32,
    format_float64,
)

__all__ = [
    "BooleanCodec",
    "Codec",
    "DecimalCodec",
    "DisplayCodec",
    "Float32Codec",
    "Float64Codec",
    "SignedIntegerCodec",
    "StringCodec",
    "UnsignedIntegerCodec",
    "escape_string_value",
    "format_float32",
    "format_float64",
    "is_number",
]
