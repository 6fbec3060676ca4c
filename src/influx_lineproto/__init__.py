"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-02
@Docs: Package exports for influx_lineproto.
influx_lineproto 包导出定义。
"""

from influx_lineproto.codecs import is_number
from influx_lineproto.config import WriteOptions, resolve_write_options
from influx_lineproto.converter import convert_row, iter_point_values, iter_points
from influx_lineproto.encoder import LineProtocolEncoder, encode_points, to_line_protocol
from influx_lineproto.exceptions import InvalidArgumentError, LineProtocolError
from influx_lineproto.fields import FieldKind, FieldValue
from influx_lineproto.point import Point, PointBuilder
from influx_lineproto.precision import WritePrecision, parse_precision, to_v2_api_string, to_v3_api_string
from influx_lineproto.resolver import (
    ColumnCategory,
    ColumnType,
    get_mapped_value,
    get_mapped_value_for_field,
    parse_column_type,
)
from influx_lineproto.timestamps import datetime_from_nanos, format_nanos, get_nano_time, to_nanoseconds
from influx_lineproto.values import PointValues

__all__ = [
    "Point",
    "PointBuilder",
    "PointValues",
    "FieldKind",
    "FieldValue",
    "LineProtocolEncoder",
    "to_line_protocol",
    "encode_points",
    "WritePrecision",
    "parse_precision",
    "to_v2_api_string",
    "to_v3_api_string",
    "ColumnCategory",
    "ColumnType",
    "parse_column_type",
    "is_number",
    "get_mapped_value",
    "get_mapped_value_for_field",
    "convert_row",
    "iter_point_values",
    "iter_points",
    "get_nano_time",
    "to_nanoseconds",
    "datetime_from_nanos",
    "format_nanos",
    "WriteOptions",
    "resolve_write_options",
    "LineProtocolError",
    "InvalidArgumentError",
]
