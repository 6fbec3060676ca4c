"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: encoder.py
@DateTime: 2026-03-02
@Docs: Line protocol encoder.
行协议编码器。

Grammar / 语法:
    ``measurement[,tag=value...] field=value[,field=value...][ timestamp]``

Escaping / 转义:
    - measurement: space and comma (``=`` is kept as is).
      测量名：转义空格与逗号（``=`` 保持不变）。
    - tag keys, tag values, field keys: space, comma and ``=``.
      标签键、标签值、字段键：转义空格、逗号与 ``=``。
    - newline, carriage return and tab always become ``\\n``, ``\\r``, ``\\t``.
      换行、回车与制表符始终写为 ``\\n``、``\\r``、``\\t``。

A point whose fields are all dropped (null, NaN, infinity) encodes to ``""``,
which callers must treat as "do not write this point".
所有字段都被丢弃（null、NaN、无穷）的数据点编码为 ``""``，调用方应视为“不写入”。
"""

from collections.abc import Iterable, Mapping
from typing import Protocol

from influx_lineproto.config import WriteOptions
from influx_lineproto.exceptions import InvalidArgumentError
from influx_lineproto.fields import FieldValue
from influx_lineproto.precision import WritePrecision, nanos_per_unit, parse_precision

_CONTROL_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}

_MEASUREMENT_TABLE = str.maketrans({**_CONTROL_ESCAPES, " ": "\\ ", ",": "\\,"})
_KEY_TABLE = str.maketrans({**_CONTROL_ESCAPES, " ": "\\ ", ",": "\\,", "=": "\\="})


class PointLike(Protocol):
    """Read interface shared by Point and PointValues.
    Point 与 PointValues 共享的只读接口。
    """

    @property
    def measurement(self) -> str | None: ...

    @property
    def tags(self) -> dict[str, str]: ...

    @property
    def timestamp(self) -> int | None: ...

    def field_values(self) -> list[tuple[str, FieldValue]]: ...


def escape_measurement(value: str) -> str:
    """Escape a measurement name.
    转义测量名。
    """
    return value.translate(_MEASUREMENT_TABLE)


def escape_key(value: str) -> str:
    """Escape a tag key, tag value or field key.
    转义标签键、标签值或字段键。
    """
    return value.translate(_KEY_TABLE)


def _render_tags(tags: Mapping[str, str]) -> str:
    return "".join(f",{escape_key(k)}={escape_key(v)}" for k, v in tags.items() if k and v)


def _render_fields(fields: Iterable[tuple[str, FieldValue]]) -> str:
    return ",".join(f"{escape_key(name)}={field.format()}" for name, field in fields if field.is_defined())


def to_line_protocol(
    point: PointLike,
    precision: WritePrecision | str | None = None,
    *,
    default_tags: Mapping[str, str] | None = None,
) -> str:
    """Encode one point as a line protocol line (no trailing newline).
    将单个数据点编码为一行行协议（不带结尾换行）。

    Args:
        point: Point or PointValues to encode.
            待编码的 Point 或 PointValues。
        precision: Precision of the rendered timestamp (default nanoseconds).
            输出时间戳的精度（默认纳秒）。
        default_tags: Tags used when the point does not set them (optional).
            数据点未设置时使用的默认标签（可选）。
    Returns:
        str: The line, or ``""`` when no field survives filtering.
            编码后的行；若没有字段保留则返回 ``""``。
    Raises:
        InvalidArgumentError: If the point has no measurement (PointValues only).
            数据点没有测量名时抛出（仅 PointValues 可能出现）。
    """
    measurement = point.measurement
    if not measurement:
        raise InvalidArgumentError(message="Missing measurement!", error_code="missing_measurement")

    fields = _render_fields(point.field_values())
    if not fields:
        return ""

    tags = point.tags
    if default_tags:
        merged = {**default_tags, **tags}
        tags = {k: merged[k] for k in sorted(merged)}

    line = f"{escape_measurement(measurement)}{_render_tags(tags)} {fields}"
    timestamp = point.timestamp
    if timestamp is None:
        return line
    # Truncate toward zero, timestamps before the epoch included.
    divisor = nanos_per_unit(precision)
    scaled = abs(timestamp) // divisor
    return f"{line} {-scaled if timestamp < 0 else scaled}"


class LineProtocolEncoder:
    """Encoder bound to a set of write options.
    绑定写入选项的编码器。
    """

    def __init__(self, options: WriteOptions | None = None) -> None:
        self.options = options or WriteOptions()

    def encode(self, point: PointLike) -> str:
        """Encode one point; ``""`` means "skip".
        编码单个数据点；``""`` 表示“跳过”。
        """
        return to_line_protocol(point, self.options.precision, default_tags=self.options.default_tags)

    def encode_many(self, points: Iterable[PointLike]) -> str:
        """Encode points into newline separated text, skipping empty lines.
        将多个数据点编码为换行分隔文本，跳过空行。
        """
        return "\n".join(line for line in map(self.encode, points) if line)


def encode_points(
    points: Iterable[PointLike],
    precision: WritePrecision | str | None = None,
    *,
    default_tags: Mapping[str, str] | None = None,
) -> str:
    """Encode points into a newline separated write body.
    将多个数据点编码为换行分隔的写入正文。

    Args:
        points: Points to encode.
            待编码的数据点。
        precision: Timestamp precision (default nanoseconds).
            时间戳精度（默认纳秒）。
        default_tags: Tags used when a point does not set them (optional).
            数据点未设置时使用的默认标签（可选）。
    Returns:
        str: Lines joined by ``\\n``; points encoding to ``""`` are left out.
            以 ``\\n`` 连接的行；编码为 ``""`` 的数据点会被省略。
    """
    options = WriteOptions(precision=parse_precision(precision), default_tags=dict(default_tags or {}))
    return LineProtocolEncoder(options).encode_many(points)
