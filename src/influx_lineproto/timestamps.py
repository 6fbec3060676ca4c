"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: timestamps.py
@DateTime: 2026-03-02
@Docs: Wall-clock to nanosecond epoch conversion.
墙上时钟到纳秒纪元时间的转换。

All arithmetic uses Python ``int``, which is arbitrary precision, so timestamps
never overflow or wrap across unit conversions.
所有运算都使用 Python ``int``（任意精度），单位换算过程中不会溢出或回绕。

Zone handling / 时区处理:
    - aware datetime: converted to UTC first.
      带时区的 datetime：先转换为 UTC。
    - naive datetime: clock numbers are taken as UTC without shifting.
      无时区的 datetime：数值直接视为 UTC，不做偏移。
    - Arrow timestamp scalar: the stored epoch value is already UTC.
      Arrow 时间戳标量：存储的纪元值本身即为 UTC。
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import pyarrow as pa

from influx_lineproto.exceptions import InvalidArgumentError
from influx_lineproto.precision import WritePrecision, nanos_per_unit

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_NANOS_PER_MICRO = 1_000
_NANOS_PER_SECOND = 1_000_000_000
_MICROS_PER_SECOND = 1_000_000
_SECONDS_PER_DAY = 86_400

_ARROW_UNIT_FACTORS: dict[str, int] = {
    "s": 1_000_000_000,
    "ms": 1_000_000,
    "us": 1_000,
    "ns": 1,
}


def is_wall_clock(value: Any) -> bool:
    """Return True if the value is a wall-clock instant.
    如果值是墙上时钟时刻则返回 True。
    """
    return isinstance(value, (datetime, pa.TimestampScalar))


def timedelta_to_nanos(value: timedelta) -> int:
    """Convert a duration to whole nanoseconds.
    将时长转换为纳秒整数。
    """
    micros = (value.days * _SECONDS_PER_DAY + value.seconds) * _MICROS_PER_SECOND + value.microseconds
    return micros * _NANOS_PER_MICRO


def to_utc(value: datetime) -> datetime:
    """Normalize a datetime to an aware UTC datetime.
    将 datetime 规范化为带 UTC 时区的 datetime。
    """
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def get_nano_time(value: datetime | pa.TimestampScalar) -> int:
    """Return nanoseconds since the Unix epoch for a wall-clock value.
    返回墙上时钟值距 Unix 纪元的纳秒数。

    Args:
        value: A datetime (naive values are read as UTC) or an Arrow timestamp scalar.
            datetime（无时区视为 UTC）或 Arrow 时间戳标量。
    Returns:
        int: Nanoseconds since epoch.
            距纪元的纳秒数。
    Raises:
        InvalidArgumentError: If the value is not a wall-clock value.
            值不是墙上时钟值时抛出。
    """
    if isinstance(value, pa.TimestampScalar):
        if not value.is_valid:
            raise InvalidArgumentError(message="Timestamp scalar is null", error_code="null_timestamp")
        return int(value.value) * _ARROW_UNIT_FACTORS[value.type.unit]
    if isinstance(value, datetime):
        return timedelta_to_nanos(to_utc(value) - EPOCH)
    raise InvalidArgumentError(
        message=f"Unsupported wall-clock value: {value!r}",
        details={"type": type(value).__name__},
        error_code="unsupported_timestamp",
    )


def to_nanoseconds(value: Any, precision: WritePrecision | str | None = None) -> int:
    """Normalize any supported timestamp input to nanoseconds.
    将任何受支持的时间戳输入规范化为纳秒。

    Args:
        value: ``int`` in ``precision`` units, ``timedelta`` since epoch, datetime,
            or Arrow timestamp scalar.
            以 ``precision`` 为单位的 ``int``、距纪元的 ``timedelta``、datetime 或 Arrow 时间戳标量。
        precision: Unit of an integer value (default nanoseconds). Ignored otherwise.
            整数值的单位（默认纳秒），其他类型忽略此参数。
    Returns:
        int: Nanoseconds since epoch.
            距纪元的纳秒数。
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(message="Timestamp cannot be a boolean", error_code="unsupported_timestamp")
    if isinstance(value, int):
        return value * nanos_per_unit(precision)
    if isinstance(value, timedelta):
        return timedelta_to_nanos(value)
    return get_nano_time(value)


def datetime_from_nanos(value: int) -> datetime:
    """Return the UTC datetime of a nanosecond timestamp, truncated toward zero to microseconds.
    返回纳秒时间戳对应的 UTC datetime（向零截断到微秒）。
    """
    micros = abs(value) // _NANOS_PER_MICRO
    return EPOCH + timedelta(microseconds=micros if value >= 0 else -micros)


def format_nanos(value: int) -> str:
    """Render a nanosecond timestamp as exact ISO 8601 UTC text.
    将纳秒时间戳渲染为精确的 ISO 8601 UTC 文本。

    Args:
        value: Nanoseconds since epoch.
            距纪元的纳秒数。
    Returns:
        str: ``YYYY-MM-DDTHH:MM:SS.fffffffffZ`` with all nine fractional digits.
            带九位小数的 ``YYYY-MM-DDTHH:MM:SS.fffffffffZ``。

    Examples:
        >>> format_nanos(-1_500)
        '1969-12-31T23:59:59.999998500Z'
    """
    seconds, nanos = divmod(value, _NANOS_PER_SECOND)
    moment = EPOCH + timedelta(seconds=seconds)
    return f"{moment:%Y-%m-%dT%H:%M:%S}.{nanos:09d}Z"
