"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: precision.py
@DateTime: 2026-03-02
@Docs: Write precision constants and helpers.
写入精度常量与辅助函数。
"""

from enum import StrEnum

from influx_lineproto.exceptions import InvalidArgumentError


class WritePrecision(StrEnum):
    """Supported timestamp precisions.
    支持的时间戳精度。
    """

    NS = "ns"
    US = "us"
    MS = "ms"
    S = "s"


_NANOS_PER_UNIT: dict[WritePrecision, int] = {
    WritePrecision.NS: 1,
    WritePrecision.US: 1_000,
    WritePrecision.MS: 1_000_000,
    WritePrecision.S: 1_000_000_000,
}

_V3_NAMES: dict[WritePrecision, str] = {
    WritePrecision.NS: "nanosecond",
    WritePrecision.US: "microsecond",
    WritePrecision.MS: "millisecond",
    WritePrecision.S: "second",
}

_ALIASES: dict[str, WritePrecision] = {
    **{p.value: p for p in WritePrecision},
    **{name: p for p, name in _V3_NAMES.items()},
}


def _unsupported(value: object) -> InvalidArgumentError:
    return InvalidArgumentError(
        message=f"Unsupported precision '{value}'",
        details={"precision": value},
        error_code="unsupported_precision",
    )


def parse_precision(value: WritePrecision | str | None) -> WritePrecision:
    """Resolve a precision from an enum member or its text form.
    从枚举成员或文本形式解析精度。

    Accepts ``ns``/``us``/``ms``/``s`` and the long forms ``nanosecond`` etc.
    ``None`` resolves to nanoseconds.
    接受 ``ns``/``us``/``ms``/``s`` 及其长名称；``None`` 解析为纳秒。

    Args:
        value: Precision member, text, or None.
            精度成员、文本或 None。
    Returns:
        WritePrecision: Resolved precision.
            解析后的精度。
    Raises:
        InvalidArgumentError: If the text is not a known precision.
            文本不是已知精度时抛出。
    """
    if value is None:
        return WritePrecision.NS
    if isinstance(value, WritePrecision):
        return value
    key = str(value).strip().lower()
    if key not in _ALIASES:
        raise _unsupported(value)
    return _ALIASES[key]


def nanos_per_unit(precision: WritePrecision | str | None) -> int:
    """Return how many nanoseconds one unit of the precision holds.
    返回该精度的一个单位包含的纳秒数。
    """
    return _NANOS_PER_UNIT[parse_precision(precision)]


def to_v2_api_string(precision: WritePrecision | str) -> str:
    """Return the v2 write API name of a precision (``ns``, ``us``, ...).
    返回精度在 v2 写入 API 中的名称。

    Args:
        precision: Precision to convert.
            待转换的精度。
    Returns:
        str: API name.
            API 名称。
    """
    return parse_precision(precision).value


def to_v3_api_string(precision: WritePrecision | str) -> str:
    """Return the v3 write API name of a precision (``nanosecond``, ...).
    返回精度在 v3 写入 API 中的名称。

    Args:
        precision: Precision to convert.
            待转换的精度。
    Returns:
        str: API name.
            API 名称。
    """
    return _V3_NAMES[parse_precision(precision)]
