"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-03-02
@Docs: Write options for the line protocol encoder.
行协议编码器的写入选项。

Write options consumed by the encoder.
编码器使用的写入选项。

Environment variables / 环境变量:
        - INFLUX_PRECISION:
            Timestamp precision (ns, us, ms, s or nanosecond ... second).
            时间戳精度（ns、us、ms、s 或 nanosecond ... second）。
        - INFLUX_DEFAULT_TAGS:
            Comma-separated ``key=value`` pairs added to points lacking them.
            逗号分隔的 ``key=value`` 对，补充到缺少这些标签的数据点。

Examples:
        Defaults / 默认值:

        >>> from influx_lineproto.config import resolve_write_options
        >>> resolve_write_options(env_prefix="EXAMPLE_UNSET").precision.value
        'ns'

        Explicit precision / 显式精度:

        >>> resolve_write_options(precision="second").precision.value
        's'
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from influx_lineproto.exceptions import InvalidArgumentError
from influx_lineproto.precision import WritePrecision, parse_precision


@dataclass(frozen=True, slots=True)
class WriteOptions:
    """Encoder write options.

    编码器写入选项。

    Attributes:
        precision: Precision of rendered timestamps.
            输出时间戳的精度。
        default_tags: Tags used when a point does not set them.
            数据点未设置时使用的默认标签。
    """

    precision: WritePrecision = WritePrecision.NS
    default_tags: Mapping[str, str] = field(default_factory=dict)


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _split_tags(value: str | None) -> dict[str, str]:
    """
    Split ``k=v,k2=v2`` into a tag mapping.
    将 ``k=v,k2=v2`` 拆分为标签映射。

    Args:
        value: Tag list text.
            标签列表文本。

    Returns:
        dict[str, str]: Parsed tags.
        dict[str, str]: 解析后的标签。

    Raises:
        InvalidArgumentError: If an item has no ``=`` or an empty key.
            条目缺少 ``=`` 或键为空时抛出。
    """
    if value is None:
        return {}
    tags: dict[str, str] = {}
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        key, sep, tag_value = item.partition("=")
        if not sep or not key.strip():
            raise InvalidArgumentError(
                message=f"Invalid default tag '{item}', expected key=value",
                details={"item": item},
                error_code="invalid_default_tags",
            )
        tags[key.strip()] = tag_value.strip()
    return tags


def resolve_write_options(
    *,
    precision: WritePrecision | str | None = None,
    default_tags: Mapping[str, str] | None = None,
    env_prefix: str = "INFLUX",
) -> WriteOptions:
    """Resolve write options from parameters and environment variables.

    从参数和环境变量解析写入选项。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_PRECISION`, `{env_prefix}_DEFAULT_TAGS`
           环境变量：`{env_prefix}_PRECISION`、`{env_prefix}_DEFAULT_TAGS`
        3) defaults: nanoseconds, no default tags
           默认值：纳秒，无默认标签

    Args:
        precision: Timestamp precision.
            时间戳精度。
        default_tags: Default tags.
            默认标签。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 INFLUX）。

    Returns:
        A WriteOptions instance.
            返回 WriteOptions 实例。

    Raises:
        InvalidArgumentError: On an unknown precision or malformed tag list.
            精度未知或标签列表格式错误时抛出。
    """
    env_precision = _env_get(f"{env_prefix}_PRECISION")
    env_tags = _env_get(f"{env_prefix}_DEFAULT_TAGS")
    resolved_precision = parse_precision(precision if precision is not None else env_precision)
    resolved_tags = dict(default_tags) if default_tags is not None else _split_tags(env_tags)
    return WriteOptions(precision=resolved_precision, default_tags=resolved_tags)
