"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: resolver.py
@DateTime: 2026-03-02
@Docs: Column metadata driven value coercion.
基于列元数据的值强制转换。

Column metadata / 列元数据:
    key ``iox::column::type``, value ``iox::column_type::<category>[::<subtype>]``.
    键为 ``iox::column::type``，值为 ``iox::column_type::<category>[::<subtype>]``。

Decoding is lenient: when a declared type does not match the decoded value, the
raw value is returned unchanged and a warning is logged. Nothing here raises.
解码是宽松的：声明类型与解码值不一致时原样返回原始值并记录警告，此处不会抛出异常。
"""

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import pyarrow as pa

from influx_lineproto.fields import FieldKind, FieldValue
from influx_lineproto.timestamps import get_nano_time, is_wall_clock

logger = logging.getLogger(__name__)

COLUMN_TYPE_METADATA_KEY = "iox::column::type"
TIME_COLUMN_NAME = "time"
MEASUREMENT_COLUMN_NAMES: tuple[str, ...] = ("measurement", "iox::measurement")


class ColumnCategory(StrEnum):
    """Column categories carried by the metadata.
    元数据携带的列类别。
    """

    FIELD = "field"
    TAG = "tag"
    TIMESTAMP = "timestamp"
    MEASUREMENT = "measurement"


_FIELD_SUBTYPES: dict[str, tuple[FieldKind, str]] = {
    "integer": (FieldKind.SIGNED_INTEGER, "is not a long"),
    "uinteger": (FieldKind.UNSIGNED_INTEGER, "is not an unsigned long"),
    "float": (FieldKind.FLOAT64, "is not a double"),
    "string": (FieldKind.STRING, "is not a string"),
    "boolean": (FieldKind.BOOLEAN, "is not a boolean"),
}


@dataclass(frozen=True, slots=True)
class ColumnType:
    """Parsed column classifier.
    解析后的列分类。

    Attributes:
        category: ``field``, ``tag``, ``timestamp`` or ``measurement``.
            列类别。
        subtype: Field subtype (``integer`` ...), None for other categories.
            字段子类型，其他类别为 None。
    """

    category: str
    subtype: str | None = None


def parse_column_type(metadata: str) -> ColumnType | None:
    """Parse ``iox::column_type::<category>[::<subtype>]``.
    解析 ``iox::column_type::<category>[::<subtype>]``。

    Args:
        metadata: Metadata value.
            元数据值。
    Returns:
        ColumnType | None: Parsed classifier, or None when malformed.
            解析结果；格式错误时返回 None。
    """
    parts = [part for part in metadata.split(":") if part]
    if len(parts) < 3:
        logger.warning("Malformed column metadata [%s]", metadata)
        return None
    subtype = parts[3] if parts[2] == ColumnCategory.FIELD and len(parts) > 3 else None
    return ColumnType(category=parts[2], subtype=subtype)


def column_metadata(field: pa.Field) -> str | None:
    """Return the column type metadata of an Arrow field, if any.
    返回 Arrow 字段的列类型元数据（若存在）。
    """
    metadata = field.metadata
    if not metadata:
        return None
    raw = metadata.get(COLUMN_TYPE_METADATA_KEY.encode())
    if raw is None:
        return None
    return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)


def _map_field_value(subtype: str | None, value: Any) -> Any:
    entry = _FIELD_SUBTYPES.get(subtype or "")
    if entry is None:
        return value
    kind, mismatch = entry
    try:
        return FieldValue.of(kind, value)
    except (ValueError, TypeError):
        logger.warning("Value [%s] %s", value, mismatch)
        return value


def get_mapped_value(column_name: str, metadata: str | None, value: Any) -> Any:
    """Coerce a decoded column value according to its metadata.
    根据列元数据强制转换解码后的列值。

    Args:
        column_name: Column name.
            列名。
        metadata: Column type metadata, or None.
            列类型元数据，或 None。
        value: Raw decoded value.
            解码后的原始值。
    Returns:
        Any: A FieldValue for matching field subtypes, nanoseconds (``int``) for
            wall-clock timestamps, otherwise the raw value unchanged.
            字段子类型匹配时返回 FieldValue，墙上时钟时间戳返回纳秒 ``int``，否则原样返回。
    """
    if value is None:
        return None
    if metadata is None:
        if column_name == TIME_COLUMN_NAME and is_wall_clock(value):
            return get_nano_time(value)
        return value

    column_type = parse_column_type(metadata)
    if column_type is None:
        return value
    if column_type.category == ColumnCategory.FIELD:
        return _map_field_value(column_type.subtype, value)
    if column_type.category == ColumnCategory.TIMESTAMP and is_wall_clock(value):
        return get_nano_time(value)
    return value


def get_mapped_value_for_field(field: pa.Field, value: Any) -> Any:
    """Same as :func:`get_mapped_value`, reading name and metadata from an Arrow field.
    同 :func:`get_mapped_value`，名称与元数据取自 Arrow 字段。
    """
    return get_mapped_value(field.name, column_metadata(field), value)
