"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: fields.py
@DateTime: 2026-03-02
@Docs: Field kinds and the tagged field value.
字段类型与带标签的字段值。

A field value is classified exactly once, when it is set on a point. The encoder
only dispatches on the stored kind and never re-inspects the Python type.
字段值仅在写入数据点时分类一次；编码器只根据保存的类型分派，不再检查 Python 类型。
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Any

from influx_lineproto.codecs import (
    BooleanCodec,
    Codec,
    DecimalCodec,
    DisplayCodec,
    Float32Codec,
    Float64Codec,
    SignedIntegerCodec,
    StringCodec,
    UnsignedIntegerCodec,
)
from influx_lineproto.exceptions import InvalidArgumentError


class FieldKind(StrEnum):
    """Closed set of field value kinds.
    字段值类型的封闭集合。
    """

    SIGNED_INTEGER = "integer"
    UNSIGNED_INTEGER = "uinteger"
    FLOAT32 = "float32"
    FLOAT64 = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    DECIMAL = "decimal"
    OTHER = "other"
    NULL = "null"


CODECS: dict[FieldKind, Codec[Any]] = {
    FieldKind.SIGNED_INTEGER: SignedIntegerCodec(),
    FieldKind.UNSIGNED_INTEGER: UnsignedIntegerCodec(),
    FieldKind.FLOAT32: Float32Codec(),
    FieldKind.FLOAT64: Float64Codec(),
    FieldKind.BOOLEAN: BooleanCodec(),
    FieldKind.STRING: StringCodec(),
    FieldKind.DECIMAL: DecimalCodec(),
    FieldKind.OTHER: DisplayCodec(),
}


@dataclass(frozen=True, slots=True)
class FieldValue:
    """A field value together with its kind.
    字段值及其类型。

    Attributes:
        kind: Field kind.
            字段类型。
        value: Canonical Python value for the kind (``None`` for NULL).
            该类型的规范 Python 值（NULL 时为 ``None``）。
    """

    kind: FieldKind
    value: Any

    def is_defined(self) -> bool:
        """Return False for values the encoder must drop (null, NaN, infinity).
        对编码器必须丢弃的值（null、NaN、无穷）返回 False。
        """
        if self.kind is FieldKind.NULL or self.value is None:
            return False
        if self.kind in (FieldKind.FLOAT32, FieldKind.FLOAT64):
            return math.isfinite(self.value)
        if self.kind is FieldKind.DECIMAL:
            return self.value.is_finite()
        return True

    def format(self) -> str:
        """Render the value as line protocol field text.
        将值渲染为行协议字段文本。
        """
        return CODECS[self.kind].format(self.value)

    @classmethod
    def of(cls, kind: FieldKind | str, value: Any) -> "FieldValue":
        """Coerce a value into the given kind.
        将值强制转换为指定类型。

        Raises:
            ValueError: If the value does not fit the kind.
                值不符合该类型时抛出。
        """
        kind = FieldKind(kind)
        if value is None or kind is FieldKind.NULL:
            return cls(FieldKind.NULL, None)
        return cls(kind, CODECS[kind].parse(value))


def _infer_kind(value: Any) -> FieldKind:
    """Infer the field kind of a plain Python or numpy-style value.
    推断普通 Python 值或 numpy 风格标量的字段类型。
    """
    if value is None:
        return FieldKind.NULL
    if isinstance(value, bool):
        return FieldKind.BOOLEAN
    if isinstance(value, int):
        return FieldKind.SIGNED_INTEGER
    if isinstance(value, float):
        return FieldKind.FLOAT64
    if isinstance(value, Decimal):
        return FieldKind.DECIMAL
    if isinstance(value, str):
        return FieldKind.STRING
    dtype = getattr(value, "dtype", None)
    dtype_kind = getattr(dtype, "kind", None)
    if dtype_kind == "b":
        return FieldKind.BOOLEAN
    if dtype_kind == "u":
        return FieldKind.UNSIGNED_INTEGER
    if dtype_kind == "i":
        return FieldKind.SIGNED_INTEGER
    if dtype_kind == "f":
        return FieldKind.FLOAT32 if getattr(dtype, "itemsize", 8) <= 4 else FieldKind.FLOAT64
    return FieldKind.OTHER


def field_value_of(name: str, value: Any, kind: FieldKind | str | None = None) -> FieldValue:
    """Classify a value into a FieldValue, once, at insertion time.
    在写入时对值进行一次分类，得到 FieldValue。

    Args:
        name: Field name, used in error messages.
            字段名，用于错误消息。
        value: Raw value or an already classified FieldValue.
            原始值或已分类的 FieldValue。
        kind: Explicit kind to coerce into (optional).
            显式指定的目标类型（可选）。
    Returns:
        FieldValue: Classified value.
            分类后的值。
    Raises:
        InvalidArgumentError: If the value cannot be represented in the kind,
            e.g. an integer outside the 64-bit range.
            值无法以该类型表示时抛出，例如超出 64 位范围的整数。
    """
    if isinstance(value, FieldValue):
        if kind is None or FieldKind(kind) is value.kind:
            return value
        value = value.value
    target = FieldKind(kind) if kind is not None else _infer_kind(value)
    try:
        return FieldValue.of(target, value)
    except (ValueError, TypeError) as exc:
        raise InvalidArgumentError(
            message=f"Invalid value for field [{name}] of kind '{target.value}': {exc}",
            details={"field": name, "kind": target.value},
            error_code="invalid_field_value",
        ) from exc
