"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-03-02
@Docs: Codec protocol for coercing and formatting field values.
字段值强制转换与格式化的编解码器协议。
"""

import numbers
from decimal import Decimal
from typing import Protocol, TypeVar

T = TypeVar("T")


class Codec(Protocol[T]):
    """Codec protocol for field values of one kind.
    单一类型字段值的编解码器协议。
    """

    def parse(self, value: object) -> T:
        """Coerce a raw value into the codec's canonical type.
        将原始值强制转换为编解码器的规范类型。

        Args:
            value: The raw value (decoded column cell or user input).
                原始值（解码后的列单元或用户输入）。
        Returns:
            The coerced value of type T.
                转换后的 T 类型值。
        Raises:
            ValueError: If the value does not belong to this kind.
                值不属于该类型时抛出。
        """
        ...

    def format(self, value: T) -> str:
        """Render a canonical value as line protocol field text.
        将规范值渲染为行协议字段文本。

        Args:
            value: The canonical value.
                规范值。
        Returns:
            The field value text, suffix and quoting included.
                字段值文本，包含后缀与引号。
        """
        ...


def is_number(value: object) -> bool:
    """Return True for any numeric kind except booleans.
    对除布尔值以外的任意数值类型返回 True。

    Covers ``int``, ``float``, ``Decimal`` and numpy-style scalars registered with
    the ``numbers`` ABCs.
    覆盖 ``int``、``float``、``Decimal`` 以及注册到 ``numbers`` ABC 的 numpy 风格标量。
    """
    if value is None or isinstance(value, bool):
        return False
    if getattr(getattr(value, "dtype", None), "kind", None) == "b":
        return False
    return isinstance(value, (numbers.Real, Decimal))
