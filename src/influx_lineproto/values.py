"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: values.py
@DateTime: 2026-03-02
@Docs: Mutable point values for decode -> mutate -> re-encode pipelines.
可变的数据点值，用于 解码 -> 修改 -> 重新编码 流程。

PointValues is mutated in place and is not safe to share between threads
without external locking. Keep one instance inside a single task.
PointValues 原地修改，未加外部锁时不可在线程间共享，请限定在单个任务内使用。
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from influx_lineproto.exceptions import check_non_empty_string
from influx_lineproto.fields import FieldKind, FieldValue, field_value_of
from influx_lineproto.helpers import SortedMap
from influx_lineproto.precision import WritePrecision
from influx_lineproto.timestamps import to_nanoseconds

if TYPE_CHECKING:
    from influx_lineproto.point import Point

logger = logging.getLogger(__name__)


class PointValues:
    """
    PointValues
    数据点值

    Measurement, tags, fields and timestamp of one point, mutated in place.
    单个数据点的测量名、标签、字段与时间戳，原地修改。

    Every setter returns ``self`` so calls can be chained.
    每个 setter 都返回 ``self``，便于链式调用。
    """

    __slots__ = ("_fields", "_measurement", "_tags", "_time")

    def __init__(self, measurement: str | None = None) -> None:
        self._measurement: str | None = measurement
        self._tags: SortedMap[str] = SortedMap()
        self._fields: SortedMap[FieldValue] = SortedMap()
        self._time: int | None = None

    # -- measurement / timestamp ---------------------------------------------

    @property
    def measurement(self) -> str | None:
        """Measurement name, or None while unset.
        测量名，未设置时为 None。
        """
        return self._measurement

    def set_measurement(self, measurement: str) -> "PointValues":
        self._measurement = measurement
        return self

    @property
    def timestamp(self) -> int | None:
        """Timestamp in nanoseconds since epoch, or None.
        距纪元的纳秒时间戳，未设置时为 None。
        """
        return self._time

    def set_timestamp(self, value: Any, precision: WritePrecision | str | None = None) -> "PointValues":
        """Set the timestamp.
        设置时间戳。

        Args:
            value: ``int`` in ``precision`` units, ``timedelta`` since epoch or a
                datetime (naive values are taken as UTC, aware values converted).
                以 ``precision`` 为单位的 ``int``、距纪元的 ``timedelta`` 或 datetime
                （无时区视为 UTC，带时区则转换）。
            precision: Unit of an integer value (default nanoseconds).
                整数值的单位（默认纳秒）。
        """
        self._time = None if value is None else to_nanoseconds(value, precision)
        return self

    # -- tags ----------------------------------------------------------------

    def get_tag(self, name: str) -> str | None:
        return self._tags.get(name)

    def set_tag(self, name: str, value: str | None) -> "PointValues":
        """Add or replace a tag. An empty value deletes the tag.
        添加或替换标签；空值会删除该标签。
        """
        if not value:
            if name in self._tags:
                logger.warning(
                    "Empty tags will cause deletion of, tag [%s], measurement [%s]", name, self._measurement
                )
                del self._tags[name]
            else:
                logger.warning("Empty tags has no effect, tag [%s], measurement [%s]", name, self._measurement)
            return self
        self._tags[name] = str(value)
        return self

    def remove_tag(self, name: str) -> "PointValues":
        self._tags.pop(name, None)
        return self

    def tag_names(self) -> list[str]:
        return self._tags.keys_list()

    @property
    def tags(self) -> dict[str, str]:
        """Tags in key order, as a new dict.
        按键排序的标签（新 dict）。
        """
        return dict(self._tags)

    # -- fields --------------------------------------------------------------

    def get_field(self, name: str) -> Any:
        """Return the Python value of a field, or None if absent.
        返回字段的 Python 值，不存在时返回 None。
        """
        field = self._fields.get(name)
        return None if field is None else field.value

    def get_field_kind(self, name: str) -> FieldKind | None:
        field = self._fields.get(name)
        return None if field is None else field.kind

    def get_field_type(self, name: str) -> type | None:
        field = self._fields.get(name)
        return None if field is None or field.value is None else type(field.value)

    def get_field_value(self, name: str) -> FieldValue | None:
        return self._fields.get(name)

    def set_field(self, name: str, value: Any, kind: FieldKind | str | None = None) -> "PointValues":
        """Add or replace a field, including its kind.
        添加或替换字段（包括其类型）。

        Args:
            name: Non-empty field name.
                非空字段名。
            value: Field value; classified once here.
                字段值，在此处分类一次。
            kind: Explicit kind to coerce into (optional).
                显式指定的目标类型（可选）。
        Raises:
            InvalidArgumentError: If the name is empty or the value does not fit the kind.
                字段名为空或值不符合类型时抛出。
        """
        check_non_empty_string(name, "Field name")
        self._fields[name] = field_value_of(name, value, kind)
        return self

    def set_fields(self, fields: Mapping[str, Any]) -> "PointValues":
        for name, value in fields.items():
            self.set_field(name, value)
        return self

    def set_integer_field(self, name: str, value: int) -> "PointValues":
        return self.set_field(name, value, FieldKind.SIGNED_INTEGER)

    def set_uinteger_field(self, name: str, value: int) -> "PointValues":
        return self.set_field(name, value, FieldKind.UNSIGNED_INTEGER)

    def set_float_field(self, name: str, value: float) -> "PointValues":
        return self.set_field(name, value, FieldKind.FLOAT64)

    def set_float32_field(self, name: str, value: float) -> "PointValues":
        return self.set_field(name, value, FieldKind.FLOAT32)

    def set_string_field(self, name: str, value: str) -> "PointValues":
        return self.set_field(name, value, FieldKind.STRING)

    def set_boolean_field(self, name: str, value: bool) -> "PointValues":
        return self.set_field(name, value, FieldKind.BOOLEAN)

    def remove_field(self, name: str) -> "PointValues":
        self._fields.pop(name, None)
        return self

    def field_names(self) -> list[str]:
        return self._fields.keys_list()

    @property
    def fields(self) -> dict[str, Any]:
        """Field Python values in key order, as a new dict.
        按键排序的字段 Python 值（新 dict）。
        """
        return {name: field.value for name, field in self._fields.items()}

    def field_values(self) -> list[tuple[str, FieldValue]]:
        """Return ``(name, FieldValue)`` pairs in key order.
        按键顺序返回 ``(name, FieldValue)`` 对。
        """
        return list(self._fields.items())

    def has_fields(self) -> bool:
        return len(self._fields) > 0

    # -- conversion ----------------------------------------------------------

    def copy(self) -> "PointValues":
        """Return an independent copy.
        返回独立副本。
        """
        clone = PointValues(self._measurement)
        clone._tags = self._tags.copy()
        clone._fields = self._fields.copy()
        clone._time = self._time
        return clone

    def as_point(self, measurement: str | None = None) -> "Point":
        """Snapshot these values as an immutable Point.
        将当前值快照为不可变 Point。

        Args:
            measurement: Measurement to set before converting (optional).
                转换前设置的测量名（可选）。
        Raises:
            InvalidArgumentError: If no measurement is set.
                未设置测量名时抛出。
        """
        from influx_lineproto.point import Point

        if measurement is not None:
            self.set_measurement(measurement)
        return Point.from_values(self)

    def to_line_protocol(self, precision: WritePrecision | str | None = None) -> str:
        """Encode these values; see :func:`influx_lineproto.encoder.to_line_protocol`.
        编码这些值；参见 :func:`influx_lineproto.encoder.to_line_protocol`。

        Raises:
            InvalidArgumentError: If no measurement is set. A Point always has one.
                未设置测量名时抛出。Point 总是带有测量名。
        """
        from influx_lineproto.encoder import to_line_protocol

        return to_line_protocol(self, precision)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointValues):
            return NotImplemented
        return (
            self._measurement == other._measurement
            and self._time == other._time
            and self._tags == other._tags
            and self._fields == other._fields
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"PointValues(measurement={self._measurement!r}, tags={dict(self._tags)!r}, "
            f"fields={self.fields!r}, timestamp={self._time!r})"
        )
