"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: point.py
@DateTime: 2026-03-02
@Docs: Immutable point and its builder.
不可变数据点及其构建器。

Point is copy-on-write: every modifying method returns a new Point and leaves the
receiver untouched, so a Point can be shared freely across threads.
Point 采用写时复制：所有修改方法都返回新的 Point，原对象保持不变，可在线程间自由共享。

Examples:
        >>> from influx_lineproto import Point
        >>> Point("h2o").tag("location", "europe").field("level", 2).time(123).to_line_protocol()
        'h2o,location=europe level=2i 123'
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from influx_lineproto.encoder import to_line_protocol
from influx_lineproto.exceptions import InvalidArgumentError, check_non_empty_string
from influx_lineproto.fields import FieldKind, FieldValue
from influx_lineproto.precision import WritePrecision
from influx_lineproto.values import PointValues


class Point:
    """
    Point
    数据点

    One measurement event: name, tags, typed fields and an optional timestamp.
    一次测量事件：名称、标签、类型化字段以及可选时间戳。

    Notes:
        Tags and fields are kept in ascending key order for deterministic output.
        标签与字段按键升序保存，保证输出确定。
    """

    __slots__ = ("_values",)

    def __init__(self, measurement: str) -> None:
        check_non_empty_string(measurement, "Measurement name")
        self._values = PointValues(measurement)

    @classmethod
    def _wrap(cls, values: PointValues) -> "Point":
        point = cls.__new__(cls)
        point._values = values
        return point

    @classmethod
    def from_values(cls, values: PointValues) -> "Point":
        """Create a Point from a snapshot of mutable values.
        从可变值的快照创建 Point。

        Raises:
            InvalidArgumentError: If the values carry no measurement.
                值中没有测量名时抛出。
        """
        if not values.measurement:
            raise InvalidArgumentError(message="Missing measurement!", error_code="missing_measurement")
        return cls._wrap(values.copy())

    @classmethod
    def measurement_of(cls, measurement: str) -> "Point":
        return cls(measurement)

    @classmethod
    def builder(cls, measurement: str) -> "PointBuilder":
        return PointBuilder(measurement)

    def _with(self, change: Callable[[PointValues], object]) -> "Point":
        values = self._values.copy()
        change(values)
        return self._wrap(values)

    # -- read ----------------------------------------------------------------

    @property
    def measurement(self) -> str:
        return self._values.measurement  # type: ignore[return-value]

    @property
    def timestamp(self) -> int | None:
        """Timestamp in nanoseconds since epoch, or None.
        距纪元的纳秒时间戳，未设置时为 None。
        """
        return self._values.timestamp

    @property
    def tags(self) -> dict[str, str]:
        return self._values.tags

    @property
    def fields(self) -> dict[str, Any]:
        return self._values.fields

    def get_tag(self, name: str) -> str | None:
        return self._values.get_tag(name)

    def tag_names(self) -> list[str]:
        return self._values.tag_names()

    def get_field(self, name: str) -> Any:
        return self._values.get_field(name)

    def get_field_kind(self, name: str) -> FieldKind | None:
        return self._values.get_field_kind(name)

    def get_field_type(self, name: str) -> type | None:
        return self._values.get_field_type(name)

    def field_names(self) -> list[str]:
        return self._values.field_names()

    def field_values(self) -> list[tuple[str, FieldValue]]:
        return self._values.field_values()

    def has_fields(self) -> bool:
        """Return True if at least one field is set (before NaN filtering).
        至少设置了一个字段时返回 True（NaN 过滤之前）。
        """
        return self._values.has_fields()

    def to_values(self) -> PointValues:
        """Return a mutable copy of this point.
        返回该数据点的可变副本。
        """
        return self._values.copy()

    def to_line_protocol(self, precision: WritePrecision | str | None = None) -> str:
        """Encode this point; see :func:`influx_lineproto.encoder.to_line_protocol`.
        编码该数据点；参见 :func:`influx_lineproto.encoder.to_line_protocol`。
        """
        return to_line_protocol(self, precision)

    # -- copy-on-write -------------------------------------------------------

    def with_measurement(self, measurement: str) -> "Point":
        check_non_empty_string(measurement, "Measurement name")
        return self._with(lambda v: v.set_measurement(measurement))

    def tag(self, name: str, value: str | None) -> "Point":
        """Return a copy with the tag added, replaced, or (empty value) removed.
        返回添加、替换或（空值时）删除标签后的副本。
        """
        return self._with(lambda v: v.set_tag(name, value))

    def remove_tag(self, name: str) -> "Point":
        return self._with(lambda v: v.remove_tag(name))

    def field(self, name: str, value: Any, kind: FieldKind | str | None = None) -> "Point":
        """Return a copy with the field added or replaced.
        返回添加或替换字段后的副本。

        Args:
            name: Non-empty field name.
                非空字段名。
            value: Field value, classified once here.
                字段值，在此处分类一次。
            kind: Explicit kind to coerce into (optional).
                显式指定的目标类型（可选）。
        Raises:
            InvalidArgumentError: If the name is empty or the value does not fit.
                字段名为空或值不符合类型时抛出。
        """
        return self._with(lambda v: v.set_field(name, value, kind))

    def with_fields(self, fields: Mapping[str, Any]) -> "Point":
        return self._with(lambda v: v.set_fields(fields))

    def integer_field(self, name: str, value: int) -> "Point":
        return self.field(name, value, FieldKind.SIGNED_INTEGER)

    def uinteger_field(self, name: str, value: int) -> "Point":
        return self.field(name, value, FieldKind.UNSIGNED_INTEGER)

    def float_field(self, name: str, value: float) -> "Point":
        return self.field(name, value, FieldKind.FLOAT64)

    def float32_field(self, name: str, value: float) -> "Point":
        return self.field(name, value, FieldKind.FLOAT32)

    def string_field(self, name: str, value: str) -> "Point":
        return self.field(name, value, FieldKind.STRING)

    def boolean_field(self, name: str, value: bool) -> "Point":
        return self.field(name, value, FieldKind.BOOLEAN)

    def remove_field(self, name: str) -> "Point":
        return self._with(lambda v: v.remove_field(name))

    def time(self, value: Any, precision: WritePrecision | str | None = None) -> "Point":
        """Return a copy with the timestamp set.
        返回设置时间戳后的副本。

        Args:
            value: ``int`` in ``precision`` units, ``timedelta`` since epoch, or a
                datetime (naive values are taken as UTC, aware values converted).
                以 ``precision`` 为单位的 ``int``、距纪元的 ``timedelta`` 或 datetime。
            precision: Unit of an integer value (default nanoseconds).
                整数值的单位（默认纳秒）。
        """
        return self._with(lambda v: v.set_timestamp(value, precision))

    # -- dunder --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(
            (
                self.measurement,
                self.timestamp,
                tuple(self._values.tags.items()),
                tuple(self._values.field_values()),
            )
        )

    def __repr__(self) -> str:
        return (
            f"Point(measurement={self.measurement!r}, tags={self.tags!r}, "
            f"fields={self.fields!r}, timestamp={self.timestamp!r})"
        )


class PointBuilder:
    """
    PointBuilder
    数据点构建器

    Mutable accumulator producing independent Point snapshots.
    可变累加器，生成相互独立的 Point 快照。

    Later ``build()`` calls reflect later changes; earlier snapshots stay frozen.
    之后的 ``build()`` 会反映之后的修改；先前的快照保持不变。
    """

    __slots__ = ("_values",)

    def __init__(self, measurement: str) -> None:
        check_non_empty_string(measurement, "Measurement name")
        self._values = PointValues(measurement)

    def tag(self, name: str, value: str | None) -> "PointBuilder":
        self._values.set_tag(name, value)
        return self

    def field(self, name: str, value: Any, kind: FieldKind | str | None = None) -> "PointBuilder":
        self._values.set_field(name, value, kind)
        return self

    def fields(self, fields: Mapping[str, Any]) -> "PointBuilder":
        self._values.set_fields(fields)
        return self

    def time(self, value: Any, precision: WritePrecision | str | None = None) -> "PointBuilder":
        """Set the timestamp.
        设置时间戳。

        Raises:
            InvalidArgumentError: If a datetime carries no timezone.
                datetime 不带时区时抛出。
        """
        if isinstance(value, datetime) and (value.tzinfo is None or value.utcoffset() is None):
            raise InvalidArgumentError(
                message="Timestamps must be specified as UTC",
                details={"timestamp": value.isoformat()},
                error_code="timestamp_not_utc",
            )
        self._values.set_timestamp(value, precision)
        return self

    def has_fields(self) -> bool:
        return self._values.has_fields()

    def build(self) -> Point:
        """Return an immutable snapshot of the current state.
        返回当前状态的不可变快照。
        """
        return Point.from_values(self._values)
