"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_values.py
@DateTime: 2026-03-02
@Docs: Tests for mutable PointValues.
可变 PointValues 测试。
"""

import logging

import pytest

from influx_lineproto import FieldKind, InvalidArgumentError, Point, PointValues


class TestTags:
    """Tag mutation.
    标签修改。
    """

    def test_set_and_get(self) -> None:
        """Set, get, list and remove tags / 设置、读取、列出与删除标签。"""
        values = PointValues("m").set_tag("b", "2").set_tag("a", "1")
        assert values.get_tag("a") == "1"
        assert values.tag_names() == ["a", "b"]
        values.remove_tag("a")
        assert values.tags == {"b": "2"}

    def test_empty_value_deletes_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Empty value deletes existing tag and warns / 空值删除已有标签并告警。"""
        values = PointValues("m").set_tag("host", "a")
        with caplog.at_level(logging.WARNING, logger="influx_lineproto.values"):
            values.set_tag("host", "")
        assert values.get_tag("host") is None
        assert "Empty tags will cause deletion of, tag [host], measurement [m]" in caplog.text

    def test_empty_value_without_tag_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """Empty value on a missing tag only warns / 对不存在的标签设置空值仅告警。"""
        with caplog.at_level(logging.WARNING, logger="influx_lineproto.values"):
            values = PointValues("m").set_tag("host", None)
        assert values.tags == {}
        assert "Empty tags has no effect" in caplog.text


class TestFields:
    """Field mutation.
    字段修改。
    """

    def test_kind_is_replaced(self) -> None:
        """Re-setting a field replaces value and kind / 重新设置字段替换值与类型。"""
        values = PointValues("m").set_integer_field("f", 1)
        assert values.get_field_kind("f") is FieldKind.SIGNED_INTEGER
        values.set_string_field("f", "x")
        assert values.get_field_kind("f") is FieldKind.STRING
        assert values.get_field_type("f") is str

    def test_typed_setters(self) -> None:
        """Typed setters / 类型化 setter。"""
        values = (
            PointValues("m")
            .set_uinteger_field("u", 1)
            .set_float_field("d", 1)
            .set_float32_field("s", 0.5)
            .set_boolean_field("b", False)
        )
        assert values.to_line_protocol() == "m b=false,d=1,s=0.5,u=1u"

    def test_field_value_accessor(self) -> None:
        """get_field_value returns the tagged value / get_field_value 返回带标签的值。"""
        values = PointValues("m").set_field("f", 1.5)
        field = values.get_field_value("f")
        assert field is not None
        assert field.kind is FieldKind.FLOAT64
        assert values.get_field_value("missing") is None

    def test_remove_field(self) -> None:
        """Remove a field / 删除字段。"""
        values = PointValues("m").set_fields({"a": 1, "b": 2}).remove_field("a")
        assert values.field_names() == ["b"]
        assert values.has_fields()

    def test_null_field_counts(self) -> None:
        """A null field still counts for has_fields / null 字段也计入 has_fields。"""
        values = PointValues("m").set_field("f", None)
        assert values.has_fields()
        assert values.get_field_type("f") is None
        assert values.to_line_protocol() == ""

    def test_empty_name_rejected(self) -> None:
        """Empty field name raises / 空字段名抛出异常。"""
        with pytest.raises(InvalidArgumentError):
            PointValues("m").set_field("", 1)


class TestConversion:
    """Copy, compare and convert.
    复制、比较与转换。
    """

    def test_copy_is_independent(self) -> None:
        """copy returns an independent instance / copy 返回独立实例。"""
        values = PointValues("m").set_tag("t", "1").set_field("f", 1).set_timestamp(5)
        clone = values.copy()
        assert clone == values
        clone.set_tag("t", "2").set_field("f", 2)
        assert values.get_tag("t") == "1"
        assert values.get_field("f") == 1
        assert clone != values

    def test_unhashable(self) -> None:
        """Mutable values are unhashable / 可变值不可哈希。"""
        with pytest.raises(TypeError):
            hash(PointValues("m"))

    def test_as_point(self) -> None:
        """as_point snapshots and may rename / as_point 生成快照并可重命名。"""
        values = PointValues().set_field("f", 1).set_timestamp(7)
        point = values.as_point("renamed")
        assert isinstance(point, Point)
        assert point.to_line_protocol() == "renamed f=1i 7"
        values.set_field("f", 2)
        assert point.get_field("f") == 1

    def test_as_point_without_measurement(self) -> None:
        """as_point without measurement raises / 无测量名时 as_point 抛出异常。"""
        with pytest.raises(InvalidArgumentError):
            PointValues().set_field("f", 1).as_point()

    def test_timestamp_with_precision(self) -> None:
        """Timestamp precision scaling / 时间戳按精度缩放。"""
        values = PointValues("m").set_timestamp(2, "s")
        assert values.timestamp == 2_000_000_000
        assert values.set_timestamp(None).timestamp is None

    def test_repr(self) -> None:
        """repr shows the content / repr 展示内容。"""
        values = PointValues("m").set_field("f", 1)
        assert repr(values) == "PointValues(measurement='m', tags={}, fields={'f': 1}, timestamp=None)"
