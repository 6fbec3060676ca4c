"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_converter.py
@DateTime: 2026-03-02
@Docs: Tests for record batch row conversion.
记录批次行转换测试。
"""

import logging
from datetime import datetime

import pyarrow as pa
import pytest

from influx_lineproto import FieldKind, InvalidArgumentError, Point, convert_row, iter_point_values, iter_points
from influx_lineproto.helpers import iter_record_batches


def _meta(column_type: str) -> dict[str, str]:
    return {"iox::column::type": f"iox::column_type::{column_type}"}


class TestConvertRow:
    """Single row conversion.
    单行转换。
    """

    def test_measurement_column(self) -> None:
        """measurement column sets the measurement / measurement 列设置测量名。"""
        batch = pa.record_batch({"measurement": pa.array(["host"])})
        assert convert_row(batch, 0).measurement == "host"

    def test_iox_measurement_column(self) -> None:
        """iox::measurement column sets the measurement / iox::measurement 列设置测量名。"""
        batch = pa.record_batch({"iox::measurement": pa.array(["cpu"]), "v": pa.array([1])})
        values = convert_row(batch, 0)
        assert values.measurement == "cpu"
        assert values.field_names() == ["v"]

    def test_metadata_routing(self, cpu_batch: pa.RecordBatch) -> None:
        """Tags, fields and timestamp routed by metadata / 按元数据写入标签、字段与时间戳。"""
        values = convert_row(cpu_batch, 0)
        assert values.measurement == "cpu"
        assert values.tags == {"host": "a"}
        assert values.get_field_kind("usage") is FieldKind.FLOAT64
        assert values.get_field_kind("count") is FieldKind.SIGNED_INTEGER
        assert values.get_field_kind("ok") is FieldKind.BOOLEAN
        assert values.timestamp == 1_700_000_000_123_456_789
        assert values.to_line_protocol() == "cpu,host=a count=10i,ok=true,usage=1.5 1700000000123456789"

    def test_null_cells_skipped(self, cpu_batch: pa.RecordBatch) -> None:
        """Null cells are skipped / 空单元格被跳过。"""
        values = convert_row(cpu_batch, 1)
        assert values.tags == {}
        assert values.to_line_protocol() == "cpu count=20i,ok=false,usage=2.5 1700000001000000000"

    def test_plain_columns(self, plain_batch: pa.RecordBatch) -> None:
        """Columns without metadata keep their values / 无元数据的列保留原值。"""
        values = convert_row(plain_batch, 0)
        assert values.measurement is None
        assert values.timestamp == 1_000_000
        assert values.get_field_kind("requests") is FieldKind.UNSIGNED_INTEGER
        assert values.get_field_kind("ratio") is FieldKind.FLOAT32
        assert values.get_field_kind("total") is FieldKind.SIGNED_INTEGER
        assert values.get_field("state") == "up"
        assert values.as_point("stats").to_line_protocol() == (
            'stats ratio=0.5,requests=5u,state="up",total=7i 1000000'
        )

    def test_plain_null_skipped(self, plain_batch: pa.RecordBatch) -> None:
        """Null plain cells are not stored / 无元数据的空单元格不保存。"""
        assert "state" not in convert_row(plain_batch, 1).field_names()

    def test_timestamp_column_as_field(self) -> None:
        """Other timestamp columns become exact ISO text fields / 其他时间戳列作为精确 ISO 文本字段。"""
        batch = pa.record_batch(
            {"created": pa.array([1_700_000_000_123_456_789, -1_500], type=pa.timestamp("ns", tz="UTC"))}
        )
        values = convert_row(batch, 0)
        assert values.timestamp is None
        assert values.get_field_kind("created") is FieldKind.STRING
        assert values.get_field("created") == "2023-11-14T22:13:20.123456789Z"
        assert convert_row(batch, 1).get_field("created") == "1969-12-31T23:59:59.999998500Z"

    def test_metadata_float_over_float32_column(self) -> None:
        """field::float wins over a float32 storage type / field::float 优先于 float32 存储类型。"""
        schema = pa.schema([pa.field("v", pa.float32(), metadata=_meta("field::float"))])
        batch = pa.record_batch([pa.array([0.1], type=pa.float32())], schema=schema)
        values = convert_row(batch, 0)
        assert values.get_field_kind("v") is FieldKind.FLOAT64
        assert values.as_point("m").to_line_protocol() == "m v=0.10000000149011612"

    def test_metadata_integer_over_uint64_column(self) -> None:
        """field::integer wins over a uint64 storage type / field::integer 优先于 uint64 存储类型。"""
        schema = pa.schema([pa.field("n", pa.uint64(), metadata=_meta("field::integer"))])
        batch = pa.record_batch([pa.array([5], type=pa.uint64())], schema=schema)
        values = convert_row(batch, 0)
        assert values.get_field_kind("n") is FieldKind.SIGNED_INTEGER
        assert values.as_point("m").to_line_protocol() == "m n=5i"

    def test_type_mismatch_kept(self, caplog: pytest.LogCaptureFixture) -> None:
        """Mismatched field values are kept raw / 类型不一致的字段值原样保留。"""
        schema = pa.schema([pa.field("level", pa.string(), metadata=_meta("field::integer"))])
        batch = pa.record_batch([pa.array(["high"])], schema=schema)
        with caplog.at_level(logging.WARNING, logger="influx_lineproto.resolver"):
            values = convert_row(batch, 0)
        assert values.get_field_kind("level") is FieldKind.STRING
        assert "Value [high] is not a long" in caplog.text

    def test_non_string_tag(self) -> None:
        """Tag values are stored as text / 标签值以文本保存。"""
        schema = pa.schema([pa.field("rack", pa.int32(), metadata=_meta("tag"))])
        batch = pa.record_batch([pa.array([7], type=pa.int32())], schema=schema)
        assert convert_row(batch, 0).tags == {"rack": "7"}

    def test_unknown_category_ignored(self) -> None:
        """Unknown categories are ignored / 未知类别被忽略。"""
        schema = pa.schema([pa.field("x", pa.int64(), metadata=_meta("index"))])
        batch = pa.record_batch([pa.array([1])], schema=schema)
        assert not convert_row(batch, 0).has_fields()

    def test_row_out_of_range(self, cpu_batch: pa.RecordBatch) -> None:
        """Row index outside the batch raises / 行号越界抛出异常。"""
        with pytest.raises(IndexError):
            convert_row(cpu_batch, 2)


class TestIteration:
    """Lazy iteration over columnar inputs.
    列式输入的惰性迭代。
    """

    def test_record_batch(self, cpu_batch: pa.RecordBatch) -> None:
        """Every row of a batch / 批次中的每一行。"""
        assert [v.get_field("count") for v in iter_point_values(cpu_batch)] == [10, 20]

    def test_table_with_chunks(self, cpu_batch: pa.RecordBatch) -> None:
        """Tables yield rows of every chunk / 表按块产出所有行。"""
        table = pa.Table.from_batches([cpu_batch, cpu_batch])
        assert len(list(iter_point_values(table))) == 4

    def test_iterable_of_batches(self, cpu_batch: pa.RecordBatch) -> None:
        """Any iterable of batches / 任意记录批次的可迭代对象。"""
        assert len(list(iter_point_values(iter([cpu_batch, cpu_batch])))) == 4

    def test_iter_points(self, cpu_batch: pa.RecordBatch) -> None:
        """Rows become immutable points / 行转换为不可变数据点。"""
        points = list(iter_points(cpu_batch))
        assert all(isinstance(p, Point) for p in points)
        assert points[0].get_tag("host") == "a"

    def test_iter_points_default_measurement(self, plain_batch: pa.RecordBatch) -> None:
        """Fallback measurement for rows without one / 无测量名时使用后备测量名。"""
        assert [p.measurement for p in iter_points(plain_batch, measurement="stats")] == ["stats", "stats"]
        with pytest.raises(InvalidArgumentError):
            list(iter_points(plain_batch))

    def test_polars_dataframe(self) -> None:
        """Polars DataFrames are accepted / 接受 Polars DataFrame。"""
        pl = pytest.importorskip("polars")
        df = pl.DataFrame({"measurement": ["cpu"], "usage": [1.5], "time": [datetime(2024, 1, 1)]})
        (values,) = iter_point_values(df)
        assert values.to_line_protocol() == "cpu usage=1.5 1704067200000000000"

    @pytest.mark.parametrize("data", ["abc", 42, {"a": 1}])
    def test_rejects_non_columnar(self, data: object) -> None:
        """Non-columnar inputs raise TypeError / 非列式输入抛出 TypeError。"""
        with pytest.raises(TypeError):
            list(iter_record_batches(data))
