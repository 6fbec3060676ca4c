"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-03-02
@Docs: Shared test fixtures for the influx-lineproto test suite.
测试套件的公共 fixtures。
"""

import pyarrow as pa
import pytest

from influx_lineproto import Point


def column_meta(column_type: str) -> dict[str, str]:
    """Return Arrow field metadata declaring a column type.
    返回声明列类型的 Arrow 字段元数据。
    """
    return {"iox::column::type": f"iox::column_type::{column_type}"}


@pytest.fixture
def h2o() -> Point:
    """Return a point with one tag and no fields.
    返回带一个标签、无字段的数据点。
    """
    return Point("h2o").tag("location", "europe")


@pytest.fixture
def cpu_batch() -> pa.RecordBatch:
    """Record batch shaped like a query result with column metadata.
    带列元数据、形如查询结果的记录批次。
    """
    schema = pa.schema(
        [
            pa.field("measurement", pa.string()),
            pa.field("host", pa.string(), metadata=column_meta("tag")),
            pa.field("usage", pa.float64(), metadata=column_meta("field::float")),
            pa.field("count", pa.int64(), metadata=column_meta("field::integer")),
            pa.field("ok", pa.bool_(), metadata=column_meta("field::boolean")),
            pa.field("time", pa.timestamp("ns", tz="UTC"), metadata=column_meta("timestamp")),
        ]
    )
    return pa.record_batch(
        [
            pa.array(["cpu", "cpu"]),
            pa.array(["a", None]),
            pa.array([1.5, 2.5]),
            pa.array([10, 20], type=pa.int64()),
            pa.array([True, False]),
            pa.array([1_700_000_000_123_456_789, 1_700_000_001_000_000_000], type=pa.timestamp("ns", tz="UTC")),
        ],
        schema=schema,
    )


@pytest.fixture
def plain_batch() -> pa.RecordBatch:
    """Record batch without any column metadata.
    不带任何列元数据的记录批次。
    """
    return pa.record_batch(
        {
            "time": pa.array([1_000, 2_000], type=pa.timestamp("us")),
            "requests": pa.array([5, 6], type=pa.uint64()),
            "ratio": pa.array([0.5, 0.25], type=pa.float32()),
            "total": pa.array([7, -8], type=pa.int64()),
            "state": pa.array(["up", None]),
        }
    )
