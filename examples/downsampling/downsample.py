"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: downsample.py
@DateTime: 2026-03-02
@Docs: Downsampling example: query result -> point values -> line protocol.
降采样示例：查询结果 -> 数据点值 -> 行协议。

Raw readings are aggregated per host, decoded back into point values, renamed and
re-encoded for writing into a downsampled measurement.
原始读数按主机聚合，解码为数据点值，重命名后重新编码以写入降采样测量。
"""

import logging

import pyarrow as pa

from influx_lineproto import LineProtocolEncoder, Point, iter_point_values, resolve_write_options

logger = logging.getLogger(__name__)

COLUMN_TYPE_KEY = "iox::column::type"


def _column_type(column_type: str) -> dict[str, str]:
    return {COLUMN_TYPE_KEY: f"iox::column_type::{column_type}"}


AGGREGATE_SCHEMA = pa.schema(
    [
        pa.field("host", pa.string(), metadata=_column_type("tag")),
        pa.field("usage_mean", pa.float64(), metadata=_column_type("field::float")),
        pa.field("time", pa.timestamp("ns", tz="UTC"), metadata=_column_type("timestamp")),
    ]
)


def aggregate(readings: pa.Table) -> pa.Table:
    """Mean usage and last reading time per host.
    每台主机的平均使用率与最后读数时间。

    Args:
        readings: Table with ``host``, ``usage`` and ``time`` columns.
            包含 ``host``、``usage`` 与 ``time`` 列的表。
    Returns:
        pa.Table: One row per host, typed like a query result.
            每台主机一行，类型与查询结果一致。
    """
    grouped = readings.group_by("host").aggregate([("usage", "mean"), ("time", "max")]).sort_by("host")
    return pa.Table.from_arrays(
        [
            grouped.column("host").cast(pa.string()),
            grouped.column("usage_mean").cast(pa.float64()),
            grouped.column("time_max").cast(pa.timestamp("ns", tz="UTC")),
        ],
        schema=AGGREGATE_SCHEMA,
    )


def downsample(readings: pa.Table, measurement: str = "cpu_downsampled") -> list[Point]:
    """Aggregate readings and turn every row into a point of ``measurement``.
    聚合读数并将每一行转换为 ``measurement`` 的数据点。
    """
    points: list[Point] = []
    for values in iter_point_values(aggregate(readings)):
        values.set_field("usage", values.get_field_value("usage_mean")).remove_field("usage_mean")
        points.append(values.as_point(measurement))
    logger.info("Downsampled %d readings into %d points", readings.num_rows, len(points))
    return points


def to_write_body(points: list[Point], precision: str | None = None) -> str:
    """Encode points with options resolved from parameters and ``INFLUX_*`` env vars.
    使用参数与 ``INFLUX_*`` 环境变量解析出的选项编码数据点。
    """
    return LineProtocolEncoder(resolve_write_options(precision=precision)).encode_many(points)
