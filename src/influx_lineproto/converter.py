"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: converter.py
@DateTime: 2026-03-02
@Docs: Arrow record batch rows to point values.
Arrow 记录批次的行转换为数据点值。

Columns are visited in schema order / 按 schema 顺序处理列:
    1) ``measurement`` / ``iox::measurement`` with a string value sets the measurement.
       名为 ``measurement`` / ``iox::measurement`` 且值为字符串时设置测量名。
    2) no metadata: ``time`` holding a wall-clock value sets the timestamp, any other
       column becomes a field with its value kept verbatim; other Arrow
       timestamps become exact ISO 8601 text.
       无元数据：``time`` 列的时钟值设置时间戳，其余列原样作为字段；
       其他 Arrow 时间戳转为精确的 ISO 8601 文本。
    3) metadata: the column is routed to a tag, a field or the timestamp.
       有元数据：按类别写入标签、字段或时间戳。

Null cells are skipped. Decoding never raises on cell content; problems are logged.
空单元格会被跳过。解码不会因单元格内容抛出异常，问题只记录日志。
"""

import logging
from collections.abc import Iterator
from typing import Any

import pyarrow as pa

from influx_lineproto.exceptions import InvalidArgumentError
from influx_lineproto.fields import FieldKind, FieldValue
from influx_lineproto.helpers import iter_record_batches
from influx_lineproto.point import Point
from influx_lineproto.resolver import (
    MEASUREMENT_COLUMN_NAMES,
    TIME_COLUMN_NAME,
    ColumnCategory,
    column_metadata,
    get_mapped_value,
    parse_column_type,
)
from influx_lineproto.timestamps import format_nanos, get_nano_time, is_wall_clock
from influx_lineproto.values import PointValues

logger = logging.getLogger(__name__)


def _cell(column: pa.Array | pa.ChunkedArray, row_index: int) -> Any:
    scalar = column[row_index]
    if not scalar.is_valid:
        return None
    # Kept as a scalar so nanoseconds are read exactly from the stored epoch value.
    if isinstance(scalar, pa.TimestampScalar):
        return scalar
    return scalar.as_py()


def _kind_hint(data_type: pa.DataType) -> FieldKind | None:
    if pa.types.is_dictionary(data_type):
        data_type = data_type.value_type
    if pa.types.is_unsigned_integer(data_type):
        return FieldKind.UNSIGNED_INTEGER
    if pa.types.is_float32(data_type) or pa.types.is_float16(data_type):
        return FieldKind.FLOAT32
    return None


def _put_field(values: PointValues, field: pa.Field, value: Any) -> None:
    # A FieldValue resolved from column metadata keeps its kind.
    if isinstance(value, FieldValue):
        kind = None
    elif isinstance(value, pa.TimestampScalar):
        value = format_nanos(get_nano_time(value))
        kind = FieldKind.STRING
    else:
        kind = _kind_hint(field.type)
    try:
        values.set_field(field.name, value, kind)
    except InvalidArgumentError as exc:
        logger.warning("Skipping column [%s]: %s", field.name, exc.message)


def _put_timestamp(values: PointValues, name: str, value: Any) -> None:
    if isinstance(value, int) and not isinstance(value, bool):
        values.set_timestamp(value)
        return
    logger.warning("Value [%s] of timestamp column [%s] is not a wall-clock value", value, name)


def convert_row(batch: pa.RecordBatch, row_index: int) -> PointValues:
    """Convert one row of a record batch into point values.
    将记录批次的一行转换为数据点值。

    Args:
        batch: Record batch to read.
            待读取的记录批次。
        row_index: Row number within the batch.
            批次内的行号。
    Returns:
        PointValues: Values decoded from the row; measurement may be unset.
            从该行解码的数据点值；测量名可能未设置。
    Raises:
        IndexError: If the row index is outside the batch.
            行号超出批次范围时抛出。
    """
    if not 0 <= row_index < batch.num_rows:
        raise IndexError(f"Row {row_index} is out of range for a batch of {batch.num_rows} rows")

    values = PointValues()
    for index, field in enumerate(batch.schema):
        name = field.name
        value = _cell(batch.column(index), row_index)
        if value is None:
            continue

        if name in MEASUREMENT_COLUMN_NAMES and isinstance(value, str):
            values.set_measurement(value)
            continue

        metadata = column_metadata(field)
        if metadata is None:
            if name == TIME_COLUMN_NAME and is_wall_clock(value):
                values.set_timestamp(get_nano_time(value))
            else:
                _put_field(values, field, value)
            continue

        column_type = parse_column_type(metadata)
        mapped = get_mapped_value(name, metadata, value)
        category = column_type.category if column_type is not None else None
        if category == ColumnCategory.TAG:
            values.set_tag(name, str(mapped))
        elif category == ColumnCategory.TIMESTAMP:
            _put_timestamp(values, name, mapped)
        elif category == ColumnCategory.MEASUREMENT and isinstance(mapped, str):
            values.set_measurement(mapped)
        elif category == ColumnCategory.FIELD:
            _put_field(values, field, mapped)
        else:
            logger.debug("Ignoring column [%s] with metadata [%s]", name, metadata)
    return values


def iter_point_values(data: Any) -> Iterator[PointValues]:
    """Lazily convert every row of columnar data into point values.
    惰性地将列式数据的每一行转换为数据点值。

    Args:
        data: RecordBatch, Table, RecordBatchReader, Polars DataFrame or an iterable
            of record batches.
            RecordBatch、Table、RecordBatchReader、Polars DataFrame 或记录批次的可迭代对象。
    """
    for batch in iter_record_batches(data):
        logger.debug("Converting record batch with %d rows", batch.num_rows)
        for row_index in range(batch.num_rows):
            yield convert_row(batch, row_index)


def iter_points(data: Any, measurement: str | None = None) -> Iterator[Point]:
    """Same as :func:`iter_point_values`, yielding immutable points.
    同 :func:`iter_point_values`，但产出不可变数据点。

    Args:
        data: Columnar data, see :func:`iter_point_values`.
            列式数据，参见 :func:`iter_point_values`。
        measurement: Measurement used for rows that carry none (optional).
            行中没有测量名时使用的测量名（可选）。
    Raises:
        InvalidArgumentError: If a row has no measurement and none is given.
            行中没有测量名且未提供时抛出。
    """
    for values in iter_point_values(data):
        if values.measurement is None and measurement is not None:
            values.set_measurement(measurement)
        yield Point.from_values(values)
