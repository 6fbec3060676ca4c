"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: batches.py
@DateTime: 2026-03-02
@Docs: Helpers to iterate Arrow record batches without exposing Polars details.
Arrow 记录批次迭代辅助（隐藏 Polars 细节）。
"""

from collections.abc import Iterable, Iterator
from typing import Any

import pyarrow as pa


def iter_record_batches(data: Any) -> Iterator[pa.RecordBatch]:
    """Iterate record batches.
    迭代记录批次。

    Args:
        data: RecordBatch, Table, RecordBatchReader, Polars DataFrame, or an
            iterable of any of these.
            RecordBatch、Table、RecordBatchReader、Polars DataFrame，或它们的可迭代对象。
    Raises:
        TypeError: If the input is not columnar data.
            输入不是列式数据时抛出。
    """
    if isinstance(data, pa.RecordBatch):
        yield data
        return
    if isinstance(data, pa.Table):
        yield from data.to_batches()
        return
    if _is_polars_df(data):
        yield from data.to_arrow().to_batches()
        return
    if isinstance(data, (str, bytes, dict)):
        raise TypeError("data must be Arrow record batches / 数据必须是 Arrow 记录批次")
    if isinstance(data, Iterable):
        for item in data:
            yield from iter_record_batches(item)
        return
    raise TypeError("data must be Arrow record batches / 数据必须是 Arrow 记录批次")


def _is_polars_df(value: Any) -> bool:
    """Return True if the value is a Polars DataFrame.
    如果值是 Polars DataFrame 则返回 True。

    Polars is an optional dependency, imported lazily on demand.
    Polars 是可选依赖，按需延迟导入。
    """
    try:
        import polars as pl  # type: ignore
    except ImportError:
        return False
    return isinstance(value, pl.DataFrame)
