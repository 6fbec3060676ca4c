"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-03-02
@Docs: Helper utilities.
辅助工具。
"""

from influx_lineproto.helpers.batches import iter_record_batches
from influx_lineproto.helpers.sorted_map import SortedMap

__all__ = ["SortedMap", "iter_record_batches"]
