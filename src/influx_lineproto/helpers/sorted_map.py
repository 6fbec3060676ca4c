"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: sorted_map.py
@DateTime: 2026-03-02
@Docs: String-keyed mapping that keeps its keys in ascending order.
按键升序保存的字符串映射。
"""

from bisect import bisect_left, insort
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import TypeVar

V = TypeVar("V")


class SortedMap(MutableMapping[str, V]):
    """Mapping whose iteration order is the ordinal order of its keys.
    迭代顺序为键的码位顺序的映射。

    Insertions keep the key list sorted with ``bisect`` so that overwrites stay
    O(1) and iteration never has to sort.
    插入时通过 ``bisect`` 保持键列表有序，覆盖写为 O(1)，迭代无需再排序。
    """

    __slots__ = ("_data", "_keys")

    def __init__(self, items: Mapping[str, V] | Iterable[tuple[str, V]] | None = None) -> None:
        self._data: dict[str, V] = {}
        self._keys: list[str] = []
        if items is not None:
            self.update(items)

    def __getitem__(self, key: str) -> V:
        return self._data[key]

    def __setitem__(self, key: str, value: V) -> None:
        if key not in self._data:
            insort(self._keys, key)
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        del self._keys[bisect_left(self._keys, key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {self._data[k]!r}" for k in self._keys)
        return f"{type(self).__name__}({{{body}}})"

    def copy(self) -> "SortedMap[V]":
        """Return a shallow copy.
        返回浅拷贝。
        """
        clone: SortedMap[V] = SortedMap()
        clone._data = dict(self._data)
        clone._keys = list(self._keys)
        return clone

    def keys_list(self) -> list[str]:
        """Return the keys as a new sorted list.
        以新的有序列表返回所有键。
        """
        return list(self._keys)
