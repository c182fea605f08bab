#!filepath: collectkit/core/map_utils.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar

from collectkit.utils.argument import Argument

K = TypeVar("K")
V = TypeVar("V")


class MapUtils:

    @staticmethod
    def get_key_from_value(mapping: Mapping[K, V], value: V) -> Optional[K]:
        """
        按迭代顺序返回第一个值等于 value 的 key，没有则 None
        """
        Argument.not_null(mapping, "mapping")
        for key, item in mapping.items():
            if item == value:
                return key
        return None

    @staticmethod
    def get_keys_from_value(mapping: Mapping[K, V], value: V) -> List[K]:
        Argument.not_null(mapping, "mapping")
        return [key for key, item in mapping.items() if item == value]

    @staticmethod
    def to_map(rows: Sequence[Sequence[Any]]) -> Dict[Any, Any]:
        """
        二维表 → dict：
            [["a", "1"], ["b", "2"]]  →  {"a": "1", "b": "2"}
        每行取前两列；重复 key 覆盖值但保留第一次出现的位置。
        """
        Argument.not_null(rows, "rows")
        result: Dict[Any, Any] = {}
        for i, row in enumerate(rows):
            if row is None or len(row) < 2:
                Argument.fail(f"Row {i} needs at least two cells, got {row!r}.")
            result[row[0]] = row[1]
        return result
