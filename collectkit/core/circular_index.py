#!filepath: collectkit/core/circular_index.py
from __future__ import annotations

from typing import Callable, List, Optional, Sequence, TypeVar

from collectkit.utils.argument import Argument

T = TypeVar("T")

NOT_FOUND = -1


class CircularIndex:
    """
    环形序列上的位置导航（纯函数，无状态）：

        [a, b, c, d]
         ↑        ↓
         └────────┘   d 的下一个是 a，a 的上一个是 d

    - 元素按值（==）定位，取第一次出现的位置
    - 找不到返回 NOT_FOUND (-1)，不抛异常
    - 多步导航每一步都按“上一步得到的元素”重新定位，
      任何一步失败 → 整体返回 None（不返回半截结果）
    - 空序列调用邻居查询 → InvalidArgumentError
    """

    # ---------------------------------------------------------
    # 定位
    # ---------------------------------------------------------
    @staticmethod
    def index_of(sequence: Sequence[T], element: T) -> int:
        for i, item in enumerate(sequence):
            if item == element:
                return i
        return NOT_FOUND

    @staticmethod
    def is_first(sequence: Sequence[T], element: T) -> bool:
        Argument.not_empty(sequence, "sequence")
        return CircularIndex.index_of(sequence, element) == 0

    @staticmethod
    def is_last(sequence: Sequence[T], element: T) -> bool:
        Argument.not_empty(sequence, "sequence")
        return CircularIndex.index_of(sequence, element) == len(sequence) - 1

    # ---------------------------------------------------------
    # 单步
    # ---------------------------------------------------------
    @staticmethod
    def next_index(sequence: Sequence[T], element: T) -> int:
        Argument.not_empty(sequence, "sequence")
        index = CircularIndex.index_of(sequence, element)
        if index == NOT_FOUND:
            return NOT_FOUND
        if index == len(sequence) - 1:
            return 0
        return index + 1

    @staticmethod
    def previous_index(sequence: Sequence[T], element: T) -> int:
        Argument.not_empty(sequence, "sequence")
        index = CircularIndex.index_of(sequence, element)
        if index == NOT_FOUND:
            return NOT_FOUND
        if index == 0:
            return len(sequence) - 1
        return index - 1

    # ---------------------------------------------------------
    # 多步（all-or-nothing）
    # ---------------------------------------------------------
    @classmethod
    def next_indexes(cls, sequence: Sequence[T], element: Optional[T], count: int) -> Optional[List[int]]:
        return cls._chain(cls.next_index, sequence, element, count)

    @classmethod
    def previous_indexes(cls, sequence: Sequence[T], element: Optional[T], count: int) -> Optional[List[int]]:
        return cls._chain(cls.previous_index, sequence, element, count)

    @staticmethod
    def _chain(
        step: Callable[[Sequence[T], T], int],
        sequence: Sequence[T],
        element: Optional[T],
        count: int,
    ) -> Optional[List[int]]:
        Argument.not_empty(sequence, "sequence")
        Argument.not_negative(count, "count")
        if element is None:
            return None

        indexes: List[int] = []
        current = element
        for _ in range(count):
            index = step(sequence, current)
            if index == NOT_FOUND:
                return None
            indexes.append(index)
            # 下一跳按值重新定位，而不是沿用 index
            current = sequence[index]
        return indexes

    # ---------------------------------------------------------
    # 邻居元素
    # ---------------------------------------------------------
    @classmethod
    def next_element(cls, sequence: Sequence[T], element: T) -> Optional[T]:
        index = cls.next_index(sequence, element)
        return None if index == NOT_FOUND else sequence[index]

    @classmethod
    def previous_element(cls, sequence: Sequence[T], element: T) -> Optional[T]:
        index = cls.previous_index(sequence, element)
        return None if index == NOT_FOUND else sequence[index]
