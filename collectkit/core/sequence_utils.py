#!filepath: collectkit/core/sequence_utils.py
from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence, TypeVar

from collectkit.core.circular_index import NOT_FOUND, CircularIndex
from collectkit.utils.argument import Argument

T = TypeVar("T")


class SequenceUtils:
    """
    序列的首尾 / 邻居工具。
    与 CircularIndex 不同：这里的邻居不回绕，越界或找不到都返回 None。
    """

    @staticmethod
    def get_first(sequence: Sequence[T]) -> Optional[T]:
        Argument.not_null(sequence, "sequence")
        return sequence[0] if sequence else None

    @staticmethod
    def get_last(sequence: Sequence[T]) -> Optional[T]:
        Argument.not_null(sequence, "sequence")
        return sequence[-1] if sequence else None

    @staticmethod
    def get_next(sequence: Sequence[T], element: T) -> Optional[T]:
        Argument.not_null(sequence, "sequence")
        index = CircularIndex.index_of(sequence, element)
        if index == NOT_FOUND or index == len(sequence) - 1:
            return None
        return sequence[index + 1]

    @staticmethod
    def get_previous(sequence: Sequence[T], element: T) -> Optional[T]:
        Argument.not_null(sequence, "sequence")
        index = CircularIndex.index_of(sequence, element)
        if index == NOT_FOUND or index == 0:
            return None
        return sequence[index - 1]

    @staticmethod
    def remove_first(values: MutableSequence[T]) -> Optional[T]:
        Argument.not_null(values, "values")
        return values.pop(0) if values else None

    @staticmethod
    def remove_last(values: MutableSequence[T]) -> Optional[T]:
        Argument.not_null(values, "values")
        return values.pop() if values else None

    @staticmethod
    def new_range_list(start: int, end: int) -> List[int]:
        """
        [start, end] 闭区间
        """
        if end < start:
            Argument.fail("Parameter end should be greater than parameter start.")
        return list(range(start, end + 1))
