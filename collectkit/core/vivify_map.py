#!filepath: collectkit/core/vivify_map.py
from __future__ import annotations

import bisect
from collections.abc import Iterator, MutableMapping
from functools import cmp_to_key
from typing import Any, Callable, Dict, Generic, List, Literal, Optional, TypeVar

from collectkit.config.collections_config import CollectionsConfig
from collectkit.utils.argument import Argument
from collectkit.utils.logger import logs

K = TypeVar("K")
V = TypeVar("V")

Ordering = Literal["insertion", "comparator"]
Comparator = Callable[[Any, Any], int]


class AutoVivifyingOrderedMap(MutableMapping[K, V], Generic[K, V]):
    """
    读缺失 key 时自动创建默认值的有序 Map。

    ⚠️ get_or_insert_default(key) 是“读即写”：
        key 不存在 → 调用 factory() 生成默认值 → 插入 → 返回
    普通的 m[key] / m.get(key) 没有副作用（缺失时 KeyError / default）。

    顺序：
        - "insertion"：按 key 第一次插入的顺序迭代，覆盖写不改变位置
        - "comparator"：按 comparator(a, b) 排序；comparator=None 时用自然顺序

    用法：
        rows = AutoVivifyingOrderedMap(dict)
        rows.get_or_insert_default(0)["name"] = "foo"

    非线程安全：并发读也可能同时插入默认值，需要调用方自己加锁。
    """

    __slots__ = ("_factory", "_ordering", "_comparator", "_sort_key", "_dict", "_keys")

    def __init__(
        self,
        factory: Callable[[], V],
        ordering: Ordering = "insertion",
        comparator: Optional[Comparator] = None,
    ) -> None:
        if not callable(factory):
            Argument.fail(f"Given argument 'factory' should be a zero-argument callable, got {factory!r}.")
        if ordering not in ("insertion", "comparator"):
            Argument.fail(f"Given argument 'ordering' should be 'insertion' or 'comparator', got {ordering!r}.")
        if comparator is not None and ordering != "comparator":
            Argument.fail("Given argument 'comparator' is only valid with ordering='comparator'.")

        self._factory = factory
        self._ordering: Ordering = ordering
        self._comparator = comparator
        self._sort_key = cmp_to_key(comparator) if comparator is not None else None
        self._dict: Dict[K, V] = {}
        # comparator 模式下维护有序 key 列表；insertion 模式直接用 dict 的插入顺序
        self._keys: List[K] = []

    # ---------------------------------------------------------
    # 构造
    # ---------------------------------------------------------
    @classmethod
    def from_config(
        cls,
        factory: Callable[[], V],
        config: CollectionsConfig,
        comparator: Optional[Comparator] = None,
    ) -> "AutoVivifyingOrderedMap[K, V]":
        return cls(factory, ordering=config.map_ordering, comparator=comparator)

    @classmethod
    def tree(
        cls,
        ordering: Ordering = "insertion",
        comparator: Optional[Comparator] = None,
    ) -> "AutoVivifyingOrderedMap":
        """
        递归自动创建：每一层的默认值还是一棵同样配置的树
        """
        return cls(lambda: cls.tree(ordering, comparator), ordering=ordering, comparator=comparator)

    @classmethod
    def associative_array(cls) -> "AutoVivifyingOrderedMap[int, Dict[str, Any]]":
        """
        稀疏二维关联数组：行号 → 有序记录 dict
            arr.get_or_insert_default(3)["price"] = 10.5
        """
        return cls(dict)

    # ---------------------------------------------------------
    # 读即写
    # ---------------------------------------------------------
    def get_or_insert_default(self, key: K) -> V:
        if key in self._dict:
            return self._dict[key]

        # factory 抛异常时直接向上传播，map 保持不变
        value = self._factory()
        self._insert_new(key, value)
        logs.debug(f"[VivifyMap] created default for key={key!r}")
        return value

    def path(self, *keys: Any) -> Any:
        """
        沿 keys 逐层 get_or_insert_default，返回最内层的值
        """
        if not keys:
            Argument.fail("path() needs at least one key.")
        node: Any = self
        for key in keys:
            node = node.get_or_insert_default(key)
        return node

    # ---------------------------------------------------------
    # 写 / 删
    # ---------------------------------------------------------
    def put(self, key: K, value: V) -> None:
        self[key] = value

    def remove(self, key: K) -> V:
        value = self._dict[key]
        del self[key]
        return value

    def _insert_new(self, key: K, value: V) -> None:
        if self._ordering == "comparator":
            index = bisect.bisect_right(self._keys, self._key_of(key), key=self._key_of)
            self._keys.insert(index, key)
        self._dict[key] = value

    def _key_of(self, key: Any) -> Any:
        return self._sort_key(key) if self._sort_key is not None else key

    # ---------------------------------------------------------
    # MutableMapping 协议
    # ---------------------------------------------------------
    def __getitem__(self, key: K) -> V:
        return self._dict[key]

    def __setitem__(self, key: K, value: V) -> None:
        if key in self._dict:
            self._dict[key] = value
        else:
            self._insert_new(key, value)

    def __delitem__(self, key: K) -> None:
        del self._dict[key]
        if self._ordering == "comparator":
            self._keys.remove(key)

    def __iter__(self) -> Iterator[K]:
        if self._ordering == "comparator":
            return iter(self._keys)
        return iter(self._dict)

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, key: object) -> bool:
        return key in self._dict

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"{type(self).__name__}({{{items}}})"

    @property
    def ordering(self) -> Ordering:
        return self._ordering

    def to_dict(self) -> Dict[K, Any]:
        """
        转成普通 dict（保持迭代顺序），嵌套的 AutoVivifyingOrderedMap 递归转换
        """
        result: Dict[K, Any] = {}
        for key, value in self.items():
            result[key] = value.to_dict() if isinstance(value, AutoVivifyingOrderedMap) else value
        return result
