#!filepath: tests/core_test/test_vivify_map.py
import pytest

from collectkit import InvalidArgumentError
from collectkit.config import CollectionsConfig
from collectkit.core.vivify_map import AutoVivifyingOrderedMap


def test_get_or_insert_default_creates_and_keeps_order():
    m = AutoVivifyingOrderedMap(list)

    value = m.get_or_insert_default("a")
    assert value == []
    assert "a" in m
    assert list(m) == ["a"]

    m.get_or_insert_default("b")
    m.get_or_insert_default("a")
    assert list(m) == ["a", "b"]


def test_get_or_insert_default_returns_same_object():
    m = AutoVivifyingOrderedMap(list)
    m.get_or_insert_default("a").append(1)
    m.get_or_insert_default("a").append(2)
    assert m["a"] == [1, 2]


def test_plain_reads_have_no_side_effect():
    m = AutoVivifyingOrderedMap(dict)

    with pytest.raises(KeyError):
        m["missing"]
    assert m.get("missing") is None
    assert m.get("missing", 0) == 0
    assert "missing" not in m
    assert len(m) == 0


def test_put_overwrites_without_moving():
    m = AutoVivifyingOrderedMap(int)
    m.put("x", 1)
    m.put("y", 2)
    m.put("x", 3)

    assert list(m.items()) == [("x", 3), ("y", 2)]


def test_remove_drops_key_and_position():
    m = AutoVivifyingOrderedMap(int)
    for k in "abc":
        m[k] = ord(k)

    assert m.remove("b") == ord("b")
    assert list(m) == ["a", "c"]

    # 重新插入 → 排到末尾
    m["b"] = 0
    assert list(m) == ["a", "c", "b"]

    with pytest.raises(KeyError):
        m.remove("zzz")


def test_failing_factory_propagates_and_leaves_map_unchanged():
    def boom():
        raise RuntimeError("factory failed")

    m = AutoVivifyingOrderedMap(boom)
    m["ok"] = 1

    with pytest.raises(RuntimeError, match="factory failed"):
        m.get_or_insert_default("bad")

    assert list(m) == ["ok"]


def test_factory_must_be_callable():
    with pytest.raises(InvalidArgumentError):
        AutoVivifyingOrderedMap([])


def test_invalid_ordering_options():
    with pytest.raises(InvalidArgumentError):
        AutoVivifyingOrderedMap(list, ordering="random")
    with pytest.raises(InvalidArgumentError):
        AutoVivifyingOrderedMap(list, comparator=lambda a, b: 0)


# ============================================================
# comparator 顺序
# ============================================================
def test_comparator_ordering_natural():
    m = AutoVivifyingOrderedMap(list, ordering="comparator")
    for k in (3, 1, 2):
        m.get_or_insert_default(k)
    m.put(1, [10])

    assert list(m) == [1, 2, 3]
    assert len(m) == 3


def test_comparator_ordering_custom():
    def by_length_desc(a, b):
        return len(b) - len(a)

    m = AutoVivifyingOrderedMap(int, ordering="comparator", comparator=by_length_desc)
    for k in ("a", "ccc", "bb"):
        m[k] = len(k)

    assert list(m) == ["ccc", "bb", "a"]

    del m["bb"]
    assert list(m) == ["ccc", "a"]


def test_comparator_ties_keep_insertion_order():
    m = AutoVivifyingOrderedMap(int, ordering="comparator", comparator=lambda a, b: len(a) - len(b))
    for k in ("yy", "x", "aa", "bb"):
        m[k] = 0

    assert list(m) == ["x", "yy", "aa", "bb"]


def test_from_config():
    cfg = CollectionsConfig(map_ordering="comparator")
    m = AutoVivifyingOrderedMap.from_config(list, cfg)
    m.get_or_insert_default("b")
    m.get_or_insert_default("a")

    assert m.ordering == "comparator"
    assert list(m) == ["a", "b"]


# ============================================================
# 嵌套 / 关联数组
# ============================================================
def test_associative_array_sparse_rows():
    rows = AutoVivifyingOrderedMap.associative_array()
    rows.get_or_insert_default(5)["name"] = "foo"
    rows.get_or_insert_default(2)["name"] = "bar"
    rows.get_or_insert_default(5)["price"] = "10.5"

    assert list(rows) == [5, 2]
    assert rows[5] == {"name": "foo", "price": "10.5"}


def test_tree_vivifies_nested_levels():
    t = AutoVivifyingOrderedMap.tree()
    t.get_or_insert_default("a").get_or_insert_default("b")["c"] = 1
    t.path("a", "x")["y"] = 2

    assert t.to_dict() == {"a": {"b": {"c": 1}, "x": {"y": 2}}}
    assert list(t["a"]) == ["b", "x"]


def test_path_requires_keys():
    with pytest.raises(InvalidArgumentError):
        AutoVivifyingOrderedMap.tree().path()


def test_mapping_equality_and_repr():
    m = AutoVivifyingOrderedMap(int)
    m["a"] = 1

    assert m == {"a": 1}
    assert repr(m) == "AutoVivifyingOrderedMap({'a': 1})"


def test_vivify_logs_debug(log_messages):
    AutoVivifyingOrderedMap(list).get_or_insert_default("k")
    assert any("[VivifyMap] created default for key='k'" in m for m in log_messages)
