import pytest

from ptcore.objects import ManagedObject
from ptcore.treemap import TreeMap, make_map


def _cmp(a, b):
    return (a > b) - (a < b)


def test_update_and_find():
    tree_map = TreeMap(_cmp)
    tree_map.update(3, "c")
    tree_map.update(1, "a")
    assert tree_map.find(3) == "c"
    assert tree_map.find(1) == "a"
    assert len(tree_map) == 2


def test_find_missing_raises_key_error():
    tree_map = TreeMap(_cmp)
    tree_map.update(1, "a")
    with pytest.raises(KeyError):
        tree_map.find(2)


def test_iteration_is_in_key_order():
    tree_map = TreeMap(_cmp)
    for key in (5, 2, 9, 1):
        tree_map[key] = key * 10
    assert list(tree_map) == [(1, 10), (2, 20), (5, 50), (9, 90)]


def test_keys_are_copied_through_key_dup():
    tree_map = TreeMap(_cmp, key_dup=list)
    key = [1, 2]
    tree_map.update(key, "v")
    key.append(3)
    assert tree_map.find([1, 2]) == "v"
    assert [1, 2] in tree_map
    assert [1, 2, 3] not in tree_map


def test_compare_is_mandatory():
    with pytest.raises(ValueError):
        TreeMap(None)


def test_release_empties_and_frees():
    keys_freed = []
    data_freed = []
    tree_map = TreeMap(_cmp, key_free=keys_freed.append, data_free=data_freed.append)
    tree_map.update(1, "a")
    tree_map.update(2, "b")
    keys_freed.clear()
    data_freed.clear()
    tree_map.release()
    assert len(tree_map) == 0
    assert sorted(keys_freed) == [1, 2]
    assert sorted(data_freed) == ["a", "b"]


def test_dump_writes_pairs(capsys):
    tree_map = TreeMap(_cmp, key_dump=str, data_dump=str)
    tree_map.update(2, "b")
    tree_map.update(1, "a")
    tree_map.dump()
    assert capsys.readouterr().out == "{ (1, a) (2, b) }"


def test_make_map_uses_dummy_callbacks():
    dummy_key = ManagedObject(None, str.lower, None, str, _cmp)
    dummy_data = ManagedObject(None, None, None, str, None)
    tree_map = make_map(dummy_key, dummy_data)
    tree_map.update("KEY", 7)
    assert tree_map.find("key") == 7
    assert list(tree_map) == [("key", 7)]


def test_make_map_requires_compare():
    with pytest.raises(ValueError):
        make_map(ManagedObject(), ManagedObject())