import io

import pytest

from ptcore.dynarray import DynArray


def make(*items):
    array = DynArray()
    for item in items:
        array.push(item)
    return array


def test_push_and_get():
    array = make("a", "b", "c")
    assert len(array) == 3
    assert array.get(0) == "a"
    assert array.get(2) == "c"
    assert list(array) == ["a", "b", "c"]


def test_push_beyond_initial_capacity():
    array = make(*range(12))
    assert list(array) == list(range(12))


def test_get_out_of_range_returns_none():
    array = make(1)
    assert array.get(1) is None
    assert array.get(-1) is None


def test_delete_single_element_shifts_rest():
    array = make(1, 2, 3, 4)
    array.delete(1)
    assert list(array) == [1, 3, 4]


def test_delete_range_calls_free():
    freed = []
    array = make(1, 2, 3, 4, 5)
    array.delete(1, 3, freed.append)
    assert freed == [2, 3, 4]
    assert list(array) == [1, 5]


def test_delete_out_of_range_raises_and_keeps_content():
    array = make(1, 2)
    with pytest.raises(IndexError):
        array.delete(1, 2)
    assert list(array) == [1, 2]


def test_clear_calls_free_on_all():
    freed = []
    array = make("x", "y")
    array.clear(freed.append)
    assert freed == ["x", "y"]
    assert len(array) == 0


def test_release_skips_none():
    freed = []
    array = make("x", None, "z")
    array.release(freed.append)
    assert freed == ["x", "z"]
    assert len(array) == 0


def test_set_replaces_and_appends():
    array = make(1, 2)
    array.set(0, 10)
    array.set(2, 30)
    assert list(array) == [10, 2, 30]


def test_set_out_of_range_raises():
    with pytest.raises(IndexError):
        make(1).set(3, "x")


def test_copy_without_dup_shares_elements():
    item = [1]
    array = make(item)
    duplicate = array.copy()
    assert duplicate.get(0) is item
    duplicate.push(2)
    assert len(array) == 1


def test_copy_with_dup_applies_function():
    array = make([1], [2])
    duplicate = array.copy(list)
    assert list(duplicate) == list(array)
    assert duplicate.get(0) is not array.get(0)


def test_format():
    assert make(1, 2, 3).format() == "[ 1, 2, 3 ]"
    assert DynArray().format() == "[  ]"


def test_format_uses_element_format():
    assert make("a").format(repr) == "[ 'a' ]"


def test_dump_writes_format():
    out = io.StringIO()
    array = make(4, 5)
    array.dump(str, out)
    assert out.getvalue() == array.format()