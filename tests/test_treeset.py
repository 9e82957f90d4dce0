import pytest

from ptcore.objects import ManagedObject
from ptcore.treeset import TreeSet, make_set


def cmp(a, b):
    return (a > b) - (a < b)


def test_insert_reports_new_and_duplicate():
    s = TreeSet(cmp)
    assert s.insert(3) is True
    assert s.insert(3) is False
    assert len(s) == 1


def test_iteration_is_sorted():
    s = TreeSet(cmp)
    values = [5, 1, 4, 2, 3]
    for value in values:
        s.insert(value)
    assert list(s) == sorted(values)


def test_custom_order():
    s = TreeSet(lambda a, b: cmp(b, a))
    for value in (1, 3, 2):
        s.insert(value)
    assert list(s) == [3, 2, 1]


def test_find_returns_stored_copy():
    s = TreeSet(cmp, element_dup=list)
    source = [1, 2]
    s.insert(source)
    found = s.find([1, 2])
    assert found == source
    assert found is not source


def test_find_missing_returns_none():
    s = TreeSet(cmp)
    s.insert(1)
    assert s.find(2) is None
    assert 1 in s
    assert 2 not in s


def test_duplicate_insert_frees_the_copy():
    freed = []
    s = TreeSet(cmp, element_dup=list, element_free=freed.append)
    s.insert([1])
    s.insert([1])
    assert freed == [[1]]
    assert len(s) == 1


def test_erase_removes_and_frees():
    freed = []
    s = TreeSet(cmp, element_free=freed.append)
    for value in (1, 2, 3):
        s.insert(value)
    assert s.erase(2) is True
    assert freed == [2]
    assert list(s) == [1, 3]


def test_erase_missing_returns_false():
    s = TreeSet(cmp)
    s.insert(1)
    assert s.erase(4) is False
    assert list(s) == [1]


def test_release_frees_all():
    freed = []
    s = TreeSet(cmp, element_free=freed.append)
    for value in (2, 1):
        s.insert(value)
    s.release()
    assert freed == [1, 2]
    assert len(s) == 0


def test_format_with_dump():
    s = TreeSet(cmp, element_dump=str)
    for value in (3, 1, 2):
        s.insert(value)
    assert s.format() == "{ 1 2 3 }"


def test_format_without_dump():
    s = TreeSet(cmp)
    s.insert(1)
    s.insert(2)
    assert s.format() == "{ ? ? }"


def test_format_empty():
    assert TreeSet(cmp).format() == "{ }"


def test_dump_writes_format(capsys):
    s = TreeSet(cmp, element_dump=str)
    s.insert(8)
    s.dump()
    assert capsys.readouterr().out == s.format()


def test_missing_compare_raises():
    with pytest.raises(ValueError):
        TreeSet(None)


def test_make_set_uses_dummy_callbacks():
    dummy = ManagedObject(None, element_dup=list, element_compare=cmp, element_dump=str)
    s = make_set(dummy)
    assert s.dummy_element is not dummy
    assert s.dummy_element.element_compare is cmp
    source = [2]
    s.insert(source)
    assert s.find([2]) is not source
    assert s.find([2]) == source


def test_make_set_without_compare_raises():
    with pytest.raises(ValueError):
        make_set(ManagedObject(None, element_dup=list))