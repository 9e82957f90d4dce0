import io

import pytest

from ptcore.linkedlist import LinkedList


def test_push_keeps_insertion_order():
    items = LinkedList()
    for value in (1, 2, 3):
        items.push(value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_head_and_tail():
    items = LinkedList(elements=[1, 2, 3])
    assert items.head == 1
    assert items.tail == 3


def test_empty_head_and_tail():
    items = LinkedList()
    assert items.head is None
    assert items.tail is None


def test_pop_is_fifo():
    items = LinkedList(elements=["a", "b", "c"])
    assert [items.pop(), items.pop(), items.pop()] == ["a", "b", "c"]
    assert len(items) == 0


def test_pop_calls_element_free():
    freed = []
    items = LinkedList(elements=["a", "b"])
    assert items.pop(freed.append) == "a"
    assert freed == ["a"]
    assert list(items) == ["b"]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop()


def test_release_frees_each_element_in_order():
    freed = []
    items = LinkedList(element_free=freed.append, elements=[3, 1, 2])
    items.release()
    assert freed == [3, 1, 2]
    assert len(items) == 0


def test_release_without_free_empties():
    items = LinkedList(elements=[1, 2])
    items.release()
    assert list(items) == []


def test_format_without_formatter_is_empty():
    assert LinkedList(elements=[1, 2]).format() == ""


def test_format_with_formatter():
    assert LinkedList(element_format=str, elements=[1, 2]).format() == "[ 1 2 ]"


def test_format_empty_list():
    assert LinkedList(element_format=str).format() == "[ ]"


def test_fprintf_writes_format():
    items = LinkedList(element_format=repr, elements=["x", "y"])
    out = io.StringIO()
    items.fprintf(out)
    assert out.getvalue() == items.format()


def test_dump_writes_to_stdout(capsys):
    items = LinkedList(element_format=str, elements=[5, 6])
    items.dump()
    assert capsys.readouterr().out == items.format()