import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.exceptions import UnderflowError
from algolab.leftist_heap import LeftistHeap


def drain(heap):
    result = []
    while heap:
        result.append(heap.delete_min())
    return result


@given(st.lists(st.integers()))
def test_drains_in_sorted_order(items):
    assert drain(LeftistHeap(items)) == sorted(items)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_merge_combines_and_empties_other(first, second):
    a = LeftistHeap(first)
    b = LeftistHeap(second)
    a.merge(b)
    assert not b
    assert drain(a) == sorted(first + second)


def test_merge_with_self_is_noop():
    heap = LeftistHeap([3, 1, 2])
    heap.merge(heap)
    assert drain(heap) == [1, 2, 3]


def test_find_min_does_not_remove():
    heap = LeftistHeap([4, 2, 8])
    assert heap.find_min() == 2
    assert heap.find_min() == 2
    assert drain(heap) == [2, 4, 8]


def test_copy_is_independent():
    heap = LeftistHeap(range(50))
    duplicate = copy.copy(heap)
    heap.delete_min()
    duplicate.insert(-1)
    assert drain(heap) == list(range(1, 50))
    assert drain(duplicate) == [-1, *range(50)]


def test_empty_heap_raises():
    heap = LeftistHeap()
    with pytest.raises(UnderflowError):
        heap.find_min()
    with pytest.raises(UnderflowError):
        heap.delete_min()


def test_clear():
    heap = LeftistHeap([1, 2])
    heap.clear()
    assert not heap