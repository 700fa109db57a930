import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.binary_heap import BinaryHeap
from algolab.exceptions import UnderflowError


def drain(heap):
    result = []
    while heap:
        result.append(heap.delete_min())
    return result


@given(st.lists(st.integers()))
def test_inserts_drain_in_sorted_order(items):
    heap = BinaryHeap()
    for x in items:
        heap.insert(x)
    assert len(heap) == len(items)
    assert drain(heap) == sorted(items)


@given(st.lists(st.integers()))
def test_build_from_items(items):
    heap = BinaryHeap(items)
    if items:
        assert heap.find_min() == min(items)
    assert drain(heap) == sorted(items)


def test_duplicates_are_kept():
    heap = BinaryHeap([3, 3, 1, 1])
    assert len(heap) == 4
    assert drain(heap) == [1, 1, 3, 3]


def test_mixed_insert_and_delete():
    heap = BinaryHeap([5, 2])
    heap.insert(1)
    assert heap.delete_min() == 1
    heap.insert(4)
    assert drain(heap) == [2, 4, 5]


def test_empty_heap_raises():
    heap = BinaryHeap()
    with pytest.raises(UnderflowError):
        heap.find_min()
    with pytest.raises(UnderflowError):
        heap.delete_min()


def test_clear():
    heap = BinaryHeap([1, 2, 3])
    heap.clear()
    assert len(heap) == 0
    assert not heap