import pytest
from hypothesis import given, strategies as st

from algolab.exceptions import ArrayIndexOutOfBoundsError, IllegalArgumentError, UnderflowError
from algolab.vector import Vector


def _vector_of(items):
    v = Vector()
    for item in items:
        v.append(item)
        assert v.capacity() >= len(v)
    return v


def test_initial_size_and_spare_capacity():
    v = Vector(4)
    assert len(v) == 4
    assert v.capacity() == 4 + Vector.SPARE_CAPACITY
    assert list(v) == [None] * 4


@given(st.lists(st.integers()))
def test_append_then_iterate(items):
    v = _vector_of(items)
    assert list(v) == items
    assert len(v) == len(items)


@given(st.lists(st.integers(), min_size=1))
def test_pop_returns_in_reverse(items):
    v = _vector_of(items)
    assert [v.pop() for _ in items] == items[::-1]
    assert len(v) == 0


def test_index_bounds_checked():
    v = _vector_of(["a"])
    assert v[0] == "a"
    v[0] = "b"
    assert v.back() == "b"
    with pytest.raises(ArrayIndexOutOfBoundsError):
        v[1]
    with pytest.raises(IndexError):
        v[-1]
    with pytest.raises(ArrayIndexOutOfBoundsError):
        v[5] = "c"


@pytest.mark.parametrize("operation", [Vector.pop, Vector.back])
def test_empty_pop_and_back_raise(operation):
    with pytest.raises(UnderflowError):
        operation(Vector())


def test_resize_within_capacity_keeps_old_slots():
    v = _vector_of("xyz")
    v.resize(1)
    assert list(v) == ["x"]
    v.resize(3)
    assert list(v) == ["x", "y", "z"]


def test_resize_beyond_capacity_grows():
    v = Vector()
    v.resize(10)
    assert len(v) == 10
    assert v.capacity() >= 10


def test_reserve_below_size_is_ignored():
    v = Vector(5)
    before = v.capacity()
    v.reserve(2)
    assert v.capacity() == before
    v.reserve(50)
    assert v.capacity() == 50
    assert len(v) == 5


@pytest.mark.parametrize("action", [lambda: Vector(-1), lambda: Vector().resize(-3)])
def test_negative_sizes_rejected(action):
    with pytest.raises(IllegalArgumentError):
        action()