"""A binary min-heap stored in an implicit array."""

from __future__ import annotations

from typing import Any, Iterable

from algolab.exceptions import UnderflowError


class BinaryHeap:
    """Priority queue ordered by the items' ``<`` operator; duplicates allowed."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        # Slot 0 is unused so that the children of i are 2i and 2i + 1.
        self._array: list[Any] = [None, *items]
        for i in range(len(self) // 2, 0, -1):
            self._percolate_down(i)

    def __len__(self) -> int:
        return len(self._array) - 1

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"BinaryHeap({self._array[1:]!r})"

    def _percolate_down(self, hole: int) -> None:
        array = self._array
        size = len(self)
        tmp = array[hole]
        while hole * 2 <= size:
            child = hole * 2
            if child != size and array[child + 1] < array[child]:
                child += 1
            if array[child] < tmp:
                array[hole] = array[child]
                hole = child
            else:
                break
        array[hole] = tmp

    def find_min(self) -> Any:
        """Return the smallest item."""
        if not self:
            raise UnderflowError("find_min on empty heap")
        return self._array[1]

    def insert(self, x: Any) -> None:
        """Add x to the heap."""
        array = self._array
        array.append(x)
        hole = len(array) - 1
        while hole > 1 and x < array[hole // 2]:
            array[hole] = array[hole // 2]
            hole //= 2
        array[hole] = x

    def delete_min(self) -> Any:
        """Remove and return the smallest item."""
        if not self:
            raise UnderflowError("delete_min on empty heap")
        array = self._array
        smallest = array[1]
        last = array.pop()
        if len(array) > 1:
            array[1] = last
            self._percolate_down(1)
        return smallest

    def clear(self) -> None:
        """Remove every item."""
        del self._array[1:]