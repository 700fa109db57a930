"""A growable array with explicit capacity management and bounds checks."""

from __future__ import annotations

import operator
from itertools import islice
from typing import Any, Iterator

from algolab.exceptions import (
    ArrayIndexOutOfBoundsError,
    IllegalArgumentError,
    UnderflowError,
)


class Vector:
    """Dynamic array whose storage grows geometrically."""

    SPARE_CAPACITY = 2

    def __init__(self, init_size: int = 0) -> None:
        if init_size < 0:
            raise IllegalArgumentError("size must be non-negative")
        self._size = init_size
        self._slots: list[Any] = [None] * (init_size + self.SPARE_CAPACITY)

    def __len__(self) -> int:
        return self._size

    def _checked(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < self._size:
            raise ArrayIndexOutOfBoundsError(index)
        return index

    def __getitem__(self, index: int) -> Any:
        return self._slots[self._checked(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._slots[self._checked(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return islice(self._slots, self._size)

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"

    def capacity(self) -> int:
        """Return the number of slots currently allocated."""
        return len(self._slots)

    def resize(self, new_size: int) -> None:
        """Change the logical size, growing storage when needed."""
        if new_size < 0:
            raise IllegalArgumentError("size must be non-negative")
        if new_size > self.capacity():
            self.reserve(new_size * 2)
        self._size = new_size

    def reserve(self, new_capacity: int) -> None:
        """Reallocate storage to new_capacity; ignored if below the size."""
        if new_capacity < self._size:
            return
        kept = self._slots[: self._size]
        self._slots = kept + [None] * (new_capacity - self._size)

    def append(self, x: Any) -> None:
        """Add x at the end."""
        if self._size == self.capacity():
            self.reserve(2 * self.capacity() + 1)
        self._slots[self._size] = x
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last item."""
        if not self._size:
            raise UnderflowError("pop from empty vector")
        self._size -= 1
        return self._slots[self._size]

    def back(self) -> Any:
        """Return the last item."""
        if not self._size:
            raise UnderflowError("back of empty vector")
        return self._slots[self._size - 1]