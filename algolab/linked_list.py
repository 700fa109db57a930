"""A doubly linked list with sentinel head and tail nodes."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator

from algolab.exceptions import UnderflowError


class _Node:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any = None, prev: _Node | None = None, next_: _Node | None = None) -> None:
        self.data = data
        self.prev = prev
        self.next = next_


class LinkedList:
    """Doubly linked sequence supporting cheap operations at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _Node()
        self._tail = _Node()
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        for item in items:
            self.append(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail.prev
        while node is not self._head:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _normalize(self, index: int) -> int:
        index = operator.index(index)
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("list index out of range")
        return index

    def _node_at(self, index: int) -> _Node:
        if index < self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next
        else:
            node = self._tail.prev
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _insert_before(self, node: _Node, x: Any) -> None:
        new = _Node(x, node.prev, node)
        node.prev.next = new
        node.prev = new
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.data

    def __getitem__(self, index: int) -> Any:
        return self._node_at(self._normalize(index)).data

    def __delitem__(self, index: int) -> None:
        self._unlink(self._node_at(self._normalize(index)))

    def front(self) -> Any:
        """Return the first item."""
        if not self._size:
            raise UnderflowError("front of empty list")
        return self._head.next.data

    def back(self) -> Any:
        """Return the last item."""
        if not self._size:
            raise UnderflowError("back of empty list")
        return self._tail.prev.data

    def append(self, x: Any) -> None:
        """Add x at the end."""
        self._insert_before(self._tail, x)

    def appendleft(self, x: Any) -> None:
        """Add x at the front."""
        self._insert_before(self._head.next, x)

    def pop(self) -> Any:
        """Remove and return the last item."""
        if not self._size:
            raise UnderflowError("pop from empty list")
        return self._unlink(self._tail.prev)

    def popleft(self) -> Any:
        """Remove and return the first item."""
        if not self._size:
            raise UnderflowError("pop from empty list")
        return self._unlink(self._head.next)

    def insert(self, index: int, x: Any) -> None:
        """Insert x before position index, clamping like list.insert."""
        index = operator.index(index)
        if index < 0:
            index = max(0, index + self._size)
        index = min(index, self._size)
        target = self._tail if index == self._size else self._node_at(index)
        self._insert_before(target, x)

    def clear(self) -> None:
        """Remove every item."""
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0