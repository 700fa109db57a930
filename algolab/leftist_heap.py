"""A mergeable leftist min-heap."""

from __future__ import annotations

from typing import Any, Iterable

from algolab.exceptions import UnderflowError


class _Node:
    __slots__ = ("element", "left", "right", "npl")

    def __init__(
        self,
        element: Any,
        left: _Node | None = None,
        right: _Node | None = None,
        npl: int = 0,
    ) -> None:
        self.element = element
        self.left = left
        self.right = right
        self.npl = npl


def _merge(h1: _Node | None, h2: _Node | None) -> _Node | None:
    if h1 is None:
        return h2
    if h2 is None:
        return h1
    if h1.element < h2.element:
        return _merge1(h1, h2)
    return _merge1(h2, h1)


def _merge1(h1: _Node, h2: _Node) -> _Node:
    if h1.left is None:
        h1.left = h2
    else:
        h1.right = _merge(h1.right, h2)
        if h1.left.npl < h1.right.npl:
            h1.left, h1.right = h1.right, h1.left
        h1.npl = h1.right.npl + 1
    return h1


def _clone(root: _Node | None) -> _Node | None:
    if root is None:
        return None
    new_root = _Node(root.element, npl=root.npl)
    pending = [(root, new_root)]
    while pending:
        source, target = pending.pop()
        if source.left is not None:
            target.left = _Node(source.left.element, npl=source.left.npl)
            pending.append((source.left, target.left))
        if source.right is not None:
            target.right = _Node(source.right.element, npl=source.right.npl)
            pending.append((source.right, target.right))
    return new_root


class LeftistHeap:
    """Priority queue supporting efficient merging; duplicates allowed."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for item in items:
            self.insert(item)

    def __bool__(self) -> bool:
        return self._root is not None

    def __copy__(self) -> LeftistHeap:
        duplicate = LeftistHeap()
        duplicate._root = _clone(self._root)
        return duplicate

    def find_min(self) -> Any:
        """Return the smallest item."""
        if self._root is None:
            raise UnderflowError("find_min on empty heap")
        return self._root.element

    def insert(self, x: Any) -> None:
        """Add x to the heap."""
        self._root = _merge(_Node(x), self._root)

    def delete_min(self) -> Any:
        """Remove and return the smallest item."""
        if self._root is None:
            raise UnderflowError("delete_min on empty heap")
        old_root = self._root
        self._root = _merge(old_root.left, old_root.right)
        return old_root.element

    def merge(self, other: LeftistHeap) -> None:
        """Absorb every item of other, leaving other empty."""
        if other is self:
            return
        self._root = _merge(self._root, other._root)
        other._root = None

    def clear(self) -> None:
        """Remove every item."""
        self._root = None