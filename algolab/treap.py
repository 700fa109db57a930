"""A treap: a search tree kept balanced by random heap-ordered priorities."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, Protocol, TextIO

from algolab.exceptions import UnderflowError
from algolab.uniform_random import UniformRandom

_INT_MAX = 2**31 - 1


class _PrioritySource(Protocol):
    def next_int(self) -> int: ...


class _Node:
    __slots__ = ("element", "left", "right", "priority")

    def __init__(
        self,
        element: Any = None,
        left: _Node | None = None,
        right: _Node | None = None,
        priority: int = _INT_MAX,
    ) -> None:
        self.element = element
        self.left = left
        self.right = right
        self.priority = priority


def _rotate_with_left_child(k2: _Node) -> _Node:
    k1 = k2.left
    k2.left = k1.right
    k1.right = k2
    return k1


def _rotate_with_right_child(k1: _Node) -> _Node:
    k2 = k1.right
    k1.right = k2.left
    k2.left = k1
    return k2


class Treap:
    """Randomized search tree ordered by the items' ``<`` operator."""

    def __init__(self, items: Iterable[Any] = (), rng: _PrioritySource | None = None) -> None:
        self._rng = UniformRandom() if rng is None else rng
        self._null = _Node()
        self._null.left = self._null.right = self._null
        self._root = self._null
        for item in items:
            self.insert(item)

    def _insert(self, x: Any, t: _Node) -> _Node:
        null = self._null
        if t is null:
            return _Node(x, null, null, self._rng.next_int())
        if x < t.element:
            t.left = self._insert(x, t.left)
            if t.left.priority < t.priority:
                t = _rotate_with_left_child(t)
        elif t.element < x:
            t.right = self._insert(x, t.right)
            if t.right.priority < t.priority:
                t = _rotate_with_right_child(t)
        return t

    def _remove(self, x: Any, t: _Node) -> _Node:
        null = self._null
        if t is null:
            return t
        if x < t.element:
            t.left = self._remove(x, t.left)
        elif t.element < x:
            t.right = self._remove(x, t.right)
        elif t.left is null and t.right is null:
            return null
        else:
            if t.right is null or (t.left is not null and t.left.priority < t.right.priority):
                t = _rotate_with_left_child(t)
            else:
                t = _rotate_with_right_child(t)
            t = self._remove(x, t)
        return t

    def __contains__(self, x: Any) -> bool:
        node = self._root
        while node is not self._null:
            if x < node.element:
                node = node.left
            elif node.element < x:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[Any]:
        null = self._null
        stack: list[_Node] = []
        node = self._root
        while stack or node is not null:
            while node is not null:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.element
            node = node.right

    def __bool__(self) -> bool:
        return self._root is not self._null

    def __repr__(self) -> str:
        return f"Treap({list(self)!r})"

    def __copy__(self) -> Treap:
        duplicate = Treap(rng=self._rng)
        source_null, target_null = self._null, duplicate._null

        def clone(node: _Node) -> _Node:
            if node is source_null:
                return target_null
            return _Node(node.element, clone(node.left), clone(node.right), node.priority)

        duplicate._root = clone(self._root)
        return duplicate

    def find_min(self) -> Any:
        """Return the smallest item."""
        if not self:
            raise UnderflowError("find_min on empty tree")
        node = self._root
        while node.left is not self._null:
            node = node.left
        return node.element

    def find_max(self) -> Any:
        """Return the largest item."""
        if not self:
            raise UnderflowError("find_max on empty tree")
        node = self._root
        while node.right is not self._null:
            node = node.right
        return node.element

    def insert(self, x: Any) -> None:
        """Insert x; an item already present is left alone."""
        self._root = self._insert(x, self._root)

    def remove(self, x: Any) -> None:
        """Remove x; nothing happens if it is absent."""
        self._root = self._remove(x, self._root)

    def clear(self) -> None:
        """Remove every item."""
        self._root = self._null

    def print_tree(self, out: TextIO | None = None) -> None:
        """Write the items in sorted order, one per line."""
        out = sys.stdout if out is None else out
        if not self:
            print("Empty tree", file=out)
            return
        for element in self:
            print(element, file=out)