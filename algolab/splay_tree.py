"""A top-down splay tree that ignores duplicate insertions."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, TextIO

from algolab.exceptions import UnderflowError


class _Node:
    __slots__ = ("element", "left", "right")

    def __init__(self, element: Any = None, left: _Node | None = None, right: _Node | None = None) -> None:
        self.element = element
        self.left = left
        self.right = right


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


class SplayTree:
    """Self-adjusting search tree; accessed items move to the root."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._null = _Node()
        self._null.left = self._null.right = self._null
        self._root = self._null
        for item in items:
            self.insert(item)

    def _splay(self, x: Any, t: _Node) -> _Node:
        """Splay around x within the subtree t and return the new subtree root."""
        null = self._null
        header = _Node(None, null, null)
        left_tree_max = right_tree_min = header
        null.element = x
        try:
            while True:
                if x < t.element:
                    if x < t.left.element:
                        t = _rotate_with_left_child(t)
                    if t.left is null:
                        break
                    right_tree_min.left = t
                    right_tree_min = t
                    t = t.left
                elif t.element < x:
                    if t.right.element < x:
                        t = _rotate_with_right_child(t)
                    if t.right is null:
                        break
                    left_tree_max.right = t
                    left_tree_max = t
                    t = t.right
                else:
                    break
        finally:
            null.element = None
        left_tree_max.right = t.left
        right_tree_min.left = t.right
        t.left = header.right
        t.right = header.left
        return t

    def __contains__(self, x: Any) -> bool:
        if not self:
            return False
        self._root = self._splay(x, self._root)
        element = self._root.element
        return not (x < element or element < x)

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
        return f"SplayTree({list(self)!r})"

    def __copy__(self) -> SplayTree:
        duplicate = SplayTree()
        if not self:
            return duplicate
        source_null, target_null = self._null, duplicate._null
        duplicate._root = _Node(self._root.element, target_null, target_null)
        pending = [(self._root, duplicate._root)]
        while pending:
            source, target = pending.pop()
            if source.left is not source_null:
                target.left = _Node(source.left.element, target_null, target_null)
                pending.append((source.left, target.left))
            if source.right is not source_null:
                target.right = _Node(source.right.element, target_null, target_null)
                pending.append((source.right, target.right))
        return duplicate

    def root(self) -> Any:
        """Return the item currently at the root."""
        if not self:
            raise UnderflowError("root of empty tree")
        return self._root.element

    def find_min(self) -> Any:
        """Return the smallest item, splaying it to the root."""
        if not self:
            raise UnderflowError("find_min on empty tree")
        node = self._root
        while node.left is not self._null:
            node = node.left
        element = node.element
        self._root = self._splay(element, self._root)
        return element

    def find_max(self) -> Any:
        """Return the largest item, splaying it to the root."""
        if not self:
            raise UnderflowError("find_max on empty tree")
        node = self._root
        while node.right is not self._null:
            node = node.right
        element = node.element
        self._root = self._splay(element, self._root)
        return element

    def insert(self, x: Any) -> None:
        """Insert x; an item already present is left alone."""
        null = self._null
        if self._root is null:
            self._root = _Node(x, null, null)
            return
        root = self._root = self._splay(x, self._root)
        if x < root.element:
            self._root = _Node(x, root.left, root)
            root.left = null
        elif root.element < x:
            self._root = _Node(x, root, root.right)
            root.right = null

    def remove(self, x: Any) -> None:
        """Remove x; nothing happens if it is absent."""
        if x not in self:
            return
        root = self._root
        if root.left is self._null:
            self._root = root.right
        else:
            new_tree = self._splay(x, root.left)
            new_tree.right = root.right
            self._root = new_tree

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