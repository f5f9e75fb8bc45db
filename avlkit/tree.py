"""A self-balancing AVL binary search tree with a pluggable ordering."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

Less = Callable[[T, T], bool]


@dataclass(eq=False)
class Node(Generic[T]):
    """A single tree node holding one value."""

    value: T
    left: Optional["Node[T]"] = None
    right: Optional["Node[T]"] = None
    height: int = 1


def _height(node: Optional[Node]) -> int:
    return node.height if node is not None else 0


def _update_height(node: Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance_factor(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(y: Node) -> Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: Node) -> Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


def _rebalance(node: Node) -> Node:
    _update_height(node)
    factor = _balance_factor(node)
    if factor > 1:
        if _balance_factor(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance_factor(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _leftmost(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.left is not None:
        node = node.left
    return node


class AVLTree(Generic[T]):
    """An AVL tree of unique values ordered by a strict "less than" function.

    Two values are considered equal when neither is less than the other;
    inserting a value equal to one already present does nothing.
    """

    def __init__(self, less: Optional[Less] = None) -> None:
        self._less: Less = less if less is not None else operator.lt
        self._root: Optional[Node[T]] = None

    def insert(self, value: T) -> None:
        """Insert ``value`` unless an equal value is already stored."""
        self._root = self._insert(self._root, value)

    def _insert(self, node: Optional[Node[T]], value: T) -> Node[T]:
        if node is None:
            return Node(value)
        if self._less(value, node.value):
            node.left = self._insert(node.left, value)
        elif self._less(node.value, value):
            node.right = self._insert(node.right, value)
        else:
            return node
        return _rebalance(node)

    def remove(self, value: T) -> None:
        """Remove the value equal to ``value``; absent values are ignored."""
        self._root = self._remove(self._root, value)

    def _remove(self, node: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        if node is None:
            return None
        if self._less(value, node.value):
            node.left = self._remove(node.left, value)
        elif self._less(node.value, value):
            node.right = self._remove(node.right, value)
        elif node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        else:
            successor = _leftmost(node.right)
            node.value = successor.value
            node.right = self._remove(node.right, successor.value)
        return _rebalance(node)

    def contains(self, value: T, less: Optional[Less] = None) -> bool:
        """Search for ``value``, optionally steering by a one-off ordering."""
        less = less if less is not None else self._less
        current = self._root
        while current is not None:
            if less(value, current.value):
                current = current.left
            elif less(current.value, value):
                current = current.right
            else:
                return True
        return False

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def in_order(self) -> Iterator[T]:
        """Yield values in ascending order."""

        def walk(node: Optional[Node[T]]) -> Iterator[T]:
            if node is not None:
                yield from walk(node.left)
                yield node.value
                yield from walk(node.right)

        return walk(self._root)

    def pre_order(self) -> Iterator[T]:
        """Yield each node before its left and right subtrees."""

        def walk(node: Optional[Node[T]]) -> Iterator[T]:
            if node is not None:
                yield node.value
                yield from walk(node.left)
                yield from walk(node.right)

        return walk(self._root)

    def post_order(self) -> Iterator[T]:
        """Yield each node after its left and right subtrees."""

        def walk(node: Optional[Node[T]]) -> Iterator[T]:
            if node is not None:
                yield from walk(node.left)
                yield from walk(node.right)
                yield node.value

        return walk(self._root)

    def level_order(self) -> Iterator[T]:
        """Yield values breadth first, left to right within each level."""
        if self._root is None:
            return
        queue = deque([self._root])
        while queue:
            current = queue.popleft()
            yield current.value
            if current.left is not None:
                queue.append(current.left)
            if current.right is not None:
                queue.append(current.right)

    def reverse_in_order(self) -> Iterator[T]:
        """Yield values in descending order."""

        def walk(node: Optional[Node[T]]) -> Iterator[T]:
            if node is not None:
                yield from walk(node.right)
                yield node.value
                yield from walk(node.left)

        return walk(self._root)

    def morris_in_order(self) -> Iterator[T]:
        """Yield values in ascending order using threaded (stackless) traversal.

        The temporary threads are always removed, even if iteration stops early.
        """
        current = self._root
        try:
            while current is not None:
                if current.left is None:
                    yield current.value
                    current = current.right
                    continue
                predecessor = current.left
                while predecessor.right is not None and predecessor.right is not current:
                    predecessor = predecessor.right
                if predecessor.right is None:
                    predecessor.right = current
                    current = current.left
                else:
                    predecessor.right = None
                    yield current.value
                    current = current.right
        finally:
            _finish_morris(current)

    def find_min(self) -> Optional[Node[T]]:
        """Return the node holding the smallest value, or None if empty."""
        return _leftmost(self._root)

    def height(self) -> int:
        """Return the height of the tree; an empty tree has height 0."""
        return _height(self._root)

    def is_empty(self) -> bool:
        return self._root is None


def _finish_morris(current: Optional[Node]) -> None:
    """Complete a Morris walk without emitting, undoing any threads left behind."""
    while current is not None:
        if current.left is None:
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            predecessor.right = None
            current = current.right