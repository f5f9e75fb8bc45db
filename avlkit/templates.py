"""Traversal patterns: serialise trees to text and build them back."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from enum import Enum
from typing import TypeVar

from avlkit.extensions import extract_subtree
from avlkit.tree import AVLTree

T = TypeVar("T")

_UNSUPPORTED = "Unsupported pattern"


class TraversalOrder(Enum):
    """Depth-first traversal orders."""

    IN_ORDER = "LKP"
    PRE_ORDER = "KLP"
    POST_ORDER = "LPK"


def traverse(tree: AVLTree[T], order: TraversalOrder) -> Iterator[T]:
    """Yield the tree's values in the requested order."""
    if order is TraversalOrder.IN_ORDER:
        return tree.in_order()
    if order is TraversalOrder.PRE_ORDER:
        return tree.pre_order()
    if order is TraversalOrder.POST_ORDER:
        return tree.post_order()
    raise ValueError(f"unknown traversal order: {order!r}")


def _order_for(pattern: str) -> TraversalOrder:
    try:
        return TraversalOrder(pattern)
    except ValueError:
        raise ValueError(_UNSUPPORTED) from None


def to_string_template(tree: AVLTree[T], pattern: str) -> str:
    """Render values in the order named by ``pattern``, each followed by a space.

    ``KLP`` is pre-order, ``LKP`` in-order and ``LPK`` post-order.
    """
    order = _order_for(pattern)
    return "".join(f"{value} " for value in traverse(tree, order))


def from_order_template(values: Sequence[T], pattern: str) -> AVLTree[T]:
    """Build a tree from ``values`` read as the traversal named by ``pattern``.

    ``KLP`` inserts values as given, ``LKP`` treats them as sorted and inserts
    middles first, ``LPK`` inserts them in reverse.
    """
    order = _order_for(pattern)
    tree: AVLTree[T] = AVLTree()
    if order is TraversalOrder.PRE_ORDER:
        for value in values:
            tree.insert(value)
    elif order is TraversalOrder.IN_ORDER:
        _insert_middles(tree, values, 0, len(values) - 1)
    else:
        for value in reversed(values):
            tree.insert(value)
    return tree


def _insert_middles(tree: AVLTree[T], values: Sequence[T], low: int, high: int) -> None:
    if low > high:
        return
    middle = (low + high) // 2
    tree.insert(values[middle])
    _insert_middles(tree, values, low, middle - 1)
    _insert_middles(tree, values, middle + 1, high)


def parse_values(text: str, convert: Callable[[str], T] = int) -> list[T]:
    """Convert whitespace-separated tokens, stopping at the first that fails."""
    values: list[T] = []
    for token in text.split():
        try:
            values.append(convert(token))
        except ValueError:
            break
    return values


def is_same_tree(a: AVLTree[T], b: AVLTree[T]) -> bool:
    """True when both trees yield the same values in pre-order."""
    return list(a.pre_order()) == list(b.pre_order())


def has_subtree(tree: AVLTree[T], sub: AVLTree[T]) -> bool:
    """True when the subtree extracted at some value of ``tree`` matches ``sub``."""
    return any(
        is_same_tree(extract_subtree(tree, candidate), sub)
        for candidate in tree.pre_order()
    )