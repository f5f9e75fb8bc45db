"""Functional helpers that build new trees from existing ones."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import TypeVar

from avlkit.tree import AVLTree

T = TypeVar("T")
R = TypeVar("R")


def map_tree(tree: AVLTree[T], func: Callable[[T], R]) -> AVLTree[R]:
    """Return a new tree holding ``func`` applied to every value."""
    result: AVLTree[R] = AVLTree()
    for value in tree.in_order():
        result.insert(func(value))
    return result


def where(tree: AVLTree[T], predicate: Callable[[T], bool]) -> AVLTree[T]:
    """Return a new tree holding the values that satisfy ``predicate``."""
    result: AVLTree[T] = AVLTree()
    for value in tree.in_order():
        if predicate(value):
            result.insert(value)
    return result


def reduce_tree(tree: AVLTree[T], func: Callable[[R, T], R], initial: R) -> R:
    """Fold the values in ascending order, starting from ``initial``."""
    return reduce(func, tree.in_order(), initial)


def extract_subtree(tree: AVLTree[T], key: T) -> AVLTree[T]:
    """Return a tree of ``key`` and every value after it in pre-order.

    The result is empty if ``key`` is not in the tree.
    """
    result: AVLTree[T] = AVLTree()
    found = False
    for value in tree.pre_order():
        if found:
            result.insert(value)
        if value == key:
            result.insert(value)
            found = True
    return result


def equals(a: AVLTree[T], b: AVLTree[T]) -> bool:
    """True when both trees hold the same values in the same sorted order."""
    return list(a.in_order()) == list(b.in_order())