"""An unbalanced binary search tree, plus the tree helpers it shares."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class BSTNode:
    """A node of a binary search tree."""

    item: Any
    left: Optional[BSTNode] = None
    right: Optional[BSTNode] = None


def _unchanged(node: Any) -> Any:
    return node


def _leftmost(node: Any) -> Any:
    while node.left is not None:
        node = node.left
    return node


def _walk(node: Any, order: str) -> Iterator[Any]:
    """Yield items in ``order``: "pre", "in" or "post"."""
    if node is None:
        return
    if order == "pre":
        yield node.item
    yield from _walk(node.left, order)
    if order == "in":
        yield node.item
    yield from _walk(node.right, order)
    if order == "post":
        yield node.item


def _find(node: Any, data: Any) -> Any:
    """Return the node below ``node`` holding ``data``, or None."""
    while node is not None:
        if data < node.item:
            node = node.left
        elif data > node.item:
            node = node.right
        else:
            return node
    return None


def _insert(
    node: Any,
    data: Any,
    make_node: Callable[[Any], Any],
    fix: Callable[[Any], Any] = _unchanged,
) -> Any:
    """Insert ``data`` below ``node``; duplicates are ignored."""
    if node is None:
        return make_node(data)
    if data < node.item:
        node.left = _insert(node.left, data, make_node, fix)
    elif data > node.item:
        node.right = _insert(node.right, data, make_node, fix)
    else:
        return node
    return fix(node)


def _delete(node: Any, data: Any, fix: Callable[[Any], Any] = _unchanged) -> Any:
    """Remove ``data`` from below ``node`` and return the new subtree root."""
    if node is None:
        return None
    if data < node.item:
        node.left = _delete(node.left, data, fix)
    elif data > node.item:
        node.right = _delete(node.right, data, fix)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        successor = _leftmost(node.right)
        node.item = successor.item
        node.right = _delete(node.right, successor.item, fix)
    return fix(node)


class BinarySearchTree:
    """A binary search tree; duplicate values are ignored."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.root: Optional[BSTNode] = None
        for item in items:
            self.insert(item)

    def insert(self, data: Any) -> None:
        self.root = _insert(self.root, data, BSTNode)

    def delete(self, data: Any) -> None:
        """Remove ``data`` if present; a missing value leaves the tree unchanged."""
        self.root = _delete(self.root, data)

    def __contains__(self, data: Any) -> bool:
        return _find(self.root, data) is not None

    def preorder(self) -> list[Any]:
        return list(_walk(self.root, "pre"))

    def inorder(self) -> list[Any]:
        return list(_walk(self.root, "in"))

    def postorder(self) -> list[Any]:
        return list(_walk(self.root, "post"))

    def min(self) -> Any:
        """Smallest value in the tree."""
        if self.root is None:
            raise ValueError("min of an empty tree")
        return _leftmost(self.root).item

    def max(self) -> Any:
        """Largest value in the tree."""
        if self.root is None:
            raise ValueError("max of an empty tree")
        node = self.root
        while node.right is not None:
            node = node.right
        return node.item

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"