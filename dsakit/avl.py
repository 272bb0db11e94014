"""A self-balancing AVL binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from dsakit.bst import _delete, _find, _insert, _walk


@dataclass(eq=False)
class AVLNode:
    """A node of an AVL tree; ``height`` counts nodes on the longest downward path."""

    item: Any
    left: Optional[AVLNode] = None
    right: Optional[AVLNode] = None
    height: int = 1


def height(node: Optional[AVLNode]) -> int:
    """Height of ``node``; an empty subtree has height 0."""
    return 0 if node is None else node.height


def balance_factor(node: Optional[AVLNode]) -> int:
    """Left subtree height minus right subtree height; 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def _rotate(node: AVLNode, toward: str) -> AVLNode:
    away = "left" if toward == "right" else "right"
    pivot = getattr(node, away)
    if pivot is None:
        raise ValueError(f"cannot rotate {toward} without a {away} child")
    setattr(node, away, getattr(pivot, toward))
    setattr(pivot, toward, node)
    _update_height(node)
    _update_height(pivot)
    return pivot


def rotate_right(node: AVLNode) -> AVLNode:
    """Rotate ``node`` right and return the new subtree root."""
    return _rotate(node, "right")


def rotate_left(node: AVLNode) -> AVLNode:
    """Rotate ``node`` left and return the new subtree root."""
    return _rotate(node, "left")


def _rebalance(node: AVLNode) -> AVLNode:
    _update_height(node)
    balance = balance_factor(node)
    if balance > 1:
        if balance_factor(node.left) < 0:
            node.left = rotate_left(node.left)
        return rotate_right(node)
    if balance < -1:
        if balance_factor(node.right) > 0:
            node.right = rotate_right(node.right)
        return rotate_left(node)
    return node


class AVLTree:
    """A binary search tree kept height-balanced; duplicate values are ignored."""

    def __init__(self) -> None:
        self.root: Optional[AVLNode] = None

    def insert(self, data: Any) -> None:
        self.root = _insert(self.root, data, AVLNode, _rebalance)

    def delete(self, data: Any) -> None:
        """Remove ``data`` if present; a missing value leaves the tree unchanged."""
        self.root = _delete(self.root, data, _rebalance)

    def search(self, data: Any) -> Optional[AVLNode]:
        """Return the node holding ``data``, or None."""
        return _find(self.root, data)

    def __contains__(self, data: Any) -> bool:
        return _find(self.root, data) is not None

    def preorder(self) -> list[Any]:
        return list(_walk(self.root, "pre"))

    def inorder(self) -> list[Any]:
        return list(_walk(self.root, "in"))

    def postorder(self) -> list[Any]:
        return list(_walk(self.root, "post"))

    def height(self) -> int:
        """Height of the whole tree; 0 when empty."""
        return height(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"