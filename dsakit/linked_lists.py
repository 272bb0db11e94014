"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class SinglyNode:
    """A node of a singly linked list."""

    item: Any
    next: Optional[SinglyNode] = None


@dataclass(eq=False)
class DoublyNode:
    """A node of a doubly linked list."""

    item: Any
    prev: Optional[DoublyNode] = None
    next: Optional[DoublyNode] = None


def _nodes(head: Any) -> Iterator[Any]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _tail(head: Any) -> Any:
    tail = None
    for tail in _nodes(head):
        pass
    return tail


def _require_items(head: Any) -> None:
    if head is None:
        raise IndexError("list is empty")


def _search(head: Any, data: Any) -> Any:
    return next((node for node in _nodes(head) if node.item == data), None)


class SinglyLinkedList:
    """A linked list whose nodes point only forward."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[SinglyNode] = None
        for item in items:
            self.insert_last(item)

    def insert_first(self, data: Any) -> SinglyNode:
        self.head = SinglyNode(data, self.head)
        return self.head

    def insert_last(self, data: Any) -> SinglyNode:
        tail = _tail(self.head)
        if tail is None:
            return self.insert_first(data)
        tail.next = SinglyNode(data)
        return tail.next

    def search(self, data: Any) -> Optional[SinglyNode]:
        """Return the first node holding ``data``, or None."""
        return _search(self.head, data)

    def insert_after(self, node: Optional[SinglyNode], data: Any) -> Optional[SinglyNode]:
        """Insert ``data`` after ``node``; nothing happens when ``node`` is None."""
        if node is None:
            return None
        node.next = SinglyNode(data, node.next)
        return node.next

    def delete_first(self) -> None:
        _require_items(self.head)
        self.head = self.head.next

    def delete_last(self) -> None:
        _require_items(self.head)
        if self.head.next is None:
            self.head = None
            return
        node = self.head
        while node.next.next is not None:
            node = node.next
        node.next = None

    def delete_node(self, node: SinglyNode) -> None:
        """Unlink ``node`` from the list."""
        _require_items(self.head)
        if self.head is node:
            self.delete_first()
            return
        for current in _nodes(self.head):
            if current.next is node:
                current.next = node.next
                return
        raise ValueError("node is not in the list")

    def __iter__(self) -> Iterator[Any]:
        return (node.item for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A linked list whose nodes point both forward and back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        for item in items:
            self.insert_last(item)

    def insert_first(self, data: Any) -> DoublyNode:
        new = DoublyNode(data, None, self.head)
        if self.head is not None:
            self.head.prev = new
        self.head = new
        return new

    def insert_last(self, data: Any) -> DoublyNode:
        tail = _tail(self.head)
        if tail is None:
            return self.insert_first(data)
        return self.insert_after(tail, data)

    def search(self, data: Any) -> Optional[DoublyNode]:
        """Return the first node holding ``data``, or None."""
        return _search(self.head, data)

    def insert_after(self, node: DoublyNode, data: Any) -> DoublyNode:
        """Insert ``data`` directly after ``node``."""
        if node is None:
            raise ValueError("node must not be None")
        new = DoublyNode(data, node, node.next)
        if node.next is not None:
            node.next.prev = new
        node.next = new
        return new

    def delete_first(self) -> None:
        _require_items(self.head)
        self.head = self.head.next
        if self.head is not None:
            self.head.prev = None

    def delete_last(self) -> None:
        _require_items(self.head)
        tail = _tail(self.head)
        if tail.prev is None:
            self.head = None
        else:
            tail.prev.next = None

    def delete_node(self, node: DoublyNode) -> None:
        """Unlink ``node`` from the list."""
        _require_items(self.head)
        if not any(current is node for current in _nodes(self.head)):
            raise ValueError("node is not in the list")
        if node is self.head:
            self.delete_first()
        elif node.next is None:
            self.delete_last()
        else:
            node.prev.next = node.next
            node.next.prev = node.prev

    def __iter__(self) -> Iterator[Any]:
        return (node.item for node in _nodes(self.head))

    def __reversed__(self) -> Iterator[Any]:
        node = _tail(self.head)
        while node is not None:
            yield node.item
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def middle_value(values: Iterable[Any]) -> Any:
    """Return the element at position len // 2 of ``values``."""
    items = list(values)
    if not items:
        raise IndexError("no middle value of an empty sequence")
    return items[len(items) // 2]