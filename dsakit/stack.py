"""A stack backed by a fixed-capacity array."""

from __future__ import annotations

import operator
from typing import Any


class ArrayStack:
    """A last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = operator.index(capacity)
        if self.capacity < 0:
            raise ValueError("capacity must not be negative")
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self) == self.capacity

    def is_empty(self) -> bool:
        return len(self) == 0

    def push(self, data: Any) -> None:
        """Place ``data`` on top of the stack."""
        if self.is_full():
            raise OverflowError("stack overflow")
        self._items.append(data)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top element, or None when the stack is empty."""
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"