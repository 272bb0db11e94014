"""Arrays with an explicit capacity: a fixed one and a growable one."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any


class FixedArray:
    """An array whose capacity is set once and never changes."""

    def __init__(self, capacity: int) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of elements the array can hold without growing."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def _checked_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError("invalid index or array is empty")
        return index

    def _checked_insert_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index <= len(self._items):
            raise IndexError("invalid index")
        return index

    def append(self, data: Any) -> None:
        """Add ``data`` after the last element."""
        if self.is_full():
            raise OverflowError("array overflow")
        self._items.append(data)

    def insert(self, index: int, data: Any) -> None:
        """Put ``data`` at ``index``, shifting later elements right."""
        index = self._checked_insert_index(index)
        if self.is_full():
            raise OverflowError("array overflow")
        self._items.insert(index, data)

    def find(self, data: Any) -> int:
        """Return the index of the first element equal to ``data``, or -1."""
        for position, item in enumerate(self._items):
            if item == data:
                return position
        return -1

    def __getitem__(self, index: int) -> Any:
        return self._items[self._checked_index(index)]

    def __setitem__(self, index: int, data: Any) -> None:
        self._items[self._checked_index(index)] = data

    def __delitem__(self, index: int) -> None:
        del self._items[self._checked_index(index)]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class DynamicArray(FixedArray):
    """An array that doubles its capacity when full.

    With ``shrink`` set, the capacity is halved after a deletion that leaves
    the array at most half full.
    """

    def __init__(self, capacity: int, shrink: bool = False) -> None:
        capacity = operator.index(capacity)
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        super().__init__(capacity)
        self.shrink = shrink

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def _grow_if_full(self) -> None:
        if self.is_full():
            self._capacity *= 2

    def append(self, data: Any) -> None:
        """Add ``data`` after the last element, doubling capacity if full."""
        self._grow_if_full()
        self._items.append(data)

    def insert(self, index: int, data: Any) -> None:
        """Put ``data`` at ``index``, doubling capacity if full."""
        index = self._checked_insert_index(index)
        self._grow_if_full()
        self._items.insert(index, data)

    def find(self, data: Any) -> int:
        """Return the index of the first element equal to ``data``, or -1."""
        return super().find(data)

    def __getitem__(self, index: int) -> Any:
        return super().__getitem__(index)

    def __setitem__(self, index: int, data: Any) -> None:
        super().__setitem__(index, data)

    def __delitem__(self, index: int) -> None:
        super().__delitem__(index)
        if self.shrink and self._capacity > 1 and len(self._items) <= self._capacity // 2:
            self._capacity //= 2

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()