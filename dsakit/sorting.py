"""Ordering of strings by character code."""

from __future__ import annotations

from collections.abc import Iterable


def sort_strings(strings: Iterable[str], ascending: bool = True) -> list[str]:
    """Return ``strings`` ordered by character code, ascending or descending.

    Equal strings keep their original relative order. The input is not modified.
    """
    items = list(strings)
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"expected str, got {type(item).__name__}")
    return sorted(items, reverse=not ascending)