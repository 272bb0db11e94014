"""Classic data structures (arrays, stack, linked lists, search trees, graphs), string sorting and a CGPA calculator."""

__version__ = "0.1.0"

__all__ = ["arrays", "avl", "bst", "cgpa", "graphs", "linked_lists", "sorting", "stack"]