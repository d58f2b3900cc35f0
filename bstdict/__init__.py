"""Ordered dictionary on a binary search tree with a cursor, and a line-ordering command."""

__version__ = "0.1.0"
__all__ = ["dictionary", "order"]