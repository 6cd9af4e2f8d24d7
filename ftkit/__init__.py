"""Helpers for characters, byte buffers, numbers, strings, linked lists and integer arrays."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "numconv", "llist", "strutil", "intarray", "output"]