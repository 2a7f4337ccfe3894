"""Character tests, byte buffers, NUL-terminated text, descriptor output and a linked list."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstring", "strutil", "output", "linkedlist"]