"""Linked lists, bounded stacks, postfix evaluation, searching, sorting, Fibonacci and string edits."""

__version__ = "0.1.0"
__all__ = ["__version__"]