"""Arithmetic helpers and a singly linked list container."""

__version__ = "0.1.0"
__all__ = ["operations", "linked_list"]