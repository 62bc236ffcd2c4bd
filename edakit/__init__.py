"""Linked lists, stacks, universal hashing, open-addressing probing and IPv4 helpers."""

__version__ = "0.1.0"