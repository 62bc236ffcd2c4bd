"""LIFO stack backed by a linked list."""

from __future__ import annotations

from typing import Any

from edakit.linked_list import LinkedList


class Stack:
    """A last-in first-out stack; the list head is the top."""

    def __init__(self) -> None:
        self._list = LinkedList()

    @classmethod
    def parse(cls, text: str) -> "Stack":
        """Build a stack from the list format; the first item is the top.

        Raises ValueError("Wrong input format.") on malformed input.
        """
        stack = cls()
        stack._list = LinkedList.parse(text)
        return stack

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)

    def __str__(self) -> str:
        return str(self._list)

    def __repr__(self) -> str:
        return f"Stack({list(self._list)!r})"

    def top(self) -> Any:
        """The most recently pushed item."""
        if self._list.is_empty():
            raise IndexError("the stack is empty")
        return self._list.front()

    def push(self, item: Any) -> None:
        self._list.push_front(item)

    def pop(self) -> None:
        """Remove the top item."""
        if self._list.is_empty():
            raise IndexError("pop from an empty stack")
        self._list.pop_front()