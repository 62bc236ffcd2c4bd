"""Doubly linked node used as the building block of linked lists."""

from __future__ import annotations

from typing import Any, Optional


class DNode:
    """A node with links to its neighbours.

    A dummy node carries no item; lists use it to mark their end.
    """

    __slots__ = ("_item", "_has_item", "prev", "next")

    def __init__(self, item: Any) -> None:
        self._item = item
        self._has_item = True
        self.prev: Optional[DNode] = None
        self.next: Optional[DNode] = None

    @classmethod
    def dummy(cls) -> "DNode":
        """Create a node without an item."""
        node = cls.__new__(cls)
        node._item = None
        node._has_item = False
        node.prev = None
        node.next = None
        return node

    def is_dummy(self) -> bool:
        return not self._has_item

    @property
    def item(self) -> Any:
        """The data item; a dummy node has none and raises ValueError."""
        if not self._has_item:
            raise ValueError("a dummy node has no item")
        return self._item

    @item.setter
    def item(self, value: Any) -> None:
        self._item = value
        self._has_item = True

    def __repr__(self) -> str:
        if self.is_dummy():
            return "DNode.dummy()"
        return f"DNode({self._item!r})"