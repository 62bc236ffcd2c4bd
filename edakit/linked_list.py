"""Doubly linked list with a dummy end node and editing iterators."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Optional

from edakit.dnode import DNode

_FORMAT_ERROR = "Wrong input format."

Less = Callable[[Any, Any], bool]


class ListIterator:
    """A position in a LinkedList; it stays valid while its node is alive."""

    __slots__ = ("_node",)

    def __init__(self, node: Optional[DNode] = None) -> None:
        self._node = node

    def _require_node(self) -> DNode:
        if self._node is None:
            raise ValueError("the iterator points to no node")
        return self._node

    def is_valid(self) -> bool:
        """Does the iterator point to a node?"""
        return self._node is not None

    def item(self) -> Any:
        """The item at this position; the end position has none."""
        return self._require_node().item

    def set_item(self, value: Any) -> None:
        """Replace the item at this position."""
        node = self._require_node()
        if node.is_dummy():
            raise ValueError("the end position has no item")
        node.item = value

    def next(self, dist: int = 1) -> "ListIterator":
        """An iterator dist positions forward."""
        moved = ListIterator(self._require_node())
        moved.goto_next(dist)
        return moved

    def prev(self, dist: int = 1) -> "ListIterator":
        """An iterator dist positions backward."""
        moved = ListIterator(self._require_node())
        moved.goto_prev(dist)
        return moved

    def goto_next(self, dist: int = 1) -> None:
        """Move dist positions forward."""
        node = self._require_node()
        for _ in range(dist):
            node = node.next
        self._node = node

    def goto_prev(self, dist: int = 1) -> None:
        """Move dist positions backward."""
        node = self._require_node()
        for _ in range(dist):
            node = node.prev
        self._node = node

    def distance(self, other: "ListIterator") -> int:
        """Number of positions in the range [self, other)."""
        start = self._require_node()
        target = other._require_node()
        count = 0
        node = start
        while node is not target:
            node = node.next
            count += 1
            if node is start:
                raise ValueError("the iterators are not in the same list")
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(id(self._node))

    def __repr__(self) -> str:
        return f"ListIterator({self._node!r})"


class LinkedList:
    """A doubly linked list whose end is marked by a dummy node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._dummy = DNode.dummy()
        self._dummy.prev = self._dummy
        self._dummy.next = self._dummy
        self._size = 0
        for item in items:
            self.push_back(item)

    @classmethod
    def parse(cls, text: str) -> "LinkedList":
        """Build a list from "[]" or "[ item1 ... item_n ]" (integer items).

        Raises ValueError("Wrong input format.") on malformed input.
        """
        tokens = iter(text.split())
        first = next(tokens, "")
        result = cls()
        if first == "[]":
            return result
        if first != "[":
            raise ValueError(_FORMAT_ERROR)
        for token in tokens:
            if token == "]":
                return result
            try:
                result.push_back(int(token))
            except ValueError:
                raise ValueError(_FORMAT_ERROR) from None
        raise ValueError(_FORMAT_ERROR)

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._dummy.next
        while node is not self._dummy:
            yield node.item
            node = node.next

    def __str__(self) -> str:
        return "[" + "".join(f" {item}" for item in self) + " ]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def front(self) -> Any:
        """The first item."""
        if self.is_empty():
            raise IndexError("the list is empty")
        return self._dummy.next.item

    def back(self) -> Any:
        """The last item."""
        if self.is_empty():
            raise IndexError("the list is empty")
        return self._dummy.prev.item

    def begin(self) -> ListIterator:
        return ListIterator(self._dummy.next)

    def end(self) -> ListIterator:
        return ListIterator(self._dummy)

    def find(self, item: Any, start: Optional[ListIterator] = None) -> ListIterator:
        """First position from start holding item, or end() when absent."""
        pos = ListIterator((start if start is not None else self.begin())._require_node())
        end = self.end()
        while pos != end and pos.item() != item:
            pos.goto_next()
        return pos

    def _hook(self, node: DNode, pos: DNode) -> None:
        node.prev = pos.prev
        pos.prev.next = node
        node.next = pos
        pos.prev = node
        self._size += 1

    def _unhook(self, node: DNode) -> None:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1

    def insert(self, pos: ListIterator, item: Any) -> ListIterator:
        """Insert item before pos; return an iterator to the new item."""
        target = pos._require_node()
        node = DNode(item)
        self._hook(node, target)
        return ListIterator(node)

    def remove(self, pos: ListIterator) -> ListIterator:
        """Remove the item at pos; return an iterator to the following one."""
        if self.is_empty():
            raise IndexError("remove from an empty list")
        node = pos._require_node()
        if node.is_dummy():
            raise ValueError("cannot remove the end position")
        following = node.next
        self._unhook(node)
        return ListIterator(following)

    def push_front(self, item: Any) -> None:
        self.insert(self.begin(), item)

    def push_back(self, item: Any) -> None:
        self.insert(self.end(), item)

    def pop_front(self) -> None:
        if self.is_empty():
            raise IndexError("pop from an empty list")
        self.remove(self.begin())

    def pop_back(self) -> None:
        if self.is_empty():
            raise IndexError("pop from an empty list")
        self.remove(self.end().prev())

    def splice(
        self,
        pos: ListIterator,
        other: "LinkedList",
        first: ListIterator,
        last: ListIterator,
    ) -> None:
        """Move the nodes of other's range [first, last) before pos."""
        target = pos._require_node()
        node = first._require_node()
        stop = last._require_node()
        moving = []
        while node is not stop:
            if node is other._dummy:
                raise ValueError("the range runs past the end of the list")
            moving.append(node)
            node = node.next
        if any(n is target for n in moving):
            raise ValueError("cannot splice a range before one of its own nodes")
        for n in moving:
            other._unhook(n)
            self._hook(n, target)

    def splice_all(self, pos: ListIterator, other: "LinkedList") -> None:
        """Move every node of other before pos."""
        self.splice(pos, other, other.begin(), other.end())

    def splice_one(self, pos: ListIterator, other: "LinkedList", it: ListIterator) -> None:
        """Move the node of other at it before pos."""
        self.splice(pos, other, it, it.next())

    def merge(self, other: "LinkedList", less: Less = operator.lt) -> None:
        """Merge the sorted list other into this sorted list; other ends empty."""
        if other is self:
            raise ValueError("cannot merge a list with itself")
        pos = self._dummy.next
        while pos is not self._dummy and not other.is_empty():
            candidate = other._dummy.next
            if less(candidate.item, pos.item):
                other._unhook(candidate)
                self._hook(candidate, pos)
            else:
                pos = pos.next
        self.splice_all(self.end(), other)

    def sort(self, less: Less = operator.lt) -> None:
        """Merge sort the list in O(N log N)."""
        if self._size <= 1:
            return
        tail = LinkedList()
        midpoint = self.begin().next(self._size // 2)
        tail.splice(tail.end(), self, midpoint, self.end())
        self.sort(less)
        tail.sort(less)
        self.merge(tail, less)