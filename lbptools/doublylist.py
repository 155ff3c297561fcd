"""A doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["ListNode", "DoublyLinkedList"]


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`DoublyLinkedList`."""

    value: int
    prev: ListNode | None = field(default=None, repr=False)
    next: ListNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A list of integers linked in both directions, with a head and a tail."""

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def push_front(self, value: int) -> None:
        """Insert ``value`` at the head of the list."""
        self.push_front_node(ListNode(value))

    def push_front_node(self, node: ListNode) -> None:
        """Link an existing node in at the head of the list."""
        node.prev = None
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Insert ``value`` at the tail of the list."""
        node = ListNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_sorted(self, value: int) -> None:
        """Insert ``value`` keeping an ascending list in ascending order.

        A value equal to the head goes before it; a value equal to the tail
        goes after it.
        """
        if self._head is None or self._tail is None:
            self.push_back(value)
            return
        if value <= self._head.value:
            self.push_front(value)
            return
        if value >= self._tail.value:
            self.push_back(value)
            return
        current = self._head
        while current.next is not None and value > current.next.value:
            current = current.next
        following = current.next
        node = ListNode(value, prev=current, next=following)
        if following is not None:
            following.prev = node
        current.next = node
        self._size += 1

    def _unlink(self, node: ListNode) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def pop_front_node(self) -> ListNode:
        """Detach and return the head node. Raises IndexError if empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._unlink(node)
        return node

    def pop_front(self) -> int:
        """Remove and return the value at the head. Raises IndexError if empty."""
        return self.pop_front_node().value

    def pop_back(self) -> int:
        """Remove and return the value at the tail. Raises IndexError if empty."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._unlink(node)
        return node.value

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``.

        The head is checked first, then the tail, then the list from the head
        onwards. Raises ValueError if the value is not in the list.
        """
        if self._head is None or self._tail is None:
            raise ValueError(f"{value} is not in the list")
        if self._head.value == value:
            self._unlink(self._head)
            return
        if self._tail.value == value:
            self._unlink(self._tail)
            return
        current = self._head
        while current is not None:
            if current.value == value:
                self._unlink(current)
                return
            current = current.next
        raise ValueError(f"{value} is not in the list")

    def front(self) -> int:
        """Return the value at the head. Raises IndexError if empty."""
        if self._head is None:
            raise IndexError("the list is empty")
        return self._head.value

    def back(self) -> int:
        """Return the value at the tail. Raises IndexError if empty."""
        if self._tail is None:
            raise IndexError("the list is empty")
        return self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"