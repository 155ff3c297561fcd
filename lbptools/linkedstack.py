"""A stack of integers built from singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

__all__ = ["StackNode", "LinkedStack"]


@dataclass(eq=False)
class StackNode:
    """One link of a :class:`LinkedStack`."""

    value: int
    next: StackNode | None = field(default=None, repr=False)


class LinkedStack:
    """A last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._top: StackNode | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: int) -> None:
        """Place ``value`` on top of the stack."""
        self.push_node(StackNode(value))

    def push_node(self, node: StackNode) -> None:
        """Place an existing node on top of the stack.

        The node's link is overwritten, so a node must not be on two
        stacks, or on one stack twice, at the same time.
        """
        node.next = self._top
        self._top = node
        self._size += 1

    def pop_node(self) -> StackNode:
        """Detach and return the top node. Raises IndexError if empty."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.next
        node.next = None
        self._size -= 1
        return node

    def pop(self) -> int:
        """Remove and return the top value. Raises IndexError if empty."""
        return self.pop_node().value

    def peek(self) -> int:
        """Return the top value without removing it. Raises IndexError if empty."""
        if self._top is None:
            raise IndexError("the stack is empty")
        return self._top.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Yield the values from the top of the stack down."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"