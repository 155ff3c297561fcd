"""Fixed-capacity queue and stack of integers with overflow and underflow errors."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterator
from typing import Optional

__all__ = [
    "MAX_SIZE",
    "OverflowError_",
    "UnderflowError",
    "BoundedQueue",
    "BoundedStack",
]

# Number of slots in the underlying storage; one of them is a reserved control slot.
MAX_SIZE = 256


class OverflowError_(Exception):
    """Raised when an item is added to a full structure."""


class UnderflowError(Exception):
    """Raised when an item is taken from an empty structure."""


class _Bounded:
    """Shared storage and capacity checks for the bounded structures."""

    _random_limit = 100

    def __init__(self, capacity: int) -> None:
        if not 0 <= capacity < MAX_SIZE:
            raise ValueError(
                f"capacity must be between 0 and {MAX_SIZE - 1}, got {capacity}"
            )
        self.capacity = capacity
        self._items: deque[int] = deque()

    def fill_random(self, rng: Optional[random.Random] = None) -> None:
        """Replace the contents with ``capacity`` random values, leaving it full."""
        source = rng if rng is not None else random.Random()
        self._items = deque(
            source.randrange(self._random_limit) for _ in range(self.capacity)
        )

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def _append(self, value: int) -> None:
        if self.is_full():
            raise OverflowError_("overflow")
        self._items.append(value)

    def items(self) -> tuple[int, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={list(self._items)!r})"


class BoundedQueue(_Bounded):
    """A first-in, first-out queue holding at most ``capacity`` integers."""

    _random_limit = 100

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def fill_random(self, rng: Optional[random.Random] = None) -> None:
        """Fill the queue with random values from 0 to 99."""
        super().fill_random(rng)

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the end. Raises OverflowError_ when full."""
        self._append(value)

    def dequeue(self) -> int:
        """Remove and return the front value. Raises UnderflowError when empty."""
        if not self._items:
            raise UnderflowError("underflow")
        return self._items.popleft()

    def items(self) -> tuple[int, ...]:
        """The values from front to back."""
        return super().items()


class BoundedStack(_Bounded):
    """A last-in, first-out stack holding at most ``capacity`` integers."""

    _random_limit = 10

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def fill_random(self, rng: Optional[random.Random] = None) -> None:
        """Fill the stack with random values from 0 to 9."""
        super().fill_random(rng)

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def push(self, value: int) -> None:
        """Place ``value`` on top. Raises OverflowError_ when full."""
        self._append(value)

    def pop(self) -> int:
        """Remove and return the top value. Raises UnderflowError when empty."""
        if not self._items:
            raise UnderflowError("underflow")
        return self._items.pop()

    def items(self) -> tuple[int, ...]:
        """The values from bottom to top."""
        return super().items()