"""A set of integers kept in ascending order."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator, Sequence

__all__ = ["binary_search", "SortedIntSet"]


def binary_search(items: Sequence[int], x: int) -> int | None:
    """Return the index of ``x`` in the ascending sequence ``items``, or None."""
    low, high = 0, len(items)
    while high > low:
        middle = (low + high) // 2
        value = items[middle]
        if value == x:
            return middle
        if value < x:
            low = middle + 1
        else:
            high = middle
    return None


class SortedIntSet:
    """Integers without repetition, always held in ascending order."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for item in items:
            self.add(item)

    def add(self, x: int) -> None:
        """Insert ``x`` in order unless it is already present."""
        if x in self:
            return
        bisect.insort(self._items, x)

    def remove(self, x: int) -> None:
        """Remove ``x`` if present; an absent value is left alone."""
        position = binary_search(self._items, x)
        if position is not None:
            del self._items[position]

    def __contains__(self, x: object) -> bool:
        if not isinstance(x, int):
            return False
        return binary_search(self._items, x) is not None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_subset(self, other: SortedIntSet) -> bool:
        """True if every element of this set is in ``other``."""
        if len(self) > len(other):
            return False
        return all(item in other for item in self._items)

    def union(self, other: SortedIntSet) -> SortedIntSet:
        """Return a new set with the elements of both sets."""
        result = SortedIntSet()
        result._items = _merge(self._items, other._items)
        return result

    def intersection(self, other: SortedIntSet) -> SortedIntSet:
        """Return a new set with the elements found in both sets."""
        common: list[int] = []
        left, right = self._items, other._items
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] == right[j]:
                common.append(left[i])
                i += 1
                j += 1
            elif left[i] < right[j]:
                i += 1
            else:
                j += 1
        result = SortedIntSet()
        result._items = common
        return result

    def __str__(self) -> str:
        return "".join(f" {item} " for item in self._items)

    def __repr__(self) -> str:
        return f"SortedIntSet({self._items!r})"


def _merge(left: list[int], right: list[int]) -> list[int]:
    """Merge two ascending lists, keeping one copy of shared values."""
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        elif left[i] > right[j]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged