"""Stable binary min-heap."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable, Generic, Iterable, List, Tuple, TypeVar

from .errors import EmptyHeapError

T = TypeVar("T")


def _weight_key(item: Any) -> Any:
    return item.weight


class MinHeap(Generic[T]):
    """Min-heap ordered by ``key(item)``; equal keys pop in insertion order.

    Every insert is stamped with a monotonically increasing sequence number,
    which sits between the key and the item in the stored tuple so items
    themselves are never compared.
    """

    def __init__(self, items: Iterable[T] = (), key: Callable[[T], Any] = _weight_key) -> None:
        self._key = key
        self._entries: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()
        for item in items:
            self.insert(item)

    def insert(self, item: T) -> None:
        heapq.heappush(self._entries, (self._key(item), next(self._counter), item))

    def delete_min(self) -> T:
        if not self._entries:
            raise EmptyHeapError("delete_min() on an empty heap")
        return heapq.heappop(self._entries)[2]

    def merge(self, other: "MinHeap[T]") -> None:
        """Move all of ``other``'s items into this heap, leaving ``other`` empty.

        Items are re-inserted in ``other``'s own pop order, so ties among them
        keep their relative order and rank after everything already here.
        """

        for _, _, item in sorted(other._entries):
            self.insert(item)
        other._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MinHeap(size={len(self._entries)})"


__all__ = ["MinHeap"]
