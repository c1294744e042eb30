"""Fixed-capacity double-ended ring buffer."""
from __future__ import annotations

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Indexable buffer that overwrites the opposite end once full.

    ``push_back`` on a full buffer drops the front element and ``push_front``
    drops the back one. Index 0 is always the front. Not thread safe.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        # //1.- A bounded deque already discards from the opposite end when full.
        self._items: Deque[T] = deque(maxlen=int(capacity))

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "RingBuffer[T]":
        """Build a full buffer whose capacity equals the number of items."""

        values = list(items)
        buffer: RingBuffer[T] = cls(len(values))
        buffer._items.extend(values)
        return buffer

    @property
    def capacity(self) -> int:
        return self._items.maxlen or 0

    @property
    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, items={list(self._items)!r})"

    def _check_index(self, index: int) -> int:
        # //2.- Only non-negative indices inside the live window are addressable.
        if index < 0 or index >= len(self._items):
            raise IndexError(f"ring buffer index {index} out of range")
        return index

    def __getitem__(self, index: int) -> T:
        return self._items[self._check_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._check_index(index)] = value

    def push_back(self, element: T) -> None:
        self._items.append(element)

    def push_front(self, element: T) -> None:
        self._items.appendleft(element)

    def pop_back(self) -> T:
        if not self._items:
            raise IndexError("ring buffer is empty, can't remove")
        return self._items.pop()

    def pop_front(self) -> T:
        if not self._items:
            raise IndexError("ring buffer is empty, can't remove")
        return self._items.popleft()

    def peek_back(self) -> T:
        if not self._items:
            raise IndexError("ring buffer is empty")
        return self._items[-1]

    def peek_front(self) -> T:
        if not self._items:
            raise IndexError("ring buffer is empty")
        return self._items[0]

    def clear(self) -> None:
        self._items.clear()


__all__ = ["RingBuffer"]
