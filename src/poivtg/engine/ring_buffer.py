"""Fixed-capacity circular buffer with FIFO eviction."""

import numbers
from typing import Generic, List, Optional, TypeVar

from ..errors import InputValidationError

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Bounded history of the most recent `capacity` values.

    Storage is preallocated; once full, each push overwrites the oldest
    slot and advances start_index. Capacity 0 accepts and drops everything.
    """

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral) or capacity < 0:
            raise InputValidationError(
                f"ring buffer capacity must be a non-negative integer, got {capacity!r}"
            )
        self.capacity = int(capacity)
        self.data: List[Optional[T]] = [None] * self.capacity
        self.start_index = 0
        self.size = 0

    def push(self, value: T) -> None:
        if self.capacity == 0:
            return

        if self.size < self.capacity:
            self.data[(self.start_index + self.size) % self.capacity] = value
            self.size += 1
            return

        self.data[self.start_index] = value
        self.start_index = (self.start_index + 1) % self.capacity

    def to_list(self) -> List[T]:
        """Values ordered oldest -> newest."""
        return [
            self.data[(self.start_index + i) % self.capacity]
            for i in range(self.size)
        ]

    def copy(self) -> "RingBuffer[T]":
        clone: RingBuffer[T] = RingBuffer(self.capacity)
        clone.data = list(self.data)
        clone.start_index = self.start_index
        clone.size = self.size
        return clone

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, size={self.size})"
