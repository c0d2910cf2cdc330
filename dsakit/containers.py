"""Fixed-capacity queues and stacks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = [
    "OverflowError_",
    "QueueFullError",
    "QueueEmptyError",
    "StackOverflowError",
    "StackUnderflowError",
    "CircularQueue",
    "LinearQueue",
    "BoundedStack",
]


class OverflowError_(OverflowError):
    """Raised when a bounded container cannot take another item."""


class QueueFullError(OverflowError_):
    """Raised on enqueue into a full queue."""


class QueueEmptyError(IndexError):
    """Raised on dequeue from an empty queue."""


class StackOverflowError(OverflowError_):
    """Raised on push onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised on pop or peek from an empty stack."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class CircularQueue:
    """A ring-buffer queue that reuses freed slots."""

    def __init__(self, capacity: int = 5) -> None:
        self._slots: list[Any] = [None] * _check_capacity(capacity)
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def is_empty(self) -> bool:
        return self._count == 0

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is FULL!")
        rear = (self._front + self._count) % len(self._slots)
        self._slots[rear] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is EMPTY!")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._count -= 1
        if self._count == 0:
            self._front = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        size = len(self._slots)
        for offset in range(self._count):
            yield self._slots[(self._front + offset) % size]

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"


class LinearQueue:
    """An array-backed queue whose rear only moves forward.

    Slots freed by dequeuing are not reused, so the queue reports full once
    ``capacity`` values have been enqueued. With ``reset_when_empty`` the
    queue starts over from the first slot whenever it is emptied.
    """

    def __init__(self, capacity: int = 5, reset_when_empty: bool = False) -> None:
        self._capacity = _check_capacity(capacity)
        self._reset_when_empty = reset_when_empty
        self._items: list[Any] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        return self._front >= len(self._items)

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueFullError("Queue is full (Overflow)")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty (Underflow)")
        value = self._items[self._front]
        self._front += 1
        if self._reset_when_empty and self.is_empty():
            self._items.clear()
            self._front = 0
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items[self._front:])

    def __len__(self) -> int:
        return len(self._items) - self._front

    def __repr__(self) -> str:
        return f"LinearQueue({list(self)!r}, capacity={self._capacity})"


class BoundedStack:
    """A LIFO stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        """Place a value on top."""
        if self.is_full():
            raise StackOverflowError("Overflow!!")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("Underflow!!!")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise StackUnderflowError("Stack is Empty!!")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self._capacity})"