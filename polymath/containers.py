"""Bounded stack, queue and a container of strings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


def _check_capacity(capacity: int | None) -> None:
    if capacity is not None and capacity < 0:
        raise ValueError("capacity must not be negative.")


class Stack(Generic[T]):
    """Last in, first out; ``capacity`` of None means unbounded."""

    def __init__(self, capacity: int | None = None) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: list[T] = []

    def push(self, item: T) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise OverflowError("Stack is full.")
        self._items.append(item)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)


class Queue(Generic[T]):
    """First in, first out; ``capacity`` of None means unbounded."""

    def __init__(self, capacity: int | None = None) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._items: deque[T] = deque()

    def enqueue(self, item: T) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise OverflowError("Queue is full.")
        self._items.append(item)

    def dequeue(self) -> T:
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


@dataclass
class DataContainer:
    """An ordered collection of string entries."""

    entries: list[str] = field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.entries)