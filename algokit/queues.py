"""Bounded linear and circular queues, and an unbounded linked queue."""

from dataclasses import dataclass
from typing import Any, Optional


class QueueOverflow(Exception):
    """Raised when adding to a full queue."""


class QueueUnderflow(Exception):
    """Raised when reading from an empty queue."""


def _check_capacity(capacity):
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class LinearQueue:
    """Array queue whose slots are not reused until it has been emptied.

    Once the rear reaches the last slot the queue reports overflow, even if
    values have been removed from the front in the meantime.
    """

    def __init__(self, capacity=10):
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, value):
        """Add value at the rear; raise QueueOverflow when the last slot is used."""
        if self._rear == self.capacity - 1:
            raise QueueOverflow("queue overflow")
        if self._front == -1:
            self._front = self._rear = 0
        else:
            self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self):
        """Remove and return the front value."""
        if self._front == -1:
            raise QueueUnderflow("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        if self._front > self._rear:
            self._front = self._rear = -1
        return value

    def peek(self):
        """Return the front value without removing it."""
        if self._front == -1:
            raise QueueUnderflow("queue is empty")
        return self._slots[self._front]

    def __len__(self):
        return 0 if self._front == -1 else self._rear - self._front + 1

    def __iter__(self):
        """Iterate from front to rear."""
        if self._front == -1:
            return iter(())
        return iter(self._slots[self._front:self._rear + 1])


class CircularQueue:
    """Array queue that wraps around, reusing slots freed at the front."""

    def __init__(self, capacity=10):
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value):
        """Add value at the rear; raise QueueOverflow when every slot is used."""
        if self._size == self.capacity:
            raise QueueOverflow("queue overflow")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self):
        """Remove and return the front value."""
        if not self._size:
            raise QueueUnderflow("queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        if not self._size:
            self._front = 0
        return value

    def peek(self):
        """Return the front value without removing it."""
        if not self._size:
            raise QueueUnderflow("queue is empty")
        return self._slots[self._front]

    def __len__(self):
        return self._size

    def __iter__(self):
        """Iterate from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """Unbounded queue built from linked nodes."""

    def __init__(self):
        self._front = None
        self._rear = None
        self._size = 0

    def enqueue(self, value):
        """Add value at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self):
        """Remove and return the front value."""
        if self._front is None:
            raise QueueUnderflow("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def peek(self):
        """Return the front value without removing it."""
        if self._front is None:
            raise QueueUnderflow("queue is empty")
        return self._front.value

    def rear(self):
        """Return the rear value without removing it."""
        if self._rear is None:
            raise QueueUnderflow("queue is empty")
        return self._rear.value

    def clear(self):
        """Remove every value."""
        self._front = self._rear = None
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self):
        """Iterate from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next