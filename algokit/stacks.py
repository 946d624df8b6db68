"""Bounded and linked stacks."""

from dataclasses import dataclass
from typing import Any, Optional


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when reading from an empty stack."""


class BoundedStack:
    """Stack with a fixed capacity."""

    def __init__(self, capacity=3):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items = []

    def push(self, value):
        """Push value; raise StackOverflow when full."""
        if len(self._items) == self.capacity:
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self):
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Iterate from top to bottom."""
        return reversed(self._items)


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"]


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self):
        self._head = None
        self._size = 0

    def push(self, value):
        """Push value on top."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self):
        """Remove and return the top value."""
        if self._head is None:
            raise StackUnderflow("stack underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self):
        """Return the top value without removing it."""
        if self._head is None:
            raise StackUnderflow("stack is empty")
        return self._head.value

    def clear(self):
        """Remove every value."""
        self._head = None
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self):
        """Iterate from top to bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next


def reverse_with_stack(items):
    """Return items in reverse order by pushing them all and popping them back."""
    stack = LinkedStack()
    for item in items:
        stack.push(item)
    return [stack.pop() for _ in range(len(stack))]