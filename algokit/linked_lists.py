"""Singly, doubly and header linked lists."""


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value, next=None):
        self.value = value
        self.next = next


class _DNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value, prev=None, next=None):
        self.value = value
        self.prev = prev
        self.next = next


def _not_found(target):
    return ValueError(f"value {target!r} is not in the list")


class SinglyLinkedList:
    """Linked list whose nodes point only forward."""

    def __init__(self, items=()):
        self._head = None
        self._tail = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def _find(self, target):
        """Return (previous node or None, node) for the first node holding target."""
        prev, node = None, self._head
        while node is not None:
            if node.value == target:
                return prev, node
            prev, node = node, node.next
        raise _not_found(target)

    def insert_beg(self, value):
        """Insert value at the front."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_end(self, value):
        """Insert value at the back."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_before(self, value, target):
        """Insert value before the first node holding target."""
        prev, node = self._find(target)
        if prev is None:
            self.insert_beg(value)
            return
        prev.next = _Node(value, node)
        self._size += 1

    def insert_after(self, value, target):
        """Insert value after the first node holding target."""
        _, node = self._find(target)
        node.next = _Node(value, node.next)
        if node is self._tail:
            self._tail = node.next
        self._size += 1

    def _remove(self, prev, node):
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1
        return node.value

    def delete_beg(self):
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._remove(None, self._head)

    def delete_end(self):
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        prev, node = None, self._head
        while node.next is not None:
            prev, node = node, node.next
        return self._remove(prev, node)

    def delete_node(self, target):
        """Remove the first node holding target and return its value."""
        prev, node = self._find(target)
        return self._remove(prev, node)

    def delete_after(self, target):
        """Remove the node after the first node holding target and return its value."""
        _, node = self._find(target)
        if node.next is None:
            raise ValueError(f"no node follows {target!r}")
        return self._remove(node, node.next)

    def clear(self):
        """Remove every node."""
        self._head = self._tail = None
        self._size = 0

    def sort(self):
        """Sort the values in ascending order, in place."""
        values = sorted(self)
        node = self._head
        for value in values:
            node.value = value
            node = node.next

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self):
        if self._head is None:
            return "List is empty"
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """Linked list whose nodes point both forward and back."""

    def __init__(self, items=()):
        self._head = None
        self._tail = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def _find(self, target):
        node = self._head
        while node is not None:
            if node.value == target:
                return node
            node = node.next
        raise _not_found(target)

    def _link_before(self, value, node):
        new = _DNode(value, node.prev, node)
        if node.prev is None:
            self._head = new
        else:
            node.prev.next = new
        node.prev = new
        self._size += 1

    def _link_after(self, value, node):
        new = _DNode(value, node, node.next)
        if node.next is None:
            self._tail = new
        else:
            node.next.prev = new
        node.next = new
        self._size += 1

    def _unlink(self, node):
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def insert_beg(self, value):
        """Insert value at the front."""
        if self._head is None:
            self._head = self._tail = _DNode(value)
            self._size += 1
        else:
            self._link_before(value, self._head)

    def insert_end(self, value):
        """Insert value at the back."""
        if self._tail is None:
            self._head = self._tail = _DNode(value)
            self._size += 1
        else:
            self._link_after(value, self._tail)

    def insert_before(self, value, target):
        """Insert value before the first node holding target."""
        self._link_before(value, self._find(target))

    def insert_after(self, value, target):
        """Insert value after the first node holding target."""
        self._link_after(value, self._find(target))

    def delete_beg(self):
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._head)

    def delete_end(self):
        """Remove and return the last value."""
        if self._tail is None:
            raise IndexError("delete from an empty list")
        return self._unlink(self._tail)

    def delete_before(self, target):
        """Remove the node before the first node holding target and return its value."""
        node = self._find(target)
        if node.prev is None:
            raise ValueError(f"no node precedes {target!r}")
        return self._unlink(node.prev)

    def delete_after(self, target):
        """Remove the node after the first node holding target and return its value."""
        node = self._find(target)
        if node.next is None:
            raise ValueError(f"no node follows {target!r}")
        return self._unlink(node.next)

    def clear(self):
        """Remove every node."""
        self._head = self._tail = None
        self._size = 0

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"


class HeaderLinkedList:
    """Singly linked list that starts with a header node holding no value."""

    def __init__(self, items=()):
        self._header = _Node(None)
        self._tail = self._header
        self._size = 0
        for item in items:
            self.append(item)

    def append(self, value):
        """Add value at the back."""
        self._tail.next = _Node(value)
        self._tail = self._tail.next
        self._size += 1

    def __len__(self):
        return self._size

    def __iter__(self):
        node = self._header.next
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"