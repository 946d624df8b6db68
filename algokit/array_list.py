"""A growable list with sorting and binary search."""

from .sorting import binary_search as _binary_search


class ArrayList:
    """Ordered collection that grows as items are added."""

    def __init__(self, items=()):
        self._items = list(items)

    def _check_index(self, index):
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of bounds")

    def add(self, item):
        """Append item at the end."""
        self._items.append(item)

    def remove(self, index):
        """Remove the item at index, shifting later items down."""
        self._check_index(index)
        del self._items[index]

    def get(self, index):
        """Return the item at index."""
        self._check_index(index)
        return self._items[index]

    def sort(self):
        """Sort the items in ascending order."""
        self._items.sort()

    def binary_search(self, key):
        """Index of key in the sorted list, or None if absent."""
        return _binary_search(self._items, key)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __repr__(self):
        return f"{type(self).__name__}({self._items!r})"