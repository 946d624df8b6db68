"""Union-find (disjoint set) with union by rank and path compression."""


class UnionFind:
    """Disjoint sets over the elements 0..n-1."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("number of elements must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._size = [1] * n
        self._num_sets = n

    def _check(self, i):
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} outside 0..{len(self._parent) - 1}")

    def find_set(self, i):
        """Representative of the set holding i."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def is_same_set(self, i, j):
        """Whether i and j are in the same set."""
        return self.find_set(i) == self.find_set(j)

    def union_set(self, i, j):
        """Merge the sets holding i and j."""
        x, y = self.find_set(i), self.find_set(j)
        if x == y:
            return
        self._num_sets -= 1
        if self._rank[x] > self._rank[y]:
            self._parent[y] = x
            self._size[x] += self._size[y]
        else:
            self._parent[x] = y
            self._size[y] += self._size[x]
            if self._rank[x] == self._rank[y]:
                self._rank[y] += 1

    def num_disjoint_sets(self):
        """Number of disjoint sets."""
        return self._num_sets

    def size_of_set(self, i):
        """Number of elements in the set holding i."""
        return self._size[self.find_set(i)]