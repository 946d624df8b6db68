"""Fenwick (binary indexed) tree for prefix and range sums."""


class FenwickTree:
    """Fenwick tree over positions 1..n, all starting at zero."""

    def __init__(self, n):
        if n < 0:
            raise ValueError("size must not be negative")
        self.n = n
        self._tree = [0] * (n + 1)

    def adjust(self, k, v):
        """Add v to the value at position k (1-based)."""
        if not 1 <= k <= self.n:
            raise IndexError(f"position {k} outside 1..{self.n}")
        while k <= self.n:
            self._tree[k] += v
            k += k & -k

    def rsq(self, b):
        """Sum of positions 1..b; rsq(0) is 0."""
        if not 0 <= b <= self.n:
            raise IndexError(f"position {b} outside 0..{self.n}")
        total = 0
        while b:
            total += self._tree[b]
            b -= b & -b
        return total

    def rsq_range(self, a, b):
        """Sum of positions a..b inclusive."""
        if a < 1:
            raise IndexError(f"position {a} is below 1")
        if a > b:
            raise ValueError(f"empty range {a}..{b}")
        return self.rsq(b) - self.rsq(a - 1)