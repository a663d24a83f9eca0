"""
Weighted quick-union with path compression.

Elements are the integers 0..n-1. Parent links and tree sizes live in two
numpy arrays, so a set is identified by the index of its root and no element
objects are ever allocated.
"""

import numbers

import numpy as np


class WeightedQuickUnionUF:
    """
    Disjoint-set forest over a fixed universe of integer labels.

    The smaller tree is always linked under the root of the larger one and
    every find flattens the path it walked, which keeps merge and connected
    close to constant time amortized.

    Example:
        uf = WeightedQuickUnionUF(10)
        uf.merge(3, 4)
        uf.connected(4, 3)  # True
    """

    def __init__(self, n: int):
        """
        Args:
            n: Number of elements in the universe (must be positive)
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
            raise ValueError(f"Universe size must be a positive integer, got {n!r}")

        self.n = int(n)
        self.parent = np.arange(self.n, dtype=np.int64)
        self.size = np.ones(self.n, dtype=np.int64)
        self._count = self.n

    def __len__(self) -> int:
        return self.n

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def _validate(self, p) -> int:
        if isinstance(p, bool) or not isinstance(p, numbers.Integral):
            raise IndexError(f"Label {p!r} is not an integer")
        if p < 0 or p >= self.n:
            raise IndexError(f"Label {p} is not between 0 and {self.n - 1}")
        return int(p)

    def _root(self, p: int) -> int:
        parent = self.parent
        root = p
        while root != parent[root]:
            root = int(parent[root])

        # Path compression
        while p != root:
            nxt = int(parent[p])
            parent[p] = root
            p = nxt

        return root

    def find(self, p: int) -> int:
        """Return the root label of the set containing p."""
        return self._root(self._validate(p))

    def connected(self, p: int, q: int) -> bool:
        """Return True if p and q are in the same set."""
        p = self._validate(p)
        q = self._validate(q)
        return self._root(p) == self._root(q)

    def merge(self, p: int, q: int) -> None:
        """Merge the sets containing p and q (no-op if already joined)."""
        root_p = self._root(self._validate(p))
        root_q = self._root(self._validate(q))
        if root_p == root_q:
            return

        if self.size[root_p] < self.size[root_q]:
            root_p, root_q = root_q, root_p

        self.parent[root_q] = root_p
        self.size[root_p] += self.size[root_q]
        self._count -= 1

    def get_roots(self) -> np.ndarray:
        """Return the root label of every element (compresses all paths)."""
        return np.array([self._root(p) for p in range(self.n)], dtype=np.int64)
