"""
N-by-N site percolation with incremental connectivity.

Each site of the grid is either blocked or open. Opening a site merges it
with its open orthogonal neighbours in two union-find structures, so the
percolation and fullness queries never rescan the grid.

Labels:
    0               virtual top, joined to every open site of row 0
    row * n + col + 1   the site at (row, col)
    n * n + 1       virtual bottom, joined to every open site of row n-1
                    (primary structure only)

The secondary structure has no virtual bottom. Without it a site in the
bottom row that shares a component with the virtual bottom would look full
as soon as the grid percolates anywhere (backwash). A site is full only when
it reaches the virtual top in both structures.
"""

import numbers
from typing import Iterator, Tuple

import numpy as np

from ..connectivity.union_find import WeightedQuickUnionUF


class Percolation:
    """
    Site percolation model on an n-by-n grid, all sites initially blocked.

    Example:
        perc = Percolation(3)
        for row in range(3):
            perc.open(row, 1)
        perc.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Args:
            n: Grid side length (must be a positive integer)
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n <= 0:
            raise ValueError(f"Grid size must be a positive integer, got {n!r}")

        self._n = int(n)
        self._open = np.zeros(self._n * self._n, dtype=bool)
        self._open_count = 0

        self._top = 0
        self._bottom = self._n * self._n + 1
        self._uf = WeightedQuickUnionUF(self._n * self._n + 2)
        self._uf_top = WeightedQuickUnionUF(self._n * self._n + 1)

    @property
    def n(self) -> int:
        return self._n

    @property
    def site_count(self) -> int:
        return self._n * self._n

    @property
    def open_sites(self) -> int:
        return self._open_count

    def _validate(self, row: int, col: int) -> None:
        n = self._n
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise IndexError(f"Coordinate ({row}, {col}) is not an integer pair")
        if not (0 <= row < n and 0 <= col < n):
            raise IndexError(f"Coordinate ({row}, {col}) out of bounds for {n}x{n} grid")

    def _label(self, row: int, col: int) -> int:
        # Callers have already validated (row, col)
        return row * self._n + col + 1

    def neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (row, col) of every in-bounds orthogonal neighbour.
        Does NOT check whether the neighbour is open.
        """
        self._validate(row, col)
        return self._neighbors(row, col)

    def _neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        if row > 0:
            yield (row - 1, col)
        if row < self._n - 1:
            yield (row + 1, col)
        if col > 0:
            yield (row, col - 1)
        if col < self._n - 1:
            yield (row, col + 1)

    def open(self, row: int, col: int) -> None:
        """
        Open site (row, col) if it is not open already.

        Raises:
            IndexError: if row or col is outside [0, n-1]
        """
        self._validate(row, col)
        site = self._label(row, col)
        if self._open[site - 1]:
            return

        self._open[site - 1] = True
        self._open_count += 1

        if row == 0:
            self._uf.merge(site, self._top)
            self._uf_top.merge(site, self._top)
        if row == self._n - 1:
            self._uf.merge(site, self._bottom)

        for nrow, ncol in self._neighbors(row, col):
            other = self._label(nrow, ncol)
            if self._open[other - 1]:
                self._uf.merge(site, other)
                self._uf_top.merge(site, other)

    def is_open(self, row: int, col: int) -> bool:
        """Return True if site (row, col) is open."""
        self._validate(row, col)
        return bool(self._open[self._label(row, col) - 1])

    def is_full(self, row: int, col: int) -> bool:
        """Return True if site (row, col) is connected to the top row through open sites."""
        self._validate(row, col)
        site = self._label(row, col)
        if not self._open[site - 1]:
            return False
        return self._uf.connected(self._top, site) and self._uf_top.connected(self._top, site)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Return True if some open path joins the top row to the bottom row."""
        return self._uf.connected(self._top, self._bottom)

    def open_fraction(self) -> float:
        return self._open_count / self.site_count

    def open_mask(self) -> np.ndarray:
        """Copy of the open/blocked state as an (n, n) boolean array."""
        return self._open.reshape(self._n, self._n).copy()

    def full_mask(self) -> np.ndarray:
        """(n, n) boolean array, True where the site is full."""
        sites = slice(1, self.site_count + 1)
        roots = self._uf.get_roots()
        roots_top = self._uf_top.get_roots()
        full = (self._open
                & (roots[sites] == roots[self._top])
                & (roots_top[sites] == roots_top[self._top]))
        return full.reshape(self._n, self._n)

    def __repr__(self) -> str:
        return (f"Percolation(n={self._n}, open_sites={self._open_count}, "
                f"percolates={self.percolates()})")
