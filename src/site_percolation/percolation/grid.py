"""
Site percolation on an n-by-n grid.

Sites are opened one at a time. Connectivity between open sites is tracked
incrementally in a union-find structure over n*n + 2 elements: the n*n real
sites plus two virtual sentinels, one attached to every open site in the top
row and one attached to every open site in the bottom row. "Is this site
full?" and "does the system percolate?" then reduce to a single find
comparison against the sentinels instead of a traversal per query.

Coordinates are 1-indexed: rows and columns run from 1 to n.
"""

from typing import Iterable, Tuple

import numpy as np

from .errors import InvalidArgument, OutOfBounds
from .union_find import UnionFind


class PercolationGrid:
    """
    An n-by-n grid of sites, all initially blocked.

    Example:
        grid = PercolationGrid(2)
        grid.open(1, 1)
        grid.open(2, 1)
        grid.percolates()  # True
    """

    def __init__(self, n: int):
        """
        Create an n-by-n grid with every site blocked.

        Args:
            n: Grid size, must be positive
        """
        if n <= 0:
            raise InvalidArgument(f"Grid size must be positive, got {n}")

        self.n = n
        self._open = np.zeros(n * n, dtype=bool)
        self._opened_count = 0
        self._uf = UnionFind(n * n + 2)

        self.virtual_top = 0
        self.virtual_bottom = n * n + 1

    def _validate(self, row: int, col: int) -> None:
        for value in (row, col):
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
                raise OutOfBounds(
                    f"Site ({row}, {col}) must have integer coordinates in [1, {self.n}]"
                )
        if row < 1 or row > self.n or col < 1 or col > self.n:
            raise OutOfBounds(
                f"Site ({row}, {col}) out of bounds for grid of size {self.n}, "
                f"rows and columns must be in [1, {self.n}]"
            )

    def site_index(self, row: int, col: int) -> int:
        """
        Union-find index of a site.

        Real sites map to [1, n*n]; 0 and n*n+1 are the virtual sentinels.
        """
        self._validate(row, col)
        return (row - 1) * self.n + col

    def open(self, row: int, col: int) -> None:
        """
        Open the site (row, col) if it is not open already.

        Joins the site to every open neighbor, and to the top or bottom
        sentinel when it lies in the first or last row.
        """
        self._validate(row, col)

        if self._open[(row - 1) * self.n + col - 1]:
            return

        self._open[(row - 1) * self.n + col - 1] = True
        self._opened_count += 1

        index = self.site_index(row, col)

        # Both fire for a 1x1 grid
        if row == 1:
            self._uf.union(index, self.virtual_top)
        if row == self.n:
            self._uf.union(index, self.virtual_bottom)

        for r, c in ((row - 1, col), (row, col - 1), (row + 1, col), (row, col + 1)):
            if 1 <= r <= self.n and 1 <= c <= self.n and self.is_open(r, c):
                self._uf.union(index, self.site_index(r, c))

    def open_many(self, sites: Iterable[Tuple[int, int]]) -> None:
        """
        Open a sequence of (row, col) sites in order.

        Sites before an out-of-bounds pair stay open; the bad pair raises.
        """
        for row, col in sites:
            self.open(row, col)

    def is_open(self, row: int, col: int) -> bool:
        """Is the site (row, col) open?"""
        self._validate(row, col)
        return bool(self._open[(row - 1) * self.n + col - 1])

    def is_full(self, row: int, col: int) -> bool:
        """Is the site (row, col) open and connected to the top row?"""
        return self.is_open(row, col) and self._uf.connected(
            self.site_index(row, col), self.virtual_top
        )

    def number_of_open_sites(self) -> int:
        """Number of sites opened so far."""
        return self._opened_count

    def percolates(self) -> bool:
        """Does an open path connect the top row to the bottom row?"""
        return self._uf.connected(self.virtual_bottom, self.virtual_top)

    def open_fraction(self) -> float:
        """Fraction of the n*n sites that are open."""
        return self._opened_count / (self.n * self.n)

    def open_sites(self) -> np.ndarray:
        """
        Snapshot of the open state.

        Returns:
            Boolean array of shape (n, n); entry [r-1, c-1] is site (r, c)
        """
        return self._open.reshape(self.n, self.n).copy()

    def full_sites(self) -> np.ndarray:
        """
        Snapshot of which sites are full.

        Returns:
            Boolean array of shape (n, n); entry [r-1, c-1] is site (r, c)
        """
        top_root = self._uf.find(self.virtual_top)
        full = np.zeros(self.n * self.n, dtype=bool)
        for flat in np.flatnonzero(self._open):
            full[flat] = self._uf.find(int(flat) + 1) == top_root
        return full.reshape(self.n, self.n)

    def __repr__(self) -> str:
        return (
            f"PercolationGrid(n={self.n}, open={self._opened_count}, "
            f"percolates={self.percolates()})"
        )
