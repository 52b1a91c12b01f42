"""
Disjoint-set primitive used by the percolation grid.

Wraps scipy's DisjointSet (union by size with path halving) behind the
integer-indexed make-set / union / find contract the grid relies on.
"""

from scipy.cluster.hierarchy import DisjointSet

from .errors import InvalidArgument, OutOfBounds


class UnionFind:
    """
    Weighted union-find over the integers 0 .. size-1.

    Every element starts as its own singleton component. Both union and find
    run in near-constant amortized time.
    """

    def __init__(self, size: int):
        """
        Create `size` singleton components.

        Args:
            size: Number of elements, must be positive
        """
        if size <= 0:
            raise InvalidArgument(f"Union-find size must be positive, got {size}")

        self.size = size
        self._sets = DisjointSet(range(size))

    def _validate(self, element: int) -> None:
        if element < 0 or element >= self.size:
            raise OutOfBounds(
                f"Element {element} out of range [0, {self.size - 1}]"
            )

    def find(self, element: int) -> int:
        """
        Return the canonical representative of the element's component.

        The representative is stable until the next union touching that component.
        """
        self._validate(element)
        return self._sets[element]

    def union(self, a: int, b: int) -> bool:
        """
        Merge the components containing `a` and `b`.

        Returns:
            True if two distinct components were merged, False if they were
            already connected
        """
        self._validate(a)
        self._validate(b)
        return self._sets.merge(a, b)

    def connected(self, a: int, b: int) -> bool:
        """Whether `a` and `b` share a component."""
        return self.find(a) == self.find(b)

    @property
    def count(self) -> int:
        """Number of disjoint components."""
        return self._sets.n_subsets

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"UnionFind(size={self.size}, components={self.count})"
