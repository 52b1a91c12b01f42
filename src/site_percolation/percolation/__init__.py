"""Site percolation grid backed by a weighted union-find."""

from .errors import PercolationError, InvalidArgument, OutOfBounds
from .union_find import UnionFind
from .grid import PercolationGrid

__all__ = ['PercolationGrid', 'UnionFind', 'PercolationError', 'InvalidArgument', 'OutOfBounds']
