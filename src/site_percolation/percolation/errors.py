"""
Exceptions raised by the percolation grid and its union-find backend.
"""


class PercolationError(ValueError):
    """Base class for all percolation errors."""
    pass


class InvalidArgument(PercolationError):
    """Raised when a grid or union-find is requested with a non-positive size."""
    pass


class OutOfBounds(PercolationError, IndexError):
    """Raised when a coordinate or element index lies outside the valid range."""
    pass
