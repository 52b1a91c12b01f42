"""
Site Percolation - connectivity queries on an n-by-n grid of sites.

This package provides tools for:
- Opening sites on a grid and tracking connectivity with a weighted union-find
- Querying whether a site is open or full, and whether the system percolates
- Loading opening scenarios from YAML files
- A command-line smoke test and scenario runner
"""

__version__ = "1.0.0"
