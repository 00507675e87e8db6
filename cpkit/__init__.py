"""Algorithms and data structures for competitive programming."""

__version__ = "0.1.0"

__all__ = [
    "internal_math",
    "modmath",
    "modint",
    "convolution",
    "dsu",
    "fenwicktree",
    "segtree",
    "lazysegtree",
    "strings",
    "scc",
    "twosat",
    "maxflow",
    "mincostflow",
    "linalg",
    "geometry",
]