"""Classic algorithm exercises on arrays, matrices, strings, bits, trees, graphs and heaps."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "graph",
    "heap",
    "matrix",
    "nqueens",
    "searching",
    "strings",
    "tree",
    "tree_metrics",
    "tree_paths",
]