"""Classic data structures and algorithms: graph traversal, dynamic programming, a max-heap, a circular queue, searching and sorting."""

__version__ = "0.1.0"

__all__ = [
    "graph",
    "dynamic",
    "searching",
    "heap",
    "circular_queue",
    "sorting",
]