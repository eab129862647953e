"""Array, matrix and graph algorithm drills, most with brute-force and efficient variants."""

__version__ = "0.1.0"

__all__ = [
    "alien",
    "array_basics",
    "dijkstra",
    "directed",
    "grids",
    "ksum",
    "matrix",
    "ordering",
    "subarrays",
    "traversal",
]