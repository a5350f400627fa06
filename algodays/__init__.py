"""Solutions to classic algorithm and data-structure problems."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "design",
    "dynamic",
    "graphs",
    "linked_lists",
    "matrix",
    "numbers",
    "searching",
    "stacks",
    "strings",
    "sums",
    "trees",
]