"""Backtracking and dynamic-programming algorithms as plain Python functions."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "counting",
    "maze",
    "optimization",
    "queens",
    "segment_tree",
    "strings",
    "subsets",
    "sudoku",
    "tug_of_war",
    "words",
]