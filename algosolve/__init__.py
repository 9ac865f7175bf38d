"""Solutions to classic algorithm problems, grouped by technique into submodules."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "dynamic",
    "graphs",
    "grids",
    "linked",
    "numbers",
    "text",
    "trees",
]