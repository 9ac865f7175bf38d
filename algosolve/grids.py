"""Path counting and minimum-cost paths over grids and triangles."""

from __future__ import annotations

import math
from typing import Sequence


def _require_grid(grid: Sequence[Sequence[int]]) -> int:
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one cell")
    return len(grid[0])


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m <= 0 or n <= 0:
        return 0
    return math.comb(m + n - 2, m - 1)


def unique_paths_with_obstacles(obstacle_grid: Sequence[Sequence[int]]) -> int:
    """Count right/down paths that avoid the non-zero cells of the grid."""
    width = _require_grid(obstacle_grid)
    ways = [0] * (width + 1)
    for depth, row in enumerate(reversed(obstacle_grid)):
        for col in range(width - 1, -1, -1):
            if row[col] != 0:
                ways[col] = 0
            elif depth == 0 and col == width - 1:
                ways[col] = 1
            else:
                ways[col] += ways[col + 1]
    return ways[0]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum along a right/down path from corner to corner."""
    width = _require_grid(grid)
    best = [math.inf] * (width + 1)
    for depth, row in enumerate(reversed(grid)):
        for col in range(width - 1, -1, -1):
            if depth == 0 and col == width - 1:
                best[col] = row[col]
            else:
                best[col] = row[col] + min(best[col], best[col + 1])
    return int(best[0])


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Return the smallest top-to-bottom path sum through a triangle."""
    if not triangle:
        raise ValueError("triangle must have at least one row")
    best = list(triangle[-1])
    for row in reversed(triangle[:-1]):
        best = [value + min(a, b) for value, a, b in zip(row, best, best[1:])]
    return best[0]


def calculate_minimum_hp(dungeon: Sequence[Sequence[int]]) -> int:
    """Return the least starting health that keeps health above zero on some path."""
    width = _require_grid(dungeon)
    need = [math.inf] * (width + 1)
    for depth, row in enumerate(reversed(dungeon)):
        for col in range(width - 1, -1, -1):
            if depth == 0 and col == width - 1:
                need[col] = max(1, 1 - row[col])
            else:
                need[col] = max(1, min(need[col], need[col + 1]) - row[col])
    return int(need[0])


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Return the smallest sum of a path falling one row at a time to adjacent columns."""
    _require_grid(matrix)
    best = list(matrix[-1])
    for row in reversed(matrix[:-1]):
        best = [
            value + min(best[max(col - 1, 0) : col + 2])
            for col, value in enumerate(row)
        ]
    return min(best)