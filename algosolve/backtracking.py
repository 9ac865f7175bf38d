"""Backtracking searches: sudoku, permutations, queens, combinations and partitions."""

from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Iterator, MutableSequence, Sequence

_DIGITS = "123456789"
_EMPTY = "."


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the empty ('.') cells of a 9x9 board in place.

    Cells are tried in row-major order and digits in ascending order. Returns
    True once the board is filled; returns False, with the board unchanged,
    when no filling exists.
    """
    rows: list[set[str]] = [set() for _ in range(9)]
    cols: list[set[str]] = [set() for _ in range(9)]
    boxes: list[set[str]] = [set() for _ in range(9)]
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == _EMPTY:
                empties.append((r, c))
            else:
                rows[r].add(value)
                cols[c].add(value)
                boxes[(r // 3) * 3 + c // 3].add(value)

    def place(position: int) -> bool:
        if position == len(empties):
            return True
        r, c = empties[position]
        box = boxes[(r // 3) * 3 + c // 3]
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in box:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            box.add(digit)
            if place(position + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            box.discard(digit)
            board[r][c] = _EMPTY
        return False

    return place(0)


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ordering of ``nums`` in lexicographic order."""
    counts = Counter(nums)
    values = sorted(counts)
    size = len(nums)
    current: list[int] = []
    result: list[list[int]] = []

    def extend() -> None:
        if len(current) == size:
            result.append(list(current))
            return
        for value in values:
            if counts[value]:
                counts[value] -= 1
                current.append(value)
                extend()
                current.pop()
                counts[value] += 1

    extend()
    return result


def _queen_placements(n: int) -> Iterator[list[int]]:
    """Yield the queen column for each row of every solution, in search order."""
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []
    used_cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> Iterator[list[int]]:
        if row == n:
            yield list(columns)
            return
        for col in range(n):
            if col in used_cols or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.append(col)
            used_cols.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            yield from place(row + 1)
            anti_diagonals.discard(row + col)
            diagonals.discard(row - col)
            used_cols.discard(col)
            columns.pop()

    yield from place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of 'Q' and '.'."""
    return [
        ["." * col + "Q" + "." * (n - col - 1) for col in placement]
        for placement in _queen_placements(n)
    ]


def total_n_queens(n: int) -> int:
    """Return the number of placements of ``n`` non-attacking queens."""
    return sum(1 for _ in _queen_placements(n))


def combine(n: int, k: int) -> list[list[int]]:
    """Return all ``k``-element combinations of 1..n in lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, n + 1), k)]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, each excluding an element before including it."""
    result: list[list[int]] = [[]]
    for value in reversed(nums):
        result = result + [[value, *rest] for rest in result]
    return result


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every split of ``s`` into palindromic pieces, shorter first pieces first."""
    result: list[list[str]] = []
    current: list[str] = []

    def split(start: int) -> None:
        if start == len(s):
            result.append(list(current))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                current.append(piece)
                split(end)
                current.pop()

    split(0)
    return result


def word_break_sentences(s: str, word_dict: Sequence[str]) -> list[str]:
    """Return every way to write ``s`` as space-separated words of ``word_dict``."""
    words = set(word_dict)
    cache: dict[int, list[list[str]]] = {}

    def breaks(start: int) -> list[list[str]]:
        if start == len(s):
            return [[]]
        if start not in cache:
            found: list[list[str]] = []
            for end in range(start + 1, len(s) + 1):
                word = s[start:end]
                if word in words:
                    found.extend([word, *rest] for rest in breaks(end))
            cache[start] = found
        return cache[start]

    return [" ".join(sentence) for sentence in breaks(0)]


def num_tile_possibilities(tiles: str) -> int:
    """Count the distinct non-empty sequences that can be laid from ``tiles``."""
    counts = Counter(tiles)

    def count() -> int:
        total = 0
        for letter in counts:
            if counts[letter]:
                counts[letter] -= 1
                total += 1 + count()
                counts[letter] += 1
        return total

    return count()


def valid_strings(n: int) -> list[str]:
    """Return all binary strings of length ``n`` with no two adjacent zeros."""

    def grow(prefix: str) -> Iterator[str]:
        if len(prefix) >= n:
            yield prefix
            return
        if not prefix.endswith("0"):
            yield from grow(prefix + "0")
        yield from grow(prefix + "1")

    return list(grow(""))