"""Array problems: searching, counting, windows and simple simulations."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Iterable, Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target``.

    The index of the smaller value comes first; an empty list means no pair exists.
    """
    ordered = sorted((value, index) for index, value in enumerate(nums))
    low, high = 0, len(ordered) - 1
    while low < high:
        total = ordered[low][0] + ordered[high][0]
        if total == target:
            return [ordered[low][1], ordered[high][1]]
        if total < target:
            low += 1
        else:
            high -= 1
    return []


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or where it would be inserted."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            start = mid + 1
        else:
            end = mid - 1
    return start


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values lie at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and index - last_seen[value] <= k:
            return True
        last_seen[value] = index
    return False


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(nums) if value == 1),
        default=0,
    )


def find_error_nums(nums: Sequence[int]) -> list[int]:
    """Return ``[duplicate, missing]`` for a list meant to hold 1..n once each."""
    counts = Counter(nums)
    duplicate = missing = 0
    for value in range(1, len(nums) + 1):
        if counts[value] == 2:
            duplicate = value
        if counts[value] == 0:
            missing = value
    return [duplicate, missing]


def k_length_apart(nums: Iterable[int], k: int) -> bool:
    """Tell whether every two 1s are separated by at least ``k`` other values."""
    gap = k
    for value in nums:
        if value == 1:
            if gap < k:
                return False
            gap = 0
        else:
            gap += 1
    return True


def num_special(mat: Sequence[Sequence[int]]) -> int:
    """Count the set cells that are the only 1 in both their row and their column."""
    if not mat:
        return 0
    row_ones = [list(row).count(1) for row in mat]
    col_ones = [list(col).count(1) for col in zip(*mat)]
    return sum(
        1
        for i, row in enumerate(mat)
        for j, value in enumerate(row)
        if value
        and row_ones[i] - (value == 1) == 0
        and col_ones[j] - (value == 1) == 0
    )


def min_number_operations(target: Sequence[int]) -> int:
    """Return the fewest subarray increments that turn zeros into ``target``."""
    if not target:
        raise ValueError("target must not be empty")
    return target[0] + sum(
        max(current - previous, 0) for previous, current in zip(target, target[1:])
    )


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def find_final_value(nums: Iterable[int], original: int) -> int:
    """Keep doubling ``original`` while it is found in ``nums`` and return the result."""
    values = set(nums)
    if original == 0 and 0 in values:
        raise ValueError("doubling zero never leaves the values")
    while original in values:
        original *= 2
    return original


def triangular_sum(nums: Sequence[int]) -> int:
    """Reduce digits by summing neighbours modulo 10 until one remains; 0 if empty."""
    row = list(nums)
    if not row:
        return 0
    while len(row) > 1:
        row = [(a + b) % 10 for a, b in zip(row, row[1:])]
    return row[0]


def minimum_boxes(apple: Iterable[int], capacity: Iterable[int]) -> int:
    """Return how many of the largest boxes are taken until all apples fit."""
    remaining = sum(apple)
    boxes = 0
    for size in sorted(capacity, reverse=True):
        remaining -= size
        boxes += 1
        if remaining <= 0:
            break
    return boxes


def get_sneaky_numbers(nums: Iterable[int]) -> list[int]:
    """Return, in ascending order, the values that occur more than once."""
    return sorted(value for value, count in Counter(nums).items() if count > 1)


def count_valid_selections(nums: Sequence[int]) -> int:
    """Count the (zero cell, direction) starts whose bouncing walk clears every value."""

    def clears(start: int, direction: int) -> bool:
        remaining = list(nums)
        position = start
        while 0 <= position < len(remaining):
            if remaining[position] != 0:
                remaining[position] -= 1
                direction = -direction
            position += direction
        return not any(remaining)

    return sum(
        clears(index, direction)
        for index, value in enumerate(nums)
        if value == 0
        for direction in (1, -1)
    )


def minimum_index(capacity: Sequence[int], item_size: int) -> int:
    """Return the index of the smallest box that holds ``item_size``, earliest on ties, or -1."""
    fitting = [(size, index) for index, size in enumerate(capacity) if size >= item_size]
    return min(fitting)[1] if fitting else -1