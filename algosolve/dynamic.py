"""Dynamic-programming problems over sequences and strings."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

MOD = 10**9 + 7


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 1:
        raise ValueError("number of stairs must be at least 1")
    if n <= 2:
        return n
    before, current = 1, 2
    for _ in range(n - 2):
        before, current = current, before + current
    return current


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` can be split into words taken from ``word_dict``."""
    words = set(word_dict)
    breakable = [False] * len(s) + [True]
    for start in range(len(s) - 1, -1, -1):
        breakable[start] = any(
            breakable[end] for end in range(start + 1, len(s) + 1) if s[start:end] in words
        )
    return breakable[0]


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of non-adjacent values, always starting from the first house."""
    if not nums:
        raise ValueError("there must be at least one house")
    if len(nums) == 1:
        return nums[0]
    before, current = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, current = current, max(value + before, current)
    return current


def _rob_range(values: Iterable[int]) -> int:
    skipped, best = 0, 0
    for value in values:
        skipped, best = best, max(best, skipped + value)
    return best


def rob_circular(nums: Sequence[int]) -> int:
    """Return the largest sum of non-adjacent values when the first and last houses touch."""
    if not nums:
        raise ValueError("there must be at least one house")
    if len(nums) == 1:
        return nums[0]
    return max(_rob_range(nums[:-1]), _rob_range(nums[1:]))


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether ``s`` appears in ``t`` with its characters in order."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def can_cross(stones: Sequence[int]) -> bool:
    """Tell whether the frog can reach the last stone.

    The first jump is one unit; each later jump is the previous one, one less
    or one more, and always forward.
    """
    if len(stones) < 2:
        raise ValueError("there must be at least two stones")
    if stones[1] != 1:
        return False
    jumps: dict[int, set[int]] = {stone: set() for stone in stones}
    jumps[stones[0]].add(0)
    for stone in stones:
        for previous in jumps[stone]:
            for step in (previous - 1, previous, previous + 1):
                if step > 0 and stone + step in jumps:
                    jumps[stone + step].add(step)
    return bool(jumps[stones[-1]]) or len(stones) == 1


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two parts of equal sum."""
    total = sum(nums)
    if total % 2 != 0:
        return False
    target = total // 2
    reachable = {0}
    for value in nums:
        reachable |= {partial + value for partial in reachable if partial + value <= target}
        if target in reachable:
            return True
    return target in reachable


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Return the cheapest way past the top, starting from step 0 or step 1."""
    if len(cost) < 2:
        raise ValueError("there must be at least two steps")
    before, current = cost[0], cost[1]
    for value in cost[2:]:
        before, current = current, value + min(before, current)
    return min(before, current)


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    before, current = 0, 1
    for _ in range(n - 1):
        before, current = current, before + current
    return current


def max_sum_after_partitioning(arr: Sequence[int], k: int) -> int:
    """Split ``arr`` into runs of at most ``k`` values, each raised to its maximum, and
    return the largest possible total."""
    size = len(arr)
    best = [0] * (size + 1)
    for start in range(size - 1, -1, -1):
        result = 0
        run_max = -math.inf
        for end in range(start, min(size, start + k)):
            run_max = max(run_max, arr[end])
            result = max(result, (end - start + 1) * run_max + best[end + 1])
        best[start] = result
    return best[0]


def tribonacci(n: int) -> int:
    """Return the ``n``-th Tribonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    a, b, c = 0, 1, 1
    for _ in range(n - 2):
        a, b, c = b, c, a + b + c
    return c


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Return the length of the longest common subsequence of two strings."""
    below = [0] * (len(text2) + 1)
    for char1 in reversed(text1):
        row = [0] * (len(text2) + 1)
        for j in range(len(text2) - 1, -1, -1):
            if char1 == text2[j]:
                row[j] = 1 + below[j + 1]
            else:
                row[j] = max(row[j + 1], below[j])
        below = row
    return below[0]


def min_difficulty(job_difficulty: Sequence[int], d: int) -> int:
    """Return the least total of daily maxima when the jobs, in order, fill ``d`` days.

    Returns -1 when there are fewer jobs than days.
    """
    if d < 1:
        raise ValueError("number of days must be at least 1")
    size = len(job_difficulty)
    if size < d:
        return -1
    best = [math.inf] * (size + 1)
    running = -math.inf
    for start in range(size - 1, -1, -1):
        running = max(running, job_difficulty[start])
        best[start] = running
    for days in range(2, d + 1):
        current = [math.inf] * (size + 1)
        for start in range(size - days + 1):
            day_max = -math.inf
            for end in range(start, size - days + 1):
                day_max = max(day_max, job_difficulty[end])
                current[start] = min(current[start], day_max + best[end + 1])
        best = current
    return int(best[0])


def number_of_arrays(s: str, k: int) -> int:
    """Count the ways ``s`` splits into numbers in 1..k without leading zeros, modulo 1e9+7."""
    size = len(s)
    ways = [0] * size + [1]
    for start in range(size - 1, -1, -1):
        if s[start] == "0":
            continue
        number = 0
        total = 0
        for end in range(start, size):
            number = number * 10 + int(s[end])
            if number > k:
                break
            total += ways[end + 1]
        ways[start] = total % MOD
    return ways[0]