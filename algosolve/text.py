"""String problems: bracket matching, searching, counting and capitalisation."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character that is not an opening bracket closes the latest open one.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
            continue
        if not stack:
            return False
        top = stack.pop()
        if char in _PAIRS and _PAIRS[char] != top:
            return False
    return not stack


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    return haystack.find(needle)


def title_to_number(column_title: str) -> int:
    """Convert a spreadsheet column title such as 'AB' to its number."""
    result = 0
    for char in column_title:
        result = result * 26 + ord(char) - ord("A") + 1
    return result


def first_uniq_char(s: str) -> int:
    """Return the index of the first character that occurs once, or -1."""
    counts = Counter(s)
    return next((index for index, char in enumerate(s) if counts[char] == 1), -1)


def detect_capital_use(word: str) -> bool:
    """Tell whether a word is all capitals, all lower case, or capitalised."""
    capitals = sum(1 for char in word if char.isupper())
    return capitals in (0, len(word)) or (capitals == 1 and word[0].isupper())


def number_of_beams(bank: Iterable[str]) -> int:
    """Count the beams between devices ('1') of consecutive non-empty rows."""
    previous = 0
    total = 0
    for row in bank:
        devices = row.count("1")
        if devices:
            total += previous * devices
            previous = devices
    return total


def max_difference(s: str) -> int:
    """Return the largest odd character frequency minus the smallest even one."""
    counts = Counter(s).values()
    evens = [count for count in counts if count % 2 == 0]
    if not evens:
        raise ValueError("no character occurs an even number of times")
    odds = [count for count in counts if count % 2 == 1]
    return max(odds, default=0) - min(evens)


def max_distinct(s: str) -> int:
    """Return the number of distinct characters in ``s``."""
    return len(set(s))