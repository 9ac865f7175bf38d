"""Integer puzzles on digits, subtraction, divisibility and bit patterns."""

from __future__ import annotations


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains."""
    while num >= 10:
        num = sum(int(digit) for digit in str(num))
    return num


def _is_self_dividing(num: int) -> bool:
    if num <= 0:
        return True
    return all(digit != "0" and num % int(digit) == 0 for digit in str(num))


def self_dividing_numbers(left: int, right: int) -> list[int]:
    """Return the numbers in ``left..right`` that are divisible by each of their digits."""
    return [num for num in range(left, right + 1) if _is_self_dividing(num)]


def count_operations(num1: int, num2: int) -> int:
    """Count the subtractions of the smaller from the larger until one number is zero."""
    if num1 < 0 or num2 < 0:
        raise ValueError("numbers must not be negative")
    operations = 0
    while num1 and num2:
        if num1 >= num2:
            operations += num1 // num2
            num1 %= num2
        else:
            operations += num2 // num1
            num2 %= num1
    return operations


def difference_of_sums(n: int, m: int) -> int:
    """Return the sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    if n <= 0:
        return 0
    step = abs(m)
    multiples = n // step
    divisible = step * multiples * (multiples + 1) // 2
    return n * (n + 1) // 2 - 2 * divisible


def smallest_number(n: int) -> int:
    """Return the smallest number of the form 2**k - 1 (k >= 1) that is at least ``n``."""
    if n <= 1:
        return 1
    return (1 << n.bit_length()) - 1