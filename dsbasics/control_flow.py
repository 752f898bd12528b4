"""Exercises in branching, looping and recursion."""

from __future__ import annotations

import math
import string

VOWELS = frozenset("aeiouAEIOU")


def sum_natural(n: int) -> int:
    """Return the sum of the integers from 0 to n, added up one at a time."""
    return sum(range(n + 1))


def sum_natural_recursive(n: int) -> int:
    """Return the sum of the integers from 1 to n by recursion."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return 1
    return n + sum_natural_recursive(n - 1)


def is_vowel(char: str) -> bool:
    """Return whether a single character is an English vowel."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char in VOWELS


def is_leap_year(year: int) -> bool:
    """Return whether year is a leap year in the Gregorian calendar."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def sign_of(num: float) -> str:
    """Describe the sign of num as 'positive', 'zero' or 'negative'."""
    if num > 0:
        return "positive"
    if num == 0:
        return "zero"
    return "negative"


def factorial(n: int) -> int:
    """Return n factorial for n of at least 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    return math.prod(range(1, n + 1))


def multiplication_table(num: int, limit: int) -> list[str]:
    """Return the lines 'num * i = product' for i from 1 to limit."""
    return [f"{num} * {i} = {num * i}" for i in range(1, limit + 1)]


def alphabet_lines() -> list[str]:
    """Return the upper-case and then the lower-case alphabet, space separated."""
    return [" ".join(string.ascii_uppercase), " ".join(string.ascii_lowercase)]


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a