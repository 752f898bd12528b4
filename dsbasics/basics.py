"""Small arithmetic building blocks: sums, products, shapes, primes and type sizes."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle given by its length and width."""

    length: float
    width: float

    def area(self) -> float:
        """Return length times width."""
        return self.length * self.width

    def perimeter(self) -> float:
        """Return the distance around the rectangle."""
        return 2 * (self.length + self.width)


@dataclass(frozen=True)
class ComplexInt:
    """A complex number with integer real and imaginary parts."""

    real: int
    img: int

    def __add__(self, other: object) -> ComplexInt:
        if not isinstance(other, ComplexInt):
            return NotImplemented
        return ComplexInt(self.real + other.real, self.img + other.img)

    def __str__(self) -> str:
        return f"{self.real} + {self.img}i"


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def multiply(a: float, b: float) -> float:
    """Return the product of two numbers."""
    return a * b


def compound_interest(principal: float, rate: float, time: float) -> float:
    """Return the interest earned on principal at rate percent over time periods."""
    amount = principal * (1 + rate / 100) ** time
    return amount - principal


def fahrenheit_to_celsius(temp_f: float) -> float:
    """Convert a temperature from degrees Fahrenheit to degrees Celsius."""
    return (temp_f - 32) * 5 / 9


def is_prime(num: int) -> bool:
    """Trial division by every candidate up to half of num.

    Numbers below 2 have no candidate divisors and so count as prime here.
    """
    return all(num % divisor for divisor in range(2, num // 2 + 1))


def is_prime_sqrt(num: int) -> bool:
    """Trial division by every candidate up to the square root of num.

    Numbers below 2 have no candidate divisors and so count as prime here.
    """
    limit = math.isqrt(num) if num > 0 else 1
    return all(num % divisor for divisor in range(2, limit + 1))


def primes_up_to(limit: int) -> list[int]:
    """Return every number from 1 to limit that is_prime accepts."""
    return [num for num in range(1, limit + 1) if is_prime(num)]


def ascii_value(text: str) -> int:
    """Return the character code of the first character of text."""
    if not text:
        raise ValueError("a character is required")
    return ord(text[0])


def type_sizes() -> dict[str, int]:
    """Return the native size in bytes of the basic numeric types."""
    return {
        "short int": struct.calcsize("h"),
        "int": struct.calcsize("i"),
        "char": struct.calcsize("c"),
        "signed char": struct.calcsize("b"),
        "float": struct.calcsize("f"),
        "double": struct.calcsize("d"),
    }


def greeting() -> str:
    """Return the customary first greeting."""
    return "Hello world!"