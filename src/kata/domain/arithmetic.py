"""Arithmetic helpers from the introductory lesson."""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_of(a: float, b: float) -> float:
    """Return the greater argument; *a* when both are equal."""
    return a if a >= b else b


def fizz_buzz(n: int) -> str:
    """Classic FizzBuzz for a single number.

    Examples:
        >>> fizz_buzz(15)
        'FizzBuzz'
        >>> fizz_buzz(8)
        '8'
    """
    result = ""
    if n % 3 == 0:
        result += "Fizz"
    if n % 5 == 0:
        result += "Buzz"
    return result or str(n)


def calculate_average(numbers: Sequence[float]) -> float:
    """Arithmetic mean; ``nan`` for an empty sequence."""
    if not numbers:
        return math.nan
    return sum(numbers) / len(numbers)


def product_of(numbers: Sequence[float]) -> float:
    """Product of all numbers; ``nan`` for an empty sequence."""
    if not numbers:
        return math.nan
    return math.prod(numbers)


def factorial(n: float) -> int | None:
    """n!, or None for negative or fractional input.

    Integral floats such as ``2.0`` are accepted.
    """
    if isinstance(n, float) and not n.is_integer():
        return None
    if n < 0:
        return None
    return math.factorial(int(n))
