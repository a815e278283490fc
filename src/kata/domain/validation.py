"""Pure validation predicates over primitive inputs.

Every predicate is total: malformed input yields False, never an exception.
"""

from __future__ import annotations

import re
from typing import Any

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"\d")


def is_number(value: Any) -> bool:
    """True for int and float values. ``bool`` is not a number here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_price_in_range(price: float, minimum: float, maximum: float) -> bool:
    """Inclusive range check: ``minimum <= price <= maximum``."""
    return minimum <= price <= maximum


def is_valid_username(name: Any, min_length: int = 5, max_length: int = 15) -> bool:
    """Check that *name* is a string whose length lies within the bounds."""
    if not isinstance(name, str):
        return False
    return min_length <= len(name) <= max_length


def is_strong_password(password: Any, min_length: int = 8) -> bool:
    """Require minimum length plus one uppercase, one lowercase and one digit.

    Examples:
        >>> is_strong_password("AkashGolui@123")
        True
        >>> is_strong_password("akash")
        False
    """
    if not isinstance(password, str) or len(password) < min_length:
        return False
    return all(p.search(password) for p in (_UPPER, _LOWER, _DIGIT))


def is_positive_number(value: Any) -> bool:
    """True for numbers strictly greater than zero. ``nan`` is rejected."""
    return is_number(value) and value > 0


def is_whole_number(value: Any) -> bool:
    """True for ints and integral floats (``3.0``). ``nan`` and ``inf`` are rejected."""
    if isinstance(value, float):
        return value.is_integer()
    return is_number(value)
