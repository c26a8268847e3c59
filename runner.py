"""Function runner and the unary functions it is usually handed.

``run`` exists to pass functions around as values; the helpers below
are the stock callables the console front-end feeds it.
"""
from __future__ import annotations

from math import isqrt
from typing import Any, Callable, TypeVar

R = TypeVar("R")


def run(n: int, f: Callable[[int], R]) -> R:
    """Apply ``f`` to ``n`` and return the result unchanged."""
    return f(n)                                                    # RUN-APPLY


def is_even(x: int) -> bool:
    return x % 2 == 0


def factorial(x: int) -> int:
    """Product of 1..x; ``factorial(0) == 1``."""
    if x < 0:
        raise ValueError(f"factorial is undefined for negative input ({x})")
    result = 1
    for i in range(2, x + 1):
        result *= i
    return result


def is_prime(x: int) -> bool:
    """Trial division up to isqrt(x).  0, 1 and negatives are not prime."""
    if x < 2:
        return False
    for d in range(2, isqrt(x) + 1):
        if x % d == 0:
            return False
    return True


UNARY_FUNCTIONS: dict[str, Callable[[int], Any]] = {
    "even": is_even,
    "factorial": factorial,
    "prime": is_prime,
}
