"""Integer division that signals division by zero.

Division truncates toward zero (like C, Java and Kotlin), not toward
negative infinity like Python's ``//``.

Branches: DIV-NORMAL, DIV-ZERO-ERROR, DIV-TRUNCATE
"""
from __future__ import annotations


def truncdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor division)."""
    q, r = divmod(a, b)
    # divmod rounds toward -inf; adjust when the result is negative
    # and there is a remainder.
    if r != 0 and (a < 0) != (b < 0):                             # DIV-TRUNCATE
        q += 1
    return q


def divide(a: int, b: int) -> int:
    """``a / b`` truncated toward zero.

    Raises ``ZeroDivisionError`` (an ``ArithmeticError``) when ``b`` is 0.
    """
    if b == 0:                                                     # DIV-ZERO-ERROR
        raise ZeroDivisionError("Cannot divide by zero.")
    return truncdiv(a, b)                                          # DIV-NORMAL
