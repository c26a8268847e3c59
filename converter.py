"""Binary encoder implementation.

Both encoders produce the *digit-sequence* form of a binary number: an
ordinary integer whose decimal digits are the binary digits of the
input, most significant bit first (6 -> 110).

Decision branches are annotated with their branch-IDs (see
``contract.build_spec``) so white-box tests can trace coverage back to the
contract.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

from bounds import Bounds
from runner import run

R = TypeVar("R")


def _check_natural(n: int) -> None:
    """Reject anything that is not a non-negative int.

    Branches: INPUT-NOT-INT, INPUT-NEGATIVE
    """
    if isinstance(n, bool) or not isinstance(n, int):               # INPUT-NOT-INT
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:                                                       # INPUT-NEGATIVE
        raise ValueError(f"{n} is negative; only n >= 0 can be encoded")


def encode_binary(n: int) -> int:
    """Encode ``n`` recursively.

    Recursion depth equals ``n.bit_length()``, so inputs past the
    interpreter's recursion limit raise ``RecursionError``; use
    :func:`encode_binary_tail` for those.

    Branches: ENC-BASE, ENC-RECURSE
    """
    _check_natural(n)
    return _encode(n)


def _encode(n: int) -> int:
    if n == 0:                                                      # ENC-BASE
        return 0
    return _encode(n // 2) * 10 + n % 2                             # ENC-RECURSE


def encode_binary_tail(n: int, multiplier: int = 1, accumulated_result: int = 0) -> int:
    """Encode ``n`` with an accumulator, in constant stack space.

    ``multiplier`` is the place value of the next digit and
    ``accumulated_result`` the digits produced so far.  Each loop turn is
    one tail call: ``(n // 2, multiplier * 10, acc + n % 2 * multiplier)``.

    Branches: TAIL-BASE, TAIL-STEP
    """
    _check_natural(n)
    while n != 0:                                                   # TAIL-STEP
        accumulated_result += n % 2 * multiplier
        multiplier *= 10
        n //= 2
    return accumulated_result                                       # TAIL-BASE


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


@dataclass(frozen=True)
class BinaryEncoder:
    """An encoder that only accepts inputs within ``bounds``."""

    bounds: Bounds

    def _validate(self, n: int) -> None:
        """Reject inputs outside bounds.

        Branches: INPUT-VALID, INPUT-OUT-OF-BOUNDS
        """
        _check_natural(n)
        if not self.bounds.contains(n):                             # INPUT-OUT-OF-BOUNDS
            raise ValueError(
                f"{n} is outside bounds [{self.bounds.lo}, {self.bounds.hi}]"
            )
        # (falls through) INPUT-VALID

    def encode(self, n: int) -> int:
        """Recursive encoding of a bounded input."""
        self._validate(n)
        return _encode(n)

    def encode_tail(self, n: int) -> int:
        """Accumulator encoding of a bounded input."""
        self._validate(n)
        return encode_binary_tail(n)

    def run(self, n: int, f: Callable[[int], R]) -> R:
        """Apply ``f`` to a bounded input."""
        self._validate(n)
        return run(n, f)
