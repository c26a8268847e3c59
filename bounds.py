"""
Bounds layer for the binary encoder.

Bounds define the input *domain* an encoder accepts.  The core
functions in ``converter`` take any non-negative integer; a
``BinaryEncoder`` additionally rejects inputs outside its bounds so
callers can guarantee the encoding fits a fixed-width integer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bounds:
    """Inclusive non-negative integer interval [lo, hi]."""

    lo: int
    hi: int

    def __post_init__(self) -> None:
        if self.lo < 0:
            raise ValueError(f"lo ({self.lo}) must be >= 0")
        if self.lo > self.hi:
            raise ValueError(f"lo ({self.lo}) must be <= hi ({self.hi})")

    @property
    def width(self) -> int:
        """Total number of representable values."""
        return self.hi - self.lo + 1

    @property
    def max_digits(self) -> int:
        """Digit count of the largest encoding in the domain."""
        return max(1, self.hi.bit_length())

    def contains(self, value: int) -> bool:
        return self.lo <= value <= self.hi

    def all_values(self) -> range:
        return range(self.lo, self.hi + 1)

    def edge_values(self) -> list[int]:
        """Boundary values plus the powers of two just around them."""
        candidates = [self.lo, self.lo + 1, self.hi - 1, self.hi]
        power = 1
        while power <= self.hi:
            candidates.extend((power - 1, power, power + 1))
            power *= 2
        return sorted({v for v in candidates if self.contains(v)})


# ---------------------------------------------------------------------------
# Common bounds presets
# ---------------------------------------------------------------------------

UINT8 = Bounds(lo=0, hi=255)
UINT16 = Bounds(lo=0, hi=65_535)

# 19 binary digits is the longest encoding below 2**63 - 1.
INT64_DIGITS = Bounds(lo=0, hi=2**19 - 1)

# Small bounds useful for exhaustive verification
TINY = Bounds(lo=0, hi=15)

PRESETS = {
    "uint8": UINT8,
    "uint16": UINT16,
    "int64": INT64_DIGITS,
}
