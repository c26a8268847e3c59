"""Console input and output models.

Everything the console front-end reads is parsed through one of these
models, so non-numeric input surfaces as a ``pydantic.ValidationError``
with a readable message instead of reaching the encoder.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")

# str() refuses ints longer than sys.get_int_max_str_digits(); chunks stay under it
_CHUNK_DIGITS = 1000
_CHUNK = 10 ** _CHUNK_DIGITS


def decimal_text(value: int) -> str:
    """Decimal digits of a non-negative int of any length."""
    chunks = []
    while value >= _CHUNK:
        value, low = divmod(value, _CHUNK)
        chunks.append(f"{low:0{_CHUNK_DIGITS}d}")
    chunks.append(str(value))
    return "".join(reversed(chunks))


# ---------------------------------------------------------------------------
# Input: one line of console text
# ---------------------------------------------------------------------------

class IntegerInput(BaseModel):
    """A line of console text holding a whole number."""

    value: int

    @field_validator("value", mode="before")
    @classmethod
    def parse_integer_text(cls, v: object) -> object:
        if isinstance(v, str):
            text = v.strip()
            if not _INTEGER_PATTERN.match(text):
                raise PydanticCustomError(
                    "integer_text",
                    "Enter a valid whole number, got {text}",
                    {"text": repr(v)},
                )
            try:
                return int(text)
            except ValueError as e:
                # longer than sys.get_int_max_str_digits()
                raise PydanticCustomError("integer_too_long", str(e)) from None
        return v

    @classmethod
    def parse(cls, text: str) -> int:
        return cls(value=text).value


class NaturalInput(IntegerInput):
    """A whole number that can be encoded (n >= 0)."""

    value: int = Field(..., ge=0)


class TemperatureInput(BaseModel):
    """A temperature in degrees Celsius."""

    celsius: float

    @field_validator("celsius", mode="before")
    @classmethod
    def parse_float_text(cls, v: object) -> object:
        if isinstance(v, str):
            text = v.strip()
            try:
                return float(text)
            except ValueError:
                raise PydanticCustomError(
                    "temperature_text",
                    "Enter a valid temperature, got {text}",
                    {"text": repr(v)},
                ) from None
        return v

    @classmethod
    def parse(cls, text: str) -> float:
        return cls(celsius=text).celsius


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

class EncodingMethod(str, Enum):
    RECURSIVE = "recursive"
    TAIL = "tail"


class ConversionResult(BaseModel):
    """One encoded number, ready to print."""

    n: int = Field(..., ge=0)
    encoded: int = Field(..., ge=0)
    method: EncodingMethod

    def render(self) -> str:
        return f"{decimal_text(self.n)} written on binary as {decimal_text(self.encoded)}"
