"""Formal contract for the bounded binary encoder.

Each operation is specified as a collection of:
- preconditions: what inputs must satisfy before the operation
- postconditions: what the output must satisfy given valid inputs
- error conditions: what inputs must cause specific exceptions
- algebraic properties: relationships between calls that must hold

The spec is machine-readable.  The factory, the conformance tests and
the counterexample search all iterate over it.

Layers
------
OperationSpec   per-operation contract (pre/post/error/properties)
BranchSpec      every decision point that white-box tests must cover
EncoderSpec     the full contract for a configured encoder
build_spec()    constructs an EncoderSpec for given bounds
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from bounds import Bounds


# ---------------------------------------------------------------------------
# Spec building blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Precondition:
    name: str
    description: str
    check: Callable[..., bool]


@dataclass(frozen=True)
class Postcondition:
    name: str
    description: str
    check: Callable[..., bool]


@dataclass(frozen=True)
class ErrorCondition:
    name: str
    description: str
    trigger: Callable[..., bool]
    exception: type


@dataclass(frozen=True)
class AlgebraicProperty:
    name: str
    description: str
    arity: int          # how many free input values the check needs
    check: Callable[..., bool]


@dataclass(frozen=True)
class OperationSpec:
    name: str
    preconditions: list[Precondition]
    postconditions: list[Postcondition]
    error_conditions: list[ErrorCondition]
    properties: list[AlgebraicProperty]


@dataclass(frozen=True)
class BranchSpec:
    """A decision point in the implementation that must be exercised."""

    id: str
    description: str
    condition: str      # human-readable boolean expression
    operation: str      # which operation / helper this belongs to


@dataclass(frozen=True)
class EncoderSpec:
    """Complete contract for a bounded encoder."""

    bounds: Bounds
    operations: dict[str, OperationSpec]
    branches: list[BranchSpec]

    @property
    def all_properties(self) -> list[tuple[str, AlgebraicProperty]]:
        out: list[tuple[str, AlgebraicProperty]] = []
        for name, op in self.operations.items():
            for prop in op.properties:
                out.append((name, prop))
        return out

    @property
    def all_postconditions(self) -> list[tuple[str, Postcondition]]:
        out: list[tuple[str, Postcondition]] = []
        for name, op in self.operations.items():
            for post in op.postconditions:
                out.append((name, post))
        return out

    @property
    def branch_ids(self) -> set[str]:
        return {b.id for b in self.branches}


# ---------------------------------------------------------------------------
# Helpers used inside the spec predicates
# ---------------------------------------------------------------------------

def digits_are_binary(encoded: int) -> bool:
    """True when every decimal digit of ``encoded`` is 0 or 1."""
    return encoded >= 0 and set(str(encoded)) <= {"0", "1"}


def decode_digits(encoded: int) -> int:
    """Read the decimal digits of ``encoded`` as a base-2 number."""
    return int(str(encoded), 2)


def expected_digit_count(n: int) -> int:
    return max(1, n.bit_length())


# ---------------------------------------------------------------------------
# Spec builder
# ---------------------------------------------------------------------------

def _encoding_postconditions(what: str) -> list[Postcondition]:
    return [
        Postcondition(
            "binary_digits",
            f"{what} contains only the digits 0 and 1",
            lambda n, result: digits_are_binary(result),
        ),
        Postcondition(
            "decodes_to_input",
            f"{what} read as base 2 equals the input",
            lambda n, result: decode_digits(result) == n,
        ),
        Postcondition(
            "digit_count",
            f"{what} has max(1, n.bit_length()) digits",
            lambda n, result: len(str(result)) == expected_digit_count(n),
        ),
    ]


def build_spec(bounds: Bounds) -> EncoderSpec:
    """Construct the full encoder contract for a bounds configuration."""

    in_bounds = Precondition(
        "input_in_bounds",
        "Input within bounds",
        lambda n: bounds.contains(n),
    )
    out_of_bounds = ErrorCondition(
        "out_of_bounds",
        "ValueError when input is outside bounds (including negatives)",
        lambda n: not bounds.contains(n),
        ValueError,
    )

    # --------------------------------------------------------------- encode
    encode_spec = OperationSpec(
        name="encode",
        preconditions=[in_bounds],
        postconditions=_encoding_postconditions("Recursive encoding"),
        error_conditions=[out_of_bounds],
        properties=[
            AlgebraicProperty(
                "matches_tail", "encode(n) == encode_tail(n)", 1,
                lambda enc, n: enc.encode(n) == enc.encode_tail(n),
            ),
            AlgebraicProperty(
                "idempotent", "encode(n) is the same on every call", 1,
                lambda enc, n: enc.encode(n) == enc.encode(n),
            ),
            AlgebraicProperty(
                "doubling", "encode(2n) == encode(n) * 10 when 2n in bounds", 1,
                lambda enc, n: (
                    enc.encode(2 * n) == enc.encode(n) * 10
                    if bounds.contains(2 * n) else True
                ),
            ),
            AlgebraicProperty(
                "order_preserving", "n < m implies encode(n) < encode(m)", 2,
                lambda enc, n, m: (
                    n >= m or enc.encode(n) < enc.encode(m)
                ),
            ),
        ],
    )

    # ---------------------------------------------------------- encode_tail
    encode_tail_spec = OperationSpec(
        name="encode_tail",
        preconditions=[in_bounds],
        postconditions=_encoding_postconditions("Accumulator encoding"),
        error_conditions=[out_of_bounds],
        properties=[
            AlgebraicProperty(
                "matches_recursive", "encode_tail(n) == encode(n)", 1,
                lambda enc, n: enc.encode_tail(n) == enc.encode(n),
            ),
            AlgebraicProperty(
                "idempotent", "encode_tail(n) is the same on every call", 1,
                lambda enc, n: enc.encode_tail(n) == enc.encode_tail(n),
            ),
            AlgebraicProperty(
                "append_one",
                "encode_tail(2n + 1) == encode_tail(n) * 10 + 1 when 2n + 1 in bounds", 1,
                lambda enc, n: (
                    enc.encode_tail(2 * n + 1) == enc.encode_tail(n) * 10 + 1
                    if bounds.contains(2 * n + 1) else True
                ),
            ),
        ],
    )

    # ------------------------------------------------------------------ run
    run_spec = OperationSpec(
        name="run",
        preconditions=[in_bounds],
        postconditions=[],
        error_conditions=[out_of_bounds],
        properties=[
            AlgebraicProperty(
                "identity", "run(n, x -> x) == n", 1,
                lambda enc, n: enc.run(n, lambda x: x) == n,
            ),
            AlgebraicProperty(
                "function_as_value", "run(n, encode) == encode(n)", 1,
                lambda enc, n: enc.run(n, enc.encode) == enc.encode(n),
            ),
            AlgebraicProperty(
                "result_unchanged", "run(n, f) returns f(n) as-is", 1,
                lambda enc, n: enc.run(n, lambda x: (x, "tag")) == (n, "tag"),
            ),
        ],
    )

    # -------------------------------------------------------------- branches
    branches = [
        # Input validation (converter._check_natural, BinaryEncoder._validate)
        BranchSpec(
            "INPUT-NOT-INT",
            "Non-integer input rejected",
            "not isinstance(n, int) or isinstance(n, bool)",
            "validation",
        ),
        BranchSpec(
            "INPUT-NEGATIVE",
            "Negative input rejected",
            "n < 0",
            "validation",
        ),
        BranchSpec(
            "INPUT-OUT-OF-BOUNDS",
            "Input outside encoder bounds rejected",
            "not bounds.contains(n)",
            "validation",
        ),
        BranchSpec(
            "INPUT-VALID",
            "Input within bounds accepted",
            "bounds.contains(n)",
            "validation",
        ),
        # Recursive encoder
        BranchSpec(
            "ENC-BASE",
            "Recursion bottoms out at zero",
            "n == 0",
            "encode",
        ),
        BranchSpec(
            "ENC-RECURSE",
            "Recurse on n // 2 and append n % 2",
            "n > 0",
            "encode",
        ),
        # Accumulator encoder
        BranchSpec(
            "TAIL-BASE",
            "Return the accumulated result",
            "n == 0",
            "encode_tail",
        ),
        BranchSpec(
            "TAIL-STEP",
            "Fold n % 2 * multiplier into the accumulator",
            "n > 0",
            "encode_tail",
        ),
        # Runner
        BranchSpec(
            "RUN-APPLY",
            "Function applied to the input",
            "always",
            "run",
        ),
        # Division
        BranchSpec(
            "DIV-NORMAL",
            "Normal division (b != 0)",
            "b != 0",
            "divide",
        ),
        BranchSpec(
            "DIV-ZERO-ERROR",
            "ZeroDivisionError on b == 0",
            "b == 0",
            "divide",
        ),
        BranchSpec(
            "DIV-TRUNCATE",
            "Truncation toward zero differs from floor division",
            "a % b != 0 and signs differ",
            "divide",
        ),
    ]

    return EncoderSpec(
        bounds=bounds,
        operations={
            "encode": encode_spec,
            "encode_tail": encode_tail_spec,
            "run": run_spec,
        },
        branches=branches,
    )
