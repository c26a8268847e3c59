"""Counterexample search: discovers gaps in implementation or tests.

This module runs independently of the test suite.  It systematically
searches for:

1. Postcondition violations: inputs whose encoding doesn't satisfy the
   contract's postconditions.
2. Error condition violations: inputs that should raise but don't (or
   raise the wrong exception).
3. Property violations: relationships between calls that fail for
   some input combination.

Run directly::

    python -m validation.counterexample_search
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any

sys.path.insert(0, ".")

from bounds import Bounds, TINY, UINT8
from contract import EncoderSpec, build_spec
from converter import BinaryEncoder


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------

@dataclass
class Counterexample:
    category: str
    operation: str
    inputs: tuple
    expected: str
    actual: str
    description: str


@dataclass
class SearchReport:
    counterexamples: list[Counterexample] = field(default_factory=list)
    checks_run: int = 0

    @property
    def passed(self) -> bool:
        return len(self.counterexamples) == 0

    def summary(self) -> str:
        lines = [
            "Counterexample Search Report",
            "=" * 40,
            f"Total checks: {self.checks_run}",
            f"Counterexamples found: {len(self.counterexamples)}",
        ]
        if self.counterexamples:
            lines.append("")
            for i, cx in enumerate(self.counterexamples, 1):
                lines.append(f"  [{i}] {cx.category} / {cx.operation}")
                lines.append(f"      Inputs:   {cx.inputs}")
                lines.append(f"      Expected: {cx.expected}")
                lines.append(f"      Actual:   {cx.actual}")
                lines.append(f"      {cx.description}")
        else:
            lines.append("\nNo counterexamples found, all checks passed.")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Search functions
# ---------------------------------------------------------------------------

def _outside_values(bounds: Bounds) -> list[int]:
    """A few inputs just outside the domain, negatives included."""
    values = [-1, bounds.hi + 1, bounds.hi * 2 + 1]
    if bounds.lo > 0:
        values.append(bounds.lo - 1)
    return values


def search_postcondition_violations(
    encoder: Any,
    spec: EncoderSpec,
) -> tuple[list[Counterexample], int]:
    """Exhaustively verify postconditions for every input."""
    cxs: list[Counterexample] = []
    checks = 0

    for op_name, op_spec in spec.operations.items():
        if not op_spec.postconditions:
            continue
        op = getattr(encoder, op_name)
        for n in spec.bounds.all_values():
            checks += 1
            try:
                result = op(n)
            except Exception as e:
                cxs.append(Counterexample(
                    category="unexpected_error",
                    operation=op_name,
                    inputs=(n,),
                    expected="no error",
                    actual=f"{type(e).__name__}: {e}",
                    description="Operation raised an unexpected exception",
                ))
                continue

            for post in op_spec.postconditions:
                if not post.check(n, result):
                    cxs.append(Counterexample(
                        category="postcondition_violation",
                        operation=op_name,
                        inputs=(n,),
                        expected=post.description,
                        actual=f"result={result}",
                        description=f"Postcondition '{post.name}' violated",
                    ))

    return cxs, checks


def search_error_condition_violations(
    encoder: Any,
    spec: EncoderSpec,
) -> tuple[list[Counterexample], int]:
    """Verify every error condition triggers the right exception."""
    cxs: list[Counterexample] = []
    checks = 0

    for op_name, op_spec in spec.operations.items():
        op = getattr(encoder, op_name)
        # run takes a function; the identity keeps the call shape uniform
        call = (lambda n, op=op: op(n, lambda x: x)) if op_name == "run" else op
        for n in _outside_values(spec.bounds):
            for ec in op_spec.error_conditions:
                if not ec.trigger(n):
                    continue
                checks += 1
                try:
                    result = call(n)
                    cxs.append(Counterexample(
                        category="missing_error",
                        operation=op_name,
                        inputs=(n,),
                        expected=f"{ec.exception.__name__}",
                        actual=f"result={result}",
                        description=(
                            f"Error condition '{ec.name}' should have "
                            f"triggered but didn't"
                        ),
                    ))
                except ec.exception:
                    pass  # expected
                except Exception as e:
                    cxs.append(Counterexample(
                        category="wrong_error",
                        operation=op_name,
                        inputs=(n,),
                        expected=f"{ec.exception.__name__}",
                        actual=f"{type(e).__name__}: {e}",
                        description=f"Wrong exception type for '{ec.name}'",
                    ))

    return cxs, checks


def search_property_violations(
    encoder: Any,
    spec: EncoderSpec,
) -> tuple[list[Counterexample], int]:
    """Exhaustively check every algebraic property."""
    cxs: list[Counterexample] = []
    checks = 0

    for op_name, prop in spec.all_properties:
        if prop.arity == 2:
            combos = [
                (a, b)
                for a in spec.bounds.all_values()
                for b in spec.bounds.all_values()
            ]
        else:
            combos = [(a,) for a in spec.bounds.all_values()]

        for combo in combos:
            checks += 1
            if not prop.check(encoder, *combo):
                cxs.append(Counterexample(
                    category="property_violation",
                    operation=op_name,
                    inputs=combo,
                    expected=prop.description,
                    actual="property does not hold",
                    description=f"Property '{prop.name}' violated",
                ))

    return cxs, checks


# ---------------------------------------------------------------------------
# Top-level runner
# ---------------------------------------------------------------------------

def run_search(bounds: Bounds, encoder: Any | None = None) -> SearchReport:
    """Run complete counterexample search for one configuration."""
    if encoder is None:
        encoder = BinaryEncoder(bounds)
    spec = build_spec(bounds)
    report = SearchReport()

    for search_fn in (
        search_postcondition_violations,
        search_error_condition_violations,
        search_property_violations,
    ):
        cxs, checks = search_fn(encoder, spec)
        report.counterexamples.extend(cxs)
        report.checks_run += checks

    return report


def main() -> None:
    """Run counterexample search across several configurations."""
    configs = [
        ("TINY   [0, 15]", TINY),
        ("UINT8  [0, 255]", UINT8),
        ("OFFSET [8, 40]", Bounds(8, 40)),
    ]

    all_passed = True
    for name, bounds in configs:
        print(f"\n--- Configuration: {name} ---")
        report = run_search(bounds)
        print(report.summary())
        if not report.passed:
            all_passed = False

    print("\n" + "=" * 40)
    if all_passed:
        print("ALL CONFIGURATIONS PASSED")
    else:
        print("SOME CONFIGURATIONS HAD COUNTEREXAMPLES")
        sys.exit(1)


if __name__ == "__main__":
    main()
