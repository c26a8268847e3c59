"""
The verified encoder factory.

The factory does not just construct encoders - it *verifies* them
against their contract before releasing them.

Flow:
  1. Caller requests an encoder for a given Bounds.
  2. Factory builds the BinaryEncoder.
  3. Factory checks every postcondition and algebraic property of
     ``contract.build_spec(bounds)`` over the domain.
  4. If verification passes  -> return the encoder.
     If verification fails   -> raise, never hand out a broken instance.
"""

from __future__ import annotations

import itertools
import logging
import random
from dataclasses import dataclass, field
from typing import Any

from bounds import Bounds
from contract import AlgebraicProperty, EncoderSpec, OperationSpec, build_spec
from converter import BinaryEncoder

logger = logging.getLogger(__name__)


@dataclass
class VerificationResult:
    """Outcome of verifying one postcondition or property."""

    property_name: str
    passed: bool
    counterexample: tuple | None = None
    tests_run: int = 0

    def __repr__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        ce = f"  counterexample={self.counterexample}" if self.counterexample else ""
        return f"[{status}] {self.property_name} ({self.tests_run} tests){ce}"


@dataclass
class VerificationReport:
    """Aggregate result of verifying one operation."""

    spec_name: str
    results: list[VerificationResult] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def tests_run(self) -> int:
        return sum(r.tests_run for r in self.results)

    def summary(self) -> str:
        lines = [f"--- {self.spec_name} ---"]
        for r in self.results:
            lines.append(f"  {r}")
        status = "ALL PASSED" if self.passed else "FAILED"
        lines.append(f"  => {status}")
        return "\n".join(lines)


class VerificationError(Exception):
    """Raised when an encoder fails its contract."""

    def __init__(self, report: VerificationReport):
        self.report = report
        super().__init__(f"Verification failed:\n{report.summary()}")


# ---------------------------------------------------------------------------
# The factory
# ---------------------------------------------------------------------------

class EncoderFactory:
    """
    Produces BinaryEncoder instances that are proven correct.

    For small bounds the factory checks *every* input (and every pair
    for two-argument properties).  For larger bounds it falls back to
    edge values plus random samples.
    """

    EXHAUSTIVE_THRESHOLD = 1024     # max width for brute-force check
    PAIR_THRESHOLD = 64             # max width for brute-force pair checks
    SAMPLE_COUNT = 2_000

    @classmethod
    def create(cls, bounds: Bounds, spec: EncoderSpec | None = None) -> BinaryEncoder:
        """Build, verify, and return a BinaryEncoder."""
        encoder = BinaryEncoder(bounds=bounds)
        cls.verify(encoder, spec or build_spec(bounds))
        return encoder

    @classmethod
    def verify(cls, encoder: Any, spec: EncoderSpec) -> list[VerificationReport]:
        """Check ``encoder`` against every operation of ``spec``."""
        reports = []
        for op_spec in spec.operations.values():
            report = cls._verify_operation(encoder, op_spec, spec.bounds)
            logger.debug("verified %s: %d checks", op_spec.name, report.tests_run)
            if not report.passed:
                logger.warning("encoder rejected:\n%s", report.summary())
                raise VerificationError(report)
            reports.append(report)
        return reports

    # -- internal ---------------------------------------------------------

    @classmethod
    def _verify_operation(
        cls, encoder: Any, op_spec: OperationSpec, bounds: Bounds
    ) -> VerificationReport:
        report = VerificationReport(spec_name=op_spec.name)
        op = getattr(encoder, op_spec.name)

        for post in op_spec.postconditions:
            tests_run = 0
            failed: tuple | None = None
            for (n,) in cls._inputs(bounds, arity=1):
                tests_run += 1
                result = op(n)
                if not post.check(n, result):
                    failed = (n, result)
                    break
            report.results.append(VerificationResult(
                property_name=post.name,
                passed=failed is None,
                counterexample=failed,
                tests_run=tests_run,
            ))
            if failed is not None:
                return report

        for prop in op_spec.properties:
            result = cls._verify_property(encoder, prop, bounds)
            report.results.append(result)
            if not result.passed:
                return report

        return report

    @classmethod
    def _verify_property(
        cls, encoder: Any, prop: AlgebraicProperty, bounds: Bounds
    ) -> VerificationResult:
        tests_run = 0
        for combo in cls._inputs(bounds, arity=prop.arity):
            tests_run += 1
            if not prop.check(encoder, *combo):
                return VerificationResult(
                    property_name=prop.name,
                    passed=False,
                    counterexample=combo,
                    tests_run=tests_run,
                )
        return VerificationResult(
            property_name=prop.name,
            passed=True,
            tests_run=tests_run,
        )

    @classmethod
    def _inputs(cls, bounds: Bounds, arity: int) -> list[tuple[int, ...]]:
        limit = cls.EXHAUSTIVE_THRESHOLD if arity == 1 else cls.PAIR_THRESHOLD
        if bounds.width <= limit:
            return list(itertools.product(bounds.all_values(), repeat=arity))
        return _generate_samples(bounds, arity, count=cls.SAMPLE_COUNT)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _generate_samples(
    bounds: Bounds, arity: int, count: int
) -> list[tuple[int, ...]]:
    """Generate edge-case + random samples for property checking."""
    samples: list[tuple[int, ...]] = list(
        itertools.product(bounds.edge_values(), repeat=arity)
    )[:count]

    while len(samples) < count:
        samples.append(
            tuple(random.randint(bounds.lo, bounds.hi) for _ in range(arity))
        )

    return samples
