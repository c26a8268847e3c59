"""Property-based tests using Hypothesis.

These tests verify properties that must hold for *all* valid inputs.
They complement the white-box tests by exploring the input space
broadly rather than targeting specific branches.
"""
from __future__ import annotations

from hypothesis import given, settings, assume
from hypothesis import strategies as st
from hypothesis.strategies import integers

from bounds import INT64_DIGITS
from converter import BinaryEncoder, encode_binary, encode_binary_tail
from runner import factorial, is_even, is_prime, run
from contract import decode_digits, digits_are_binary

naturals = integers(min_value=0, max_value=2**200)
int64_domain = integers(min_value=INT64_DIGITS.lo, max_value=INT64_DIGITS.hi)


# ===================================================================
# ENCODING
# ===================================================================

class TestEncodingProperties:

    def test_equivalence_first_ten_thousand(self):
        """Both encoders agree on every input in [0, 10_000]."""
        for n in range(10_001):
            assert encode_binary(n) == encode_binary_tail(n), n

    @given(n=naturals)
    def test_equivalence(self, n):
        assert encode_binary(n) == encode_binary_tail(n)

    @given(n=naturals)
    def test_matches_builtin_bin(self, n):
        assert str(encode_binary_tail(n)) == bin(n)[2:]

    @given(n=naturals)
    def test_only_binary_digits(self, n):
        assert digits_are_binary(encode_binary(n))

    @given(n=naturals)
    def test_decodes_back(self, n):
        assert decode_digits(encode_binary_tail(n)) == n

    @given(n=naturals)
    def test_doubling_appends_zero(self, n):
        assert encode_binary(2 * n) == encode_binary(n) * 10

    @given(n=naturals)
    def test_doubling_plus_one_appends_one(self, n):
        assert encode_binary_tail(2 * n + 1) == encode_binary_tail(n) * 10 + 1

    @given(n=naturals, m=naturals)
    @settings(max_examples=300)
    def test_order_preserving(self, n, m):
        assume(n != m)
        assert (n < m) == (encode_binary(n) < encode_binary(m))

    @given(
        n=naturals,
        shift=integers(min_value=0, max_value=20),
        seed=integers(min_value=0, max_value=10**6),
    )
    def test_accumulators_compose(self, n, shift, seed):
        """A custom multiplier shifts the digits; the seed is added as-is."""
        multiplier = 10**shift
        expected = encode_binary(n) * multiplier + seed
        assert encode_binary_tail(n, multiplier, seed) == expected

    @given(n=int64_domain)
    def test_int64_domain_fits_signed_long(self, n):
        assert encode_binary(n) <= 2**63 - 1

    def test_int64_domain_is_tight(self):
        assert encode_binary(INT64_DIGITS.hi + 1) > 2**63 - 1


# ===================================================================
# IDEMPOTENCE
# ===================================================================

class TestIdempotence:

    @given(n=naturals)
    def test_encode_binary(self, n):
        assert encode_binary(n) == encode_binary(n)

    @given(n=naturals)
    def test_encode_binary_tail(self, n):
        assert encode_binary_tail(n) == encode_binary_tail(n)

    @given(n=integers(min_value=0, max_value=300))
    def test_run(self, n):
        assert run(n, factorial) == run(n, factorial)

    @given(n=int64_domain)
    def test_bounded_encoder(self, n):
        enc = BinaryEncoder(INT64_DIGITS)
        assert enc.encode(n) == enc.encode(n) == enc.encode_tail(n)


# ===================================================================
# RUNNER
# ===================================================================

class TestRunnerProperties:

    def test_run_is_even(self):
        assert run(5, is_even) is False

    def test_run_factorial(self):
        assert run(5, factorial) == 120

    @given(n=integers())
    def test_run_applies_function(self, n):
        assert run(n, is_even) == (n % 2 == 0)

    @given(n=integers(), value=st.text())
    def test_run_returns_result_unchanged(self, n, value):
        marker = object()
        assert run(n, lambda _: (value, marker)) == (value, marker)

    @given(n=integers(min_value=1, max_value=200))
    def test_factorial_recurrence(self, n):
        assert factorial(n) == n * factorial(n - 1)

    @given(a=integers(min_value=2, max_value=500), b=integers(min_value=2, max_value=500))
    def test_products_are_not_prime(self, a, b):
        assert not is_prime(a * b)
