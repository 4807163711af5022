"""
Property-based tests for big-integer arithmetic using Hypothesis.

Python's own integers are the reference: every operation on BigNum
values must agree with the same operation on ints.
"""

import math

import pytest
from hypothesis import assume, example, given
from hypothesis import strategies as st

from bignum import (
    BigNum,
    DigitSource,
    ErrorKind,
    Magnitude,
    divide_fast,
    divide_slow,
    factorial,
    gcd,
    is_prime,
    maximum,
    minimum,
    random,
    sign,
    sqrt,
)
from bignum.selftest import is_prime_reference, truncating_divmod

# Custom strategies
big_ints = st.integers(min_value=-(10**60), max_value=10**60)

medium_ints = st.integers(min_value=-(10**12), max_value=10**12)

non_zero_ints = big_ints.filter(lambda x: x != 0)

naturals = st.integers(min_value=0, max_value=10**40)

digit_strings = st.text(alphabet="0123456789", min_size=1, max_size=40)


@pytest.mark.property
class TestRepresentationProperties:
    """Property-based tests for parsing and printing."""

    @given(a=big_ints)
    def test_int_round_trip(self, a: int):
        """BigNum(a) prints and converts back to a"""
        value = BigNum(a)
        assert str(value) == str(a)
        assert value.to_int() == a

    @given(text=digit_strings, negative=st.booleans())
    @example(text="0000", negative=True)
    def test_leading_zeros_dropped(self, text: str, negative: bool):
        """Leading zeros never survive, and -0 is 0"""
        literal = ("-" if negative else "") + text
        assert str(BigNum(literal)) == str(int(literal))

    @given(text=st.text(min_size=1, max_size=10))
    def test_garbage_is_format_error(self, text: str):
        """Anything but an optional minus and digits is a format error"""
        body = text[1:] if text.startswith("-") else text
        assume(not (body and all(ch in "0123456789" for ch in body)))
        assert BigNum(text).error_kind is ErrorKind.FORMAT


@pytest.mark.property
class TestComparisonProperties:
    """Property-based tests for ordering."""

    @given(a=big_ints, b=big_ints)
    def test_matches_native(self, a: int, b: int):
        """compare agrees with int ordering"""
        assert BigNum.compare(a, b) == (a > b) - (a < b)

    @given(a=big_ints, b=big_ints)
    def test_antisymmetric(self, a: int, b: int):
        """compare(a, b) == -compare(b, a)"""
        assert BigNum.compare(a, b) == -BigNum.compare(b, a)

    @given(a=big_ints, b=big_ints)
    def test_max_min_partition(self, a: int, b: int):
        """max and min return the two operands"""
        assert maximum(a, b).to_int() == max(a, b)
        assert minimum(a, b).to_int() == min(a, b)


@pytest.mark.property
class TestAdditiveProperties:
    """Property-based tests for addition and subtraction."""

    @given(a=big_ints, b=big_ints)
    def test_add_matches_native(self, a: int, b: int):
        assert (BigNum(a) + BigNum(b)).to_int() == a + b

    @given(a=big_ints, b=big_ints)
    def test_subtract_matches_native(self, a: int, b: int):
        assert (BigNum(a) - BigNum(b)).to_int() == a - b

    @given(a=big_ints, b=big_ints)
    def test_add_then_subtract(self, a: int, b: int):
        """(a + b) - b == a"""
        assert (BigNum(a) + b) - b == BigNum(a)

    @given(a=big_ints, b=big_ints)
    def test_commutativity(self, a: int, b: int):
        """a + b == b + a"""
        assert BigNum(a) + b == BigNum(b) + a

    @given(a=big_ints)
    def test_inverse(self, a: int):
        """a + (-a) == 0 and the zero is positive"""
        total = BigNum(a) + (-BigNum(a))
        assert total.is_zero()
        assert not total.is_negative()


@pytest.mark.property
class TestMultiplicativeProperties:
    """Property-based tests for multiplication and powers."""

    @given(a=big_ints, b=big_ints)
    def test_multiply_matches_native(self, a: int, b: int):
        assert (BigNum(a) * BigNum(b)).to_int() == a * b

    @given(a=medium_ints, b=medium_ints, c=medium_ints)
    def test_distributivity(self, a: int, b: int, c: int):
        """a * (b + c) == a * b + a * c"""
        x = BigNum(a)
        assert x * (BigNum(b) + c) == x * b + x * c

    @given(base=st.integers(min_value=-(10**6), max_value=10**6), exponent=st.integers(0, 20))
    def test_power_matches_native(self, base: int, exponent: int):
        assert (BigNum(base) ** exponent).to_int() == base**exponent

    @given(base=st.integers(-1000, 1000), m=st.integers(0, 8), n=st.integers(0, 8))
    def test_power_adds_exponents(self, base: int, m: int, n: int):
        """base^m * base^n == base^(m+n)"""
        b = BigNum(base)
        assert b**m * b**n == b ** (m + n)

    @given(base=st.integers(-1000, 1000), k=st.integers(0, 8))
    def test_even_power_squares_base(self, base: int, k: int):
        """base^(2k) == (base*base)^k and an odd power keeps the sign"""
        b = BigNum(base)
        assert b ** (2 * k) == (b * b) ** k
        assert (b ** (2 * k + 1)).is_negative() == (base < 0)

    @given(base=big_ints, exponent=st.integers(max_value=-1))
    def test_negative_exponent_is_error(self, base: int, exponent: int):
        assert (BigNum(base) ** exponent).error_kind is ErrorKind.NEGATIVE_OPERAND


@pytest.mark.property
class TestDivisionProperties:
    """Property-based tests for truncating division."""

    @given(a=big_ints, b=non_zero_ints)
    def test_matches_truncating_divmod(self, a: int, b: int):
        q, r = divmod(BigNum(a), BigNum(b))
        assert (q.to_int(), r.to_int()) == truncating_divmod(a, b)

    @given(a=big_ints, b=non_zero_ints)
    def test_reconstruction(self, a: int, b: int):
        """a == b * q + r with |r| < |b| and r signed like a"""
        q, r = BigNum(a).divide_with_remainder(b)
        assert BigNum(b) * q + r == BigNum(a)
        assert abs(r) < abs(BigNum(b))
        assert r.is_zero() or r.is_negative() == (a < 0)

    @given(a=big_ints)
    def test_division_by_zero(self, a: int):
        q, r = BigNum(a).divide_with_remainder(0)
        assert q.error_kind is ErrorKind.DIVISION_BY_ZERO
        assert r.error_kind is ErrorKind.DIVISION_BY_ZERO

    @given(divisor=st.integers(1, 10**15), quotient=st.integers(0, 200), rest=st.integers(0, 10**15))
    def test_slow_agrees_with_fast(self, divisor: int, quotient: int, rest: int):
        """Bounded slow division matches long division"""
        dividend = Magnitude(divisor * quotient + rest % divisor)
        slow = divide_slow(dividend, Magnitude(divisor))
        fast = divide_fast(dividend, Magnitude(divisor))
        assert slow.quotient == fast.quotient
        assert slow.remainder == fast.remainder
        assert slow.quotient.to_int() == quotient


@pytest.mark.property
class TestFunctionProperties:
    """Property-based tests for the named functions."""

    @given(a=big_ints, b=big_ints)
    def test_gcd_matches_native(self, a: int, b: int):
        assert gcd(a, b).to_int() == math.gcd(a, b)

    @given(a=naturals, b=naturals, k=st.integers(1, 10**6))
    def test_gcd_scales(self, a: int, b: int, k: int):
        """gcd(k*a, k*b) == k * gcd(a, b)"""
        assert gcd(k * a, k * b) == BigNum(k) * gcd(a, b)

    @given(n=naturals)
    def test_sqrt_brackets(self, n: int):
        """r*r <= n < (r+1)*(r+1)"""
        r = sqrt(n)
        assert r * r <= n
        assert (r + 1) * (r + 1) > n

    @given(a=big_ints)
    def test_sign(self, a: int):
        assert sign(a).to_int() == (a > 0) - (a < 0)

    @given(n=st.integers(0, 60))
    def test_factorial_matches_native(self, n: int):
        assert factorial(n).to_int() == math.factorial(n)

    @given(n=st.integers(0, 3000))
    def test_is_prime_matches_trial_division(self, n: int):
        assert is_prime(n).to_int() == int(is_prime_reference(n))

    @given(seed=st.integers(0, 2**32), count=st.integers(1, 50))
    def test_random_digit_bound(self, seed: int, count: int):
        """random(n) never has more than n digits and repeats per seed"""
        first = random(count, DigitSource(seed))
        second = random(count, DigitSource(seed))
        assert first == second
        assert 0 <= first.to_int() < 10**count


@pytest.mark.property
@pytest.mark.slow
def test_is_prime_exhaustive():
    """isprime agrees with trial division on every value up to 10000"""
    mismatches = [n for n in range(10_001) if is_prime(n).to_int() != int(is_prime_reference(n))]
    assert mismatches == []
