"""Number-theoretic algorithms on magnitudes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bignum.division import divide, half, mod
from bignum.magnitude import ONE, Magnitude

if TYPE_CHECKING:
    from bignum.rng import DigitSource

_SMALL_PRIMES = (Magnitude(2), Magnitude(3), Magnitude(5))
_THREE = Magnitude(3)
_FIVE = Magnitude(5)
_SIX = Magnitude(6)


def power(base: Magnitude, exponent: Magnitude) -> Magnitude:
    """
    Raise base to exponent by repeated squaring.

    Walks the exponent from its low bit up, halving it each round, so it
    uses O(log exponent) multiplications; ``power(x, 0)`` is one.
    """
    result = Magnitude(1)
    square = base.copy()
    remaining = exponent.copy()
    while not remaining.is_zero():
        if remaining.is_odd():
            result = result * square
        remaining = half(remaining)
        if not remaining.is_zero():
            square = square * square
    return result


def gcd(a: Magnitude, b: Magnitude) -> Magnitude:
    """Greatest common divisor by Euclid's algorithm."""
    while not a.is_zero():
        a, b = mod(b, a), a
    return b.copy()


def isqrt(value: Magnitude) -> Magnitude:
    """
    Floor of the square root by Newton's method.

    Starts at ``half(value)`` and iterates ``x = half(x + value / x)``
    while the sequence keeps strictly decreasing.
    """
    current = half(value)
    if current.is_zero():
        return value.copy()

    following = half(current + divide(value, current))
    while following < current:
        current = following
        following = half(current + divide(value, current))
    return current


def is_prime(value: Magnitude) -> bool:
    """Deterministic trial division over 6k+1 and 6k+5 candidates."""
    if value <= ONE:
        return False
    if value in _SMALL_PRIMES:
        return True
    if value.is_even() or mod(value, _THREE).is_zero() or mod(value, _FIVE).is_zero():
        return False

    boundary = isqrt(value)
    candidate = Magnitude(6)
    while candidate <= boundary:
        if mod(value, candidate + ONE).is_zero() or mod(value, candidate + _FIVE).is_zero():
            return False
        candidate += _SIX
    return True


def random_digits(count: int, source: DigitSource) -> Magnitude:
    """A magnitude built from ``count`` digit draws; zero if count <= 0."""
    if count <= 0:
        return Magnitude()
    return Magnitude.from_digits(source.digits(count))
