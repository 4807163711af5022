"""
Long division on magnitudes.

Two tiers: ``divide_slow`` subtracts the divisor until the running
remainder drops below it, which is linear in the quotient, and
``divide_fast`` walks the dividend digit by digit so that every call to
``divide_slow`` sees a chunk smaller than ten times the divisor.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from bignum.exceptions import DivisionByZeroError
from bignum.magnitude import ONE, Magnitude

# (parity of the previous digit, current digit) -> halved digit
HALVING_TABLE: dict[tuple[int, int], int] = {
    (parity, digit): 5 * parity + digit // 2 for parity in (0, 1) for digit in range(10)
}


@dataclass
class DivisionResult:
    """Quotient and remainder of one division."""

    quotient: Magnitude
    remainder: Magnitude

    def __iter__(self) -> Iterator[Magnitude]:
        yield self.quotient
        yield self.remainder


def divide_by_one(dividend: Magnitude) -> DivisionResult:
    """Identity division: quotient is the dividend, remainder zero."""
    return DivisionResult(dividend.copy(), Magnitude())


def divide_by_two(dividend: Magnitude) -> DivisionResult:
    """
    Halve a magnitude in one left-to-right pass.

    Each quotient digit depends only on the parity of the dividend digit
    to its left and the dividend digit itself.
    """
    digits = (0,) + dividend.digits
    quotient = [
        HALVING_TABLE[(digits[i] % 2, digits[i + 1])] for i in range(len(digits) - 1)
    ]
    return DivisionResult(Magnitude.from_digits(quotient), Magnitude(digits[-1] % 2))


def _shortcut(dividend: Magnitude, divisor: Magnitude) -> DivisionResult | None:
    if divisor.is_zero():
        raise DivisionByZeroError(dividend)
    if divisor.is_one():
        return divide_by_one(dividend)
    if divisor.is_two():
        return divide_by_two(dividend)
    return None


def divide_slow(dividend: Magnitude, divisor: Magnitude) -> DivisionResult:
    """
    Divide by repeated subtraction.

    Correct for any operands but takes one subtraction per unit of the
    quotient, so it is meant for dividends below ``10 * divisor``.

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    shortcut = _shortcut(dividend, divisor)
    if shortcut is not None:
        return shortcut

    quotient = Magnitude()
    remainder = dividend.copy()
    while remainder >= divisor:
        quotient += ONE
        remainder -= divisor
    return DivisionResult(quotient, remainder)


def divide_fast(dividend: Magnitude, divisor: Magnitude) -> DivisionResult:
    """
    Schoolbook long division.

    A chunk grows by one dividend digit at a time; whenever it reaches
    the divisor, ``divide_slow`` yields the quotient digit for that
    position (at most 9 subtractions) and its remainder becomes the new
    chunk. Whatever is left once the dividend is exhausted is the
    remainder.

    Properties:
        - dividend == quotient * divisor + remainder
        - remainder < divisor

    Raises:
        DivisionByZeroError: If divisor is zero
    """
    shortcut = _shortcut(dividend, divisor)
    if shortcut is not None:
        return shortcut

    quotient = [0] * len(dividend)
    chunk = Magnitude()
    for position, digit in enumerate(dividend.digits):
        chunk = chunk.append_digit(digit)
        if chunk >= divisor:
            part = divide_slow(chunk, divisor)
            quotient[position] = part.quotient.to_int()
            chunk = part.remainder
    return DivisionResult(Magnitude.from_digits(quotient), chunk)


def half(value: Magnitude) -> Magnitude:
    """Floor of ``value / 2``."""
    return divide_by_two(value).quotient


def divide(dividend: Magnitude, divisor: Magnitude) -> Magnitude:
    return divide_fast(dividend, divisor).quotient


def mod(dividend: Magnitude, divisor: Magnitude) -> Magnitude:
    return divide_fast(dividend, divisor).remainder
