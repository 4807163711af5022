"""
Named functions over BigNum and the table an evaluator dispatches on.

Every function returns a BigNum. A non-normal argument is returned as
is, so errors flow through nested calls untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from bignum import algorithms
from bignum.exceptions import ErrorKind
from bignum.number import BigNum, Operand, as_bignum, first_non_normal
from bignum.rng import DigitSource, default_source

logger = logging.getLogger(__name__)

_ONE = BigNum(1)
_ZERO = BigNum(0)


def absolute(a: Operand) -> BigNum:
    """
    Drop the sign.

    Properties:
        - absolute(a) >= 0
        - absolute(-a) == absolute(a)
    """
    return as_bignum(a).absolute()


def sign(a: Operand) -> BigNum:
    """-1, 0 or 1 according to the sign of a."""
    a = as_bignum(a)
    special = first_non_normal(a)
    if special is not None:
        return special
    if a.is_zero():
        return _ZERO.copy()
    return BigNum(int(a.sign))


def maximum(a: Operand, b: Operand) -> BigNum:
    a, b = as_bignum(a), as_bignum(b)
    special = first_non_normal(a, b)
    if special is not None:
        return special
    return (a if a > b else b).copy()


def minimum(a: Operand, b: Operand) -> BigNum:
    a, b = as_bignum(a), as_bignum(b)
    special = first_non_normal(a, b)
    if special is not None:
        return special
    return (a if a < b else b).copy()


def gcd(a: Operand, b: Operand) -> BigNum:
    """
    Greatest common divisor of the absolute values.

    Properties:
        - gcd(a, 0) == abs(a)
        - gcd(a, b) == gcd(b % a, a)
    """
    a, b = as_bignum(a), as_bignum(b)
    special = first_non_normal(a, b)
    if special is not None:
        return special
    return BigNum(algorithms.gcd(a.magnitude, b.magnitude))


def factorial(n: Operand) -> BigNum:
    """Product ``n * (n - 1) * ... * 1``; one for n <= 1."""
    n = as_bignum(n)
    special = first_non_normal(n)
    if special is not None:
        return special
    result = _ONE.copy()
    factor = n.copy()
    while factor > _ONE:
        result *= factor
        factor.decrement()
    return result


def sqrt(a: Operand) -> BigNum:
    """
    Integer square root, rounded down.

    A negative argument gives a ``NEGATIVE_OPERAND`` error.
    """
    a = as_bignum(a)
    special = first_non_normal(a)
    if special is not None:
        return special
    if a.is_negative():
        logger.warning(
            "sqrt: negative argument %s",
            a,
            extra={"operation": "sqrt", "error_kind": ErrorKind.NEGATIVE_OPERAND.value},
        )
        return BigNum.error(ErrorKind.NEGATIVE_OPERAND)
    return BigNum(algorithms.isqrt(a.magnitude))


def random(count: Operand, source: DigitSource | None = None) -> BigNum:
    """
    A value made of ``count`` random digits.

    Leading zero draws are trimmed; zero when count <= 0.

    Args:
        count: Number of digits to draw
        source: Digit source to draw from (default: the process-wide one)
    """
    count = as_bignum(count)
    special = first_non_normal(count)
    if special is not None:
        return special
    if source is None:
        source = default_source()
    return BigNum(algorithms.random_digits(count.to_int(), source))


def is_prime(a: Operand) -> BigNum:
    """1 if a is prime, else 0. Negative values are not prime."""
    a = as_bignum(a)
    special = first_non_normal(a)
    if special is not None:
        return special
    if a.is_negative():
        return _ZERO.copy()
    return BigNum(int(algorithms.is_prime(a.magnitude)))


def logical_not(a: Operand) -> BigNum:
    """1 if a is zero, else 0."""
    a = as_bignum(a)
    special = first_non_normal(a)
    if special is not None:
        return special
    return BigNum(int(a.is_zero()))


@dataclass(frozen=True)
class Function:
    """An entry of the function table."""

    name: str
    arity: int
    func: Callable[..., BigNum]

    def __str__(self) -> str:
        return f"{self.name}()"


# Alphabetical order
FUNCTIONS: Mapping[str, Function] = MappingProxyType({
    entry.name: entry
    for entry in (
        Function("abs", 1, absolute),
        Function("factorial", 1, factorial),
        Function("gcd", 2, gcd),
        Function("isprime", 1, is_prime),
        Function("max", 2, maximum),
        Function("min", 2, minimum),
        Function("random", 1, random),
        Function("sign", 1, sign),
        Function("sqrt", 1, sqrt),
    )
})


def call_function(name: str, *args: Operand) -> BigNum:
    """
    Look up ``name`` in the function table and apply it.

    An unknown name or a wrong number of arguments gives an error value.
    """
    entry = FUNCTIONS.get(name)
    if entry is None:
        logger.warning(
            "Unknown function '%s'",
            name,
            extra={"operation": name, "error_kind": ErrorKind.UNKNOWN_FUNCTION.value},
        )
        return BigNum.error(ErrorKind.UNKNOWN_FUNCTION)
    if len(args) != entry.arity:
        logger.warning(
            "%s expects %d argument(s), got %d",
            name,
            entry.arity,
            len(args),
            extra={"operation": name, "error_kind": ErrorKind.ARITY_MISMATCH.value},
        )
        return BigNum.error(ErrorKind.ARITY_MISMATCH)
    return entry.func(*args)


def function_names() -> str:
    """Comma separated list of the table, for help text."""
    return ", ".join(str(entry) for entry in FUNCTIONS.values())
