"""Signed arbitrary-precision integers with an error/ignore state."""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Union

from bignum import algorithms
from bignum.division import divide_fast
from bignum.exceptions import (
    ARITHMETIC_FAULTS,
    BigNumError,
    ErrorKind,
    FormatError,
)
from bignum.magnitude import ONE, Magnitude
from bignum.validators import validate_digit_string, validate_native_int, validate_normal

logger = logging.getLogger(__name__)


class State(Enum):
    """Whether a BigNum holds a usable value."""

    NORMAL = "normal"
    ERROR = "error"
    IGNORE = "ignore"


class Sign(IntEnum):
    NEGATIVE = -1
    POSITIVE = 1


Operand = Union["BigNum", int, str]


def _report(operation: str, exc: BigNumError) -> BigNum:
    logger.warning(
        "%s: %s",
        operation,
        exc,
        extra={"operation": operation, "error_kind": exc.kind.value},
    )
    return BigNum.error(exc.kind)


def as_bignum(value: Operand) -> BigNum:
    if isinstance(value, BigNum):
        return value
    return BigNum(value)


def first_non_normal(*operands: BigNum) -> BigNum | None:
    """The first operand that is not normal, copied, or None."""
    for operand in operands:
        if not operand.is_normal():
            return operand.copy()
    return None


class BigNum:
    """
    A signed integer of any size, or an error/ignore marker.

    Arithmetic never raises for bad data: malformed strings, division by
    zero and similar faults produce a value in the ``ERROR`` state, and
    any operation given a non-normal operand returns that operand
    unchanged. Zero is always positive.

    Example:
        >>> str(BigNum("-12") * BigNum("3") + 1)
        '-35'
        >>> (BigNum(1) / 0).is_error()
        True
    """

    __slots__ = ("_state", "_sign", "_magnitude", "_error_kind")

    def __init__(self, value: Operand | Magnitude = 0) -> None:
        """
        Build a BigNum from a decimal string, a native int, a Magnitude or a copy.

        A string may carry one leading ``-``. A malformed string gives an
        error value rather than raising.

        Raises:
            InvalidInputError: If value has an unsupported type
        """
        self._state = State.NORMAL
        self._sign = Sign.POSITIVE
        self._magnitude = Magnitude()
        self._error_kind: ErrorKind | None = None

        if isinstance(value, BigNum):
            self._assign(value)
        elif isinstance(value, Magnitude):
            self._magnitude = value.copy()
        elif isinstance(value, str):
            self._parse(value)
        else:
            validate_native_int(value)
            self._sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
            self._magnitude = Magnitude(abs(int(value)))
        self._normalize()

    def _parse(self, text: str) -> None:
        digits = text
        if digits.startswith("-"):
            self._sign = Sign.NEGATIVE
            digits = digits[1:]
        try:
            self._magnitude = Magnitude.parse(digits)
        except FormatError as exc:
            self._assign(_report("parse", exc))

    def _normalize(self) -> None:
        if self._magnitude.is_zero():
            self._sign = Sign.POSITIVE

    def _assign(self, other: BigNum) -> BigNum:
        self._state = other._state
        self._sign = other._sign
        self._magnitude = other._magnitude.copy()
        self._error_kind = other._error_kind
        return self

    @classmethod
    def _make(cls, sign: Sign, magnitude: Magnitude) -> BigNum:
        result = cls(magnitude)
        result._sign = Sign(sign)
        result._normalize()
        return result

    @classmethod
    def error(cls, kind: ErrorKind) -> BigNum:
        """A value in the error state."""
        result = cls()
        result._state = State.ERROR
        result._error_kind = kind
        return result

    @classmethod
    def ignore(cls) -> BigNum:
        """A value marking a command that produced nothing to print."""
        result = cls()
        result._state = State.IGNORE
        return result

    # Inspection

    @property
    def state(self) -> State:
        return self._state

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def magnitude(self) -> Magnitude:
        return self._magnitude.copy()

    @property
    def error_kind(self) -> ErrorKind | None:
        return self._error_kind

    def is_normal(self) -> bool:
        return self._state is State.NORMAL

    def is_error(self) -> bool:
        return self._state is State.ERROR

    def is_ignore(self) -> bool:
        return self._state is State.IGNORE

    def is_zero(self) -> bool:
        return self.is_normal() and self._magnitude.is_zero()

    def is_negative(self) -> bool:
        return self.is_normal() and self._sign is Sign.NEGATIVE

    def is_positive(self) -> bool:
        return self.is_normal() and self._sign is Sign.POSITIVE and not self._magnitude.is_zero()

    def copy(self) -> BigNum:
        return BigNum(self)

    def to_int(self) -> int:
        """
        Convert to a native Python integer.

        Raises:
            InvalidInputError: If the value is not normal
        """
        validate_normal(self)
        return int(self._sign) * self._magnitude.to_int()

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        if self.is_ignore():
            return "ignore"
        if self.is_error():
            return "error"
        if self._sign is Sign.NEGATIVE:
            return f"-{self._magnitude}"
        return str(self._magnitude)

    def __repr__(self) -> str:
        if self.is_error():
            return f"BigNum.error({self._error_kind})"
        if self.is_ignore():
            return "BigNum.ignore()"
        return f"BigNum('{self}')"

    # Comparison

    @staticmethod
    def compare(a: Operand, b: Operand) -> int:
        """
        Three-way comparison of two normal values.

        Raises:
            InvalidInputError: If either value is not normal
        """
        a, b = validate_normal(as_bignum(a)), validate_normal(as_bignum(b))
        if a._sign != b._sign:
            return -1 if a._sign < b._sign else 1
        result = Magnitude.compare(a._magnitude, b._magnitude)
        return -result if a._sign is Sign.NEGATIVE else result

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            try:
                validate_digit_string(other[1:] if other.startswith("-") else other)
            except FormatError:
                return NotImplemented
        if isinstance(other, (int, str)):
            other = BigNum(other)
        if not isinstance(other, BigNum):
            return NotImplemented
        if self._state is not other._state:
            return False
        if self.is_error():
            return self._error_kind is other._error_kind
        return self._sign is other._sign and self._magnitude == other._magnitude

    def __lt__(self, other: Operand) -> bool:
        return BigNum.compare(self, other) < 0

    def __le__(self, other: Operand) -> bool:
        return BigNum.compare(self, other) <= 0

    def __gt__(self, other: Operand) -> bool:
        return BigNum.compare(self, other) > 0

    def __ge__(self, other: Operand) -> bool:
        return BigNum.compare(self, other) >= 0

    # Arithmetic

    @staticmethod
    def _signed_sum(a_sign: Sign, a: Magnitude, b_sign: Sign, b: Magnitude) -> BigNum:
        """
        Add two signed magnitudes.

        Same signs add and keep the sign. Mixed signs subtract the smaller
        magnitude from the larger and keep the sign of the larger.
        """
        if a_sign is b_sign:
            return BigNum._make(a_sign, a + b)
        if a >= b:
            return BigNum._make(a_sign, a - b)
        return BigNum._make(b_sign, b - a)

    def add(self, other: Operand) -> BigNum:
        """Return ``self + other``."""
        other = as_bignum(other)
        special = first_non_normal(self, other)
        if special is not None:
            return special
        try:
            return BigNum._signed_sum(self._sign, self._magnitude, other._sign, other._magnitude)
        except ARITHMETIC_FAULTS as exc:
            return _report("add", exc)

    def subtract(self, other: Operand) -> BigNum:
        """Return ``self - other``."""
        other = as_bignum(other)
        special = first_non_normal(self, other)
        if special is not None:
            return special
        flipped = Sign(-other._sign)
        try:
            return BigNum._signed_sum(self._sign, self._magnitude, flipped, other._magnitude)
        except ARITHMETIC_FAULTS as exc:
            return _report("subtract", exc)

    def multiply(self, other: Operand) -> BigNum:
        """Return ``self * other``."""
        other = as_bignum(other)
        special = first_non_normal(self, other)
        if special is not None:
            return special
        return BigNum._make(Sign(self._sign * other._sign), self._magnitude * other._magnitude)

    def divide_with_remainder(self, other: Operand) -> tuple[BigNum, BigNum]:
        """
        Truncating division.

        The quotient rounds toward zero and the remainder takes the sign
        of the dividend, so ``self == other * q + r`` always holds.
        Division by zero gives an error value for both parts.
        """
        other = as_bignum(other)
        special = first_non_normal(self, other)
        if special is not None:
            return special, special.copy()
        try:
            result = divide_fast(self._magnitude, other._magnitude)
        except ARITHMETIC_FAULTS as exc:
            failure = _report("divide", exc)
            return failure, failure.copy()
        quotient = BigNum._make(Sign(self._sign * other._sign), result.quotient)
        remainder = BigNum._make(self._sign, result.remainder)
        return quotient, remainder

    def divide(self, other: Operand) -> BigNum:
        """Return the truncated quotient ``self / other``."""
        return self.divide_with_remainder(other)[0]

    def modulo(self, other: Operand) -> BigNum:
        """Return the remainder of truncating division, signed like self."""
        return self.divide_with_remainder(other)[1]

    def power(self, exponent: Operand) -> BigNum:
        """
        Return ``self ** exponent`` by repeated squaring.

        A negative exponent gives a ``NEGATIVE_OPERAND`` error.
        """
        exponent = as_bignum(exponent)
        special = first_non_normal(self, exponent)
        if special is not None:
            return special
        if exponent.is_negative():
            logger.warning(
                "power: negative exponent %s",
                exponent,
                extra={"operation": "power", "error_kind": ErrorKind.NEGATIVE_OPERAND.value},
            )
            return BigNum.error(ErrorKind.NEGATIVE_OPERAND)
        magnitude = algorithms.power(self._magnitude, exponent._magnitude)
        odd = exponent._magnitude.is_odd()
        sign = Sign.NEGATIVE if self._sign is Sign.NEGATIVE and odd else Sign.POSITIVE
        return BigNum._make(sign, magnitude)

    def negate(self) -> BigNum:
        if not self.is_normal():
            return self.copy()
        return BigNum._make(Sign(-self._sign), self._magnitude)

    def absolute(self) -> BigNum:
        if not self.is_normal():
            return self.copy()
        return BigNum._make(Sign.POSITIVE, self._magnitude)

    def increment(self) -> BigNum:
        """Add one in place."""
        return self._assign(self.add(BigNum(ONE)))

    def decrement(self) -> BigNum:
        """Subtract one in place."""
        return self._assign(self.subtract(BigNum(ONE)))

    def __add__(self, other: Operand) -> BigNum:
        return self.add(other)

    def __radd__(self, other: Operand) -> BigNum:
        return as_bignum(other).add(self)

    def __sub__(self, other: Operand) -> BigNum:
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> BigNum:
        return as_bignum(other).subtract(self)

    def __mul__(self, other: Operand) -> BigNum:
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> BigNum:
        return as_bignum(other).multiply(self)

    def __truediv__(self, other: Operand) -> BigNum:
        return self.divide(other)

    def __rtruediv__(self, other: Operand) -> BigNum:
        return as_bignum(other).divide(self)

    def __mod__(self, other: Operand) -> BigNum:
        return self.modulo(other)

    def __rmod__(self, other: Operand) -> BigNum:
        return as_bignum(other).modulo(self)

    def __divmod__(self, other: Operand) -> tuple[BigNum, BigNum]:
        return self.divide_with_remainder(other)

    def __pow__(self, exponent: Operand) -> BigNum:
        return self.power(exponent)

    def __rpow__(self, base: Operand) -> BigNum:
        return as_bignum(base).power(self)

    def __neg__(self) -> BigNum:
        return self.negate()

    def __pos__(self) -> BigNum:
        return self.copy()

    def __abs__(self) -> BigNum:
        return self.absolute()

    def __iadd__(self, other: Operand) -> BigNum:
        return self._assign(self.add(other))

    def __isub__(self, other: Operand) -> BigNum:
        return self._assign(self.subtract(other))

    def __imul__(self, other: Operand) -> BigNum:
        return self._assign(self.multiply(other))

    def __itruediv__(self, other: Operand) -> BigNum:
        return self._assign(self.divide(other))

    def __imod__(self, other: Operand) -> BigNum:
        return self._assign(self.modulo(other))

    def __ipow__(self, exponent: Operand) -> BigNum:
        return self._assign(self.power(exponent))
