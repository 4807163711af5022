"""Unsigned decimal digit sequences with schoolbook arithmetic."""

from __future__ import annotations

from collections.abc import Iterable

from bignum.exceptions import InternalInconsistencyError
from bignum.validators import validate_digit, validate_digit_string, validate_native_int


def _trimmed(digits: list[int]) -> list[int]:
    """Strip leading zeros in place, always leaving at least one digit."""
    first = 0
    while first < len(digits) - 1 and digits[first] == 0:
        first += 1
    del digits[:first]
    if not digits:
        digits.append(0)
    return digits


def _aligned(left: list[int], right: list[int]) -> tuple[list[int], list[int]]:
    """Left-pad the shorter digit list with zeros so positions line up."""
    width = max(len(left), len(right))
    return (
        [0] * (width - len(left)) + left,
        [0] * (width - len(right)) + right,
    )


class Magnitude:
    """
    A non-negative integer stored as decimal digits, most significant first.

    The digit list is never empty and has no leading zero unless the
    value is zero itself. Arithmetic operators return new instances;
    the augmented forms (``+=``, ``-=``, ``*=``) update the receiver.

    Example:
        >>> str(Magnitude("000120") + Magnitude(5))
        '125'
    """

    __slots__ = ("_digits",)

    def __init__(self, value: int | str | Magnitude = 0) -> None:
        """
        Build a magnitude from a digit string, a non-negative int or a copy.

        Raises:
            FormatError: If a string holds anything but digits
            InvalidInputError: If an int is negative or the type is unsupported
        """
        if isinstance(value, Magnitude):
            self._digits = list(value._digits)
        elif isinstance(value, str):
            self._digits = _trimmed([int(char) for char in validate_digit_string(value)])
        else:
            validate_native_int(value, allow_negative=False)
            self._digits = [int(char) for char in str(int(value))]

    @classmethod
    def parse(cls, text: str) -> Magnitude:
        """Parse a string of decimal digits."""
        return cls(text)

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> Magnitude:
        """Build a magnitude from digit values, most significant first."""
        result = cls.__new__(cls)
        result._digits = _trimmed([validate_digit(digit) for digit in digits])
        return result

    @classmethod
    def _wrap(cls, digits: list[int]) -> Magnitude:
        result = cls.__new__(cls)
        result._digits = _trimmed(digits)
        return result

    @property
    def digits(self) -> tuple[int, ...]:
        """The digit values, most significant first."""
        return tuple(self._digits)

    def __len__(self) -> int:
        return len(self._digits)

    def __str__(self) -> str:
        return "".join(str(digit) for digit in self._digits)

    def __repr__(self) -> str:
        return f"Magnitude('{self}')"

    def to_int(self) -> int:
        """Convert to a native Python integer."""
        return int(str(self))

    def __int__(self) -> int:
        return self.to_int()

    def copy(self) -> Magnitude:
        """Create an independent copy."""
        return Magnitude(self)

    # Predicates

    def is_zero(self) -> bool:
        return self._digits == [0]

    def is_one(self) -> bool:
        return self._digits == [1]

    def is_two(self) -> bool:
        return self._digits == [2]

    def is_odd(self) -> bool:
        return self._digits[-1] % 2 == 1

    def is_even(self) -> bool:
        return not self.is_odd()

    def trim(self) -> Magnitude:
        """Drop superfluous leading zeros; returns self."""
        _trimmed(self._digits)
        return self

    def append_digit(self, digit: int) -> Magnitude:
        """Return ``self * 10 + digit``."""
        return Magnitude._wrap(self._digits + [validate_digit(digit)])

    # Comparison

    @staticmethod
    def compare(a: Magnitude, b: Magnitude) -> int:
        """
        Three-way comparison of two magnitudes.

        Returns:
            -1 if a < b, 0 if a == b, 1 if a > b
        """
        left, right = _aligned(a._digits, b._digits)
        for left_digit, right_digit in zip(left, right):
            if left_digit < right_digit:
                return -1
            if left_digit > right_digit:
                return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Magnitude):
            return NotImplemented
        return self._digits == other._digits

    def __lt__(self, other: Magnitude) -> bool:
        return Magnitude.compare(self, other) < 0

    def __le__(self, other: Magnitude) -> bool:
        return Magnitude.compare(self, other) <= 0

    def __gt__(self, other: Magnitude) -> bool:
        return Magnitude.compare(self, other) > 0

    def __ge__(self, other: Magnitude) -> bool:
        return Magnitude.compare(self, other) >= 0

    # Arithmetic

    @staticmethod
    def add(a: Magnitude, b: Magnitude) -> Magnitude:
        """
        Sum of two magnitudes.

        Properties:
            - Commutative: add(a, b) == add(b, a)
            - Identity: add(a, 0) == a
        """
        left, right = _aligned(a._digits, b._digits)
        result = [0] * len(left)
        carry = 0
        for i in range(len(left) - 1, -1, -1):
            carry, result[i] = divmod(left[i] + right[i] + carry, 10)
        if carry:
            result.insert(0, carry)
        return Magnitude._wrap(result)

    @staticmethod
    def subtract(a: Magnitude, b: Magnitude) -> Magnitude:
        """
        Difference ``a - b`` of two magnitudes where ``a >= b``.

        Raises:
            InternalInconsistencyError: If a borrow is left over, meaning a < b
        """
        left, right = _aligned(a._digits, b._digits)
        result = [0] * len(left)
        borrow = 0
        for i in range(len(left) - 1, -1, -1):
            digit = left[i] - borrow - right[i]
            if digit < 0:
                digit += 10
                borrow = 1
            else:
                borrow = 0
            result[i] = digit
        if borrow:
            raise InternalInconsistencyError("subtract", a, b)
        return Magnitude._wrap(result)

    def _scaled(self, factor: int) -> list[int]:
        """Digits of ``self * factor`` for a single digit factor."""
        result = [0] * (len(self._digits) + 1)
        carry = 0
        for i in range(len(self._digits) - 1, -1, -1):
            carry, result[i + 1] = divmod(self._digits[i] * factor + carry, 10)
        result[0] = carry
        return result

    @staticmethod
    def multiply(a: Magnitude, b: Magnitude) -> Magnitude:
        """
        Schoolbook product of two magnitudes.

        Each digit of b, least significant first, scales a into a shifted
        partial product which is accumulated with add.
        """
        total = Magnitude()
        for shift, factor in enumerate(reversed(b._digits)):
            if factor == 0:
                continue
            partial = a._scaled(factor)
            partial.extend([0] * shift)
            total = Magnitude.add(total, Magnitude._wrap(partial))
        return total

    def __add__(self, other: Magnitude) -> Magnitude:
        return Magnitude.add(self, other)

    def __sub__(self, other: Magnitude) -> Magnitude:
        return Magnitude.subtract(self, other)

    def __mul__(self, other: Magnitude) -> Magnitude:
        return Magnitude.multiply(self, other)

    def __iadd__(self, other: Magnitude) -> Magnitude:
        self._digits = Magnitude.add(self, other)._digits
        return self

    def __isub__(self, other: Magnitude) -> Magnitude:
        self._digits = Magnitude.subtract(self, other)._digits
        return self

    def __imul__(self, other: Magnitude) -> Magnitude:
        self._digits = Magnitude.multiply(self, other)._digits
        return self

    # Division and powers live in modules that import this one

    def __truediv__(self, other: Magnitude) -> Magnitude:
        from bignum.division import divide

        return divide(self, other)

    def __mod__(self, other: Magnitude) -> Magnitude:
        from bignum.division import mod

        return mod(self, other)

    def __pow__(self, exponent: Magnitude) -> Magnitude:
        from bignum.algorithms import power

        return power(self, exponent)

    def __itruediv__(self, other: Magnitude) -> Magnitude:
        self._digits = (self / other)._digits
        return self

    def __imod__(self, other: Magnitude) -> Magnitude:
        self._digits = (self % other)._digits
        return self

    def __ipow__(self, exponent: Magnitude) -> Magnitude:
        self._digits = (self**exponent)._digits
        return self


ZERO = Magnitude(0)
ONE = Magnitude(1)
TWO = Magnitude(2)
