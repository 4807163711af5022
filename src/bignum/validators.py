"""Input validation functions with strict type checking."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bignum.exceptions import FormatError, InvalidInputError

if TYPE_CHECKING:
    from bignum.number import BigNum

DECIMAL_DIGITS = frozenset("0123456789")


def validate_digit_string(text: str) -> str:
    """
    Validate that a string is a plain run of decimal digits.

    Args:
        text: The string to validate (no sign)

    Returns:
        The validated string

    Raises:
        InvalidInputError: If text is not a str
        FormatError: If text is empty, has a decimal point or a non-digit
    """
    if not isinstance(text, str):
        raise InvalidInputError(text, f"Expected str, got {type(text).__name__}")

    if not text:
        raise FormatError(text, "Empty number")

    for char in text:
        if char == ".":
            raise FormatError(text, "Decimals are not supported -- only integers")
        if char not in DECIMAL_DIGITS:
            raise FormatError(text, "Invalid number")

    return text


def validate_digit(value: int) -> int:
    """
    Validate that a value is a single decimal digit.

    Raises:
        InvalidInputError: If value is not an int in [0, 9]
    """
    if not isinstance(value, int) or not 0 <= value <= 9:
        raise InvalidInputError(value, "Digit must be an int in [0, 9]")

    return value


def validate_native_int(value: int, allow_negative: bool = True) -> int:
    """
    Validate that a value is a native Python integer.

    Args:
        value: The value to validate
        allow_negative: Whether negative integers are accepted

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int, or negative when not allowed
    """
    if not isinstance(value, int):
        raise InvalidInputError(value, f"Expected int, got {type(value).__name__}")

    if not allow_negative and value < 0:
        raise InvalidInputError(value, "Value must be non-negative")

    return value


def validate_normal(value: BigNum) -> BigNum:
    """
    Validate that a BigNum carries a usable arithmetic value.

    Raises:
        InvalidInputError: If value is in the error or ignore state
    """
    if not value.is_normal():
        raise InvalidInputError(str(value), "Value is not a normal number")

    return value
