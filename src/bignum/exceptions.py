"""Error kinds and exceptions for the bignum package."""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Why a BigNum ended up in the error state."""

    FORMAT = "format"
    DIVISION_BY_ZERO = "division_by_zero"
    INTERNAL_INCONSISTENCY = "internal_inconsistency"
    NEGATIVE_OPERAND = "negative_operand"
    UNKNOWN_FUNCTION = "unknown_function"
    ARITY_MISMATCH = "arity_mismatch"


class BigNumError(Exception):
    """Base exception for all bignum errors."""

    kind: ErrorKind | None = None

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class FormatError(BigNumError):
    """Raised when a decimal string contains anything but digits."""

    kind = ErrorKind.FORMAT

    def __init__(self, text: str, reason: str = "Invalid number") -> None:
        super().__init__(reason, text)
        self.text = text
        self.reason = reason


class DivisionByZeroError(BigNumError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, dividend: Any) -> None:
        super().__init__("Division by zero", str(dividend))
        self.dividend = dividend


class InternalInconsistencyError(BigNumError):
    """Raised when a digit loop ends in a state its caller ruled out."""

    kind = ErrorKind.INTERNAL_INCONSISTENCY

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(
            f"Inconsistent state in {operation}", tuple(str(op) for op in operands)
        )
        self.operation = operation
        self.operands = operands


class InvalidInputError(BigNumError):
    """Raised when the API is called with a value it cannot accept."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


# Faults that the signed layer turns into error values.
ARITHMETIC_FAULTS = (FormatError, DivisionByZeroError, InternalInconsistencyError)
