"""Calculator class providing chained big-integer arithmetic."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from bignum.config import get_settings
from bignum.exceptions import BigNumError, InvalidInputError
from bignum.number import BigNum, Operand, as_bignum
from bignum.operations import call_function, logical_not

logger = logging.getLogger(__name__)

# Infix operator symbols as an evaluator reads them
OPERATORS: Mapping[str, Callable[[BigNum, BigNum], BigNum]] = MappingProxyType({
    "+": BigNum.add,
    "-": BigNum.subtract,
    "*": BigNum.multiply,
    "/": BigNum.divide,
    "%": BigNum.modulo,
    "^": BigNum.power,
})


@dataclass
class CalculatorState:
    """Snapshot of the calculator after one operation."""

    value: BigNum
    operation: str
    operands: tuple[BigNum, ...]

    def __str__(self) -> str:
        return f"{self.operation}({', '.join(map(str, self.operands))}) = {self.value}"


class Calculator:
    """
    A calculator holding one BigNum, with chain operations and history.

    Once the held value becomes an error (or ignore) value, further
    operations leave it untouched; ``undo``, ``set`` and ``clear`` are
    the ways back.

    Example:
        >>> calc = Calculator(10)
        >>> str(calc.add(5).multiply(2).value)
        '30'
        >>> str(calc.undo().value)
        '15'
    """

    def __init__(
        self, initial_value: Operand = 0, slow_operation_seconds: float | None = None
    ) -> None:
        """
        Initialize calculator with a starting value.

        Args:
            initial_value: The initial value (default 0)
            slow_operation_seconds: Log operations taking longer than this
                (default: from settings)
        """
        if slow_operation_seconds is None:
            slow_operation_seconds = get_settings().slow_operation_seconds
        self.slow_operation_seconds = slow_operation_seconds
        self._value = as_bignum(initial_value).copy()
        self._history: list[CalculatorState] = []
        self._record_state("init", self._value)

    @property
    def value(self) -> BigNum:
        """Current calculator value."""
        return self._value.copy()

    @property
    def history(self) -> list[CalculatorState]:
        """List of all operations performed."""
        return self._history.copy()

    def _record_state(self, operation: str, *operands: BigNum) -> None:
        self._history.append(
            CalculatorState(
                value=self._value.copy(),
                operation=operation,
                operands=tuple(operand.copy() for operand in operands),
            )
        )

    def _timed(self, op_name: str, compute: Callable[[], BigNum]) -> BigNum:
        start = time.perf_counter()
        result = compute()
        elapsed = time.perf_counter() - start
        if elapsed > self.slow_operation_seconds:
            logger.info(
                "Took %.1f seconds",
                elapsed,
                extra={"operation": op_name, "elapsed_seconds": round(elapsed, 3)},
            )
        return result

    def _apply(
        self, operation: Callable[[BigNum, BigNum], BigNum], operand: Operand, op_name: str
    ) -> Calculator:
        """Apply a binary operation and record it."""
        operand = as_bignum(operand)
        if self._value.is_normal():
            self._value = self._timed(op_name, lambda: operation(self._value, operand))
        self._record_state(op_name, operand)
        return self

    def add(self, value: Operand) -> Calculator:
        """Add value to current result."""
        return self._apply(BigNum.add, value, "add")

    def subtract(self, value: Operand) -> Calculator:
        """Subtract value from current result."""
        return self._apply(BigNum.subtract, value, "subtract")

    def multiply(self, value: Operand) -> Calculator:
        """Multiply current result by value."""
        return self._apply(BigNum.multiply, value, "multiply")

    def divide(self, value: Operand) -> Calculator:
        """Divide current result by value, truncating toward zero."""
        return self._apply(BigNum.divide, value, "divide")

    def modulo(self, value: Operand) -> Calculator:
        """Replace current result by its remainder modulo value."""
        return self._apply(BigNum.modulo, value, "modulo")

    def power(self, exponent: Operand) -> Calculator:
        """Raise current result to power."""
        return self._apply(BigNum.power, exponent, "power")

    def apply(self, symbol: str, operand: Operand) -> Calculator:
        """
        Apply an infix operator given by its symbol (``+ - * / % ^``).

        Raises:
            InvalidInputError: If symbol is not a known operator
        """
        operation = OPERATORS.get(symbol)
        if operation is None:
            raise InvalidInputError(symbol, "Unknown operator")
        return self._apply(operation, operand, symbol)

    def call(self, name: str, *args: Operand) -> Calculator:
        """Set current value to a table function applied to args."""
        operands = tuple(as_bignum(arg) for arg in args)
        self._value = self._timed(name, lambda: call_function(name, *operands))
        self._record_state(name, *operands)
        return self

    def logical_not(self) -> Calculator:
        """Replace current result by 1 if it is zero, else 0."""
        self._value = logical_not(self._value)
        self._record_state("not")
        return self

    def clear(self) -> Calculator:
        """Reset to zero and clear history."""
        self._value = BigNum(0)
        self._history.clear()
        self._record_state("clear")
        return self

    def set(self, value: Operand) -> Calculator:
        """Set current value directly."""
        self._value = as_bignum(value).copy()
        self._record_state("set", self._value)
        return self

    def undo(self) -> Calculator:
        """
        Undo the last operation.

        Returns:
            Self with previous state restored

        Raises:
            BigNumError: If no operations to undo
        """
        if len(self._history) <= 1:
            raise BigNumError("Nothing to undo")

        self._history.pop()
        self._value = self._history[-1].value.copy()

        return self

    def copy(self) -> Calculator:
        """Create an independent copy of this calculator."""
        new_calc = Calculator(self._value, self.slow_operation_seconds)
        new_calc._history = self._history.copy()
        return new_calc

    def __repr__(self) -> str:
        return f"Calculator(value={self._value}, history_len={len(self._history)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calculator):
            return NotImplemented
        return self._value == other._value
