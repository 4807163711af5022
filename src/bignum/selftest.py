"""
Offline self-test: cross-check BigNum against native Python integers.

Runs every arithmetic operation over a grid of operand pairs and
counts agreements. A division by zero met during the run aborts it.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from bignum.config import get_settings
from bignum.exceptions import BigNumError, ErrorKind
from bignum.number import BigNum
from bignum.observability import setup_logging
from bignum.operations import factorial, gcd, is_prime, sqrt

logger = logging.getLogger(__name__)

# Strings and the int they should parse to; None means a format error
STORE_CASES: tuple[tuple[str, int | None], ...] = (
    ("0000", 0),
    ("0004", 4),
    ("4000", 4000),
    ("-25", -25),
    ("-0", 0),
    ("", None),
    ("hello", None),
    ("1.5", None),
)

NATIVE_CASES: tuple[int, ...] = (
    -(2**63), -(2**31), -(2**15), 0, 2**15 - 1, 2**31 - 1, 2**63 - 1,
)


class SelfTestAborted(BigNumError):
    """Raised when the self-test run meets a division by zero."""

    def __init__(self, a: int, b: int) -> None:
        super().__init__("Division by zero during self-test", (a, b))


@dataclass
class SelfTestReport:
    """Outcome of a self-test run."""

    successes: int = 0
    failures: list[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures

    def check(self, label: str, actual: object, expected: object) -> bool:
        if actual == expected:
            self.successes += 1
            return True
        message = f"{label} = {actual} (BigNum) != {expected} (int) fail"
        logger.error(message)
        self.failures.append(message)
        return False

    def __str__(self) -> str:
        return f"Success: {self.successes}  Fail: {len(self.failures)}"


def truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Native divmod rounding toward zero instead of toward minus infinity."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def is_prime_reference(n: int) -> bool:
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def _native(value: BigNum) -> int | str:
    return value.to_int() if value.is_normal() else str(value)


def _check_pairs(
    report: SelfTestReport,
    name: str,
    lefts: range,
    rights: range,
    actual: Callable[[BigNum, BigNum], int | str],
    expected: Callable[[int, int], int],
) -> None:
    logger.info("Testing %s", name)
    for a in lefts:
        big_a = BigNum(a)
        for b in rights:
            report.check(f"{name}({a}, {b})", actual(big_a, BigNum(b)), expected(a, b))


def _divide_checked(part: int) -> Callable[[BigNum, BigNum], int | str]:
    def run(a: BigNum, b: BigNum) -> int | str:
        result = a.divide_with_remainder(b)[part]
        if result.error_kind is ErrorKind.DIVISION_BY_ZERO:
            raise SelfTestAborted(a.to_int(), b.to_int())
        return _native(result)

    return run


def run_self_test(
    limit: int | None = None,
    step_left: int | None = None,
    step_right: int | None = None,
) -> SelfTestReport:
    """
    Run the cross-check.

    Left operands run upward over ``[-limit, limit]`` by ``step_left``,
    right operands downward by ``step_right``. Defaults come from settings.

    Raises:
        SelfTestAborted: If a divisor in the grid is zero
    """
    settings = get_settings()
    limit = settings.selftest_limit if limit is None else limit
    step_left = settings.selftest_step_left if step_left is None else step_left
    step_right = settings.selftest_step_right if step_right is None else step_right

    report = SelfTestReport()

    logger.info("Testing store str")
    for text, value in STORE_CASES:
        parsed = BigNum(text)
        if value is None:
            report.check(f"store str {text!r}", str(parsed), "error")
        else:
            report.check(f"store str {text!r}", _native(parsed), value)

    logger.info("Testing store int")
    for value in NATIVE_CASES:
        report.check(f"store int {value}", BigNum(value).to_int(), value)
        report.check(f"store str {value}", str(BigNum(str(value))), str(value))

    lefts = range(-limit, limit + 1, step_left)
    rights = range(limit, -limit - 1, -step_right)

    _check_pairs(report, "compare", lefts, rights,
                 BigNum.compare, lambda a, b: (a > b) - (a < b))
    _check_pairs(report, "add", lefts, rights,
                 lambda a, b: _native(a + b), lambda a, b: a + b)
    _check_pairs(report, "subtract", lefts, rights,
                 lambda a, b: _native(a - b), lambda a, b: a - b)
    _check_pairs(report, "multiply", lefts, rights,
                 lambda a, b: _native(a * b), lambda a, b: a * b)
    _check_pairs(report, "pow", range(-10, 10), range(1, 10),
                 lambda a, b: _native(a ** b), lambda a, b: a**b)
    _check_pairs(report, "divide", lefts, rights,
                 _divide_checked(0), lambda a, b: truncating_divmod(a, b)[0])
    _check_pairs(report, "mod", lefts, rights,
                 _divide_checked(1), lambda a, b: truncating_divmod(a, b)[1])
    _check_pairs(report, "gcd", lefts, rights,
                 lambda a, b: _native(gcd(a, b)), math.gcd)

    logger.info("Testing sqrt")
    for a in range(0, limit + 1, step_left):
        report.check(f"sqrt({a})", _native(sqrt(a)), math.isqrt(a))

    logger.info("Testing isprime")
    for a in range(0, 101):
        report.check(f"isprime({a})", _native(is_prime(a)), int(is_prime_reference(a)))

    logger.info("Testing factorial")
    for a in range(1, 13):
        report.check(f"{a}!", _native(factorial(a)), math.factorial(a))

    return report


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="bignum-selftest",
        description="Cross-check bignum arithmetic against native integers.",
    )
    parser.add_argument("--limit", type=int, default=settings.selftest_limit,
                        help="Operands run over [-limit, limit]")
    parser.add_argument("--step-left", type=int, default=settings.selftest_step_left,
                        help="Step between left operands")
    parser.add_argument("--step-right", type=int, default=settings.selftest_step_right,
                        help="Step between right operands")
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--log-format", choices=("json", "text"), default=settings.log_format)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_format)

    print("Running tests")
    start = time.perf_counter()
    try:
        report = run_self_test(args.limit, args.step_left, args.step_right)
    except SelfTestAborted as exc:
        print(exc, file=sys.stderr)
        return 2
    duration = time.perf_counter() - start

    print(report)
    print(f"Took {duration:.0f} seconds")
    return 0 if report.passed else 1


if __name__ == "__main__":
    raise SystemExit(main())
