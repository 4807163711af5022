"""
Arbitrary-precision decimal integer arithmetic.

The package is layered:
- Magnitude: unsigned digit sequences with schoolbook add/subtract/multiply
- division: halving, bounded slow division and full long division
- BigNum: signed values with an error/ignore state, never raising on bad data
- operations: the named function table an expression evaluator binds to
- Calculator: chained evaluation with history
"""

from bignum.core import OPERATORS, Calculator, CalculatorState
from bignum.division import (
    DivisionResult,
    divide,
    divide_by_one,
    divide_by_two,
    divide_fast,
    divide_slow,
    half,
    mod,
)
from bignum.exceptions import (
    BigNumError,
    DivisionByZeroError,
    ErrorKind,
    FormatError,
    InternalInconsistencyError,
    InvalidInputError,
)
from bignum.magnitude import Magnitude
from bignum.number import BigNum, Sign, State
from bignum.operations import (
    FUNCTIONS,
    absolute,
    call_function,
    factorial,
    gcd,
    is_prime,
    logical_not,
    maximum,
    minimum,
    random,
    sign,
    sqrt,
)
from bignum.rng import DigitSource, default_source
from bignum.validators import (
    validate_digit,
    validate_digit_string,
    validate_native_int,
    validate_normal,
)

__all__ = [
    "FUNCTIONS",
    "OPERATORS",
    "BigNum",
    "BigNumError",
    "Calculator",
    "CalculatorState",
    "DigitSource",
    "DivisionByZeroError",
    "DivisionResult",
    "ErrorKind",
    "FormatError",
    "InternalInconsistencyError",
    "InvalidInputError",
    "Magnitude",
    "Sign",
    "State",
    "absolute",
    "call_function",
    "default_source",
    "divide",
    "divide_by_one",
    "divide_by_two",
    "divide_fast",
    "divide_slow",
    "factorial",
    "gcd",
    "half",
    "is_prime",
    "logical_not",
    "maximum",
    "minimum",
    "mod",
    "random",
    "sign",
    "sqrt",
    "validate_digit",
    "validate_digit_string",
    "validate_native_int",
    "validate_normal",
]

__version__ = "0.1.0"
