"""Unit tests for validator functions."""

import pytest

from bignum import (
    BigNum,
    ErrorKind,
    FormatError,
    InvalidInputError,
    validate_digit,
    validate_digit_string,
    validate_native_int,
    validate_normal,
)


class TestValidateDigitString:
    """Tests for validate_digit_string function."""

    def test_accepts_digits(self):
        assert validate_digit_string("0123") == "0123"

    def test_rejects_decimal_point(self):
        with pytest.raises(FormatError) as exc_info:
            validate_digit_string("3.14")
        assert "Decimals" in str(exc_info.value)
        assert exc_info.value.kind is ErrorKind.FORMAT

    def test_rejects_letters(self):
        with pytest.raises(FormatError) as exc_info:
            validate_digit_string("12x")
        assert "Invalid number" in str(exc_info.value)
        assert exc_info.value.text == "12x"

    def test_rejects_empty(self):
        with pytest.raises(FormatError):
            validate_digit_string("")

    def test_rejects_non_string(self):
        with pytest.raises(InvalidInputError):
            validate_digit_string(123)


class TestValidateDigit:
    """Tests for validate_digit function."""

    @pytest.mark.parametrize("digit", range(10))
    def test_accepts_digits(self, digit):
        assert validate_digit(digit) == digit

    @pytest.mark.parametrize("value", [-1, 10, 1.0, "5"])
    def test_rejects_others(self, value):
        with pytest.raises(InvalidInputError):
            validate_digit(value)


class TestValidateNativeInt:
    """Tests for validate_native_int function."""

    def test_accepts_int(self):
        assert validate_native_int(42) == 42

    def test_accepts_negative(self):
        assert validate_native_int(-100) == -100

    def test_rejects_negative_when_disallowed(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_native_int(-1, allow_negative=False)
        assert "non-negative" in str(exc_info.value)

    def test_rejects_float(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_native_int(1.5)
        assert "float" in str(exc_info.value)


class TestValidateNormal:
    """Tests for validate_normal function."""

    def test_accepts_normal(self):
        value = BigNum(7)
        assert validate_normal(value) is value

    def test_rejects_error(self):
        with pytest.raises(InvalidInputError):
            validate_normal(BigNum.error(ErrorKind.DIVISION_BY_ZERO))

    def test_rejects_ignore(self):
        with pytest.raises(InvalidInputError):
            validate_normal(BigNum.ignore())
