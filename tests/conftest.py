"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Hypothesis profiles, all without deadlines
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator instance."""
    from bignum import Calculator

    return Calculator()


@pytest.fixture
def calculator_with_value():
    """Provide a Calculator initialized with 100."""
    from bignum import Calculator

    return Calculator(100)


@pytest.fixture
def digit_source():
    """Provide a deterministically seeded digit source."""
    from bignum import DigitSource

    return DigitSource(seed=1234)


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings before and after the test so env changes apply."""
    from bignum.config import get_settings

    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def sample_numbers():
    """Provide a set of interesting decimal strings."""
    return [
        "0",
        "1",
        "-1",
        "9",
        "10",
        "-10",
        "99999999999999999999",
        "-100000000000000000000",
        "123456789012345678901234567890",
        "18446744073709551616",  # 2 ** 64
    ]
