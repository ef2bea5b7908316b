"""Basic tests for the exponential_integral package."""

import numpy as np
import pytest

import exponential_integral
from exponential_integral import with_error


def test_import():
    """Test that the package imports correctly."""
    assert hasattr(exponential_integral, "E1")
    assert hasattr(exponential_integral, "Ei")
    assert hasattr(exponential_integral, "with_error")
    assert exponential_integral.__version__ == "0.1.0"


def test_error_bounds_enabled():
    """conftest pins the error-bound build mode on."""
    assert exponential_integral.config.ERROR_BOUNDS
    assert with_error.E1(1.0).error is not None


def test_value_only_E1():
    """Top-level E1 returns a plain float."""
    value = exponential_integral.E1(1.0)
    assert type(value) is float
    assert np.isclose(value, 0.21938393439552029, rtol=1e-12)


def test_value_only_Ei():
    """Top-level Ei returns a plain float equal to the with_error value."""
    value = exponential_integral.Ei(1.0)
    assert type(value) is float
    assert value == with_error.Ei(1.0).value
    assert np.isclose(value, 1.8951178163559368, rtol=1e-12)


def test_value_only_domain_error():
    """Value-only API raises the same domain errors."""
    with pytest.raises(exponential_integral.ArgumentTooPositive):
        exponential_integral.E1(800.0)
    with pytest.raises(exponential_integral.ArgumentTooPositive):
        exponential_integral.Ei(800.0)


def test_contract_violation():
    """Zero and non-finite arguments are rejected at the boundary."""
    for bad in (0.0, -0.0, np.nan, np.inf, -np.inf):
        with pytest.raises(ValueError):
            exponential_integral.E1(bad)
        with pytest.raises(ValueError):
            exponential_integral.Ei(bad)


def test_oversized_integer_argument():
    """Integers too large for a double are contract violations, not domain errors."""
    for bad in (10**400, -(10**400)):
        with pytest.raises(ValueError, match="NonZero requires") as excinfo:
            exponential_integral.E1(bad)
        assert not isinstance(excinfo.value, exponential_integral.DomainError)
        with pytest.raises(ValueError, match="NonZero requires"):
            exponential_integral.Ei(bad)
