"""Tests for the error-carrying public API."""

import numpy as np
import pytest

from exponential_integral import (
    Approx, ArgumentTooNegative, ArgumentTooPositive, NXMAX, XMAX, with_error,
)


class TestEi:
    """Ei(x) = -E1(-x)."""

    @pytest.mark.parametrize("x", [-650.0, -16.0, -5.0, -1.0, -0.5, 0.5, 1.0, 2.5, 9.0, 100.0])
    def test_identity_is_exact(self, x):
        """Values negate exactly; error bounds carry over."""
        ei = with_error.Ei(x)
        e1 = with_error.E1(-x)
        assert ei.value == -e1.value
        assert ei.error == e1.error

    def test_negative_argument(self):
        """Ei(-16) mirrors E1(16)."""
        assert with_error.Ei(-16.0).value == -with_error.E1(16.0).value
        assert with_error.Ei(-16.0).value < 0

    def test_known_values(self):
        """Spot values of Ei."""
        assert np.isclose(with_error.Ei(1.0).value, 1.8951178163559368, rtol=1e-12)
        assert np.isclose(with_error.Ei(-1.0).value, -0.21938393439552029, rtol=1e-12)

    def test_too_positive(self):
        """Ei(x) for x >= XMAX reports the caller's own argument."""
        with pytest.raises(ArgumentTooPositive) as excinfo:
            with_error.Ei(XMAX)
        assert excinfo.value.argument == XMAX
        assert isinstance(excinfo.value.__cause__, ArgumentTooNegative)

    def test_too_negative(self):
        """Ei(x) for x <= -XMAX reports the caller's own argument."""
        with pytest.raises(ArgumentTooNegative) as excinfo:
            with_error.Ei(NXMAX)
        assert excinfo.value.argument == NXMAX
        assert isinstance(excinfo.value.__cause__, ArgumentTooPositive)

    def test_invalid(self):
        """Zero and non-finite arguments are rejected."""
        for x in (0.0, np.nan, np.inf):
            with pytest.raises(ValueError):
                with_error.Ei(x)

    def test_max_order(self):
        """A bounded order passes through to E1."""
        assert with_error.Ei(3.0, max_order=4) == with_error.E1(-3.0, max_order=4).negated()


class TestE1:
    """E1 through the public module."""

    def test_deterministic(self):
        """Repeated calls give identical results."""
        assert with_error.E1(3.3) == with_error.E1(3.3)
        assert with_error.E1(-3.3) == with_error.E1(-3.3)

    def test_returns_approx(self):
        """Results carry a value and a non-negative error."""
        result = with_error.E1(2.0)
        assert isinstance(result, Approx)
        assert result.error >= 0.0


class TestApprox:
    """The result type."""

    def test_str(self):
        """Printed as value +/- error."""
        assert str(Approx(1.5, 0.25)) == "1.5 +/- 0.25"
        assert str(Approx(1.5)) == "1.5"

    def test_negated(self):
        """Negation keeps the error bound."""
        assert Approx(2.0, 0.5).negated() == Approx(-2.0, 0.5)
        assert Approx(2.0).negated().error is None

    def test_validation(self):
        """Values must be finite; errors non-negative."""
        with pytest.raises(ValueError):
            Approx(np.nan, 0.0)
        with pytest.raises(ValueError):
            Approx(1.0, -1e-20)
        with pytest.raises(ValueError):
            Approx(1.0, np.inf)

    def test_immutable(self):
        """Results are frozen."""
        result = Approx(1.0, 0.0)
        with pytest.raises(AttributeError):
            result.value = 2.0

    def test_ordering(self):
        """Results order by value first."""
        assert Approx(1.0, 0.5) < Approx(2.0, 0.0)
