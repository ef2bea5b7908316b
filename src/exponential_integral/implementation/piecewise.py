"""
Specialized approximations for disjoint intervals of the domain of E1.

Each interval owns one Chebyshev table. Evaluation maps x onto [-1, 1],
sums the series, then applies the interval's closing transform:

- exponential tails: ``s * (1 + c)`` with ``s = exp(-x) / x``
- logarithmic core: ``-log|x| + c`` (plus ``x - 0.6875`` around zero)

together with the interval's own error-bound formula. The formulas follow
GSL's ``expint_E1_impl`` with ``scale`` pinned to 0.

None of these functions check their argument: the router only calls them
with a nonzero finite x inside their interval.
"""

import numpy as np

from .. import chebyshev, config
from ..approx import Approx
from ..chebyshev import CANONICAL
from ..coefficients import AE11, AE12, AE13, AE14, E11, E12, NATIVE_ORDERS
from ..constants import E12_OFFSET, GSL_DBL_EPSILON


class Branch:
    """
    One interval's series and closing transform.

    Attributes
    ----------
    name : str
        Name of the coefficient table.
    coefficients : array
        The table itself.
    native_order : int
        Truncation order used when the caller does not bound it.
    """
    name = None
    coefficients = None
    native_order = None

    def order(self, max_order=None):
        return chebyshev.truncation_order(self.coefficients, self.native_order, max_order)

    def remap(self, x):
        """Map x onto the series' canonical argument."""
        raise NotImplementedError

    def combine(self, x, series_value):
        """Turn the series value into E1(x)."""
        raise NotImplementedError

    def bound(self, x, series: Approx, value):
        """Error bound on ``value`` given the series' own estimate."""
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.name}, order={self.native_order})"


class _ExponentialTail(Branch):
    """E1(x) = exp(-x)/x * (1 + c)."""

    def scale(self, x):
        return (1.0 / x) * np.exp(-x)

    def combine(self, x, series_value):
        return self.scale(x) * (1.0 + series_value)


class _LogarithmicCore(Branch):
    """E1(x) = -log|x| + c."""

    def log_term(self, x):
        return -np.log(abs(x))

    def combine(self, x, series_value):
        return self.log_term(x) + series_value

    def bound(self, x, series, value):
        err = series.error + GSL_DBL_EPSILON * abs(self.log_term(x))
        return err + 2.0 * GSL_DBL_EPSILON * abs(value)


class _NegativeFarTail(_ExponentialTail):
    """(-XMAX, -10]"""
    name = "AE11"
    coefficients = AE11
    native_order = NATIVE_ORDERS["AE11"]

    def remap(self, x):
        return 20.0 / x + 1.0

    def bound(self, x, series, value):
        # s < 0 here; its magnitude scales the series error
        return (abs(self.scale(x)) * series.error
                + 2.0 * GSL_DBL_EPSILON * (abs(x) + 1.0) * abs(value))


class _NegativeNearTail(_ExponentialTail):
    """(-10, -4]"""
    name = "AE12"
    coefficients = AE12
    native_order = NATIVE_ORDERS["AE12"]

    def remap(self, x):
        return (40.0 / x + 7.0) / 3.0

    def bound(self, x, series, value):
        return abs(self.scale(x)) * series.error + 2.0 * GSL_DBL_EPSILON * abs(value)


class _NegativeCore(_LogarithmicCore):
    """(-4, -1]"""
    name = "E11"
    coefficients = E11
    native_order = NATIVE_ORDERS["E11"]

    def remap(self, x):
        return (2.0 * x + 5.0) / 3.0


class _Core(_LogarithmicCore):
    """(-1, 0) and (0, 1]"""
    name = "E12"
    coefficients = E12
    native_order = NATIVE_ORDERS["E12"]

    def remap(self, x):
        return x

    def combine(self, x, series_value):
        return self.log_term(x) - E12_OFFSET + x + series_value


class _PositiveNearTail(_ExponentialTail):
    """(1, 4]"""
    name = "AE13"
    coefficients = AE13
    native_order = NATIVE_ORDERS["AE13"]

    def remap(self, x):
        return (8.0 / x - 5.0) / 3.0

    def bound(self, x, series, value):
        return self.scale(x) * series.error + 2.0 * GSL_DBL_EPSILON * abs(value)


class _PositiveFarTail(_ExponentialTail):
    """(4, XMAX)"""
    name = "AE14"
    coefficients = AE14
    native_order = NATIVE_ORDERS["AE14"]

    def remap(self, x):
        return 8.0 / x - 1.0

    def bound(self, x, series, value):
        return (self.scale(x) * (GSL_DBL_EPSILON + series.error)
                + 2.0 * (x + 1.0) * GSL_DBL_EPSILON * abs(value))


LE_NEG_10 = _NegativeFarTail()
LE_NEG_4 = _NegativeNearTail()
LE_NEG_1 = _NegativeCore()
LE_POS_1 = _Core()
LE_POS_4 = _PositiveNearTail()
LE_POS_XMAX = _PositiveFarTail()

BRANCHES = (LE_NEG_10, LE_NEG_4, LE_NEG_1, LE_POS_1, LE_POS_4, LE_POS_XMAX)


def approximate_with_error(branch: Branch, x, max_order=None) -> Approx:
    """Evaluate ``branch`` at x, propagating the series' error bound."""
    series = chebyshev.evaluate(CANONICAL, branch.coefficients, branch.order(max_order),
                                branch.remap(x))
    value = branch.combine(x, series.value)
    return Approx(value, branch.bound(x, series, value))


def approximate_value(branch: Branch, x, max_order=None) -> Approx:
    """Evaluate ``branch`` at x without any error bookkeeping."""
    series_value = chebyshev.evaluate_value(CANONICAL, branch.coefficients,
                                            branch.order(max_order), branch.remap(x))
    return Approx(branch.combine(x, series_value))


# Chosen once, at import
approximate = approximate_with_error if config.ERROR_BOUNDS else approximate_value


def le_neg_10(x, max_order=None) -> Approx:
    """Between the minimum input and -10."""
    return approximate(LE_NEG_10, x, max_order)


def le_neg_4(x, max_order=None) -> Approx:
    """Between -10 and -4."""
    return approximate(LE_NEG_4, x, max_order)


def le_neg_1(x, max_order=None) -> Approx:
    """Between -4 and -1."""
    return approximate(LE_NEG_1, x, max_order)


def le_pos_1(x, max_order=None) -> Approx:
    """Between -1 and 1, excluding 0."""
    return approximate(LE_POS_1, x, max_order)


def le_pos_4(x, max_order=None) -> Approx:
    """Between 1 and 4."""
    return approximate(LE_POS_4, x, max_order)


def le_pos_xmax(x, max_order=None) -> Approx:
    """Between 4 and the maximum input."""
    return approximate(LE_POS_XMAX, x, max_order)
