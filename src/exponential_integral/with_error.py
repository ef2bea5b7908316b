"""
Approximate values alongside estimates of their own approximation errors.
"""

from .approx import Approx
from .checked import nonzero_argument
from .errors import ArgumentTooNegative, ArgumentTooPositive
from . import implementation


def E1(x, max_order=None) -> Approx:
    """
    Exponential integral E1(x) = -Ei(-x), with an error estimate.

    See ``exponential_integral.implementation.router.E1``.
    """
    return implementation.E1(x, max_order)


def Ei(x, max_order=None) -> Approx:
    """
    Exponential integral Ei(x), with an error estimate.

    Computed from the identity Ei(x) = -E1(-x); the error bound carries over
    unchanged and the value is negated exactly.

    Parameters
    ----------
    x : float
        Nonzero, finite argument.
    max_order : int, optional
        Upper bound on the Chebyshev truncation order. Below the native
        order the error estimate is heuristic, not a rigorous bound.

    Returns
    -------
    Approx
        Ei(x) and an upper bound on its absolute error.

    Raises
    ------
    ArgumentTooNegative
        If x <= -XMAX.
    ArgumentTooPositive
        If x >= XMAX.
    """
    x = nonzero_argument(x)
    try:
        result = implementation.E1(-x, max_order)
    except ArgumentTooNegative as err:
        raise ArgumentTooPositive(x) from err
    except ArgumentTooPositive as err:
        raise ArgumentTooNegative(x) from err
    return result.negated()
