"""
exponential_integral: E1 and Ei for real double-precision arguments.

The exponential integral Ei(t) is the integral of exp(u)/u from -infinity
to t; E1(x) = -Ei(-x). Both are approximated with piecewise Chebyshev
expansions (after GSL's specfunc/expint.c), each piece carrying a rigorous
bound on its own approximation error.

Set EXPONENTIAL_INTEGRAL_ERROR_BOUNDS=0 before importing to skip the
error-bound bookkeeping; returned values are unaffected.
"""

__version__ = "0.1.0"

from . import config
from . import constants
from . import with_error

from .approx import Approx
from .checked import Finite, LessThan, Negative, NonNegative, NonZero, Positive, Sorted
from .constants import GSL_DBL_EPSILON, NXMAX, XMAX
from .errors import ArgumentTooNegative, ArgumentTooPositive, DomainError


def E1(x, max_order=None) -> float:
    """
    Exponential integral E1(x), value only.

    Raises
    ------
    DomainError
        If |x| is at or beyond XMAX (see ``with_error.E1``).
    """
    return float(with_error.E1(x, max_order).value)


def Ei(x, max_order=None) -> float:
    """
    Exponential integral Ei(x), value only.

    Raises
    ------
    DomainError
        If |x| is at or beyond XMAX (see ``with_error.Ei``).
    """
    return float(with_error.Ei(x, max_order).value)


__all__ = [
    # Version
    "__version__",
    # Submodules
    "config",
    "constants",
    "with_error",
    # Functions
    "E1",
    "Ei",
    # Types
    "Approx",
    "Finite",
    "LessThan",
    "Negative",
    "NonNegative",
    "NonZero",
    "Positive",
    "Sorted",
    # Errors
    "DomainError",
    "ArgumentTooNegative",
    "ArgumentTooPositive",
    # Constants
    "GSL_DBL_EPSILON",
    "NXMAX",
    "XMAX",
]
