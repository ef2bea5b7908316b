"""
Numerical constants used throughout exponential_integral.

All boundaries are in units of the (dimensionless) argument x.
"""

import numpy as np

# Spacing between 1.0 and the next representable double
GSL_DBL_EPSILON = 2.2204460492503131e-16

# -log(DBL_MIN): the largest t for which exp(-t) stays a normal double
XMAXT = 708.39641853226408

# XMAXT - log(XMAXT), tabulated rather than recomputed so the boundary is exact
XMAX = 701.8334146821
NXMAX = -XMAX

# Interior breakpoints of the piecewise approximation
NEG_TAIL_BOUNDARY = -10.0
NEG_MID_BOUNDARY = -4.0
NEG_CORE_BOUNDARY = -1.0
POS_CORE_BOUNDARY = 1.0
POS_MID_BOUNDARY = 4.0

# Constant offset folded out of the E12 series
E12_OFFSET = 0.6875

# Canonical Chebyshev domain
CANONICAL_LOWER = -1.0
CANONICAL_UPPER = 1.0


def derived_xmax() -> float:
    """XMAX recomputed from the float format, for consistency checks."""
    xmaxt = -np.log(np.finfo(np.float64).tiny)
    return float(xmaxt - np.log(xmaxt))
