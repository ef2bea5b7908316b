"""
Domain router for E1.

The real line is split into ordered, disjoint intervals. ``classify`` finds
the interval containing x by binary search over the upper bounds;
``E1`` then dispatches to that interval's piecewise approximation or raises
the matching domain error.

Every interval is closed at its upper end except (-1, 0) and (4, XMAX):

    (-inf, -XMAX]  too negative
    (-XMAX, -10]   AE11 tail
    (-10, -4]      AE12 tail
    (-4, -1]       E11 core
    (-1, 0)        E12 core
    (0, 1]         E12 core
    (1, 4]         AE13 tail
    (4, XMAX)      AE14 tail
    [XMAX, +inf)   too positive
"""

import enum
from bisect import bisect_left

import numpy as np

from ..approx import Approx
from ..checked import NonZero, nonzero_argument
from ..constants import (
    NEG_CORE_BOUNDARY,
    NEG_MID_BOUNDARY,
    NEG_TAIL_BOUNDARY,
    NXMAX,
    POS_CORE_BOUNDARY,
    POS_MID_BOUNDARY,
    XMAX,
)
from ..errors import ArgumentTooNegative, ArgumentTooPositive
from . import piecewise


class Interval(enum.Enum):
    TOO_NEGATIVE = "(-inf, -XMAX]"
    LE_NEG_10 = "(-XMAX, -10]"
    LE_NEG_4 = "(-10, -4]"
    LE_NEG_1 = "(-4, -1]"
    NEAR_ZERO_NEGATIVE = "(-1, 0)"
    NEAR_ZERO_POSITIVE = "(0, 1]"
    LE_POS_4 = "(1, 4]"
    LE_POS_XMAX = "(4, XMAX)"
    TOO_POSITIVE = "[XMAX, +inf)"


# (upper bound, upper bound included, interval), in increasing order
_PARTITION = (
    (NXMAX, True, Interval.TOO_NEGATIVE),
    (NEG_TAIL_BOUNDARY, True, Interval.LE_NEG_10),
    (NEG_MID_BOUNDARY, True, Interval.LE_NEG_4),
    (NEG_CORE_BOUNDARY, True, Interval.LE_NEG_1),
    (0.0, False, Interval.NEAR_ZERO_NEGATIVE),
    (POS_CORE_BOUNDARY, True, Interval.NEAR_ZERO_POSITIVE),
    (POS_MID_BOUNDARY, True, Interval.LE_POS_4),
    (XMAX, False, Interval.LE_POS_XMAX),
    (np.inf, True, Interval.TOO_POSITIVE),
)

_UPPER_BOUNDS = tuple(upper for upper, _, _ in _PARTITION)

_HANDLERS = {
    Interval.LE_NEG_10: piecewise.le_neg_10,
    Interval.LE_NEG_4: piecewise.le_neg_4,
    Interval.LE_NEG_1: piecewise.le_neg_1,
    Interval.NEAR_ZERO_NEGATIVE: piecewise.le_pos_1,
    Interval.NEAR_ZERO_POSITIVE: piecewise.le_pos_1,
    Interval.LE_POS_4: piecewise.le_pos_4,
    Interval.LE_POS_XMAX: piecewise.le_pos_xmax,
}


def classify(x: NonZero) -> Interval:
    """
    Find the interval of the partition containing x.

    Parameters
    ----------
    x : NonZero
        Argument; finite and nonzero.

    Returns
    -------
    Interval
        The unique interval containing x.
    """
    i = bisect_left(_UPPER_BOUNDS, x)
    upper, closed, interval = _PARTITION[i]
    if x == upper and not closed:
        interval = _PARTITION[i + 1][2]
    return interval


def _check_max_order(max_order):
    if max_order is None:
        return None
    if max_order < 0:
        raise ValueError(f"max_order must be non-negative, got {max_order}")
    return int(max_order)


def E1(x, max_order=None) -> Approx:
    """
    Exponential integral E1(x) with an error estimate.

    Parameters
    ----------
    x : float
        Nonzero, finite argument.
    max_order : int, optional
        Upper bound on the Chebyshev truncation order. Clamped to each
        interval's native order; omit for full accuracy. Below the native
        order the error estimate is heuristic, not a rigorous bound.

    Returns
    -------
    Approx
        E1(x) and an upper bound on its absolute error.

    Raises
    ------
    ArgumentTooNegative
        If x <= -XMAX.
    ArgumentTooPositive
        If x >= XMAX.
    ValueError
        If x is zero, NaN or infinite, or max_order is negative.
    """
    x = nonzero_argument(x)
    max_order = _check_max_order(max_order)

    interval = classify(x)
    if interval is Interval.TOO_NEGATIVE:
        raise ArgumentTooNegative(x)
    if interval is Interval.TOO_POSITIVE:
        raise ArgumentTooPositive(x)
    return _HANDLERS[interval](x, max_order)
