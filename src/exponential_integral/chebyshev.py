"""
Chebyshev series evaluation.

Implements the Clenshaw backward recurrence used by GSL's ``cheb_eval_e``,
evaluated at an explicit truncation order rather than the full table length.
Lower orders trade accuracy for speed. The error estimate adds the magnitude
of the last coefficient summed, ``|c[order]|``, as a stand-in for the
neglected tail. At full order that term is negligible; at a truncated order
it is a heuristic and can understate the true truncation error.

Two evaluators are provided:

- ``evaluate`` returns an ``Approx`` with a rigorous error bound.
- ``evaluate_value`` runs the identical recurrence without the error
  bookkeeping and returns the value alone.

Both produce bit-identical values for the same inputs.
"""

from dataclasses import dataclass

import numpy as np

from .approx import Approx
from .checked import Finite, LessThan, Sorted
from .constants import CANONICAL_LOWER, CANONICAL_UPPER, GSL_DBL_EPSILON

CANONICAL = Sorted((CANONICAL_LOWER, CANONICAL_UPPER))


def _rescale(endpoints: Sorted, x: float):
    """Map x from [a, b] onto [-1, 1]; returns (y, 2y)."""
    a, b = endpoints
    y = (2.0 * x - a - b) / (b - a)
    return y, 2.0 * y


def evaluate(endpoints: Sorted, coefficients: np.ndarray, order: LessThan, x: Finite) -> Approx:
    """
    Evaluate a Chebyshev series with an error estimate.

    Parameters
    ----------
    endpoints : Sorted
        Native domain ``(a, b)`` of the series.
    coefficients : array
        Series coefficients; ``c[0]`` enters with weight 1/2.
    order : LessThan
        Highest coefficient index summed. Must be bounded by
        ``len(coefficients)``.
    x : Finite
        Evaluation point in the series' native domain.

    Returns
    -------
    Approx
        Series value and ``GSL_DBL_EPSILON * e + |c[order]|``, where ``e``
        accumulates the magnitudes of every term of the recurrence.
    """
    y, y2 = _rescale(endpoints, x)

    d = 0.0
    dd = 0.0
    e = 0.0

    for j in range(order, 0, -1):
        c = float(coefficients[j])
        tmp = d
        d = y2 * d - dd + c
        e += abs(y2 * tmp) + abs(dd) + abs(c)
        dd = tmp

    half = 0.5 * float(coefficients[0])
    tmp = d
    d = y * d - dd + half
    e += abs(y * tmp) + abs(dd) + abs(half)

    return Approx(d, GSL_DBL_EPSILON * e + abs(float(coefficients[order])))


def evaluate_value(endpoints: Sorted, coefficients: np.ndarray, order: LessThan, x: Finite) -> float:
    """Evaluate a Chebyshev series, skipping the error estimate."""
    y, y2 = _rescale(endpoints, x)

    d = 0.0
    dd = 0.0

    for j in range(order, 0, -1):
        tmp = d
        d = y2 * d - dd + float(coefficients[j])
        dd = tmp

    return y * d - dd + 0.5 * float(coefficients[0])


def truncation_order(coefficients: np.ndarray, native_order: int, max_order=None) -> LessThan:
    """
    Clamp a requested truncation order to a table's native order.

    Parameters
    ----------
    coefficients : array
        The table the order will index.
    native_order : int
        Order used when no bound is requested.
    max_order : int, optional
        Caller-supplied upper bound on the order.

    Returns
    -------
    LessThan
        An order guaranteed to index ``coefficients``.
    """
    order = native_order if max_order is None else min(int(max_order), native_order)
    return LessThan(order, len(coefficients))


@dataclass(frozen=True, eq=False)
class Series:
    """
    A Chebyshev series on ``[a, b]``, truncated at ``order``.

    Attributes
    ----------
    endpoints : Sorted
        Native domain ``(a, b)``, ``a < b``.
    coefficients : array
        Series coefficients (not copied).
    order : LessThan
        Order of expansion, ``order < len(coefficients)``.
    """
    endpoints: Sorted
    coefficients: np.ndarray
    order: LessThan

    def __post_init__(self):
        if not isinstance(self.endpoints, Sorted):
            object.__setattr__(self, 'endpoints', Sorted(self.endpoints))
        if len(self.coefficients) == 0:
            raise ValueError("Chebyshev series without any coefficients")
        if not isinstance(self.order, LessThan) or self.order.bound != len(self.coefficients):
            object.__setattr__(self, 'order', LessThan(self.order, len(self.coefficients)))

    @classmethod
    def canonical(cls, coefficients: np.ndarray, order=None) -> "Series":
        """A series on [-1, 1], at full order unless ``order`` is given."""
        if order is None:
            order = len(coefficients) - 1
        return cls(CANONICAL, coefficients, order)

    @property
    def a(self) -> float:
        return self.endpoints.lower

    @property
    def b(self) -> float:
        return self.endpoints.upper

    def evaluate(self, x) -> Approx:
        return evaluate(self.endpoints, self.coefficients, self.order, Finite.of(x))

    def evaluate_value(self, x) -> float:
        return evaluate_value(self.endpoints, self.coefficients, self.order, Finite.of(x))

    def __call__(self, x) -> float:
        return self.evaluate_value(x)
