"""
Approximate values with attached error estimates.
"""

from dataclasses import dataclass
from typing import Optional

from .checked import Finite, NonNegative


@dataclass(frozen=True, order=True)
class Approx:
    """
    An approximate value alongside an estimate of its own approximation error.

    Attributes
    ----------
    value : Finite
        Approximate value.
    error : NonNegative or None
        Upper bound on the absolute error of ``value``. ``None`` when the
        package was imported with error bounds disabled.
    """
    value: float
    error: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, 'value', Finite.of(self.value))
        if self.error is not None:
            object.__setattr__(self, 'error', NonNegative.of(self.error))

    def negated(self) -> "Approx":
        """Same error bound, opposite sign."""
        return Approx(-self.value, self.error)

    def __str__(self):
        if self.error is None:
            return f"{float(self.value)}"
        return f"{float(self.value)} +/- {float(self.error)}"
