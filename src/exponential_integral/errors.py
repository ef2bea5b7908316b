"""
Domain errors raised for arguments outside the approximation range.

Both errors subclass ``ValueError`` and carry the offending argument.
"""

from .checked import Negative, Positive
from .constants import NXMAX, XMAX


class DomainError(ValueError):
    """Argument lies outside the range where the approximation is defined."""

    def __init__(self, argument: float, message: str):
        super().__init__(message)
        self.argument = argument


class ArgumentTooNegative(DomainError):
    """Argument was at or below the safe minimum, ``NXMAX``."""

    def __init__(self, argument):
        argument = Negative.of(argument)
        super().__init__(
            argument,
            f"Argument too large (negative): minimum is {NXMAX}, "
            f"but {float(argument)} was supplied",
        )


class ArgumentTooPositive(DomainError):
    """Argument was at or above the safe maximum, ``XMAX``."""

    def __init__(self, argument):
        argument = Positive.of(argument)
        super().__init__(
            argument,
            f"Argument too large (positive): maximum is {XMAX}, "
            f"but {float(argument)} was supplied",
        )
