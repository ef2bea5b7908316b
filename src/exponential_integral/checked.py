"""
Refined numeric types.

Each type wraps a builtin value and validates one constraint when it is
constructed. Once built, the wrapper is a proof that the constraint holds:
code receiving a ``NonZero`` never needs to test for NaN, infinity or zero
again.

The scalar types subclass ``float`` (and ``LessThan`` subclasses ``int``),
so arithmetic on them yields plain builtins and they can be passed anywhere
a number is expected.

Examples
--------
>>> NonZero(2.5)
NonZero(2.5)
>>> NonZero(0.0)
Traceback (most recent call last):
    ...
ValueError: NonZero requires a finite, nonzero value, got 0.0
"""

import math


class Checked:
    """
    Mixin giving a builtin numeric type a validating constructor.

    Subclasses provide ``requirement`` (used in error messages) and
    ``holds``, the predicate the value must satisfy.
    """

    requirement = "a valid value"

    @classmethod
    def holds(cls, value) -> bool:
        return True

    @classmethod
    def of(cls, value):
        """Return ``value`` unchanged if it is already checked, else wrap it."""
        if isinstance(value, cls):
            return value
        return cls(value)

    def __new__(cls, value, *args):
        try:
            checked = super().__new__(cls, value)
        except OverflowError as err:
            # e.g. an int too large for a double
            raise ValueError(f"{cls.__name__} requires {cls.requirement}, got {value!r}") from err
        if not cls.holds(checked, *args):
            raise ValueError(f"{cls.__name__} requires {cls.requirement}, got {value!r}")
        return checked

    def __repr__(self):
        return f"{type(self).__name__}({super().__repr__()})"


class Finite(Checked, float):
    """A float that is neither NaN nor infinite."""

    requirement = "a finite value"

    @classmethod
    def holds(cls, value) -> bool:
        return math.isfinite(value)


class NonNegative(Finite):
    """A finite float >= 0."""

    requirement = "a finite, non-negative value"

    @classmethod
    def holds(cls, value) -> bool:
        return super().holds(value) and value >= 0.0


class NonZero(Finite):
    """A finite float other than 0 (either sign of zero)."""

    requirement = "a finite, nonzero value"

    @classmethod
    def holds(cls, value) -> bool:
        return super().holds(value) and value != 0.0

    def __neg__(self):
        # negation keeps the value finite and nonzero
        return float.__new__(NonZero, -float(self))


class Positive(NonZero):
    requirement = "a finite, positive value"

    @classmethod
    def holds(cls, value) -> bool:
        return super().holds(value) and value > 0.0


class Negative(NonZero):
    requirement = "a finite, negative value"

    @classmethod
    def holds(cls, value) -> bool:
        return super().holds(value) and value < 0.0


class LessThan(Checked, int):
    """
    A non-negative integer index strictly below ``bound``.

    Parameters
    ----------
    value : int
        The index.
    bound : int
        Exclusive upper limit, typically the length of the indexed table.
    """

    requirement = "an index in [0, bound)"

    def __new__(cls, value, bound):
        index = super().__new__(cls, value, bound)
        index.bound = bound
        return index

    @classmethod
    def holds(cls, value, bound) -> bool:
        return 0 <= value < bound

    def __repr__(self):
        return f"LessThan({int(self)}, bound={self.bound})"


class Sorted(tuple):
    """
    A pair of finite floats ``(a, b)`` with ``a < b``.

    Used for the endpoints of a Chebyshev series' native domain.
    """

    def __new__(cls, pair):
        a, b = pair
        a, b = Finite.of(a), Finite.of(b)
        if not a < b:
            raise ValueError(f"Sorted requires a strictly increasing pair, got ({a}, {b})")
        return super().__new__(cls, (a, b))

    @property
    def lower(self) -> Finite:
        return self[0]

    @property
    def upper(self) -> Finite:
        return self[1]

    def __repr__(self):
        return f"Sorted({float(self[0])}, {float(self[1])})"


def nonzero_argument(x) -> NonZero:
    """Validate a public-API argument once, passing checked values through."""
    return NonZero.of(x)

