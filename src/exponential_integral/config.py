"""
Import-time configuration.

Settings are read from environment variables once, when the package is
first imported. Changing the environment afterwards has no effect on an
already-imported package.

EXPONENTIAL_INTEGRAL_ERROR_BOUNDS
    Track rigorous error bounds alongside every value (default: on).
    When off, every result carries only its value and the error-bound
    bookkeeping is skipped entirely. Returned values are identical either way.
"""

import os
import warnings

ERROR_BOUNDS_VARIABLE = "EXPONENTIAL_INTEGRAL_ERROR_BOUNDS"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def read_flag(name: str, default: bool) -> bool:
    """
    Read a boolean switch from the environment.

    Parameters
    ----------
    name : str
        Environment variable name.
    default : bool
        Value used when the variable is unset or unrecognized.

    Returns
    -------
    bool
        The parsed switch.
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default

    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False

    warnings.warn(
        f"Unrecognized value {raw!r} for {name}; expected one of "
        f"{sorted(_TRUTHY | _FALSY)}. Using default ({default})."
    )
    return default


ERROR_BOUNDS = read_flag(ERROR_BOUNDS_VARIABLE, True)
