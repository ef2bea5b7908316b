#!/usr/bin/env python3
"""
Evaluate Ei at a random point in (1, 16).

Prints the value with its error bound, or the domain error if the
argument is out of range.
"""

import numpy as np

from exponential_integral import DomainError, NonZero
from exponential_integral.with_error import Ei


def main():
    """Draw a point and evaluate Ei there."""
    rng = np.random.default_rng()

    # (1, 16) is open at both ends
    x = rng.uniform(1.0, 16.0)
    while x <= 1.0:
        x = rng.uniform(1.0, 16.0)
    x = NonZero(x)

    print(f"x = {float(x)}")
    try:
        print(f"Ei({float(x)}) = {Ei(x)}")
    except DomainError as e:
        print(f"Ei({float(x)}) = [ERROR: {e}]")


if __name__ == "__main__":
    main()
