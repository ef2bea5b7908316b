#!/usr/bin/env python3
"""
Evaluate a random 8-term Chebyshev series at a random point.
"""

import numpy as np

from exponential_integral.chebyshev import Series
from exponential_integral.checked import LessThan, Sorted

N = 8


def main():
    """Build a random series and print its evaluation."""
    rng = np.random.default_rng()

    while True:
        a, b = rng.normal(scale=10.0, size=2)
        if a != b:
            break
    endpoints = Sorted((min(a, b), max(a, b)))

    coefficients = rng.normal(size=N)
    order = LessThan(int(rng.integers(N)), N)
    x = rng.uniform(endpoints.lower, endpoints.upper)

    series = Series(endpoints, coefficients, order)
    print(f"endpoints    = {endpoints}")
    print(f"coefficients = {coefficients}")
    print(f"order        = {order}")
    print(f"x            = {x}")
    print(f"series(x)    = {series.evaluate(x)}")


if __name__ == "__main__":
    main()
