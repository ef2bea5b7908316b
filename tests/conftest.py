"""
Pytest configuration for exponential_integral tests.

This file pins error-bound tracking on before the package is imported,
so results carry an error estimate regardless of the caller's environment.
"""

import os

# Set the build mode via environment variable BEFORE any imports
os.environ["EXPONENTIAL_INTEGRAL_ERROR_BOUNDS"] = "true"

# Now import the package, which reads the switch once
import exponential_integral  # noqa: E402, F401
