"""Tests for import-time configuration."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

import exponential_integral
from exponential_integral import config, with_error
from exponential_integral.implementation import piecewise


class TestReadFlag:
    """Boolean environment switches."""

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", " on "])
    def test_truthy(self, monkeypatch, raw):
        """Truthy spellings enable the switch."""
        monkeypatch.setenv("EXPINT_TEST_FLAG", raw)
        assert config.read_flag("EXPINT_TEST_FLAG", False) is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "OFF"])
    def test_falsy(self, monkeypatch, raw):
        """Falsy spellings disable the switch."""
        monkeypatch.setenv("EXPINT_TEST_FLAG", raw)
        assert config.read_flag("EXPINT_TEST_FLAG", True) is False

    def test_unset(self, monkeypatch):
        """Unset variables fall back to the default."""
        monkeypatch.delenv("EXPINT_TEST_FLAG", raising=False)
        assert config.read_flag("EXPINT_TEST_FLAG", True) is True
        assert config.read_flag("EXPINT_TEST_FLAG", False) is False

    def test_blank(self, monkeypatch):
        """Blank values fall back to the default."""
        monkeypatch.setenv("EXPINT_TEST_FLAG", "   ")
        assert config.read_flag("EXPINT_TEST_FLAG", True) is True

    def test_unrecognized(self, monkeypatch):
        """Unrecognized values warn and fall back to the default."""
        monkeypatch.setenv("EXPINT_TEST_FLAG", "maybe")
        with pytest.warns(UserWarning, match="EXPINT_TEST_FLAG"):
            assert config.read_flag("EXPINT_TEST_FLAG", True) is True


class TestErrorBounds:
    """The error-bound switch as read by the test session."""

    def test_enabled(self):
        """conftest.py turns error bounds on."""
        assert config.ERROR_BOUNDS is True
        assert config.ERROR_BOUNDS_VARIABLE == "EXPONENTIAL_INTEGRAL_ERROR_BOUNDS"

    def test_pipeline(self):
        """The error-tracking pipeline is bound at import."""
        assert piecewise.approximate is piecewise.approximate_with_error


# Run in a fresh interpreter: the switch is only read at import
_VALUE_ONLY_SCRIPT = """
import json
import sys

from exponential_integral import config, with_error
from exponential_integral.implementation import piecewise

points = json.loads(sys.argv[1])
print(json.dumps({
    "error_bounds": config.ERROR_BOUNDS,
    "value_only": piecewise.approximate is piecewise.approximate_value,
    "errors": [with_error.E1(x).error for x in points],
    "text": str(with_error.E1(2.0)),
    "e1": [with_error.E1(x).value.hex() for x in points],
    "ei": [with_error.Ei(x).value.hex() for x in points],
}))
"""

POINTS = [-600.0, -10.0, -5.5, -2.0, -0.5, 1e-8, 0.75, 2.0, 3.9, 42.0, 700.0]


def run_with_error_bounds(raw):
    """Import the package in a subprocess with the switch set to ``raw``."""
    env = dict(os.environ)
    env["EXPONENTIAL_INTEGRAL_ERROR_BOUNDS"] = raw
    src = str(Path(exponential_integral.__file__).resolve().parents[1])
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [src, env.get("PYTHONPATH")]))
    completed = subprocess.run(
        [sys.executable, "-c", _VALUE_ONLY_SCRIPT, json.dumps(POINTS)],
        env=env, capture_output=True, text=True, check=True,
    )
    return json.loads(completed.stdout)


class TestValueOnlyMode:
    """Importing with error bounds switched off."""

    def test_switch_selects_value_pipeline(self):
        """EXPONENTIAL_INTEGRAL_ERROR_BOUNDS=0 binds the value-only pipeline."""
        result = run_with_error_bounds("0")
        assert result["error_bounds"] is False
        assert result["value_only"] is True

    def test_results_carry_no_error(self):
        """Results have no error and print as the bare value."""
        result = run_with_error_bounds("0")
        assert result["errors"] == [None] * len(POINTS)
        assert result["text"] == str(float(with_error.E1(2.0).value))
        assert "+/-" not in result["text"]

    def test_values_bit_identical(self):
        """Values match the error-tracking build exactly."""
        result = run_with_error_bounds("0")
        assert result["e1"] == [with_error.E1(x).value.hex() for x in POINTS]
        assert result["ei"] == [with_error.Ei(x).value.hex() for x in POINTS]

    def test_switch_on_in_subprocess(self):
        """The same harness with the switch on keeps error bounds."""
        result = run_with_error_bounds("1")
        assert result["error_bounds"] is True
        assert result["value_only"] is False
        assert all(error is not None for error in result["errors"])
