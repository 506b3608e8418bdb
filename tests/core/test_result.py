"""
Tests for the Result[P] envelope and shared compute utilities.

Validates:
    - Generic payloads and frozen immutability
    - Timer sections and error states
    - round_half_up tie handling
"""

from dataclasses import FrozenInstanceError, dataclass

import numpy as np
import pytest

from pynumerics.core.compute import Timer, round_half_up, timed
from pynumerics.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResult:

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"method": "test"},
            timing={"total_seconds": 0.01},
            backend_name="cpu",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "test"
        assert result.timing["total_seconds"] == 0.01
        assert result.warnings == ()

    def test_frozen(self):
        result = Result(params=FakeParams(1.0), info={}, timing=None, backend_name="cpu")
        with pytest.raises(FrozenInstanceError):
            result.backend_name = "other"


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section("step"):
            pass
        with timer.section("step"):
            pass
        timer.stop()
        timing = timer.result()
        assert set(timing) == {"total_seconds", "step"}
        assert timing["total_seconds"] >= 0.0

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()["total_seconds"] >= 0.0


# ═══════════════════════════════════════════════════════════════════════
# Precision
# ═══════════════════════════════════════════════════════════════════════


class TestRoundHalfUp:

    def test_ties_round_up(self):
        assert round_half_up(2.5, 0) == 3.0
        assert round_half_up(0.125, 2) == 0.13

    def test_negative_ties_toward_positive_infinity(self):
        assert round_half_up(-2.5, 0) == -2.0

    def test_none_keeps_value(self):
        assert round_half_up(1.23456789, None) == 1.23456789

    def test_array_input(self):
        np.testing.assert_array_equal(
            round_half_up([0.8000000001, 1.3999999999], 5), [0.8, 1.4]
        )

    def test_non_finite_pass_through(self):
        assert np.isnan(round_half_up(np.nan, 4))
        assert round_half_up(np.inf, 4) == np.inf

    def test_scalar_returns_float(self):
        assert isinstance(round_half_up(np.float64(1.5), 1), float)

