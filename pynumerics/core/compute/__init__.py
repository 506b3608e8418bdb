"""
Shared compute infrastructure for PyNumerics.

This module provides timing utilities, rounding and the default
tolerances that are shared across all subpackages.

Submodules:
    timing: Execution timing utilities
    precision: Machine epsilon and half-up rounding
    tolerances: Default thresholds, iteration caps and rounding digits
"""

from pynumerics.core.compute.timing import Timer, timed
from pynumerics.core.compute.precision import EPSILON_64, round_half_up

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Precision
    "EPSILON_64",
    "round_half_up",
]
